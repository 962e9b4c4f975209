from __future__ import annotations

import logging

from connect3.config import LOG_LEVEL
from connect3.ui.menu import run_menu


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        run_menu()
    except (KeyboardInterrupt, EOFError):
        print("\nBye.")


if __name__ == "__main__":
    main()
