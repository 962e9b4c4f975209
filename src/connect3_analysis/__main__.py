from __future__ import annotations

import sys
from typing import Callable, Dict

from .cli.analyze_csv import main as analyze_main
from .cli.make_figures import main as figures_main

COMMANDS: Dict[str, Callable[[list[str]], int]] = {
    "analyze": analyze_main,
    "analysis": analyze_main,
    "figures": figures_main,
    "plots": figures_main,
}

USAGE = """Usage:
  python -m connect3_analysis analyze [--csv ...] [--variant classic] [--metric ...] [--no-plots]
  python -m connect3_analysis figures [--csv ...] [--figures-dir data/figures]"""


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # bare flags (or nothing) mean "analyze"
    if not argv or (argv[0].startswith("-") and argv[0] not in {"-h", "--help"}):
        return analyze_main(argv)

    cmd, rest = argv[0].lower(), argv[1:]
    handler = COMMANDS.get(cmd)
    if handler is not None:
        return handler(rest)

    print(USAGE)
    return 0 if cmd in {"-h", "--help", "help"} else 2


if __name__ == "__main__":
    raise SystemExit(main())
