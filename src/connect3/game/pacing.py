from __future__ import annotations

import asyncio
from typing import Callable


class Pacer:
    """
    Presentation delays that know which game they belong to.

    ``generation`` is read from the owner (the engine) at call time; a wait
    reports False when the owner moved on to another game meanwhile, and
    the caller must then drop whatever it was about to apply.
    """

    def __init__(self, generation: Callable[[], int]) -> None:
        self._generation = generation

    def token(self) -> int:
        return self._generation()

    def is_current(self, token: int) -> bool:
        return token == self._generation()

    async def wait(self, seconds: float, token: int) -> bool:
        if seconds > 0:
            await asyncio.sleep(seconds)
        return self.is_current(token)
