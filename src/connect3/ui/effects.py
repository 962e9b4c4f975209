from __future__ import annotations

import asyncio
import sys
from typing import Awaitable, TypeVar

from connect3.config import AI_THINKING_SPINNER

T = TypeVar("T")

_FRAMES = "|/-\\"
_FRAME_SEC = 0.08


async def thinking_spinner(work: Awaitable[T], label: str = "AI is thinking") -> T:
    """
    Await ``work`` (normally ``GameEngine.play_ai_turn()``) while a spinner
    turns on the status line. The wait itself belongs to ``work``.
    """
    task = asyncio.ensure_future(work)
    if not AI_THINKING_SPINNER:
        return await task

    i = 0
    while not task.done():
        sys.stdout.write(f"\r{label}... {_FRAMES[i % len(_FRAMES)]}")
        sys.stdout.flush()
        await asyncio.wait({task}, timeout=_FRAME_SEC)
        i += 1

    sys.stdout.write("\r" + " " * (len(label) + 10) + "\r")
    sys.stdout.flush()
    return task.result()
