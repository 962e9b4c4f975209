from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from connect3.core.events import KingConversionEvent, MatchEvent

FEED_SIZE = 10


def base_points(match_size: int, is_king: bool = False) -> int:
    if match_size == 3:
        points = 100
    elif match_size == 4:
        points = 200
    elif match_size == 5:
        points = 300
    else:
        points = max(300, match_size * 60)

    # king matches are worth double
    return points * 2 if is_king else points


def cascade_multiplier(depth: int) -> float:
    if depth <= 0:
        return 1.0
    if depth == 1:
        return 1.5
    if depth == 2:
        return 2.0
    return 3.0


def simultaneous_bonus(count: int) -> float:
    return 1.0 + (count - 1) * 0.5 if count > 1 else 1.0


def match_points(event: MatchEvent) -> int:
    total = base_points(event.size, event.is_king)
    total *= cascade_multiplier(event.cascade_depth) * simultaneous_bonus(event.simultaneous)
    return int(round(total))


@dataclass(frozen=True, slots=True)
class ScoreEvent:
    points: int
    multiplier: float
    description: str


@dataclass
class ScoreKeeper:
    """
    Listener for the engine's match/king notifications.

    Register ``on_match_found`` and ``on_king_conversion`` with a
    GameEngine; call ``reset`` when a new game starts.
    """
    score: int = 0
    base: int = 0
    bonus: int = 0
    matches: int = 0
    cascades: int = 0
    max_cascade_depth: int = 0
    kings_created: int = 0
    feed: List[ScoreEvent] = field(default_factory=list)

    def on_match_found(self, event: MatchEvent) -> None:
        base = base_points(event.size, event.is_king)
        points = match_points(event)
        mult = cascade_multiplier(event.cascade_depth) * simultaneous_bonus(event.simultaneous)

        self.score += points
        self.base += base
        self.bonus += points - base
        self.matches += 1
        if event.cascade_depth > 0:
            self.cascades += 1
        self.max_cascade_depth = max(self.max_cascade_depth, event.cascade_depth)

        desc = f"{event.size} {'King ' if event.is_king else ''}Match"
        if event.cascade_depth > 0:
            desc += f" (Cascade x{event.cascade_depth + 1})"
        self.feed.insert(0, ScoreEvent(points, mult, desc))
        del self.feed[FEED_SIZE:]

    def on_king_conversion(self, event: KingConversionEvent) -> None:
        self.kings_created += 1

    def reset(self) -> None:
        self.score = self.base = self.bonus = 0
        self.matches = self.cascades = self.max_cascade_depth = 0
        self.kings_created = 0
        self.feed.clear()
