"""Game variants: board bounds and the run length needed to win.

Variant selection is environment-first, the same way data locations are
resolved elsewhere: an explicit name wins, then INAROW_VARIANT, then
tic-tac-toe.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict

VARIANT_ENV = "INAROW_VARIANT"
DEFAULT_VARIANT = "tic-tac-toe"


@dataclass(frozen=True)
class GameConfig:
    min_x: int
    max_x: int
    min_y: int
    max_y: int
    goal: int
    name: str = "custom"

    def __post_init__(self) -> None:
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise ValueError(
                f"Empty board: x {self.min_x}..{self.max_x}, y {self.min_y}..{self.max_y}"
            )
        if not 1 <= self.goal <= max(self.width, self.height):
            raise ValueError(f"Goal {self.goal} does not fit a {self.width}x{self.height} board")

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1

    @property
    def cell_count(self) -> int:
        return self.width * self.height


TIC_TAC_TOE = GameConfig(min_x=-1, max_x=1, min_y=-1, max_y=1, goal=3, name="tic-tac-toe")
GOMOKU = GameConfig(min_x=-7, max_x=7, min_y=-7, max_y=7, goal=5, name="gomoku")

VARIANTS: Dict[str, GameConfig] = {
    TIC_TAC_TOE.name: TIC_TAC_TOE,
    GOMOKU.name: GOMOKU,
}


def get_variant(name: str) -> GameConfig:
    try:
        return VARIANTS[name]
    except KeyError:
        raise KeyError(f"Unknown variant {name!r}; known: {', '.join(sorted(VARIANTS))}") from None


def variant_from_env(name: str | None = None) -> GameConfig:
    """Resolve a variant: explicit name -> env var INAROW_VARIANT -> tic-tac-toe."""
    if name:
        return get_variant(name)
    return get_variant(os.getenv(VARIANT_ENV) or DEFAULT_VARIANT)
