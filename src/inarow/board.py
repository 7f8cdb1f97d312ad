"""
Immutable game board: move validation, win and draw detection, rendering.
Teaching notes:
- Only occupied cells are stored, as a read-only mapping Coordinates -> Player.
- insert() never touches the receiver; it returns a new Board. Older boards stay
  valid, so a GameState can keep "the board at turn N" around safely.
- Win detection only looks at the (up to) four lines through the last move and
  at windows of exactly `goal` cells that contain that move.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional, Tuple

import numpy as np

from .config import GameConfig
from .coordinates import Coordinates
from .errors import AlreadyOccupied, OutOfBounds
from .player import Player

Line = Tuple[Coordinates, ...]

# Numeric encoding used by to_array(): 0=empty, 1=X, 2=O.
PLAYER_CODES = {Player.X: 1, Player.O: 2}


@dataclass(frozen=True)
class Board:
    min_x: int
    max_x: int
    min_y: int
    max_y: int
    cells: Mapping[Coordinates, Player] = field(default_factory=dict)

    def __post_init__(self) -> None:
        cells = dict(self.cells)
        for coordinates in cells:
            if not self.on_board(coordinates):
                raise OutOfBounds(coordinates)
        object.__setattr__(self, "cells", MappingProxyType(cells))

    def __hash__(self) -> int:
        return hash((self.min_x, self.max_x, self.min_y, self.max_y, frozenset(self.cells.items())))

    @classmethod
    def new(cls, config: GameConfig) -> "Board":
        return cls(min_x=config.min_x, max_x=config.max_x, min_y=config.min_y, max_y=config.max_y)

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1

    @property
    def move_count(self) -> int:
        return len(self.cells)

    def on_board(self, coordinates: Coordinates) -> bool:
        return (
            self.min_x <= coordinates.x <= self.max_x
            and self.min_y <= coordinates.y <= self.max_y
        )

    def get(self, coordinates: Coordinates) -> Optional[Player]:
        return self.cells.get(coordinates)

    def __contains__(self, coordinates: object) -> bool:
        return coordinates in self.cells

    def insert(self, coordinates: Coordinates, player: Player) -> "Board":
        """Return a new board with `player` at `coordinates`.

        Raises OutOfBounds or AlreadyOccupied; the receiver is left unchanged
        either way.
        """
        if not self.on_board(coordinates):
            raise OutOfBounds(coordinates)
        if coordinates in self.cells:
            raise AlreadyOccupied(coordinates)
        return replace(self, cells={**self.cells, coordinates: player})

    def is_draw(self) -> bool:
        # >= rather than ==: stays correct if insert ever allows overwrites.
        return len(self.cells) >= self.width * self.height

    def legal_moves(self) -> List[Coordinates]:
        return [c for c in self._iter_cells() if c not in self.cells]

    def affected_rows(self, coordinates: Coordinates) -> List[Line]:
        """Lines through `coordinates`: row, column, descending and ascending diagonal.

        Offsets span the whole board on either side of the cell, then get clipped
        to the playable area. Duplicate lines, and lines wholly contained in a
        longer one (a corner's single-cell diagonal), are dropped.
        """
        x_size = self.max_x - self.min_x
        y_size = self.max_y - self.min_y
        d_size = max(x_size, y_size)
        xs = range(-x_size, x_size + 1)
        ys = range(-y_size, y_size + 1)
        ds = range(-d_size, d_size + 1)
        candidates = [
            [coordinates.offset(dx, 0) for dx in xs],
            [coordinates.offset(0, dy) for dy in ys],
            [coordinates.offset(d, d) for d in ds],
            [coordinates.offset(d, -d) for d in ds],
        ]

        unique: List[Line] = []
        for candidate in candidates:
            row = tuple(c for c in candidate if self.on_board(c))
            if coordinates in row and row not in unique:
                unique.append(row)
        return [
            row for row in unique
            if not any(set(row) < set(other) for other in unique)
        ]

    def winning_run(self, coordinates: Coordinates, goal: int) -> Optional[Line]:
        """First window of `goal` same-player cells that includes `coordinates`, if any."""
        if goal < 1:
            return None
        for row in self.affected_rows(coordinates):
            for start in range(len(row) - goal + 1):
                window = row[start:start + goal]
                if coordinates not in window:
                    continue
                occupants = [self.cells.get(c) for c in window]
                if None not in occupants and len(set(occupants)) == 1:
                    return window
        return None

    def is_winning_move(self, coordinates: Coordinates, goal: int) -> bool:
        return self.winning_run(coordinates, goal) is not None

    def to_array(self) -> np.ndarray:
        """Grid of shape (height, width), indexed [y - min_y, x - min_x]."""
        grid = np.zeros((self.height, self.width), dtype=np.int8)
        for coordinates, player in self.cells.items():
            grid[coordinates.y - self.min_y, coordinates.x - self.min_x] = PLAYER_CODES[player]
        return grid

    def render(self) -> str:
        cell_size = max(len(str(b)) for b in (self.min_x, self.max_x, self.min_y, self.max_y)) * 2 + 3
        separator = "|".join(["-" * cell_size] * self.width)
        lines: List[str] = []
        for y in range(self.min_y, self.max_y + 1):
            if lines:
                lines.append(separator)
            cells = [
                _center(self._cell_text(Coordinates(x, y)), cell_size)
                for x in range(self.min_x, self.max_x + 1)
            ]
            lines.append("|".join(cells))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def _cell_text(self, coordinates: Coordinates) -> str:
        player = self.cells.get(coordinates)
        return str(coordinates) if player is None else str(player)

    def _iter_cells(self) -> Iterator[Coordinates]:
        for y in range(self.min_y, self.max_y + 1):
            for x in range(self.min_x, self.max_x + 1):
                yield Coordinates(x, y)


def _center(text: str, width: int) -> str:
    # odd padding goes to the right
    pad = max(width - len(text), 0)
    left = pad // 2
    return " " * left + text + " " * (pad - left)
