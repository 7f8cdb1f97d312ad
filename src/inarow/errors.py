"""
Errors raised by the game engine.

All of them are recoverable: the engine raises, the driver decides whether
to retry the move or abandon the game.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .coordinates import Coordinates


class GameError(Exception):
    """Base class for every error raised by inarow."""


class ParseError(GameError, ValueError):
    """Text could not be decoded into Coordinates."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Coordinates can't be parsed: {text!r}")
        self.text = text


class MoveError(GameError):
    """A move was rejected by the board."""

    reason = "Invalid move"

    def __init__(self, coordinates: "Coordinates") -> None:
        super().__init__(f"{self.reason}: {coordinates}")
        self.coordinates = coordinates


class OutOfBounds(MoveError):
    reason = "Out of bounds"


class AlreadyOccupied(MoveError):
    reason = "Already occupied"
