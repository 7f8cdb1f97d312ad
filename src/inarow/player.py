"""Player identities. X always starts."""
from __future__ import annotations

from enum import Enum


class Player(Enum):
    X = "X"
    O = "O"

    @classmethod
    def first(cls) -> "Player":
        return cls.X

    def next(self) -> "Player":
        return Player.O if self is Player.X else Player.X

    def __str__(self) -> str:
        return self.value
