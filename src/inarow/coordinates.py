"""
Cell addresses and their text encoding.

The wire form of a move is "<x>,<y>", e.g. "-1,2". Integers may be negative;
nothing else (not even whitespace) is accepted. Components must fit in a
signed byte (-128..127). Board bounds are not checked here,
that is the board's job.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import ParseError

_COORDINATES_RE = re.compile(r"(-?[0-9]+),(-?[0-9]+)")

# Parsed components are signed 8-bit values.
COORDINATE_MIN = -128
COORDINATE_MAX = 127


@dataclass(frozen=True, order=True)
class Coordinates:
    x: int
    y: int

    @classmethod
    def parse(cls, text: str) -> "Coordinates":
        m = _COORDINATES_RE.fullmatch(text)
        if m is None:
            raise ParseError(text)
        try:
            x, y = int(m.group(1)), int(m.group(2))
        except ValueError:
            # more digits than int() accepts
            raise ParseError(text) from None
        if not (COORDINATE_MIN <= x <= COORDINATE_MAX and COORDINATE_MIN <= y <= COORDINATE_MAX):
            raise ParseError(text)
        return cls(x, y)

    def offset(self, dx: int, dy: int) -> "Coordinates":
        return Coordinates(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return f"{self.x},{self.y}"
