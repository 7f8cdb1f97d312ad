"""inarow package.

Grid game engine for "n in a row" games (tic-tac-toe, gomoku): immutable
board, win/draw detection, a turn state machine, and a console driver.

Convenience imports are exposed for common workflows.
"""

from .board import Board
from .config import GOMOKU, TIC_TAC_TOE, GameConfig
from .coordinates import Coordinates
from .errors import AlreadyOccupied, GameError, MoveError, OutOfBounds, ParseError
from .player import Player
from .state import Draw, EndGame, GameState, NextTurn, StartGame, Won, replay, transition

__all__ = [
    "Board",
    "GameConfig",
    "TIC_TAC_TOE",
    "GOMOKU",
    "Coordinates",
    "Player",
    "GameState",
    "StartGame",
    "NextTurn",
    "Won",
    "Draw",
    "EndGame",
    "transition",
    "replay",
    "GameError",
    "ParseError",
    "MoveError",
    "OutOfBounds",
    "AlreadyOccupied",
]
