"""
Turn state machine.

A game is a sequence of immutable GameState values. The driver owns the loop
variable and feeds each state back through transition() together with any
external input (the next move, or the answer to "try again?"):

    StartGame -> NextTurn(X, empty board)
    NextTurn  -> Won | Draw | NextTurn(other player, new board)
    NextTurn  -> NextTurn (retry) | EndGame (abort)    after a rejected move
    Won, Draw -> EndGame
    EndGame   -> EndGame                               terminal
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

from .board import Board, Line
from .config import GameConfig
from .coordinates import Coordinates
from .errors import GameError
from .player import Player


@dataclass(frozen=True)
class StartGame:
    pass


@dataclass(frozen=True)
class NextTurn:
    player: Player
    board: Board


@dataclass(frozen=True)
class Won:
    player: Player
    board: Optional[Board] = field(default=None, compare=False)
    run: Optional[Line] = field(default=None, compare=False)


@dataclass(frozen=True)
class Draw:
    board: Optional[Board] = field(default=None, compare=False)


@dataclass(frozen=True)
class EndGame:
    pass


GameState = Union[StartGame, NextTurn, Won, Draw, EndGame]


def start_game(config: GameConfig) -> NextTurn:
    return NextTurn(Player.first(), Board.new(config))


def play_move(config: GameConfig, state: NextTurn, coordinates: Coordinates) -> GameState:
    """Apply the current player's move.

    Raises MoveError when the board rejects it; `state` is still usable for a
    retry in that case.
    """
    board = state.board.insert(coordinates, state.player)
    run = board.winning_run(coordinates, config.goal)
    if run is not None:
        return Won(state.player, board, run)
    if board.is_draw():
        return Draw(board)
    return NextTurn(state.player.next(), board)


def after_error(state: NextTurn, retry: bool) -> GameState:
    return state if retry else EndGame()


def finish(state: GameState) -> EndGame:
    if isinstance(state, (StartGame, NextTurn)):
        raise GameError(f"Game is not over: {type(state).__name__}")
    return EndGame()


def transition(
    config: GameConfig, state: GameState, coordinates: Optional[Coordinates] = None
) -> GameState:
    if isinstance(state, StartGame):
        return start_game(config)
    if isinstance(state, NextTurn):
        if coordinates is None:
            raise GameError(f"Player {state.player} has to play a move")
        return play_move(config, state, coordinates)
    return finish(state)


def is_terminal(state: GameState) -> bool:
    return isinstance(state, EndGame)


def replay(config: GameConfig, moves: Iterable[Coordinates]) -> GameState:
    """Play `moves` from the start; returns the last state reached.

    Stops at Won/Draw. Moves left over after that raise GameError, illegal
    moves raise MoveError.
    """
    state: GameState = start_game(config)
    for coordinates in moves:
        if not isinstance(state, NextTurn):
            raise GameError(f"Move {coordinates} played after the game ended")
        state = play_move(config, state, coordinates)
    return state
