"""
Console driver: reads moves from a line source, prints the board, loops the
state machine until EndGame.

I/O is injected (`read_line`, `write`) so tests can script a whole game;
the defaults are input() and print().
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from .config import GameConfig
from .coordinates import Coordinates
from .errors import GameError
from .state import (
    Draw,
    EndGame,
    GameState,
    NextTurn,
    StartGame,
    Won,
    after_error,
    finish,
    is_terminal,
    play_move,
    start_game,
)

logger = logging.getLogger(__name__)

ReadLine = Callable[[], str]
Write = Callable[[str], None]

YES_ANSWERS = ("true", "yes", "y")


def read_coordinates(read_line: ReadLine) -> Coordinates:
    return Coordinates.parse(read_line().strip())


def read_answer(read_line: ReadLine) -> bool:
    """Yes/no answer; anything unreadable counts as no."""
    try:
        raw = read_line()
    except EOFError:
        return False
    return raw.strip().lower() in YES_ANSWERS


def next_turn(config: GameConfig, state: NextTurn, read_line: ReadLine, write: Write) -> GameState:
    write(f"Player {state.player}'s turn")
    write(state.board.render())
    write("")
    write("Where would you like to play ?")
    try:
        coordinates = read_coordinates(read_line)
        return play_move(config, state, coordinates)
    except EOFError:
        logger.debug("input closed during %s's turn", state.player)
        return EndGame()
    except GameError as e:
        logger.debug("rejected move: %r", e)
        write(f"Error: {e}")
        write("Try again ?")
        return after_error(state, read_answer(read_line))


def turn(config: GameConfig, state: GameState, read_line: ReadLine, write: Write) -> GameState:
    if isinstance(state, StartGame):
        return start_game(config)
    if isinstance(state, NextTurn):
        return next_turn(config, state, read_line, write)
    if isinstance(state, Won):
        write(f"Game finished and {state.player} won")
    elif isinstance(state, Draw):
        write("Game finished with a draw")
    else:
        write("Game finished")
    return finish(state)


def play(
    config: GameConfig,
    read_line: Optional[ReadLine] = None,
    write: Optional[Write] = None,
) -> GameState:
    """Run a full game; returns the last state before EndGame."""
    read_line = read_line or input
    write = write or print
    state: GameState = StartGame()
    outcome = state
    while not is_terminal(state):
        outcome = state
        state = turn(config, state, read_line, write)
        logger.debug("%s -> %s", type(outcome).__name__, type(state).__name__)
    return outcome
