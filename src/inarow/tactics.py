"""
Tactics: cells that win on the spot.
Teaching notes:
- A move is an immediate win if placing the mark there completes a run of `goal`.
- Checking the opponent's immediate wins gives the cells that must be blocked.
"""
from typing import List

from .board import Board
from .coordinates import Coordinates
from .player import Player


def immediate_winning_moves(board: Board, player: Player, goal: int) -> List[Coordinates]:
    wins: List[Coordinates] = []
    for move in board.legal_moves():
        if board.insert(move, player).is_winning_move(move, goal):
            wins.append(move)
    return wins


def forced_blocks(board: Board, player: Player, goal: int) -> List[Coordinates]:
    """Cells `player` must take to stop the opponent winning next turn."""
    return immediate_winning_moves(board, player.next(), goal)
