from __future__ import annotations

import argparse
import logging
from typing import List

from .board import Board
from .config import VARIANTS, variant_from_env
from .console import play
from .coordinates import Coordinates
from .errors import GameError
from .state import Draw, NextTurn, Won, replay
from .tactics import forced_blocks, immediate_winning_moves


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="inarow", description="N-in-a-row grid game")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment and dependency info and exit",
    )
    p.add_argument(
        "--variant",
        choices=sorted(VARIANTS),
        default=None,
        help="Game variant (default: $INAROW_VARIANT or tic-tac-toe)",
    )

    sub.add_parser("play", help="Play an interactive game on the console (default)")

    p_show = sub.add_parser("show", help="Print the board, optionally after some moves")
    p_show.add_argument("--moves", default="", help='Space-separated moves, e.g. "0,0 -1,1"')
    p_show.add_argument(
        "--array", action="store_true", help="Print the numeric grid (0=empty,1=X,2=O) instead"
    )
    p_show.add_argument(
        "--threats",
        action="store_true",
        help="Also list immediate wins and forced blocks for the side to move",
    )

    p_replay = sub.add_parser("replay", help="Replay moves and report the resulting state")
    p_replay.add_argument("--moves", required=True, help='Space-separated moves, e.g. "0,0 -1,1"')

    return p


def _print_info(variant: str | None) -> None:
    import importlib.util
    import platform
    import sys

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    for pkg in ["numpy"]:
        spec = importlib.util.find_spec(pkg)
        if spec is None:
            print(f"{pkg}=<not installed>")
        else:
            mod = __import__(pkg)
            ver = getattr(mod, "__version__", "?")
            print(f"{pkg}={ver}")
    try:
        config = variant_from_env(variant)
    except KeyError:
        print("variant=<unknown>")
    else:
        bounds = f"x{config.min_x}..{config.max_x},y{config.min_y}..{config.max_y}"
        print(f"variant={config.name} bounds={bounds} goal={config.goal}")


def _parse_moves(raw: str) -> List[Coordinates]:
    return [Coordinates.parse(tok) for tok in raw.split()]


def _join(cells: List[Coordinates]) -> str:
    return " ".join(map(str, cells))


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    # Early exits
    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("in-a-row"))
        except Exception:
            print("unknown")
        return 0
    if getattr(ns, "info", False):
        _print_info(ns.variant)
        return 0

    try:
        config = variant_from_env(ns.variant)
    except KeyError as e:
        logging.error("%s", e.args[0])
        return 2
    logging.debug("variant=%s goal=%d", config.name, config.goal)

    if ns.cmd in (None, "play"):
        outcome = play(config)
        logging.debug("outcome=%s", type(outcome).__name__)
        return 0

    try:
        state = replay(config, _parse_moves(ns.moves))
    except GameError as e:
        logging.error("%s", e)
        return 2

    if ns.cmd == "show":
        board = getattr(state, "board", None) or Board.new(config)
        if ns.array:
            for row in board.to_array():
                print(" ".join(str(int(v)) for v in row))
        else:
            print(board.render())
        if ns.threats:
            if not isinstance(state, NextTurn):
                logging.error("Game is over: %s", type(state).__name__)
                return 2
            wins = immediate_winning_moves(state.board, state.player, config.goal)
            blocks = forced_blocks(state.board, state.player, config.goal)
            print(f"to_move={state.player} wins={_join(wins)} blocks={_join(blocks)}")
        return 0

    if ns.cmd == "replay":
        if isinstance(state, Won):
            print(f"winner={state.player} run={' '.join(map(str, state.run or ()))}")
        elif isinstance(state, Draw):
            print("draw")
        elif isinstance(state, NextTurn):
            print(f"to_move={state.player} moves={state.board.move_count}")
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
