import argparse
import logging
import sys

from ninarow.config import CONFIG
from ninarow.core.board import Board, MoveError
from ninarow.core.lines import SUPPORTED_SIZES
from ninarow.core.search import SearchEngine, Strategy
from ninarow.core.evaluator import Ordering
from ninarow.core.types import GameResult, Player
from ninarow.core.utils import format_info
from ninarow.main import Engine

STRATEGIES = [s.value for s in Strategy]
ORDERINGS = [o.value for o in Ordering]
HUMAN_SIDES = {
    "first": {Player.FIRST},
    "second": {Player.SECOND},
    "both": {Player.FIRST, Player.SECOND},
}


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="ninarow", description="N-in-a-row solver")
    p.add_argument("--log-level", default=CONFIG.log_level, help="logging level")
    sub = p.add_subparsers(dest="command", required=True)

    play = sub.add_parser("play", help="play a game on the terminal")
    play.add_argument("--size", type=int, choices=SUPPORTED_SIZES, default=CONFIG.game.board_size)
    play.add_argument("--human", choices=["first", "second", "both"], default="first",
                      help="which side the human plays")
    play.add_argument("--opponent", choices=["best", "random"], default="best")
    play.add_argument("--strategy", choices=STRATEGIES, default=CONFIG.search.strategy)
    play.add_argument("--ordering", choices=ORDERINGS, default=CONFIG.search.ordering)
    play.add_argument("--depth", type=int, default=CONFIG.search.depth, help="optional ply limit")

    bench = sub.add_parser("bench", help="time every strategy from the empty board")
    bench.add_argument("--size", type=int, choices=SUPPORTED_SIZES, default=CONFIG.game.board_size)
    bench.add_argument("--strategies", nargs="+", choices=STRATEGIES, default=STRATEGIES)
    bench.add_argument("--ordering", choices=ORDERINGS, default=CONFIG.search.ordering)
    bench.add_argument("--depth", type=int, default=CONFIG.search.depth)
    return p.parse_args(argv)


def read_human_move(engine: Engine, prompt=input, out=print) -> int:
    """Read indices until one is legal, then play it."""
    board = engine.board
    while True:
        line = prompt(f"{board.turn.symbol} to move [0-{len(board) - 1}]: ")
        try:
            index = int(line.strip())
        except ValueError:
            out(f"Please type a number 0..{len(board) - 1}.")
            continue
        try:
            engine.make_move(index)
        except MoveError as e:
            out(f"Illegal move: {e}")
            continue
        return index


def describe(result: GameResult) -> str:
    if result is GameResult.DRAW:
        return "Good game, Draw!"
    return f"Winner is {result.winner.symbol}"


def run_play(args, prompt=input, out=print) -> GameResult:
    engine = Engine(args.size, args.strategy, args.ordering, args.depth)
    humans = HUMAN_SIDES[args.human]

    out(str(engine.board))
    while not engine.is_game_over():
        if engine.board.turn in humans:
            read_human_move(engine, prompt, out)
        elif args.opponent == "random":
            out(f"Engine plays (random): {engine.play_random_move()}")
        else:
            move = engine.play_best_move()
            out(f"Engine plays: {move} | Eval: {engine.last_stats.result.value}")
        out(str(engine.board))

    result = engine.result()
    out(describe(result))
    return result


def run_bench(args, out=print):
    results = {}
    for name in args.strategies:
        engine = SearchEngine(name, args.ordering, depth=args.depth)
        stats = engine.search(Board(args.size))
        results[name] = stats
        out(format_info(name, stats))
    return results


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    if args.command == "play":
        run_play(args)
    else:
        run_bench(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
