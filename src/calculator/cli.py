import argparse
import logging

from tower import DEFAULT_MAX_LEVEL, FieldOps, TowerConfig, TowerError

from .repl import Session


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tower-calc",
        description="Calculator for the Wiedemann tower of binary fields",
    )
    parser.add_argument(
        "--max-level",
        type=int,
        default=DEFAULT_MAX_LEVEL,
        help="largest tower level accepted (default: %(default)s, i.e. 128-bit)",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="also print results as sums of monomials, e.g. 1 + X0X1",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        ops = FieldOps(TowerConfig.default(args.max_level))
    except TowerError as e:
        parser.error(str(e))
    Session(ops, show_monomials=args.render).run()
    return 0
