"""Command line entry point for the territory war games."""

from __future__ import annotations

import argparse
import random
import sys

from territorywar.console import Console
from territorywar.games import run_adventurer, run_beginner, run_master


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="territorywar", description="Jogo de guerra por territórios."
    )
    parser.add_argument(
        "mode",
        choices=("beginner", "adventurer", "master"),
        help="registration only, battles, or battles with missions",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the dice")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    console = Console()
    try:
        if args.mode == "beginner":
            run_beginner(console)
        elif args.mode == "adventurer":
            run_adventurer(console, rng)
        else:
            run_master(console, rng)
    except EOFError:
        print("\nentrada encerrada", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"erro: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())