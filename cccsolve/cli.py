"""Command line: solve one contest problem from standard input."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence

from cccsolve import (
    contest2010j,
    contest2010s,
    contest2014j,
    contest2015j,
    contest2016j,
    contest2017j,
    contest2018j,
    contest2019,
    contest2021j,
    contest2022j,
    contest2023j,
    contest2024j,
)

CONTESTS: dict[str, Callable[[int, str], str]] = {
    "2010j": contest2010j.run,
    "2010s": contest2010s.run,
    "2014j": contest2014j.run,
    "2015j": contest2015j.run,
    "2016j": contest2016j.run,
    "2017j": contest2017j.run,
    "2018j": contest2018j.run,
    "2019": contest2019.run,
    "2021j": contest2021j.run,
    "2022j": contest2022j.run,
    "2023j": contest2023j.run,
    "2024j": contest2024j.run,
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cccsolve",
        description="Read a problem's input from standard input and print its answer.",
    )
    parser.add_argument("contest", choices=sorted(CONTESTS), help="contest year and level")
    parser.add_argument("problem", type=int, help="problem number")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the solver named on the command line; return the exit status."""
    args = _parser().parse_args(argv)
    text = sys.stdin.read()
    try:
        output = CONTESTS[args.contest](args.problem, text)
    except (ValueError, ZeroDivisionError) as exc:
        print(f"cccsolve: error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())