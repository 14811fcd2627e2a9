"""Solutions to the 2016 junior problems."""

from __future__ import annotations

import re
from enum import IntEnum
from itertools import cycle
from typing import Callable, Iterable, Iterator

DAY_MINUTES = 24 * 60
TRAFFIC_STARTS = (7 * 60, 15 * 60)
COMMUTE_MINUTES = 120
STEP = 20

_CLOCK = re.compile(r"\s*([+-]?\d+)\s*([^\d\s])\s*([+-]?\d+)")


class Request(IntEnum):
    FIND_MIN = 1
    FIND_MAX = 2


def parse_clock(text: str) -> int:
    """Parse ``HH:MM`` (any single separator) into minutes since midnight."""
    match = _CLOCK.match(text)
    if match is None:
        raise ValueError(f"not a clock time: {text!r}")
    return int(match.group(1)) * 60 + int(match.group(3))


def format_clock(minutes: int) -> str:
    """Format minutes since midnight as ``HH:MM``."""
    if minutes < 0:
        raise ValueError(f"negative time: {minutes}")
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def advance_commute(start_minutes: int, finish_time: int) -> int:
    """Advance the clock in 20-minute ticks until ``finish_time`` minutes of travel.

    A tick covers 20 minutes of travel before the current rush start and 10
    after it; the rush starts are checked in turn. Raises ``ValueError`` when
    the travelled distance jumps past ``finish_time`` and can never match it.
    """
    clock = start_minutes
    travelled = 0
    for rush_start in cycle(TRAFFIC_STARTS):
        if travelled == finish_time:
            return clock
        if travelled > finish_time:
            raise ValueError(f"travel time never reaches {finish_time}")
        clock += STEP
        if clock > DAY_MINUTES:
            clock -= DAY_MINUTES
        travelled += STEP if clock < rush_start else STEP // 2
    raise AssertionError("unreachable")


def total_speed(request: int, group_a: Iterable[int], group_b: Iterable[int]) -> int:
    """Pair riders for the minimum (request 1) or maximum (request 2) total speed."""
    first = sorted(group_a)
    second = sorted(group_b)
    if len(first) != len(second):
        raise ValueError("groups must be the same size")
    if request == Request.FIND_MAX:
        second.reverse()
    return sum(map(max, first, second))


def _take_int(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _solve_commute(text: str) -> str:
    start = parse_clock(text.strip())
    return f"{format_clock(advance_commute(start, COMMUTE_MINUTES))}\n"


def _solve_tandem(text: str) -> str:
    tokens = iter(text.split())
    request = _take_int(tokens)
    size = _take_int(tokens)
    group_a = [_take_int(tokens) for _ in range(size)]
    group_b = [_take_int(tokens) for _ in range(size)]
    return f"{total_speed(request, group_a, group_b)}\n"


_SOLVERS: dict[int, Callable[[str], str]] = {
    4: _solve_commute,
    5: _solve_tandem,
}


def run(problem: int, text: str) -> str:
    """Solve ``problem`` for the input ``text`` and return the printed output."""
    try:
        solver = _SOLVERS[problem]
    except KeyError:
        raise ValueError(f"no such problem: {problem}") from None
    return solver(text)