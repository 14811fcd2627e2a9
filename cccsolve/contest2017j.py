"""Solutions to the 2017 junior problems."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Iterable, Iterator, Sequence

SIMULATED_MINUTES = 3600


class Quadrant(IntEnum):
    FIRST = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4


def quadrant(x: int, y: int) -> int:
    """Return the quadrant number of ``(x, y)``."""
    if x > 0:
        return Quadrant.FIRST if y > 0 else Quadrant.FOURTH
    return Quadrant.SECOND if y > 0 else Quadrant.THIRD


def sum_shifts(number: int, shifts: int) -> int:
    """Sum ``number`` shifted left by 0 up to ``shifts`` decimal places."""
    digits = shifts + 1
    repunit = (10**digits - 1) // 9 if digits > 0 else 0
    return number * repunit


def can_reach(start: Sequence[int], end: Sequence[int], charge: int) -> bool:
    """Say whether exactly ``charge`` unit moves can take ``start`` to ``end``."""
    distance = abs(end[0] - start[0]) + abs(end[1] - start[1])
    if distance > charge:
        return False
    return (charge - distance) % 2 == 0


@dataclass
class ClockCounter:
    """A digital clock shown as four digits, starting at 12:00."""

    hours_tens: int = 1
    hours_units: int = 2
    minutes_tens: int = 0
    minutes_units: int = 0

    def next_time(self) -> None:
        """Advance one minute; 12 o'clock is shown as 00."""
        self.minutes_units += 1
        if self.minutes_units >= 10:
            self.minutes_tens += 1
            self.minutes_units = 0
        if self.minutes_tens >= 6:
            self.hours_units += 1
            self.minutes_tens = 0
        if self.hours_units >= 10:
            self.hours_tens += 1
            self.hours_units = 0
        if 10 * self.hours_tens + self.hours_units >= 12:
            self.hours_tens = 0
            self.hours_units = 0

    def is_arithmetic(self) -> bool:
        """Say whether the shown digits form an arithmetic sequence."""
        if self.hours_tens == 0:
            step = self.hours_units - self.minutes_tens
            return self.minutes_tens - self.minutes_units == step
        step = self.hours_tens - self.hours_units
        return (
            self.hours_units - self.minutes_tens == step
            and self.minutes_tens - self.minutes_units == step
        )


def count_arithmetic_times() -> int:
    """Count arithmetic displays over the simulated span of minutes."""
    clock = ClockCounter()
    count = 0
    for _ in range(SIMULATED_MINUTES):
        clock.next_time()
        count += clock.is_arithmetic()
    return count


def fence_max(pieces: Iterable[int]) -> tuple[int, int]:
    """Return the ``(height, ways)`` pair the board-pairing search settles on."""
    boards = sorted(pieces)
    if not boards:
        raise ValueError("at least one piece is needed")
    size = len(boards)
    longest = boards[-1]
    biggest = 0
    ways = 0
    for i, piece in enumerate(boards[:-1]):
        height = longest + piece
        partner = boards[size - 2 - i]
        matched = False
        for other in boards[i + 1 : size - 2]:
            total = partner + other
            if total == height:
                matched = True
                break
            if total < height:
                break
        if int(matched) > biggest:
            biggest = height
            ways = 1
        else:
            ways += 1
    return biggest, ways


def _take_int(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _solve_quadrant(tokens: Iterator[str]) -> str:
    return f"{int(quadrant(_take_int(tokens), _take_int(tokens)))}\n"


def _solve_shifts(tokens: Iterator[str]) -> str:
    return str(sum_shifts(_take_int(tokens), _take_int(tokens)))


def _solve_reach(tokens: Iterator[str]) -> str:
    start = (_take_int(tokens), _take_int(tokens))
    end = (_take_int(tokens), _take_int(tokens))
    return "Y\n" if can_reach(start, end, _take_int(tokens)) else "N\n"


def _solve_clock(tokens: Iterator[str]) -> str:
    return f"{count_arithmetic_times()}\n"


def _solve_fence(tokens: Iterator[str]) -> str:
    count = _take_int(tokens)
    pieces = [_take_int(tokens) for _ in range(count)]
    height, ways = fence_max(pieces)
    return f"{height} {ways}\n"


_SOLVERS: dict[int, Callable[[Iterator[str]], str]] = {
    1: _solve_quadrant,
    2: _solve_shifts,
    3: _solve_reach,
    4: _solve_clock,
    5: _solve_fence,
}


def run(problem: int, text: str) -> str:
    """Solve ``problem`` for the input ``text`` and return the printed output."""
    try:
        solver = _SOLVERS[problem]
    except KeyError:
        raise ValueError(f"no such problem: {problem}") from None
    return solver(iter(text.split()))