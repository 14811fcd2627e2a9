"""Solutions to the 2010 junior problems."""

from __future__ import annotations

import operator
from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from itertools import combinations_with_replacement, pairwise
from typing import Callable, Iterable, Iterator, Sequence

FINGERS = range(6)
BOARD = range(1, 9)
KNIGHT_MOVES = (
    (1, 2),
    (2, 1),
    (2, -1),
    (1, -2),
    (-1, 2),
    (-2, 1),
    (-1, -2),
    (-2, -1),
)


def finger_ways(num: int) -> int:
    """Count the ways ``num`` can be shown on two hands of up to five fingers."""
    return sum(
        1 for left, right in combinations_with_replacement(FINGERS, 2) if left + right == num
    )


@dataclass
class Walker:
    """A walker that alternates between forward and backward phases."""

    name: str
    forward: int
    backward: int
    steps: int = 0
    phase_steps: int = 0
    going_forward: bool = True

    def move(self) -> None:
        """Advance the walker by one tick."""
        # phase_steps is compared but never advanced, so a phase only ends
        # when its configured length is zero.
        if self.going_forward:
            if self.phase_steps < self.forward:
                self.steps += 1
            else:
                self.going_forward = False
                self.phase_steps = 0
        if not self.going_forward:
            if self.phase_steps < self.backward:
                self.steps -= 1
            else:
                self.going_forward = True
                self.phase_steps = 0


def walk_winner(first: Walker, second: Walker, steps: int) -> str:
    """Move both walkers ``steps`` times and name the one further ahead."""
    for _ in range(steps):
        first.move()
        second.move()
    if first.steps > second.steps:
        return first.name
    if first.steps == second.steps:
        return "Tied"
    return second.name


class Operator(IntEnum):
    SET = 1
    PRINT = 2
    ADD = 3
    MUL = 4
    SUB = 5
    DIV = 6
    HALT = 7


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_ARITHMETIC: dict[Operator, Callable[[int, int], int]] = {
    Operator.ADD: operator.add,
    Operator.MUL: operator.mul,
    Operator.SUB: operator.sub,
    Operator.DIV: _truncating_div,
}


@dataclass
class Machine:
    """A two-register calculator; any register name other than ``A`` means ``B``."""

    a: int = 0
    b: int = 0

    def set(self, register: str, value: int) -> None:
        """Store ``value`` in ``register``."""
        if register == "A":
            self.a = value
        else:
            self.b = value

    def apply(self, op: int, x: str, y: str) -> None:
        """Apply an arithmetic operator, storing ``x op y`` back in ``x``."""
        try:
            func = _ARITHMETIC[Operator(op)]
        except (KeyError, ValueError):
            raise ValueError(f"not an arithmetic operator: {op}") from None
        left = self._read(x)
        right = self.b if y == "B" else self.a
        self.set(x, func(left, right))

    def _read(self, register: str) -> int:
        return self.a if register == "A" else self.b


def run_program(instructions: Iterable[Sequence]) -> list[int]:
    """Run instructions of the form ``(kind, *args)`` and return printed values."""
    machine = Machine()
    output: list[int] = []
    for kind, *args in instructions:
        if kind == Operator.SET:
            machine.set(args[0], args[1])
        elif kind == Operator.PRINT:
            output.append(machine._read(args[0]))
        elif Operator.ADD <= kind <= Operator.DIV:
            machine.apply(kind, args[0], args[1])
        elif kind == Operator.HALT:
            break
    return output


def find_cycle_length(values: Sequence[int]) -> int:
    """Return the length of the shortest repeating cycle of differences."""
    diffs = [second - first for first, second in pairwise(values)]
    if not diffs:
        raise ValueError("at least two values are needed")
    return next(
        length
        for length in range(1, len(diffs) + 1)
        if all(diff == diffs[index % length] for index, diff in enumerate(diffs[length:], length))
    )


def _on_board(pos: tuple[int, int]) -> bool:
    return pos[0] in BOARD and pos[1] in BOARD


def knight_moves(start: Sequence[int], end: Sequence[int]) -> int:
    """Return the fewest knight moves from ``start`` to ``end`` on an 8x8 board."""
    start, end = tuple(start), tuple(end)
    if start == end:
        return 0
    if not _on_board(end):
        raise ValueError(f"target {end} is off the board")
    seen = {start}
    frontier = deque([(start, 0)])
    while frontier:
        (x, y), distance = frontier.popleft()
        for dx, dy in KNIGHT_MOVES:
            nxt = (x + dx, y + dy)
            if nxt in seen or not _on_board(nxt):
                continue
            if nxt == end:
                return distance + 1
            seen.add(nxt)
            frontier.append((nxt, distance + 1))
    raise ValueError(f"target {end} cannot be reached from {start}")


def _take(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _take_int(tokens: Iterator[str]) -> int:
    return int(_take(tokens))


def _solve_fingers(tokens: Iterator[str]) -> str:
    return str(finger_ways(_take_int(tokens)))


def _solve_walkers(tokens: Iterator[str]) -> str:
    nikky = Walker("Nikky", _take_int(tokens), _take_int(tokens))
    byron = Walker("Byron", _take_int(tokens), _take_int(tokens))
    return walk_winner(nikky, byron, _take_int(tokens))


def _read_program(tokens: Iterator[str]) -> Iterator[tuple]:
    for token in tokens:
        kind = int(token)
        if kind == Operator.SET:
            yield (kind, _take(tokens), _take_int(tokens))
        elif kind == Operator.PRINT:
            yield (kind, _take(tokens))
        elif Operator.ADD <= kind <= Operator.DIV:
            yield (kind, _take(tokens), _take(tokens))
        elif kind == Operator.HALT:
            yield (kind,)
            return


def _solve_machine(tokens: Iterator[str]) -> str:
    return "".join(f"{value}\n" for value in run_program(_read_program(tokens)))


def _solve_cycles(tokens: Iterator[str]) -> str:
    lines = []
    for token in tokens:
        count = int(token)
        if count == 0:
            break
        values = [_take_int(tokens) for _ in range(count)]
        lines.append(f"{find_cycle_length(values)}\n")
    return "".join(lines)


def _solve_knight(tokens: Iterator[str]) -> str:
    start = (_take_int(tokens), _take_int(tokens))
    end = (_take_int(tokens), _take_int(tokens))
    return f"{knight_moves(start, end)}\n"


_SOLVERS: dict[int, Callable[[Iterator[str]], str]] = {
    1: _solve_fingers,
    2: _solve_walkers,
    3: _solve_machine,
    4: _solve_cycles,
    5: _solve_knight,
}


def run(problem: int, text: str) -> str:
    """Solve ``problem`` for the input ``text`` and return the printed output."""
    try:
        solver = _SOLVERS[problem]
    except KeyError:
        raise ValueError(f"no such problem: {problem}") from None
    return solver(iter(text.split()))