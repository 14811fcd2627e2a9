"""Solutions to the 2010 senior problems."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Callable, Iterable, Iterator

_Entry = tuple[str, int]


def performance(r: int, s: int, d: int) -> int:
    """Score a computer system from its RAM, speed and disk figures."""
    return 2 * r + 3 * s + d


def top_two(systems: Iterable[tuple[str, int, int, int]]) -> tuple[str, str]:
    """Return the names of the two best systems, best first.

    ``systems`` yields ``(name, r, s, d)``. The first system seeds the runner-up
    slot and the second the best slot; later ones replace whichever slot they beat.
    """
    best: _Entry = ("", 0)
    runner: _Entry = ("", 0)
    for index, (name, r, s, d) in enumerate(systems):
        score = performance(r, s, d)
        if index == 0:
            runner = (name, score)
        elif index == 1:
            best = (name, score)
        elif score > best[1]:
            best = (name, score)
        elif score > runner[1]:
            runner = (name, score)

    (first_name, first_score), (second_name, second_score) = best, runner
    if first_score > second_score or (
        first_score == second_score and first_name[:1] < second_name[:1]
    ):
        return first_name, second_name
    return second_name, first_name


def _bits(text: str) -> str:
    return "".join(ch for ch in text if ch in "01")


def decode(codes: Mapping[str, str] | Iterable[tuple[str, str]], bits: str) -> str:
    """Decode ``bits`` with ``codes``, trying codes in order and skipping unmatched bits."""
    pairs = codes.items() if isinstance(codes, Mapping) else codes
    table = [(char, _bits(code)) for char, code in pairs]
    if any(not code for _, code in table):
        raise ValueError("codes must not be empty")
    stream = _bits(bits)
    decoded = []
    pos = 0
    while pos < len(stream):
        for char, code in table:
            if stream.startswith(code, pos):
                decoded.append(char)
                pos += len(code)
                break
        else:
            pos += 1
    return "".join(decoded)


def _take(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _solve_systems(tokens: Iterator[str]) -> str:
    count = int(_take(tokens))
    systems = [
        (_take(tokens), int(_take(tokens)), int(_take(tokens)), int(_take(tokens)))
        for _ in range(count)
    ]
    first, second = top_two(systems)
    return f"{first}\n{second}\n"


def _solve_decode(tokens: Iterator[str]) -> str:
    count = int(_take(tokens))
    codes = []
    for _ in range(count):
        token = _take(tokens)
        if len(token) > 1:
            codes.append((token[0], token[1:]))
        else:
            codes.append((token, _take(tokens)))
    return decode(codes, _take(tokens))


_SOLVERS: dict[int, Callable[[Iterator[str]], str]] = {
    1: _solve_systems,
    2: _solve_decode,
}


def run(problem: int, text: str) -> str:
    """Solve ``problem`` for the input ``text`` and return the printed output."""
    try:
        solver = _SOLVERS[problem]
    except KeyError:
        raise ValueError(f"no such problem: {problem}") from None
    return solver(iter(text.split()))