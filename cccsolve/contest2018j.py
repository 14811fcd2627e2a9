"""Solutions to the 2018 junior problems."""

from __future__ import annotations

from enum import Enum
from itertools import accumulate
from typing import Callable, Iterable, Iterator, Sequence

CITIES_COUNT = 5


class Rotation(Enum):
    """The rotation that restores a scrambled table."""

    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter-clockwise"
    BOTTOMED = "bottomed"
    NONE = "none"


def _square(table: Iterable[Iterable[int]]) -> list[list[int]]:
    rows = [list(row) for row in table]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("table must be square")
    return rows


def rotation_for(table: Iterable[Iterable[int]]) -> Rotation:
    """Pick the rotation that makes rows and columns increase."""
    rows = _square(table)
    if not rows:
        return Rotation.NONE
    rows_ordered = rows[0][0] < rows[0][-1]
    columns_ordered = rows[0][0] < rows[-1][0]
    if not rows_ordered and not columns_ordered:
        return Rotation.BOTTOMED
    if not rows_ordered:
        return Rotation.COUNTER_CLOCKWISE
    if not columns_ordered:
        return Rotation.CLOCKWISE
    return Rotation.NONE


def rotate(table: Iterable[Iterable[int]], rotation: Rotation) -> list[list[int]]:
    """Return ``table`` turned by ``rotation``."""
    rows = _square(table)
    rotation = Rotation(rotation)
    if rotation is Rotation.CLOCKWISE:
        return [list(column) for column in zip(*reversed(rows))]
    if rotation is Rotation.COUNTER_CLOCKWISE:
        return [list(column) for column in reversed(list(zip(*rows)))]
    if rotation is Rotation.BOTTOMED:
        return [row[::-1] for row in reversed(rows)]
    return rows


def _pages(options: Iterable[Iterable[int]]) -> list[list[int]]:
    pages = [list(targets) for targets in options]
    if not pages:
        raise ValueError("at least one page is needed")
    for page, targets in enumerate(pages, 1):
        for target in targets:
            if not 1 <= target <= len(pages):
                raise ValueError(f"page {page} points to missing page {target}")
    return pages


def all_reachable(options: Iterable[Iterable[int]]) -> bool:
    """Say whether every page can be reached from page 1.

    ``options[k]`` lists the pages that page ``k + 1`` leads to.
    """
    pages = _pages(options)
    seen = {1}
    stack = [1]
    while stack:
        for target in pages[stack.pop() - 1]:
            if target not in seen:
                seen.add(target)
                stack.append(target)
    return len(seen) == len(pages)


def shortest_path(options: Iterable[Iterable[int]]) -> int:
    """Return how many pages the shortest route from page 1 to an ending page visits."""
    pages = _pages(options)
    frontier = [1]
    seen = {1}
    level = 1
    while frontier:
        if any(not pages[page - 1] for page in frontier):
            return level
        following = []
        for page in frontier:
            for target in pages[page - 1]:
                if target not in seen:
                    seen.add(target)
                    following.append(target)
        frontier = following
        level += 1
    raise ValueError("no ending page can be reached")


def distance_matrix(gaps: Iterable[int]) -> list[list[int]]:
    """Return the distances between all cities given the gaps between neighbours."""
    positions = [0, *accumulate(gaps)]
    return [[abs(there - here) for there in positions] for here in positions]


def _take_int(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _format_rows(rows: Sequence[Sequence[int]]) -> str:
    return "".join("".join(f"{value} " for value in row) + "\n" for row in rows)


def _solve_sunflowers(tokens: Iterator[str]) -> str:
    size = _take_int(tokens)
    table = [[_take_int(tokens) for _ in range(size)] for _ in range(size)]
    return _format_rows(rotate(table, rotation_for(table)))


def _solve_pages(tokens: Iterator[str]) -> str:
    count = _take_int(tokens)
    options = []
    for _ in range(count):
        width = _take_int(tokens)
        options.append([_take_int(tokens) for _ in range(width)])
    reachable = "Y" if all_reachable(options) else "N"
    return f"{reachable}\n{shortest_path(options)}\n"


def _solve_distances(tokens: Iterator[str]) -> str:
    gaps = [_take_int(tokens) for _ in range(CITIES_COUNT - 1)]
    return _format_rows(distance_matrix(gaps))


_SOLVERS: dict[int, Callable[[Iterator[str]], str]] = {
    1: _solve_sunflowers,
    2: _solve_pages,
    3: _solve_distances,
}


def run(problem: int, text: str) -> str:
    """Solve ``problem`` for the input ``text`` and return the printed output."""
    try:
        solver = _SOLVERS[problem]
    except KeyError:
        raise ValueError(f"no such problem: {problem}") from None
    return solver(iter(text.split()))