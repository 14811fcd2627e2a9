"""Solutions to the 2021 junior problems."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator


def _check_size(rows: int, columns: int) -> None:
    if rows < 0 or columns < 0:
        raise ValueError("grid size must not be negative")


def _check_index(index: int, size: int, what: str) -> int:
    if not 1 <= index <= size:
        raise ValueError(f"{what} {index} is outside 1..{size}")
    return index - 1


def count_gold_grid(rows: int, columns: int, operations: Iterable[tuple[str, int]]) -> int:
    """Count gold cells by flipping a whole grid; any kind but ``C`` flips a row."""
    _check_size(rows, columns)
    grid = [[False] * columns for _ in range(rows)]
    for kind, index in operations:
        if kind == "C":
            column = _check_index(index, columns, "column")
            for row in grid:
                row[column] = not row[column]
        else:
            row = _check_index(index, rows, "row")
            grid[row] = [not cell for cell in grid[row]]
    return sum(row.count(True) for row in grid)


def count_gold(rows: int, columns: int, operations: Iterable[tuple[str, int]]) -> int:
    """Count gold cells from row and column flip parities; unknown kinds are ignored."""
    _check_size(rows, columns)
    flipped_rows = [False] * rows
    flipped_columns = [False] * columns
    for kind, index in operations:
        if kind == "C":
            column = _check_index(index, columns, "column")
            flipped_columns[column] = not flipped_columns[column]
        elif kind == "R":
            row = _check_index(index, rows, "row")
            flipped_rows[row] = not flipped_rows[row]
    r = sum(flipped_rows)
    c = sum(flipped_columns)
    return c * rows + r * columns - 2 * r * c


def _take(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _take_int(tokens: Iterator[str]) -> int:
    return int(_take(tokens))


def _solve_art(tokens: Iterator[str]) -> str:
    rows = _take_int(tokens)
    columns = _take_int(tokens)
    count = _take_int(tokens)
    operations = [(_take(tokens), _take_int(tokens)) for _ in range(count)]
    return f"{count_gold(rows, columns, operations)}\n"


_SOLVERS: dict[int, Callable[[Iterator[str]], str]] = {
    1: _solve_art,
}


def run(problem: int, text: str) -> str:
    """Solve ``problem`` for the input ``text`` and return the printed output."""
    try:
        solver = _SOLVERS[problem]
    except KeyError:
        raise ValueError(f"no such problem: {problem}") from None
    return solver(iter(text.split()))