"""Solutions to the 2023 junior problems."""

from __future__ import annotations

from collections import deque
from typing import Callable, Iterable, Sequence

PEPPER_HEAT = {
    "Poblano": 1_500,
    "Mirasol": 6_000,
    "Serrano": 15_500,
    "Cayenne": 40_000,
    "Thai": 75_000,
    "Habanero": 125_000,
}
_HEAT_BY_INITIAL = {name[0]: heat for name, heat in PEPPER_HEAT.items()}

DAYS = 5
AVAILABLE = "Y"

SAMPLE_WORD = "NATURE"
SAMPLE_GRID = (
    "NATSFEGQN",
    "SAIBMRHFA",
    "CFTJCUCLT",
    "KBHUPTANU",
    "DPRRRJDIR",
    "IEEKMEGBE",
)


def delivery_score(packages: int, collisions: int) -> int:
    """Score a delivery round; more packages than collisions earns a bonus."""
    bonus = 500 if packages > collisions else 0
    return 50 * packages - 10 * collisions + bonus


def spiciness(peppers: Iterable[str]) -> int:
    """Total the heat of the peppers, recognised by their first letter."""
    return sum(_HEAT_BY_INITIAL.get(name[:1], 0) for name in peppers)


def best_days(schedules: Iterable[str]) -> list[int]:
    """Return the 1-based days on which the most people are available."""
    rows = list(schedules)
    for row in rows:
        if len(row) < DAYS:
            raise ValueError(f"schedule {row!r} covers fewer than {DAYS} days")
    counts = [sum(row[day] == AVAILABLE for row in rows) for day in range(DAYS)]
    best = max(counts)
    return [day for day, count in enumerate(counts, 1) if count == best]


def _tile(value: object) -> bool:
    if value not in (0, 1):
        raise ValueError(f"not a tile flag: {value!r}")
    return bool(value)


def trail_perimeter(top: Iterable[object], bottom: Iterable[object]) -> int:
    """Return the perimeter of the wet triangular tiles in a two-row trail."""
    upper = [_tile(value) for value in top]
    lower = [_tile(value) for value in bottom]
    if len(upper) != len(lower):
        raise ValueError("both rows must have the same length")
    perimeter = 0
    prev_up = prev_down = False
    for index, (up, down) in enumerate(zip(upper, lower)):
        if up:
            perimeter += 1 if prev_up else 3
        if down:
            perimeter += 1 if prev_down else 3
        if up and down and index % 2 == 0:
            perimeter -= 2
        prev_up, prev_down = up, down
    return perimeter


def _rows(grid: Iterable[Sequence[str]]) -> list[Sequence[str]]:
    rows = list(grid)
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("grid rows must have the same length")
    return rows


def trace_word(grid: Iterable[Sequence[str]], word: str) -> bool:
    """Follow ``word`` from the top-left cell, allowing one kind of right-angle turn.

    The word only counts as found when a further cell follows its last letter.
    """
    rows = _rows(grid)
    height = len(rows)
    width = len(rows[0]) if rows else 0

    def inside(r: int, c: int) -> bool:
        return 0 <= r < height and 0 <= c < width

    row, col = 0, 0
    d_row, d_col = 1, 1
    matched = 0
    while 0 <= row < height:
        if not 0 <= col < width:
            break
        while inside(row, col):
            if matched >= len(word):
                return True
            if rows[row][col] == word[matched]:
                matched += 1
            else:
                row -= d_row
                col -= d_col
                expected = word[matched]
                if inside(row - d_col, col + d_row):
                    if rows[row - d_col][col + d_row] != expected:
                        return False
                    d_row, d_col = -d_col, d_row
                elif inside(row + d_col, col - d_row):
                    if rows[row + d_col][col - d_row] != expected:
                        return False
                    d_row, d_col = d_col, -d_row
                else:
                    return False
                row += d_row
            col += d_col
        row += d_row
    return False


def _take(tokens: deque[str]) -> str:
    if not tokens:
        raise ValueError("unexpected end of input")
    return tokens.popleft()


def _take_int(tokens: deque[str]) -> int:
    return int(_take(tokens))


def _take_chars(tokens: deque[str], count: int) -> str:
    chars: list[str] = []
    while len(chars) < count:
        token = _take(tokens)
        need = count - len(chars)
        chars.extend(token[:need])
        if len(token) > need:
            tokens.appendleft(token[need:])
    return "".join(chars)


def _solve_score(tokens: deque[str]) -> str:
    return f"\n{delivery_score(_take_int(tokens), _take_int(tokens))}"


def _solve_peppers(tokens: deque[str]) -> str:
    count = _take_int(tokens)
    return f"{spiciness(_take(tokens) for _ in range(count))}\n"


def _solve_days(tokens: deque[str]) -> str:
    count = _take_int(tokens)
    schedules = [_take(tokens) for _ in range(count)]
    return ",".join(str(day) for day in best_days(schedules))


def _solve_trail(tokens: deque[str]) -> str:
    size = _take_int(tokens)
    top = [_take_int(tokens) for _ in range(size)]
    bottom = [_take_int(tokens) for _ in range(size)]
    return f"{trail_perimeter(top, bottom)}\n"


def _solve_word(tokens: deque[str]) -> str:
    if not tokens:
        return str(int(trace_word(SAMPLE_GRID, SAMPLE_WORD)))
    word = _take(tokens)
    height = _take_int(tokens)
    width = _take_int(tokens)
    if height < 0 or width <= 0:
        raise ValueError("grid size must be positive")
    cells = _take_chars(tokens, height * width)
    grid = [cells[start : start + width] for start in range(0, len(cells), width)]
    return str(int(trace_word(grid, word)))


_SOLVERS: dict[int, Callable[[deque[str]], str]] = {
    1: _solve_score,
    2: _solve_peppers,
    3: _solve_days,
    4: _solve_trail,
    5: _solve_word,
}


def run(problem: int, text: str) -> str:
    """Solve ``problem`` for the input ``text`` and return the printed output."""
    try:
        solver = _SOLVERS[problem]
    except KeyError:
        raise ValueError(f"no such problem: {problem}") from None
    return solver(deque(text.split()))