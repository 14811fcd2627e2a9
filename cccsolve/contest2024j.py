"""Solutions to the 2024 junior problems."""

from __future__ import annotations

from collections import deque
from typing import Callable, Iterable, Sequence

NO_KEY = "-"
PUMPKIN_VALUES = {"S": 1, "M": 5, "L": 10}
BLOCKED = frozenset({"*", "c"})
_NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def plate_cost(red: int, green: int, blue: int) -> int:
    """Total the price of red, green and blue plates."""
    return 3 * red + 4 * green + 5 * blue


def dusa_size(start: int, sizes: Iterable[int]) -> int:
    """Grow Dusa by each smaller Yobi until one at least as large arrives."""
    total = start
    current = 0
    remaining = iter(sizes)
    while current < total:
        total += current
        try:
            current = next(remaining)
        except StopIteration:
            raise ValueError("ran out of sizes before a larger one appeared") from None
    return total


def third_place(scores: Iterable[int]) -> tuple[int, int]:
    """Return the third-highest score seen and how many reached it."""
    first = second = third = -1
    count_first = count_second = count_third = 0
    for score in scores:
        if score > first:
            first, second, third = score, first, second
            count_first, count_second, count_third = 1, count_first, count_second
        elif first > score > second:
            second, third = score, second
            count_second, count_third = 1, count_second
        elif second > score > third:
            third = score
            count_third = 1
        elif score == third:
            count_third += 1
        elif score == first:
            count_first += 1
        elif score == second:
            count_second += 1
    return third, count_third


def _at(text: str, index: int) -> str:
    return text[index] if 0 <= index < len(text) else "\0"


def find_bad_keys(typed: str, shown: str) -> tuple[str, str, str]:
    """Return ``(key, shown_as, quiet_key)``, using ``-`` where a key is not found."""
    key = see = quiet = NO_KEY
    offset = 0
    size = len(typed)
    for i, char in enumerate(typed):
        if char == quiet:
            offset += 1
        elif char != _at(shown, i - offset) and char != key:
            run_end = i + 1
            while run_end < size and typed[run_end] == char:
                run_end += 1
            after = run_end
            fed = i - offset
            if fed >= len(shown) or (_at(shown, fed) == _at(typed, after) and after < size):
                quiet = char
                offset += 1
            else:
                key = char
                see = _at(shown, fed)
        if key != NO_KEY and (quiet != NO_KEY or size == len(shown)):
            break
    return key, see, quiet


def harvest_value(patch: Iterable[Sequence[str]], start: Sequence[int]) -> int:
    """Return the value of the pumpkins reachable from ``start`` without crossing hay."""
    rows = list(patch)
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("patch rows must have the same length")
    height = len(rows)
    width = len(rows[0]) if rows else 0

    def inside(r: int, c: int) -> bool:
        return 0 <= r < height and 0 <= c < width

    origin = (start[0], start[1])
    if not inside(*origin):
        raise ValueError(f"start {origin} is outside the patch")
    seen = {origin}
    queue = deque([origin])
    total = 0
    while queue:
        r, c = queue.popleft()
        total += PUMPKIN_VALUES.get(rows[r][c], 0)
        for dr, dc in _NEIGHBOURS:
            nxt = (r + dr, c + dc)
            if inside(*nxt) and nxt not in seen and rows[nxt[0]][nxt[1]] not in BLOCKED:
                seen.add(nxt)
                queue.append(nxt)
    return total


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


def _solve_plates(text: str) -> str:
    tokens = deque(text.split())
    red, green, blue = (_take_int(tokens) for _ in range(3))
    return f"{plate_cost(red, green, blue)}\n"


def _solve_dusa(text: str) -> str:
    tokens = deque(text.split())
    start = _take_int(tokens)
    return f"\n{dusa_size(start, (int(token) for token in tokens))}"


def _solve_third(text: str) -> str:
    tokens = deque(text.split())
    count = _take_int(tokens)
    third, count_third = third_place(_take_int(tokens) for _ in range(count))
    return f"\n{third} {count_third}"


def _solve_keys(text: str) -> str:
    lines = [line.lstrip() for line in text.splitlines() if line.strip()]
    if len(lines) < 2:
        raise ValueError("unexpected end of input")
    key, see, quiet = find_bad_keys(lines[0], lines[1])
    return f"{key} {see}\n{quiet}\n"


def _solve_harvest(text: str) -> str:
    tokens = deque(text.split())
    height = _take_int(tokens)
    width = _take_int(tokens)
    if height <= 0 or width <= 0:
        raise ValueError("patch size must be positive")
    cells = _take_chars(tokens, height * width)
    patch = [cells[begin : begin + width] for begin in range(0, len(cells), width)]
    start = (_take_int(tokens), _take_int(tokens))
    return f"{harvest_value(patch, start)}\n"


_SOLVERS: dict[int, Callable[[str], str]] = {
    1: _solve_plates,
    2: _solve_dusa,
    3: _solve_third,
    4: _solve_keys,
    5: _solve_harvest,
}


def run(problem: int, text: str) -> str:
    """Solve ``problem`` for the input ``text`` and return the printed output."""
    try:
        solver = _SOLVERS[problem]
    except KeyError:
        raise ValueError(f"no such problem: {problem}") from None
    return solver(text)