"""Solutions to the 2014 junior problems."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Sequence


def classify_triangle(a: int, b: int, c: int) -> str:
    """Classify a triangle by its three angles."""
    if a == b == c == 60:
        return "Equilateral"
    if a + b + c != 180:
        return "Error"
    if a == b or a == c or b == c:
        return "Isosceles"
    return "Scalene"


def vote_winner(votes: Iterable[str]) -> str:
    """Return ``A``, ``B`` or ``Tie``; every vote other than ``A`` counts for ``B``."""
    votes = list(votes)
    a_votes = votes.count("A")
    b_votes = len(votes) - a_votes
    if a_votes == b_votes:
        return "Tie"
    return "A" if a_votes > b_votes else "B"


def dice_game(rounds: Iterable[tuple[int, int]]) -> tuple[int, int]:
    """Play rounds of ``(antonia, david)`` rolls and return both final scores."""
    antonia = david = 100
    for a, d in rounds:
        if a > d:
            david -= a
        elif d > a:
            antonia -= d
    return antonia, david


def remaining_friends(count: int, removals: Iterable[int]) -> list[int]:
    """Remove every n-th remaining friend for each n in ``removals``.

    The position counter carries over from one round to the next.
    """
    friends: list[int | None] = list(range(1, count + 1))
    counter = 0
    for step in removals:
        for index, friend in enumerate(friends):
            if friend is not None:
                counter += 1
            if counter == step:
                friends[index] = None
                counter = 0
    return [friend for friend in friends if friend is not None]


def partners_consistent(first: Sequence[str], second: Sequence[str]) -> bool:
    """Check that the partner assignment is symmetric and nobody partners themselves."""
    pairs = list(zip(first, second, strict=True))
    for a, b in pairs:
        for x, y in pairs:
            if x == y:
                return False
            if a == y and b == x:
                break
        else:
            return False
    return True


def _take(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _take_int(tokens: Iterator[str]) -> int:
    return int(_take(tokens))


def _solve_triangle(tokens: Iterator[str]) -> str:
    a, b, c = (_take_int(tokens) for _ in range(3))
    return f"{classify_triangle(a, b, c)}\n"


def _solve_votes(tokens: Iterator[str]) -> str:
    count = _take_int(tokens)
    votes = "".join(tokens)[:count]
    if len(votes) < count:
        raise ValueError("unexpected end of input")
    return f"{vote_winner(votes)}\n"


def _solve_dice(tokens: Iterator[str]) -> str:
    count = _take_int(tokens)
    rounds = [(_take_int(tokens), _take_int(tokens)) for _ in range(count)]
    antonia, david = dice_game(rounds)
    return f"{antonia}\n{david}\n"


def _solve_friends(tokens: Iterator[str]) -> str:
    count = _take_int(tokens)
    rounds = _take_int(tokens)
    removals = [_take_int(tokens) for _ in range(rounds)]
    return "".join(f"{friend}\n" for friend in remaining_friends(count, removals))


def _solve_partners(tokens: Iterator[str]) -> str:
    count = _take_int(tokens)
    first = [_take(tokens) for _ in range(count)]
    second = [_take(tokens) for _ in range(count)]
    return "good\n" if partners_consistent(first, second) else "bad\n"


_SOLVERS: dict[int, Callable[[Iterator[str]], str]] = {
    1: _solve_triangle,
    2: _solve_votes,
    3: _solve_dice,
    4: _solve_friends,
    5: _solve_partners,
}


def run(problem: int, text: str) -> str:
    """Solve ``problem`` for the input ``text`` and return the printed output."""
    try:
        solver = _SOLVERS[problem]
    except KeyError:
        raise ValueError(f"no such problem: {problem}") from None
    return solver(iter(text.split()))