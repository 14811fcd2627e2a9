"""Solutions to the 2022 junior problems."""

from __future__ import annotations

from collections import defaultdict
from typing import Callable, Iterable, Iterator

_NONE: frozenset[str] = frozenset()


def cupcake_leftover(regular: int, small: int) -> int:
    """Return the cupcakes left after 28 students each take one."""
    return regular * 8 + small * 3 - 28


def count_gold_players(players: Iterable[tuple[int, int]]) -> int:
    """Count players whose ``5 * points - 3 * fouls`` exceeds 40."""
    return sum(1 for points, fouls in players if points * 5 - fouls * 3 > 40)


def harp_instructions(text: str) -> str:
    """Translate the first line of harp tuning instructions into words."""
    line = text.split("\n", 1)[0]
    parts = []
    after_digit = False
    for ch in line:
        if ch.isascii() and ch.isalpha():
            if after_digit:
                parts.append("\n")
                after_digit = False
            parts.append(ch)
        elif ch == "+":
            parts.append(" tighten ")
        elif ch == "-":
            parts.append(" loosen ")
        elif ch.isascii() and ch.isdigit():
            parts.append(ch)
            after_digit = True
    return "".join(parts)


def _links(pairs: Iterable[tuple[str, str]]) -> dict[str, set[str]]:
    links: dict[str, set[str]] = defaultdict(set)
    for first, second in pairs:
        links[first].add(second)
        links[second].add(first)
    return links


def count_violations(
    together: Iterable[tuple[str, str]],
    apart: Iterable[tuple[str, str]],
    groups: Iterable[tuple[str, str, str]],
) -> int:
    """Count broken constraints; "together" ones are checked only for each group's first member."""
    same = _links(together)
    separate = _links(apart)
    count = 0
    for first, second, third in groups:
        count += second in separate.get(first, _NONE)
        count += third in separate.get(first, _NONE)
        count += third in separate.get(second, _NONE)
        partners = same.get(first, _NONE)
        if len(partners) == 1:
            count += second not in partners and third not in partners
        elif len(partners) >= 2:
            count += (second not in partners) + (third not in partners)
    return count


def _take(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _take_int(tokens: Iterator[str]) -> int:
    return int(_take(tokens))


def _solve_cupcakes(text: str) -> str:
    tokens = iter(text.split())
    return str(cupcake_leftover(_take_int(tokens), _take_int(tokens)))


def _solve_players(text: str) -> str:
    tokens = iter(text.split())
    count = _take_int(tokens)
    players = [(_take_int(tokens), _take_int(tokens)) for _ in range(count)]
    gold = count_gold_players(players)
    return f"{gold}+" if gold == count else str(gold)


def _solve_harp(text: str) -> str:
    return harp_instructions(text)


def _solve_groups(text: str) -> str:
    tokens = iter(text.split())
    together = [(_take(tokens), _take(tokens)) for _ in range(_take_int(tokens))]
    apart = [(_take(tokens), _take(tokens)) for _ in range(_take_int(tokens))]
    groups = [
        (_take(tokens), _take(tokens), _take(tokens)) for _ in range(_take_int(tokens))
    ]
    return str(count_violations(together, apart, groups))


_SOLVERS: dict[int, Callable[[str], str]] = {
    1: _solve_cupcakes,
    2: _solve_players,
    3: _solve_harp,
    4: _solve_groups,
}


def run(problem: int, text: str) -> str:
    """Solve ``problem`` for the input ``text`` and return the printed output."""
    try:
        solver = _SOLVERS[problem]
    except KeyError:
        raise ValueError(f"no such problem: {problem}") from None
    return solver(text)