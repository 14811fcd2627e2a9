"""Solution to the 2019 substitution-rule problem."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator

RULE_COUNT = 3

Step = tuple[int, int, str]


def solve_substitutions(
    rules: Iterable[tuple[str, str]], start: str, end: str, steps: int
) -> list[Step] | None:
    """Find exactly ``steps`` rule applications turning ``start`` into ``end``.

    Returns ``(rule, position, result)`` triples with 1-based rule numbers and
    positions, or ``None`` when there is no solution. Further occurrences of a
    rule are searched in the string already rewritten at that level.
    """
    table = [(source, target) for source, target in rules]
    if any(not source for source, _ in table):
        raise ValueError("rule patterns must not be empty")
    if steps < 0:
        raise ValueError(f"negative step count: {steps}")

    path: list[Step] = []

    def search(current: str, remaining: int) -> bool:
        if remaining == 0:
            return current == end
        for number, (source, target) in enumerate(table, 1):
            text = current
            index = text.find(source)
            while index != -1:
                text = text[:index] + target + text[index + len(source) :]
                path.append((number, index + 1, text))
                if search(text, remaining - 1):
                    return True
                path.pop()
                index = text.find(source, index + len(target))
        return False

    return path if search(start, steps) else None


def _take(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _solve_rules(tokens: Iterator[str]) -> str:
    rules = [(_take(tokens), _take(tokens)) for _ in range(RULE_COUNT)]
    steps = int(_take(tokens))
    start = _take(tokens)
    end = _take(tokens)
    found = solve_substitutions(rules, start, end, steps) or []
    return "".join(f"{rule} {position} {result}\n" for rule, position, result in found)


_SOLVERS: dict[int, Callable[[Iterator[str]], str]] = {
    1: _solve_rules,
}


def run(problem: int, text: str) -> str:
    """Solve ``problem`` for the input ``text`` and return the printed output."""
    try:
        solver = _SOLVERS[problem]
    except KeyError:
        raise ValueError(f"no such problem: {problem}") from None
    return solver(iter(text.split()))