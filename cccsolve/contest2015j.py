"""Solutions to the 2015 junior problems."""

from __future__ import annotations

import string
from typing import Callable, Iterable, Iterator

VOWELS = "aoeiu"
SPECIAL_DATE = (2, 18)


def special_day(month: int, day: int) -> str:
    """Say whether ``month``/``day`` is before, on or after February 18."""
    date = (month, day)
    if date == SPECIAL_DATE:
        return "Special"
    return "After" if date > SPECIAL_DATE else "Before"


def mood(message: str) -> str:
    """Judge a message by its ``:-)`` and ``:-(`` emoticons."""
    happy = message.count(":-)")
    sad = message.count(":-(")
    if happy == 0 and sad == 0:
        return "none"
    if sad > happy:
        return "sad"
    if happy > sad:
        return "happy"
    return "unsure"


def _check_letter(c: str) -> None:
    if len(c) != 1 or not "a" <= c <= "z":
        raise ValueError(f"not a lowercase letter: {c!r}")


def closest_vowel(c: str) -> str:
    """Return the vowel nearest to ``c``; ties go to the one nearer ``a``."""
    _check_letter(c)
    return min(VOWELS, key=lambda vowel: (abs(ord(c) - ord(vowel)), vowel))


def next_consonant(c: str) -> str:
    """Return the first consonant after ``c``; ``z`` maps to itself."""
    _check_letter(c)
    if c == "z":
        return "z"
    following = string.ascii_lowercase[ord(c) - ord("a") + 1 :]
    return next(ch for ch in following if ch not in VOWELS)


def encode_word(word: str) -> str:
    """Follow every consonant with its closest vowel and the next consonant."""
    return "".join(
        ch if ch in VOWELS else ch + closest_vowel(ch) + next_consonant(ch) for ch in word
    )


def friend_wait_times(events: Iterable[tuple[str, int]]) -> list[tuple[int, int]]:
    """Total the waiting time of every friend, sorted by friend id.

    ``R`` registers a friend, ``S`` registers a friend and adds one unit to
    their wait, and each of these events then adds one unit to everybody.
    Any other kind adds its value to everybody. No friend is ever marked as
    answered, so every friend keeps accumulating.
    """
    waits: dict[int, int] = {}
    for kind, value in events:
        if kind == "R":
            waits.setdefault(value, 0)
            tick = 1
        elif kind == "S":
            waits[value] = waits.get(value, 0) + 1
            tick = 1
        else:
            tick = value
        for friend in waits:
            waits[friend] += tick
    return sorted(waits.items())


def _take(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _take_int(tokens: Iterator[str]) -> int:
    return int(_take(tokens))


def _first_line(text: str) -> str:
    lines = text.lstrip().splitlines()
    if not lines:
        raise ValueError("unexpected end of input")
    return lines[0]


def _solve_date(text: str) -> str:
    tokens = iter(text.split())
    return f"{special_day(_take_int(tokens), _take_int(tokens))}\n"


def _solve_mood(text: str) -> str:
    return f"{mood(_first_line(text))}\n"


def _solve_encode(text: str) -> str:
    return f"{encode_word(_first_line(text))}\n"


def _solve_friends(text: str) -> str:
    tokens = iter(text.split())
    count = _take_int(tokens)
    events = [(_take(tokens), _take_int(tokens)) for _ in range(count)]
    return "".join(f"{friend} {wait}\n" for friend, wait in friend_wait_times(events))


_SOLVERS: dict[int, Callable[[str], str]] = {
    1: _solve_date,
    2: _solve_mood,
    3: _solve_encode,
    4: _solve_friends,
}


def run(problem: int, text: str) -> str:
    """Solve ``problem`` for the input ``text`` and return the printed output."""
    try:
        solver = _SOLVERS[problem]
    except KeyError:
        raise ValueError(f"no such problem: {problem}") from None
    return solver(text)