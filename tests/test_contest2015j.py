import pytest

from cccsolve.contest2015j import (
    VOWELS,
    closest_vowel,
    encode_word,
    friend_wait_times,
    mood,
    next_consonant,
    run,
    special_day,
)


@pytest.mark.parametrize(
    ("month", "day", "expected"),
    [
        (2, 18, "Special"),
        (2, 19, "After"),
        (2, 1, "Before"),
        (1, 30, "Before"),
        (3, 1, "After"),
    ],
)
def test_special_day(month, day, expected):
    assert special_day(month, day) == expected


@pytest.mark.parametrize(
    ("message", "expected"),
    [
        (":-)", "happy"),
        (":-(", "sad"),
        ("hello there", "none"),
        (":-) and :-(", "unsure"),
        (":--)", "none"),
        (": -)", "none"),
        ("::-)", "happy"),
        (":-( :-( :-)", "sad"),
    ],
)
def test_mood(message, expected):
    assert mood(message) == expected


def test_closest_vowel_is_a_vowel_at_minimal_distance():
    for letter in "bcdfghjklmnpqrstvwxyz":
        vowel = closest_vowel(letter)
        assert vowel in VOWELS
        distance = abs(ord(letter) - ord(vowel))
        assert all(distance <= abs(ord(letter) - ord(v)) for v in VOWELS)


def test_closest_vowel_tie_goes_towards_a():
    assert closest_vowel("c") == "a"


def test_closest_vowel_of_vowel_is_itself():
    for vowel in VOWELS:
        assert closest_vowel(vowel) == vowel


@pytest.mark.parametrize("bad", ["A", " ", "ab", ""])
def test_closest_vowel_rejects_non_letters(bad):
    with pytest.raises(ValueError):
        closest_vowel(bad)


def test_next_consonant_of_z():
    assert next_consonant("z") == "z"


def test_next_consonant_skips_vowels():
    assert next_consonant("d") == "f"


def test_next_consonant_invariant():
    for letter in "abcdefghijklmnopqrstuvwxy":
        result = next_consonant(letter)
        assert result not in VOWELS
        assert result > letter
        between = [chr(code) for code in range(ord(letter) + 1, ord(result))]
        assert all(ch in VOWELS for ch in between)


def test_encode_word_sample():
    assert encode_word("joy") == "jikoyuz"


def test_encode_word_keeps_vowels():
    assert encode_word("aeiou") == "aeiou"


def test_encode_word_length():
    word = "programming"
    consonants = sum(ch not in VOWELS for ch in word)
    encoded = encode_word(word)
    assert len(encoded) == len(word) + 2 * consonants
    assert encoded[0] == word[0]


def test_friend_ids_sorted():
    result = friend_wait_times([("R", 3), ("R", 1), ("R", 2)])
    assert [friend for friend, _ in result] == [1, 2, 3]
    assert all(wait >= 0 for _, wait in result)


def test_wait_event_adds_to_everyone():
    base = [("R", 1), ("R", 2), ("S", 1)]
    without = friend_wait_times(base)
    with_wait = friend_wait_times(base + [("W", 5)])
    assert with_wait == [(friend, wait + 5) for friend, wait in without]


def test_send_adds_one_to_sender():
    sent = dict(friend_wait_times([("R", 1), ("R", 2), ("S", 2)]))
    received = dict(friend_wait_times([("R", 1), ("R", 2), ("R", 2)]))
    assert sent[2] == received[2] + 1
    assert sent[1] == received[1]


def test_run_date():
    assert run(1, "2\n18\n") == "Special\n"


def test_run_mood_reads_first_line():
    assert run(2, "\n:-) :-)\n:-( :-( :-(\n") == "happy\n"


def test_run_encode():
    assert run(3, "joy\n") == "jikoyuz\n"


def test_run_friends_matches_function():
    expected = "".join(
        f"{friend} {wait}\n"
        for friend, wait in friend_wait_times([("R", 1), ("W", 3), ("S", 2)])
    )
    assert run(4, "3\nR 1\nW 3\nS 2\n") == expected


def test_run_unknown_problem():
    with pytest.raises(ValueError):
        run(9, "")


def test_run_empty_line_input():
    with pytest.raises(ValueError):
        run(2, "   ")