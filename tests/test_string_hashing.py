import pytest

from cpalgos.string_hashing import hash_count_occurrences, hash_periods
from cpalgos.zfunction import count_occurrences, periods

STRINGS = [
    "a",
    "aaaa",
    "abcabca",
    "abababab",
    "mississippi",
    "abacabadabacaba",
    "xyzxyzxyzx",
]


@pytest.mark.parametrize("s", STRINGS)
def test_hash_periods_agree_with_z_function(s):
    assert hash_periods(s) == periods(s)


@pytest.mark.parametrize("s", STRINGS)
def test_hash_periods_closed_under_multiples(s):
    result = hash_periods(s)
    assert result[-1] == len(s)
    for p in result:
        assert all(k in result for k in range(p, len(s) + 1, p))


@pytest.mark.parametrize(
    "text, pattern",
    [
        ("saippuakauppias", "pp"),
        ("aaaa", "aa"),
        ("abababa", "aba"),
        ("abc", "d"),
        ("ab" * 600, "aba"),
        ("abcde" * 300, "cdeab"),
    ],
)
def test_hash_count_agrees_with_z_function(text, pattern):
    assert hash_count_occurrences(text, pattern) == count_occurrences(text, pattern)


@pytest.mark.parametrize("copies", range(1, 6))
def test_hash_count_of_repeated_pattern(copies):
    assert hash_count_occurrences("xyz" * copies, "xyz") == copies


def test_hash_count_pattern_longer_than_text():
    assert hash_count_occurrences("ab", "abc") == 0


def test_hash_count_rejects_empty_pattern():
    with pytest.raises(ValueError):
        hash_count_occurrences("abc", "")