import itertools

import pytest

from keyspace.analyzers.charset import CharsetAnalyzer, analyze
from keyspace.core.models import CharsetProfile

# Sums of every subset of the class sizes {26, 26, 10, 32}
ALLOWED_SIZES = {0, 10, 26, 32, 36, 42, 52, 58, 62, 68, 84, 94}


@pytest.mark.parametrize(
    "candidate, expected",
    [
        ("", 0),
        ("abc", 26),
        ("ABC", 26),
        ("123", 10),
        ("!!", 32),
        (" ", 32),
        ("abcABC", 52),
        ("abc123", 36),
        ("aA1", 62),
        ("aA1!", 94),
        ("Tr0ub4dor&3", 94),
    ],
)
def test_effective_size(candidate, expected):
    assert analyze(candidate).effective_size == expected


def test_empty_string_has_no_classes():
    profile = analyze("")
    assert not any(
        [profile.has_lower, profile.has_upper, profile.has_digit, profile.has_special]
    )


def test_repeated_digit_still_scores_whole_class():
    assert analyze("1111").effective_size == 10
    assert analyze("aaaa").effective_size == analyze("abcd").effective_size == 26


@pytest.mark.parametrize("candidate", ["é", "пароль", "密码", "🔑", "ß"])
def test_non_ascii_counts_as_special(candidate):
    profile = analyze(candidate)
    assert profile.has_special
    assert not profile.has_lower
    assert not profile.has_upper
    assert profile.effective_size == 32


def test_mixed_unicode_and_ascii():
    profile = analyze("café")
    assert profile.has_lower and profile.has_special
    assert profile.effective_size == 58


def test_every_flag_combination_is_a_subset_sum():
    for flags in itertools.product([False, True], repeat=4):
        profile = CharsetProfile(
            has_lower=flags[0],
            has_upper=flags[1],
            has_digit=flags[2],
            has_special=flags[3],
        )
        assert profile.effective_size in ALLOWED_SIZES
        assert 0 <= profile.effective_size <= 94


def test_sample_strings_stay_within_bounds():
    samples = ["", "a", "Z9", "x y", "P@ssw0rd", "\t\n", "ABCdef", "0" * 100]
    for sample in samples:
        assert analyze(sample).effective_size in ALLOWED_SIZES


def test_effective_size_is_serialised():
    dumped = CharsetAnalyzer().analyze("aB").model_dump()
    assert dumped["effective_size"] == 52
