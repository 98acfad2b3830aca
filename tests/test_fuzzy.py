"""Tests for edit-distance matching."""

import pytest

from barista.nlu.fuzzy import (
    closest_match,
    fuzzy_threshold,
    is_fuzzy_match,
    levenshtein_distance,
)


@pytest.mark.parametrize(
    ("first", "second", "expected"),
    [
        ("", "", 0),
        ("abc", "", 3),
        ("kitten", "sitting", 3),
        ("toast", "tost", 1),
        ("flaw", "lawn", 2),
    ],
)
def test_levenshtein_distance(first: str, second: str, expected: int) -> None:
    assert levenshtein_distance(first, second) == expected
    assert levenshtein_distance(second, first) == expected


def test_fuzzy_threshold_scales_with_length() -> None:
    assert fuzzy_threshold("fhir", "fihr") == 1
    assert fuzzy_threshold("billing", "biling") == 2
    assert fuzzy_threshold("eligibility", "eligiblity") == 3


def test_is_fuzzy_match() -> None:
    assert is_fuzzy_match("toast", "tost")
    assert is_fuzzy_match("eligibility", "eligibity")
    assert not is_fuzzy_match("toast", "roster")


def test_short_tokens_never_match() -> None:
    assert not is_fuzzy_match("ab", "ab")
    assert not is_fuzzy_match("ab", "abc")


def test_closest_match_picks_nearest() -> None:
    vocabulary = ["Salesforce", "Slack", "Jira", "Confluence"]

    assert closest_match("jirra", vocabulary) == "Jira"
    assert closest_match("slak", vocabulary) == "Slack"
    assert closest_match("workday", vocabulary) is None


def test_closest_match_tie_keeps_first() -> None:
    assert closest_match("cat", ["bat", "hat"]) == "bat"
