"""Tests for query normalization."""

import pytest

from barista.nlu.normalizer import (
    canonicalize_synonyms,
    correct_typos,
    fold_query,
    normalize,
    sanitize,
    tokenize,
)


def test_normalize_corrects_typos() -> None:
    assert normalize("tost leaderborad") == "toast leaderboard"


def test_normalize_is_case_insensitive() -> None:
    assert normalize("Show The LEADERBORAD") == "show the leaderboard"


def test_correct_typos_respects_word_boundaries() -> None:
    # "tost" inside another word is left alone
    assert correct_typos("tostada") == "tostada"
    assert correct_typos("expertin fhir") == "expert in fhir"


def test_canonicalize_synonyms_prefers_longest() -> None:
    assert canonicalize_synonyms("competitor news") == "competitive signals"
    assert canonicalize_synonyms("market news") == "market signals"
    assert canonicalize_synonyms("news") == "signals"


def test_canonicalize_multi_word_synonyms() -> None:
    assert canonicalize_synonyms("who knows fhir") == "expert in fhir"
    assert canonicalize_synonyms("give a shout out") == "give a toast"
    assert canonicalize_synonyms("love of product session") == "lop session"


def test_canonicalize_thanks_and_qa() -> None:
    assert canonicalize_synonyms("thanks to the team") == "toast to the team"
    assert canonicalize_synonyms("open qa") == "open discussions"
    # whole words only
    assert canonicalize_synonyms("qatar") == "qatar"


def test_typo_then_synonym() -> None:
    assert normalize("specalist in claims") == "expert in claims"


def test_normalize_collapses_whitespace() -> None:
    assert normalize("  shout    out   to   the team ") == "toast to the team"


@pytest.mark.parametrize(
    "query",
    [
        "tost leaderborad",
        "who knows fhir and x12",
        "Kudos for the PRD template",
        "shout   out",
        "competitor news and market news",
        "whats the latest sessons?",
        "grab and go docs",
        "q&a forum threads",
        "thanks for the qa session",
        "",
    ],
)
def test_normalize_is_idempotent(query: str) -> None:
    once = normalize(query)

    assert normalize(once) == once


def test_sanitize_strips_control_characters_and_clips() -> None:
    assert sanitize("\x00hello\x07 world  ") == "hello world"
    assert sanitize("abcdef", max_length=3) == "abc"


def test_fold_query_strips_accents() -> None:
    assert fold_query("  Café   Résumé ") == "cafe resume"


def test_tokenize() -> None:
    assert tokenize("How do I get Jira-access? (please)") == [
        "how",
        "do",
        "i",
        "get",
        "jira-access",
        "please",
    ]
