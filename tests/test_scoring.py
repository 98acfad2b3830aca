"""Tests for the taxonomy scoring engine."""

from enum import Enum

import pytest

from barista.nlu.intents import IntentRule
from barista.nlu.scoring import (
    IntentScorer,
    KeywordMatch,
    ScoringPolicy,
    Selection,
    Taxonomy,
)


class Area(Enum):
    ALPHA = "alpha"
    BETA = "beta"
    GAMMA = "gamma"
    DELTA = "delta"
    EPSILON = "epsilon"
    NONE = "none"


def _longest_phrase_taxonomy(*rules: IntentRule) -> Taxonomy:
    return Taxonomy(
        name="test-chat",
        rules=rules,
        policy=ScoringPolicy(
            selection=Selection.LONGEST_PHRASE,
            keyword_match=KeywordMatch.SUBSTRING,
            fallback_confidence=0.4,
        ),
        fallback_category=Area.NONE,
    )


def _additive_taxonomy(*rules: IntentRule) -> Taxonomy:
    return Taxonomy(
        name="test-search",
        rules=rules,
        policy=ScoringPolicy(
            selection=Selection.ADDITIVE,
            keyword_match=KeywordMatch.TOKENS,
            fallback_confidence=0.5,
        ),
        fallback_category=Area.NONE,
    )


def test_longest_phrase_wins_regardless_of_order() -> None:
    scorer = IntentScorer(
        _longest_phrase_taxonomy(
            IntentRule(Area.ALPHA, "short", phrases=("blue",)),
            IntentRule(Area.BETA, "long", phrases=("blue whale",)),
        )
    )

    ranking = scorer.rank("a blue whale swims")

    assert ranking.primary is not None
    assert ranking.primary.rule.category is Area.BETA
    assert ranking.primary.matched_phrase == "blue whale"
    assert ranking.primary.confidence == pytest.approx(0.7 + 10 / 50)


def test_equal_length_phrases_keep_declaration_order() -> None:
    scorer = IntentScorer(
        _longest_phrase_taxonomy(
            IntentRule(Area.ALPHA, "first", phrases=("cat",)),
            IntentRule(Area.BETA, "second", phrases=("dog",)),
        )
    )

    ranking = scorer.rank("dog and cat")

    assert ranking.primary is not None
    assert ranking.primary.rule.action == "first"


def test_phrase_confidence_is_capped() -> None:
    scorer = IntentScorer(
        _longest_phrase_taxonomy(
            IntentRule(Area.ALPHA, "long", phrases=("a very long trigger phrase indeed",)),
        )
    )

    ranking = scorer.rank("a very long trigger phrase indeed")

    assert ranking.primary is not None
    assert ranking.primary.confidence == 0.95


def test_keyword_fallback_uses_declaration_order() -> None:
    scorer = IntentScorer(
        _longest_phrase_taxonomy(
            IntentRule(Area.ALPHA, "phrase", phrases=("never present",)),
            IntentRule(Area.BETA, "search", keywords=("sky",)),
            IntentRule(Area.GAMMA, "search", keywords=("blue",)),
        )
    )

    ranking = scorer.rank("blue sky")

    assert ranking.primary is not None
    assert ranking.primary.rule.category is Area.BETA
    assert ranking.primary.confidence == 0.4
    assert ranking.primary.matched_phrase is None


def test_nothing_matches() -> None:
    scorer = IntentScorer(
        _longest_phrase_taxonomy(IntentRule(Area.ALPHA, "x", phrases=("cat",)))
    )

    assert scorer.rank("dog").primary is None


def test_additive_scoring_combines_phrase_and_keyword() -> None:
    scorer = IntentScorer(
        _additive_taxonomy(
            IntentRule(
                Area.ALPHA, "both", phrases=(r"get\s+\w+",), keywords=("access",),
                base_confidence=0.8, regex=True,
            ),
            IntentRule(
                Area.BETA, "phrase_only", phrases=(r"how do",), base_confidence=0.75,
                regex=True,
            ),
            IntentRule(Area.GAMMA, "keyword_only", keywords=("jira",), regex=True),
        )
    )

    ranking = scorer.rank("how do i get jira access", ["how", "do", "i", "get", "jira", "access"])

    assert ranking.primary is not None
    assert ranking.primary.rule.category is Area.ALPHA
    assert ranking.primary.confidence == 0.95
    # keyword-only scores 0.3, which is not above the retain floor
    assert [(item.rule.category, item.confidence) for item in ranking.secondary] == [
        (Area.BETA, 0.75)
    ]


def test_retain_floor_is_strict_unless_inclusive() -> None:
    rule = IntentRule(Area.ALPHA, "keyword_only", keywords=("jira",), regex=True)
    strict = IntentScorer(_additive_taxonomy(rule))
    inclusive = IntentScorer(
        Taxonomy(
            name="test-inclusive",
            rules=(rule,),
            policy=ScoringPolicy(
                selection=Selection.ADDITIVE,
                keyword_match=KeywordMatch.TOKENS,
                fallback_confidence=0.5,
                retain_inclusive=True,
            ),
            fallback_category=Area.NONE,
        )
    )

    assert strict.rank("jira", ["jira"]).primary is None
    ranking = inclusive.rank("jira", ["jira"])
    assert ranking.primary is not None
    assert ranking.primary.confidence == 0.3


def test_additive_score_is_capped_at_one() -> None:
    scorer = IntentScorer(
        _additive_taxonomy(
            IntentRule(
                Area.ALPHA, "x", phrases=("open",), keywords=("open",),
                base_confidence=0.9, regex=True,
            ),
        )
    )

    ranking = scorer.rank("open jira", ["open", "jira"])

    assert ranking.primary is not None
    assert ranking.primary.confidence == 1.0


def test_additive_keywords_match_whole_tokens() -> None:
    scorer = IntentScorer(
        _additive_taxonomy(
            IntentRule(Area.ALPHA, "x", keywords=("go",), regex=True),
            IntentRule(Area.BETA, "y", keywords=("take me",), regex=True),
        )
    )

    assert scorer.rank("good morning", ["good", "morning"]).primary is None

    ranking = scorer.rank("please take me home", ["please", "take", "me", "home"])
    assert ranking.primary is not None
    assert ranking.primary.rule.category is Area.BETA


def test_secondary_is_limited_to_three() -> None:
    rules = tuple(
        IntentRule(area, area.value, phrases=("hit",), base_confidence=0.9 - i * 0.05,
                   regex=True)
        for i, area in enumerate([Area.ALPHA, Area.BETA, Area.GAMMA, Area.DELTA, Area.EPSILON])
    )
    scorer = IntentScorer(_additive_taxonomy(*rules))

    ranking = scorer.rank("hit", ["hit"])

    assert ranking.primary is not None
    assert ranking.primary.rule.category is Area.ALPHA
    assert [item.rule.category for item in ranking.secondary] == [
        Area.BETA,
        Area.GAMMA,
        Area.DELTA,
    ]


def test_additive_ties_keep_declaration_order() -> None:
    scorer = IntentScorer(
        _additive_taxonomy(
            IntentRule(Area.ALPHA, "a", phrases=("x",), base_confidence=0.8, regex=True),
            IntentRule(Area.BETA, "b", phrases=("x",), base_confidence=0.8, regex=True),
        )
    )

    ranking = scorer.rank("x", ["x"])

    assert ranking.primary is not None
    assert ranking.primary.rule.category is Area.ALPHA
    assert ranking.secondary[0].rule.category is Area.BETA
