"""Taxonomy-driven intent scoring shared by the chat and search classifiers."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from functools import cached_property

from barista.nlu.intents import IntentRule


class Selection(Enum):
    """How candidate intents are ranked."""

    LONGEST_PHRASE = "longest_phrase"
    ADDITIVE = "additive"


class KeywordMatch(Enum):
    """How a keyword is tested against a query."""

    SUBSTRING = "substring"
    TOKENS = "tokens"


@dataclass(frozen=True)
class ScoringPolicy:
    """Numeric and matching behaviour of a taxonomy.

    ``LONGEST_PHRASE`` picks the single longest trigger phrase across all rules
    and scores it ``min(phrase_ceiling, phrase_base + len / phrase_length_divisor)``;
    with no phrase match the first rule with a present keyword wins at
    ``keyword_confidence``.

    ``ADDITIVE`` scores every rule: a phrase match contributes the rule's base
    confidence and a keyword match adds ``keyword_boost_with_phrase`` on top of
    it or ``keyword_boost_alone`` by itself, capped at ``score_ceiling``. Rules
    scoring above ``retain_floor`` are ranked (at or above it when
    ``retain_inclusive`` is set, which keeps keyword-only matches); up to
    ``max_secondary`` runners-up above ``secondary_floor`` are kept.
    """

    selection: Selection
    keyword_match: KeywordMatch
    fallback_confidence: float
    phrase_base: float = 0.7
    phrase_length_divisor: float = 50.0
    phrase_ceiling: float = 0.95
    keyword_confidence: float = 0.4
    keyword_boost_with_phrase: float = 0.15
    keyword_boost_alone: float = 0.3
    score_ceiling: float = 1.0
    retain_floor: float = 0.3
    retain_inclusive: bool = False
    secondary_floor: float = 0.4
    max_secondary: int = 3


@dataclass(frozen=True)
class Taxonomy:
    """A named set of intent rules plus the policy used to score them."""

    name: str
    rules: tuple[IntentRule, ...]
    policy: ScoringPolicy
    fallback_category: Enum
    fallback_action: str = "search"


@dataclass(frozen=True)
class ScoredIntent:
    """A rule that matched a query, with its score."""

    rule: IntentRule
    confidence: float
    matched_phrase: str | None = None


@dataclass(frozen=True)
class Ranking:
    """Scoring outcome; ``primary`` is None when nothing matched."""

    primary: ScoredIntent | None
    secondary: tuple[ScoredIntent, ...] = ()


class IntentScorer:
    """Score normalized queries against one taxonomy."""

    def __init__(self, taxonomy: Taxonomy) -> None:
        self.taxonomy = taxonomy

    @cached_property
    def _compiled(self) -> dict[int, tuple[re.Pattern[str], ...]]:
        return {
            index: tuple(re.compile(phrase, re.IGNORECASE) for phrase in rule.phrases)
            for index, rule in enumerate(self.taxonomy.rules)
            if rule.regex
        }

    def rank(self, text: str, tokens: Sequence[str] = ()) -> Ranking:
        """Rank the taxonomy's rules against a query.

        Args:
            text: Normalized, lower-cased query text.
            tokens: Query tokens, used when keywords are matched by token.

        Returns:
            Ranking with the winning rule (if any) and runners-up.
        """

        if self.taxonomy.policy.selection is Selection.LONGEST_PHRASE:
            return self._rank_longest_phrase(text, tokens)
        return self._rank_additive(text, tokens)

    def _rank_longest_phrase(self, text: str, tokens: Sequence[str]) -> Ranking:
        policy = self.taxonomy.policy
        best_rule: IntentRule | None = None
        best_phrase = ""

        for index, rule in enumerate(self.taxonomy.rules):
            phrase = self._longest_phrase(index, rule, text)
            if phrase is not None and len(phrase) > len(best_phrase):
                best_rule, best_phrase = rule, phrase

        if best_rule is not None:
            confidence = min(
                policy.phrase_ceiling,
                policy.phrase_base + len(best_phrase) / policy.phrase_length_divisor,
            )
            return Ranking(ScoredIntent(best_rule, confidence, best_phrase))

        for rule in self.taxonomy.rules:
            if self._has_keyword(rule, text, tokens):
                return Ranking(ScoredIntent(rule, policy.keyword_confidence))

        return Ranking(None)

    def _rank_additive(self, text: str, tokens: Sequence[str]) -> Ranking:
        policy = self.taxonomy.policy
        scored: list[ScoredIntent] = []

        for index, rule in enumerate(self.taxonomy.rules):
            phrase = self._longest_phrase(index, rule, text)
            score = rule.base_confidence if phrase is not None else 0.0
            if self._has_keyword(rule, text, tokens):
                score += (
                    policy.keyword_boost_with_phrase
                    if phrase is not None
                    else policy.keyword_boost_alone
                )
            score = min(score, policy.score_ceiling)
            if score > 0 and self._retained(score):
                scored.append(ScoredIntent(rule, round(score, 4), phrase))

        if not scored:
            return Ranking(None)

        # sorted() is stable, so equal scores keep declaration order.
        scored = sorted(scored, key=lambda item: item.confidence, reverse=True)
        secondary = tuple(
            item for item in scored[1:] if item.confidence > policy.secondary_floor
        )[: policy.max_secondary]
        return Ranking(scored[0], secondary)

    def _retained(self, score: float) -> bool:
        policy = self.taxonomy.policy
        if policy.retain_inclusive:
            return score >= policy.retain_floor
        return score > policy.retain_floor

    def _longest_phrase(self, index: int, rule: IntentRule, text: str) -> str | None:
        best: str | None = None
        if rule.regex:
            for pattern in self._compiled[index]:
                match = pattern.search(text)
                if match and (best is None or len(match.group(0)) > len(best)):
                    best = match.group(0)
            return best

        for phrase in rule.phrases:
            if phrase in text and (best is None or len(phrase) > len(best)):
                best = phrase
        return best

    def _has_keyword(self, rule: IntentRule, text: str, tokens: Sequence[str]) -> bool:
        if self.taxonomy.policy.keyword_match is KeywordMatch.SUBSTRING:
            return any(keyword in text for keyword in rule.keywords)

        token_set = set(tokens)
        return any(
            all(part in token_set for part in keyword.split())
            for keyword in rule.keywords
        )
