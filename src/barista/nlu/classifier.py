"""Classify free-text queries into chat intents and search intents."""

from __future__ import annotations

import logging
import re
from datetime import datetime

from barista.nlu.entities import extract_entities
from barista.nlu.intents import (
    ExpectedResult,
    Intent,
    IntentCategory,
    QueryType,
    SearchIntent,
    SearchIntentResult,
)
from barista.nlu.normalizer import correct_typos, fold_query, normalize, sanitize, tokenize
from barista.nlu.scoring import IntentScorer
from barista.nlu.search_entities import extract_search_entities
from barista.nlu.taxonomy import CHAT_TAXONOMY, SEARCH_TAXONOMY
from barista.nlu.temporal import extract_temporal, temporal_entities

logger = logging.getLogger(__name__)

DEFAULT_MAX_QUERY_LENGTH = 1000

_QUESTION_RE = re.compile(
    r"^(how|what|who|where|when|why|which|can|is|does|do|are|will|would|could|should)\b",
    re.IGNORECASE,
)
_COMMAND_RE = re.compile(
    r"^(show|open|go|find|get|list|browse|take|navigate)\b", re.IGNORECASE
)

_chat_scorer = IntentScorer(CHAT_TAXONOMY)
_search_scorer = IntentScorer(SEARCH_TAXONOMY)


def empty_intent(query: object = "") -> Intent:
    """Intent reported for empty or non-string input."""

    return Intent(
        category=IntentCategory.UNKNOWN,
        action="empty",
        confidence=0.0,
        entities={},
        original_query=query if isinstance(query, str) else "",
    )


def classify_intent(
    query: object,
    now: datetime | None = None,
    max_length: int = DEFAULT_MAX_QUERY_LENGTH,
) -> Intent:
    """Classify a chat query.

    The query is normalized (typos, synonyms), scored against the chat
    taxonomy, and the winning pattern's extractors are run. Detected date
    ranges are merged into the entities.

    Args:
        query: Raw user input. Anything other than a non-blank string yields
            the ``unknown``/``empty`` intent.
        now: Reference time for date ranges.
        max_length: Input beyond this many characters is ignored.

    Returns:
        The classified Intent. Never raises for bad input.
    """

    if not isinstance(query, str):
        return empty_intent(query)

    cleaned = sanitize(query, max_length)
    if not cleaned:
        return empty_intent(query)

    normalized = normalize(cleaned)
    temporal = extract_temporal(normalized, now)
    ranking = _chat_scorer.rank(normalized)
    scored = ranking.primary

    if scored is None:
        intent = Intent(
            category=CHAT_TAXONOMY.fallback_category,
            action=CHAT_TAXONOMY.fallback_action,
            confidence=CHAT_TAXONOMY.policy.fallback_confidence,
            entities=temporal_entities(temporal),
            original_query=query,
        )
    else:
        entities = extract_entities(normalized, scored.rule.extractors, cleaned)
        entities.update(temporal_entities(temporal))
        intent = Intent(
            category=scored.rule.category,
            action=scored.rule.action,
            confidence=scored.confidence,
            entities=entities,
            original_query=query,
        )

    logger.debug(
        f"Classified {normalized!r} as {intent.category.value}/{intent.action} "
        f"({intent.confidence:.2f})"
    )
    return intent


def detect_query_type(query: str) -> QueryType:
    """Label the surface form of a raw query.

    Questions and commands are recognised by their leading word. One to four
    tokens with at least half of them capitalized look like a person's name.
    Other queries of up to two tokens are keywords; anything longer is a phrase.
    """

    folded = fold_query(query)
    if _QUESTION_RE.match(folded):
        return QueryType.QUESTION
    if _COMMAND_RE.match(folded):
        return QueryType.COMMAND

    words = query.split()
    if 1 <= len(words) <= 4:
        capitalized = sum(1 for word in words if word[0].isupper())
        if capitalized * 2 >= len(words):
            return QueryType.NAME

    if len(words) <= 2:
        return QueryType.KEYWORD
    return QueryType.PHRASE


def classify_search(
    query: object,
    max_length: int = DEFAULT_MAX_QUERY_LENGTH,
) -> SearchIntentResult:
    """Classify an inline search query.

    Every search intent is scored additively from its patterns and keywords;
    the best becomes ``primary`` and up to three strong runners-up are
    returned as ``secondary`` for disambiguation. Tools, topics, teams and
    people named in the query are reported as ``entities`` whatever the
    intent.

    Args:
        query: Raw search box input.
        max_length: Input beyond this many characters is ignored.

    Returns:
        SearchIntentResult; ``GENERAL_SEARCH`` when nothing matched.
    """

    cleaned = sanitize(query, max_length) if isinstance(query, str) else ""
    fallback = SearchIntentResult(
        primary=SEARCH_TAXONOMY.fallback_category,
        confidence=SEARCH_TAXONOMY.policy.fallback_confidence,
        query_type=detect_query_type(cleaned),
        expected_result=ExpectedResult.MIXED,
        entities=extract_search_entities(cleaned, tokenize(cleaned)),
    )
    if not cleaned:
        return fallback

    text = correct_typos(fold_query(cleaned))
    ranking = _search_scorer.rank(text, tokenize(text))
    if ranking.primary is None:
        logger.debug(f"No search intent matched {text!r}")
        return fallback

    primary = ranking.primary
    return SearchIntentResult(
        primary=primary.rule.category,
        confidence=primary.confidence,
        secondary=tuple(
            (item.rule.category, item.confidence) for item in ranking.secondary
        ),
        query_type=fallback.query_type,
        expected_result=primary.rule.expected_result or ExpectedResult.MIXED,
        entities=fallback.entities,
    )


def is_find_intent(intent: SearchIntent) -> bool:
    return intent in {
        SearchIntent.FIND_PERSON,
        SearchIntent.FIND_TOOL,
        SearchIntent.FIND_RESOURCE,
        SearchIntent.FIND_FAQ,
        SearchIntent.FIND_TEAM,
    }


def is_action_intent(intent: SearchIntent) -> bool:
    return intent in {
        SearchIntent.TOOL_ACCESS,
        SearchIntent.START_DISCUSSION,
        SearchIntent.CONTACT_EXPERT,
        SearchIntent.NAVIGATE,
    }


def is_learn_intent(intent: SearchIntent) -> bool:
    return intent in {
        SearchIntent.EXPLAIN_CONCEPT,
        SearchIntent.LEARN_PROCESS,
        SearchIntent.COMPARE,
    }
