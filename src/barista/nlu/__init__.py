"""Natural language understanding for the Barista assistant and inline search."""

from barista.nlu.classifier import (
    classify_intent,
    classify_search,
    detect_query_type,
    empty_intent,
)
from barista.nlu.fuzzy import closest_match, is_fuzzy_match, levenshtein_distance
from barista.nlu.intents import (
    ExpectedResult,
    FollowUpKind,
    FollowUpResult,
    Intent,
    IntentCategory,
    IntentRule,
    QueryType,
    SearchEntity,
    SearchEntityType,
    SearchIntent,
    SearchIntentResult,
    TemporalInfo,
    TemporalRange,
)
from barista.nlu.normalizer import normalize
from barista.nlu.search_entities import extract_search_entities
from barista.nlu.temporal import extract_temporal

__all__ = [
    "ExpectedResult",
    "FollowUpKind",
    "FollowUpResult",
    "Intent",
    "IntentCategory",
    "IntentRule",
    "QueryType",
    "SearchEntity",
    "SearchEntityType",
    "SearchIntent",
    "SearchIntentResult",
    "TemporalInfo",
    "TemporalRange",
    "classify_intent",
    "classify_search",
    "closest_match",
    "detect_query_type",
    "empty_intent",
    "extract_search_entities",
    "extract_temporal",
    "is_fuzzy_match",
    "levenshtein_distance",
    "normalize",
]
