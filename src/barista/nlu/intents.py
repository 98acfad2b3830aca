"""Intent data models for Barista NLU."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class IntentCategory(str, Enum):
    """Portal area a chat query is about."""

    TOAST = "toast"
    LOP = "lop"
    PULSE = "pulse"
    EXPERT = "expert"
    COMMUNITY = "community"
    LIBRARY = "library"
    NAVIGATION = "navigation"
    STATS = "stats"
    HELP = "help"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Intent:
    """Structured classification of a free-text query.

    Attributes:
        category: Portal area the query targets.
        action: Action id within the category (e.g. 'leaderboard', 'find_by_skill').
        confidence: Score in [0, 1].
        entities: Extracted string values keyed by entity name.
        original_query: Query text as received.
    """

    category: IntentCategory
    action: str
    confidence: float
    entities: Mapping[str, str] = field(default_factory=dict)
    original_query: str = ""

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Intent confidence out of range: {self.confidence}")
        object.__setattr__(self, "entities", MappingProxyType(dict(self.entities)))

    def with_entities(self, **updates: str) -> Intent:
        """Return a copy with the given entities merged over the current ones."""

        return Intent(
            category=self.category,
            action=self.action,
            confidence=self.confidence,
            entities={**self.entities, **updates},
            original_query=self.original_query,
        )

    def to_dict(self) -> dict:
        return {
            "category": self.category.value,
            "action": self.action,
            "confidence": self.confidence,
            "entities": dict(self.entities),
            "originalQuery": self.original_query,
        }


@dataclass(frozen=True)
class IntentRule:
    """One row of a taxonomy table.

    Attributes:
        category: Category (or search intent) the rule resolves to.
        action: Action id reported when the rule wins.
        phrases: Trigger phrases, literal or regex depending on ``regex``.
        keywords: Keywords used by the keyword stage of scoring.
        extractors: Entity extractor names to run when the rule wins.
        base_confidence: Score contributed by a phrase match (additive scoring only).
        expected_result: Shape of result the caller should render (search only).
        regex: Whether ``phrases`` are regular expressions.
    """

    category: Enum
    action: str
    phrases: tuple[str, ...] = ()
    keywords: tuple[str, ...] = ()
    extractors: tuple[str, ...] = ()
    base_confidence: float = 0.0
    expected_result: ExpectedResult | None = None
    regex: bool = False


class TemporalRange(str, Enum):
    """Date range tags recognised in queries."""

    TODAY = "today"
    YESTERDAY = "yesterday"
    THIS_WEEK = "this_week"
    LAST_WEEK = "last_week"
    THIS_MONTH = "this_month"
    LAST_MONTH = "last_month"
    RECENT = "recent"
    NONE = "none"


@dataclass(frozen=True)
class TemporalInfo:
    """Detected date range with its concrete bounds."""

    range: TemporalRange = TemporalRange.NONE
    start: datetime | None = None
    end: datetime | None = None

    @property
    def is_present(self) -> bool:
        return self.range is not TemporalRange.NONE


class FollowUpKind(str, Enum):
    """Kinds of follow-up phrases resolved against conversation context."""

    MORE = "more"
    ANOTHER = "another"
    THAT = "that"
    THEM = "them"
    BACK = "back"
    NONE = "none"


@dataclass(frozen=True)
class FollowUpResult:
    """Outcome of follow-up resolution."""

    is_follow_up: bool
    kind: FollowUpKind = FollowUpKind.NONE
    modified_intent: Intent | None = None


NOT_A_FOLLOW_UP = FollowUpResult(is_follow_up=False)


class SearchIntent(str, Enum):
    """Intents recognised by the inline search taxonomy."""

    FIND_PERSON = "FIND_PERSON"
    FIND_TOOL = "FIND_TOOL"
    FIND_RESOURCE = "FIND_RESOURCE"
    FIND_FAQ = "FIND_FAQ"
    FIND_TEAM = "FIND_TEAM"
    TOOL_ACCESS = "TOOL_ACCESS"
    START_DISCUSSION = "START_DISCUSSION"
    CONTACT_EXPERT = "CONTACT_EXPERT"
    NAVIGATE = "NAVIGATE"
    EXPLAIN_CONCEPT = "EXPLAIN_CONCEPT"
    LEARN_PROCESS = "LEARN_PROCESS"
    COMPARE = "COMPARE"
    LOP_NEXT = "LOP_NEXT"
    LOP_FIND = "LOP_FIND"
    LOP_SPEAKER = "LOP_SPEAKER"
    BROWSE = "BROWSE"
    RECENT = "RECENT"
    POPULAR = "POPULAR"
    GENERAL_SEARCH = "GENERAL_SEARCH"


class QueryType(str, Enum):
    """Surface form of a raw search query."""

    QUESTION = "QUESTION"
    COMMAND = "COMMAND"
    NAME = "NAME"
    KEYWORD = "KEYWORD"
    PHRASE = "PHRASE"


class ExpectedResult(str, Enum):
    """Result shape a search intent expects."""

    DIRECT_ANSWER = "DIRECT_ANSWER"
    ACTIONABLE_ANSWER = "ACTIONABLE_ANSWER"
    ENTITY_CARD = "ENTITY_CARD"
    RESOURCE_LIST = "RESOURCE_LIST"
    NAVIGATION = "NAVIGATION"
    MIXED = "MIXED"


class SearchEntityType(str, Enum):
    """Kinds of entities recognised in search queries."""

    TOOL = "TOOL"
    PERSON = "PERSON"
    TOPIC = "TOPIC"
    TEAM = "TEAM"
    RESOURCE_TYPE = "RESOURCE_TYPE"
    ACTION = "ACTION"
    PILLAR = "PILLAR"


@dataclass(frozen=True)
class SearchEntity:
    """An entity found in a search query.

    Attributes:
        type: Entity kind.
        value: Matched text as it appears in the query.
        normalized_value: Canonical name (e.g. 'confluence' for 'wiki').
        confidence: Score in [0, 1].
        start: Offset of the first matched character.
        end: Offset one past the last matched character.
    """

    type: SearchEntityType
    value: str
    normalized_value: str
    confidence: float
    start: int
    end: int

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "value": self.value,
            "normalizedValue": self.normalized_value,
            "confidence": self.confidence,
            "position": {"start": self.start, "end": self.end},
        }


@dataclass(frozen=True)
class SearchIntentResult:
    """Ranked search classification.

    Attributes:
        primary: Best scoring intent.
        confidence: Score of the primary intent.
        secondary: Up to three runner-up intents with their scores, for disambiguation.
        query_type: Surface form of the raw query.
        expected_result: Result shape of the primary intent.
        entities: Entities found in the query, ordered by position.
    """

    primary: SearchIntent
    confidence: float
    secondary: tuple[tuple[SearchIntent, float], ...] = ()
    query_type: QueryType = QueryType.KEYWORD
    expected_result: ExpectedResult = ExpectedResult.MIXED
    entities: tuple[SearchEntity, ...] = ()

    def entities_of(self, entity_type: SearchEntityType) -> tuple[SearchEntity, ...]:
        return tuple(entity for entity in self.entities if entity.type is entity_type)

    def to_dict(self) -> dict:
        return {
            "primary": self.primary.value,
            "confidence": self.confidence,
            "secondary": [
                {"intent": intent.value, "confidence": score}
                for intent, score in self.secondary
            ],
            "queryType": self.query_type.value,
            "expectedResult": self.expected_result.value,
            "entities": [entity.to_dict() for entity in self.entities],
        }
