"""Multi-turn conversation state and follow-up resolution."""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import Callable
from dataclasses import dataclass, field, replace

from barista.nlu.intents import (
    NOT_A_FOLLOW_UP,
    FollowUpKind,
    FollowUpResult,
    Intent,
    IntentCategory,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 5 * 60
DEFAULT_PAGE_SIZE = 5
DEFAULT_MAX_RECENT = 5

# Checked in this order; the first family that matches wins.
FOLLOW_UP_PHRASES: dict[FollowUpKind, tuple[str, ...]] = {
    FollowUpKind.MORE: (
        "more", "show more", "more please", "next", "keep going", "continue",
        "what else", "show me more", "any more", "more of those", "more results",
    ),
    FollowUpKind.ANOTHER: (
        "another", "another one", "one more", "show another", "different one",
        "something else", "alternatives",
    ),
    FollowUpKind.THAT: (
        "tell me more about that", "more about that", "what about that",
        "explain that", "details on that", "info on that",
    ),
    FollowUpKind.THEM: (
        "tell me about them", "more about them", "who are they", "their profile",
        "contact them", "message them",
    ),
    FollowUpKind.BACK: (
        "go back", "previous", "back", "undo", "cancel", "never mind", "nevermind",
    ),
}


@dataclass
class ConversationContext:
    """State carried between turns of one conversation.

    Attributes:
        session_id: Identifier of the conversation.
        last_intent: Intent of the last classified turn.
        last_entities: Entities of the last classified turn.
        recent_topics: Most recent skills/companies first, de-duplicated.
        recent_people: Most recent people first, de-duplicated.
        turn_count: Number of recorded turns.
        last_query_time: Clock reading of the last recorded turn, or of context
            creation before the first turn (seconds).
        last_result_count: Number of results the last turn produced.
        pagination_offset: Offset for "more"/"another" paging.
    """

    session_id: str
    last_intent: Intent | None = None
    last_entities: dict[str, str] = field(default_factory=dict)
    recent_topics: list[str] = field(default_factory=list)
    recent_people: list[str] = field(default_factory=list)
    turn_count: int = 0
    last_query_time: float = 0.0
    last_result_count: int = 0
    pagination_offset: int = 0


def _push_recent(items: list[str], item: str, limit: int) -> None:
    if item in items:
        items.remove(item)
    items.insert(0, item)
    del items[limit:]


class ContextManager:
    """Holds the single live conversation context for one session.

    Every read and write first replaces a context that has been inactive for
    longer than the timeout, so a stale context is never used to resolve a
    follow-up. Callers serving several sessions keep one manager per session.
    """

    def __init__(
        self,
        session_id: str | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_recent: int = DEFAULT_MAX_RECENT,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the manager.

        Args:
            session_id: Conversation id; generated when omitted.
            timeout_seconds: Inactivity window after which context is discarded.
            page_size: Offset step for "more" follow-ups.
            max_recent: Cap for the recent topics/people lists.
            clock: Source of the current time in seconds.

        Raises:
            ValueError: If a limit is not positive.
        """
        if timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be > 0 (got {timeout_seconds})")
        if page_size <= 0:
            raise ValueError(f"page_size must be > 0 (got {page_size})")
        if max_recent <= 0:
            raise ValueError(f"max_recent must be > 0 (got {max_recent})")

        self.session_id = session_id or f"session-{uuid.uuid4().hex[:12]}"
        self.timeout_seconds = timeout_seconds
        self.page_size = page_size
        self.max_recent = max_recent
        self._clock = clock
        self._context = self._fresh_context()

    def _fresh_context(self) -> ConversationContext:
        return ConversationContext(
            session_id=self.session_id, last_query_time=self._clock()
        )

    def is_stale(self) -> bool:
        """Whether the live context has outlived the inactivity window."""

        return self._clock() - self._context.last_query_time > self.timeout_seconds

    def _live(self) -> ConversationContext:
        if self.is_stale():
            if self._context.turn_count:
                logger.info(
                    f"Conversation {self.session_id} idle for more than "
                    f"{self.timeout_seconds:.0f}s; starting fresh context"
                )
            self._context = self._fresh_context()
        return self._context

    @property
    def context(self) -> ConversationContext:
        """Snapshot of the live context."""

        live = self._live()
        return replace(
            live,
            last_entities=dict(live.last_entities),
            recent_topics=list(live.recent_topics),
            recent_people=list(live.recent_people),
        )

    @property
    def offset(self) -> int:
        return self._live().pagination_offset

    def update_context(self, intent: Intent, result_count: int = 0) -> None:
        """Record a classified turn.

        Args:
            intent: Intent that was acted on.
            result_count: Number of results shown for it.
        """

        context = self._live()
        context.last_intent = intent
        context.last_entities = dict(intent.entities)
        context.last_query_time = self._clock()
        context.turn_count += 1
        context.last_result_count = result_count
        context.pagination_offset = 0

        for key in ("skill", "company"):
            value = intent.entities.get(key)
            if value:
                _push_recent(context.recent_topics, value, self.max_recent)

        person = intent.entities.get("person")
        if person:
            _push_recent(context.recent_people, person, self.max_recent)

    def touch(self) -> None:
        """Mark the conversation active without recording a new turn."""

        context = self._live()
        if context.last_intent is not None:
            context.last_query_time = self._clock()

    def increment_offset(self, step: int | None = None) -> int:
        """Advance the pagination offset and return the new value."""

        context = self._live()
        context.pagination_offset += self.page_size if step is None else step
        return context.pagination_offset

    def clear(self) -> None:
        """Discard the conversation context."""

        self._context = self._fresh_context()

    def resolve_follow_up(self, query: str, new_intent: Intent) -> FollowUpResult:
        """Decide whether a query continues the previous turn.

        Args:
            query: Raw query text.
            new_intent: Intent the query classified to on its own.

        Returns:
            FollowUpResult; ``modified_intent`` is the intent to act on instead
            of ``new_intent`` when one applies.
        """

        # A stale context is replaced by a fresh one, which has no last intent.
        if self._live().last_intent is None:
            return NOT_A_FOLLOW_UP

        lowered = query.lower().strip()
        phrases = FOLLOW_UP_PHRASES

        if any(lowered == p or lowered.startswith(p) for p in phrases[FollowUpKind.MORE]):
            return self._page(FollowUpKind.MORE, self.page_size)
        if any(p in lowered for p in phrases[FollowUpKind.ANOTHER]):
            return self._page(FollowUpKind.ANOTHER, 1, requestType="another")
        if any(p in lowered for p in phrases[FollowUpKind.THAT]):
            return self._resolve_that(new_intent)
        if any(p in lowered for p in phrases[FollowUpKind.THEM]):
            return self._resolve_them(new_intent)
        if lowered in phrases[FollowUpKind.BACK]:
            return FollowUpResult(is_follow_up=True, kind=FollowUpKind.BACK)

        return NOT_A_FOLLOW_UP

    def _page(self, kind: FollowUpKind, step: int, **extra: str) -> FollowUpResult:
        last_intent = self._context.last_intent
        offset = self.increment_offset(step)
        modified = last_intent.with_entities(
            offset=str(offset), isFollowUp="true", **extra
        )
        logger.debug(f"Follow-up '{kind.value}' re-emits last intent at offset {offset}")
        return FollowUpResult(is_follow_up=True, kind=kind, modified_intent=modified)

    def _resolve_that(self, new_intent: Intent) -> FollowUpResult:
        if not self._context.recent_topics:
            return NOT_A_FOLLOW_UP

        topic = self._context.recent_topics[0]
        modified = new_intent.with_entities(topic=topic, resolvedFrom="that")
        return FollowUpResult(
            is_follow_up=True, kind=FollowUpKind.THAT, modified_intent=modified
        )

    def _resolve_them(self, new_intent: Intent) -> FollowUpResult:
        if self._context.recent_people:
            person = self._context.recent_people[0]
            modified = Intent(
                category=IntentCategory.EXPERT,
                action="profile",
                confidence=new_intent.confidence,
                entities={**new_intent.entities, "person": person, "resolvedFrom": "them"},
                original_query=new_intent.original_query,
            )
            return FollowUpResult(
                is_follow_up=True, kind=FollowUpKind.THEM, modified_intent=modified
            )

        last_intent = self._context.last_intent
        if last_intent is not None and last_intent.category is IntentCategory.EXPERT:
            return FollowUpResult(
                is_follow_up=True, kind=FollowUpKind.THEM, modified_intent=last_intent
            )

        return NOT_A_FOLLOW_UP
