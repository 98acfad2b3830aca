"""Assistant orchestrator for processing user turns.

Coordinates intent classification, follow-up resolution against the
conversation context, and quick-reply suggestions. This is the main query
understanding pipeline consumed by the chat panel.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from barista.config import Config
from barista.context import ContextManager
from barista.nlu import (
    FollowUpKind,
    FollowUpResult,
    Intent,
    IntentCategory,
    classify_intent,
)
from barista.nlu.intents import NOT_A_FOLLOW_UP
from barista.quick_replies import QuickReply, generate_quick_replies

logger = logging.getLogger(__name__)

# Paging and "back" act on the previous turn, which stays recorded as-is.
_KEEP_PREVIOUS_TURN = frozenset({FollowUpKind.MORE, FollowUpKind.ANOTHER, FollowUpKind.BACK})


@dataclass(frozen=True)
class AssistantTurn:
    """Outcome of one user turn.

    Attributes:
        intent: Intent to act on (the follow-up's modified intent if any).
        classified: Intent the query classified to on its own.
        follow_up: Follow-up resolution result.
        quick_replies: Suggested next queries.
    """

    intent: Intent
    classified: Intent
    follow_up: FollowUpResult = NOT_A_FOLLOW_UP
    quick_replies: tuple[QuickReply, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "intent": self.intent.to_dict(),
            "followUp": {
                "isFollowUp": self.follow_up.is_follow_up,
                "type": self.follow_up.kind.value,
            },
            "quickReplies": [reply.value for reply in self.quick_replies],
        }


class BaristaAssistant:
    """Orchestrator for turning user queries into actionable intents.

    Coordinates:
    - NLU (normalization, intent scoring, entity and date extraction)
    - Conversation context (follow-ups such as "more", "that", "them")
    - Quick replies for the presentation layer
    """

    def __init__(
        self,
        config: Config | None = None,
        context: ContextManager | None = None,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the assistant.

        Args:
            config: Assistant configuration; defaults are used when omitted.
            context: Conversation context for this session; built from the
                config when omitted.
            now: Source of the reference time for date ranges.
        """
        self.config = config or Config()
        self.context = context or ContextManager(
            timeout_seconds=self.config.context_timeout_seconds,
            page_size=self.config.page_size,
            max_recent=self.config.max_recent_items,
        )
        self._now = now

    def handle(self, query: object, result_count: int = 0) -> AssistantTurn:
        """Process a user query through the full pipeline.

        The pipeline:
        1. Classify the query on its own
        2. Try to resolve it as a follow-up to the previous turn
        3. Record the turn in the conversation context ("more", "another" and
           "back" keep the previous turn so repeated "more" keeps paging)
        4. Suggest quick replies for the resulting category

        Args:
            query: User's input.
            result_count: Number of results the caller will show.

        Returns:
            AssistantTurn describing the intent to act on.
        """
        classified = classify_intent(
            query, now=self._now(), max_length=self.config.max_query_length
        )
        if classified.category is IntentCategory.UNKNOWN and classified.action == "empty":
            logger.debug("Ignoring empty query")
            return AssistantTurn(
                intent=classified,
                classified=classified,
                quick_replies=tuple(generate_quick_replies(classified)),
            )

        follow_up = self.context.resolve_follow_up(str(query), classified)
        intent = follow_up.modified_intent or classified

        if follow_up.kind in _KEEP_PREVIOUS_TURN:
            self.context.touch()
        else:
            self.context.update_context(intent, result_count)

        logger.debug(
            f"Turn resolved to {intent.category.value}/{intent.action} "
            f"(follow-up: {follow_up.kind.value})"
        )
        return AssistantTurn(
            intent=intent,
            classified=classified,
            follow_up=follow_up,
            quick_replies=tuple(generate_quick_replies(intent)),
        )
