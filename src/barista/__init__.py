"""Query understanding core for the Barista workplace assistant."""

from barista.assistant import AssistantTurn, BaristaAssistant
from barista.config import Config
from barista.context import ContextManager, ConversationContext

__all__ = [
    "AssistantTurn",
    "BaristaAssistant",
    "Config",
    "ContextManager",
    "ConversationContext",
]
