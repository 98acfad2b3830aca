"""Quick-reply chips offered after each assistant answer."""

from __future__ import annotations

from dataclasses import dataclass

from barista.nlu.intents import Intent, IntentCategory


@dataclass(frozen=True)
class QuickReply:
    """A suggested next query."""

    id: str
    label: str
    value: str
    icon: str


_WHAT_ELSE = QuickReply("help", "What else?", "What else can you help with?", "❓")

_REPLIES: dict[IntentCategory, tuple[QuickReply, ...]] = {
    IntentCategory.TOAST: (
        QuickReply("leaderboard", "Leaderboard", "Show me the leaderboard", "🏆"),
        QuickReply("give", "Give Toast", "I want to give a toast", "🎉"),
        QuickReply("badges", "My Badges", "Show my badges", "🏅"),
    ),
    IntentCategory.LOP: (
        QuickReply("upcoming", "Upcoming", "Show upcoming LOP", "📅"),
        QuickReply("essential", "Essential", "Show essential sessions", "⭐"),
        QuickReply("paths", "Learning Paths", "Show learning paths", "🎯"),
    ),
    IntentCategory.PULSE: (
        QuickReply("competitive", "Competitors", "Show competitive intel", "📊"),
        QuickReply("regulatory", "Regulatory", "Show regulatory updates", "📋"),
        QuickReply("waystar", "Waystar", "Latest on Waystar", "🔍"),
    ),
    IntentCategory.EXPERT: (
        QuickReply("claims", "Claims Expert", "Find expert in claims", "👤"),
        QuickReply("ehr", "EHR Expert", "Find expert in EHR", "👤"),
        QuickReply("team", "My Team", "Show my team", "👥"),
    ),
    IntentCategory.COMMUNITY: (
        QuickReply("trending", "Trending", "Show trending discussions", "🔥"),
        QuickReply("open", "Open Questions", "Show open questions", "❓"),
    ),
    IntentCategory.LIBRARY: (
        QuickReply("playbooks", "Playbooks", "Show latest playbooks", "📚"),
        QuickReply("templates", "Templates", "Show templates", "📄"),
        QuickReply("grab_go", "Grab & Go", "Show Grab and Go", "⚡"),
    ),
    IntentCategory.STATS: (
        QuickReply("points", "Love Points", "My love points", "❤️"),
        QuickReply("activity", "Activity", "My recent activity", "📈"),
    ),
}

_DISCOVER = (
    QuickReply("discover", "Discover", "Show me latest playbooks", "🔍"),
    QuickReply("lop", "LOP", "Show upcoming LOP", "📺"),
    QuickReply("toast", "Toast", "Show recent toasts", "🎉"),
    QuickReply("pulse", "Pulse", "Latest on Pulse", "📊"),
)


def generate_quick_replies(intent: Intent) -> list[QuickReply]:
    """Suggest follow-up queries for an intent's category.

    Categories without dedicated suggestions (navigation, help, unknown) get
    the discovery set. Every list ends with the generic "What else?" chip.
    """

    return [*_REPLIES.get(intent.category, _DISCOVER), _WHAT_ELSE]
