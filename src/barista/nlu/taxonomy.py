"""Static intent tables for the chat assistant and the inline search.

Chat trigger phrases are written in normalized vocabulary (see
:mod:`barista.nlu.normalizer`): e.g. "news" is canonicalized to "signals" and
"who knows" to "expert in" before matching, so phrases use the canonical form.
"""

from __future__ import annotations

from barista.nlu.intents import (
    ExpectedResult,
    IntentCategory,
    IntentRule,
    SearchIntent,
)
from barista.nlu.scoring import KeywordMatch, ScoringPolicy, Selection, Taxonomy
from barista.nlu.search_entities import TEAM_SYNONYMS, TOOL_SYNONYMS

_C = IntentCategory


def _chat(
    category: IntentCategory,
    action: str,
    *phrases: str,
    extractors: tuple[str, ...] = (),
) -> IntentRule:
    return IntentRule(
        category=category, action=action, phrases=phrases, extractors=extractors
    )


def _keywords(category: IntentCategory, *keywords: str) -> IntentRule:
    return IntentRule(category=category, action="search", keywords=keywords)


CHAT_RULES: tuple[IntentRule, ...] = (
    # Toast recognitions
    _chat(_C.TOAST, "my_recognitions", "my toasts", "toasts i received", "toasts for me",
          "toasts i got", "who toasted me", "my toast", "show my toast"),
    _chat(_C.TOAST, "recent", "recent toasts", "latest toasts", "new toasts",
          "recent toast", "latest toast"),
    _chat(_C.TOAST, "give", "give a toast", "recognize someone", "send toast",
          "toast someone", "give toast"),
    _chat(_C.TOAST, "standing_ovation", "standing ovation", "give standing ovation",
          "nominate for standing"),
    _chat(_C.TOAST, "leaderboard", "leaderboard", "top performers", "rankings",
          "who is leading", "top givers", "most recognized"),
    _chat(_C.TOAST, "badges", "my badges", "earned badges", "badge progress",
          "badges i have"),
    _chat(_C.TOAST, "awards", "my awards", "earned awards", "awards i have"),
    _chat(_C.TOAST, "given", "toasts i gave", "who did i toast", "my given toasts",
          "toast i gave"),
    _chat(_C.TOAST, "team_toasts", "team toasts", "recognize team", "team toast"),
    _chat(_C.TOAST, "trending", "trending toasts", "popular toasts", "viral toasts",
          "trending toast"),
    # Love of Product sessions
    _chat(_C.LOP, "upcoming", "upcoming lop", "next session", "next lop",
          "upcoming session", "what is next on lop", "upcoming sessions",
          "next lop session", "future sessions"),
    _chat(_C.LOP, "recent", "last lop", "recent sessions", "latest lop", "last session",
          "previous lop", "lop sessions", "show lop", "recent lop", "last week lop",
          "week lop", "weekly lop", "past sessions", "completed sessions",
          "previous sessions", "show sessions"),
    _chat(_C.LOP, "last_two", "last 2 lops", "last two sessions", "recent 2 sessions",
          "past 2 lops", "last two lop"),
    _chat(_C.LOP, "essential", "essential sessions", "must watch",
          "recommended sessions", "essential lop", "best lop", "top lop"),
    _chat(_C.LOP, "by_topic", "lop on", "sessions about", "lop about", "learn about",
          extractors=("topic",)),
    _chat(_C.LOP, "learning_paths", "learning paths", "learning journey", "path to",
          "curated paths"),
    _chat(_C.LOP, "my_progress", "my lop progress", "lop progress",
          "what have i watched", "my sessions"),
    _chat(_C.LOP, "popular", "popular sessions", "most watched", "top sessions",
          "best sessions"),
    _chat(_C.LOP, "by_speaker", "sessions by", "lop by", extractors=("speaker",)),
    _chat(_C.LOP, "featured", "featured session", "featured lop", "highlight session"),
    # Pulse market intelligence
    _chat(_C.PULSE, "latest", "latest on pulse", "pulse signals", "what is on pulse",
          "latest signals"),
    _chat(_C.PULSE, "competitive", "competitive pulse", "competitive signals",
          "competition updates"),
    _chat(_C.PULSE, "by_company", "latest on", "signals about", "updates on",
          "what about", extractors=("company",)),
    _chat(_C.PULSE, "regulatory", "regulatory updates", "compliance signals",
          "regulations", "regulatory changes", "cms updates"),
    _chat(_C.PULSE, "market", "market trends", "market signals", "industry trends",
          "market updates"),
    _chat(_C.PULSE, "technology", "tech signals", "technology signals", "tech updates",
          "innovation signals"),
    _chat(_C.PULSE, "unread", "unread signals", "new signals", "unread pulse",
          "signals i missed"),
    _chat(_C.PULSE, "bookmarked", "bookmarked signals", "saved signals", "my bookmarks"),
    _chat(_C.PULSE, "competitors", "competitors", "competitor list",
          "tracked competitors", "watchlist"),
    _chat(_C.PULSE, "waystar", "waystar", "waystar signals", "latest on waystar"),
    _chat(_C.PULSE, "trizetto", "trizetto", "trizetto signals", "cognizant trizetto"),
    _chat(_C.PULSE, "inovalon", "inovalon", "inovalon signals"),
    # Experts and people
    _chat(_C.EXPERT, "find_by_skill", "expert in", "experts in", "find expert",
          "from community", extractors=("skills",)),
    _chat(_C.EXPERT, "edi", "edi expert", "edi integration"),
    _chat(_C.EXPERT, "fhir", "fhir expert", "fhir api"),
    _chat(_C.EXPERT, "x12", "x12 expert", "837 expert", "835 expert"),
    _chat(_C.EXPERT, "hl7", "hl7 expert"),
    _chat(_C.EXPERT, "ehr", "ehr expert", "epic expert", "cerner expert"),
    _chat(_C.EXPERT, "claims", "claims expert", "claims processing"),
    _chat(_C.EXPERT, "api", "api expert", "api design expert", "rest api expert"),
    _chat(_C.EXPERT, "rcm", "rcm expert", "revenue cycle expert", "billing expert"),
    _chat(_C.EXPERT, "product", "product expert", "product management expert",
          "pm expert"),
    _chat(_C.EXPERT, "design", "design expert", "ux expert", "ui expert",
          "accessibility expert"),
    _chat(_C.EXPERT, "data", "data expert", "analytics expert", "data science expert"),
    _chat(_C.EXPERT, "leadership", "leadership expert", "management expert",
          "team leads"),
    _chat(_C.EXPERT, "my_team", "my team", "team members", "people on my team"),
    _chat(_C.EXPERT, "directory", "people directory", "find people", "employee search",
          extractors=("person",)),
    _chat(_C.EXPERT, "profile", "who is", "profile of", "contact info for",
          extractors=("person",)),
    # Community discussions
    _chat(_C.COMMUNITY, "recent", "main discussions", "recent discussions",
          "latest discussions", "community posts"),
    _chat(_C.COMMUNITY, "new", "new discussions", "today discussions", "started today"),
    _chat(_C.COMMUNITY, "open", "open discussions", "unanswered discussions",
          "discussions without answers"),
    _chat(_C.COMMUNITY, "trending", "trending topics", "hot discussions",
          "popular discussions", "trending discussions"),
    _chat(_C.COMMUNITY, "by_tag", "discussions on", "discussions about", "topics about",
          extractors=("tag",)),
    _chat(_C.COMMUNITY, "my_posts", "my discussions", "my posts",
          "discussions i started"),
    _chat(_C.COMMUNITY, "my_replies", "my replies", "answers i gave", "my comments"),
    _chat(_C.COMMUNITY, "resolved", "resolved discussions", "answered discussions",
          "solved discussions"),
    # Library resources
    _chat(_C.LIBRARY, "playbooks", "latest playbooks", "new playbooks", "playbooks",
          "product playbooks"),
    _chat(_C.LIBRARY, "grab_go", "grab and go", "grab & go", "quick resources",
          "grab go", "ready to use"),
    _chat(_C.LIBRARY, "templates", "templates", "document templates", "prd templates",
          "okr templates"),
    _chat(_C.LIBRARY, "popular", "popular resources", "most viewed", "top resources",
          "trending resources"),
    _chat(_C.LIBRARY, "new", "new resources", "latest resources", "recently added"),
    _chat(_C.LIBRARY, "by_pillar", "resources on", "documents about", "library for",
          extractors=("topic",)),
    _chat(_C.LIBRARY, "process", "process documents", "how to"),
    _chat(_C.LIBRARY, "research", "research reports", "user research",
          "market research"),
    _chat(_C.LIBRARY, "strategy", "strategy documents", "product strategy", "roadmap"),
    # Navigation
    _chat(_C.NAVIGATION, "home", "go home", "take me home", "home page", "open home"),
    _chat(_C.NAVIGATION, "toast", "open toast", "go to toast", "toast page"),
    _chat(_C.NAVIGATION, "lop", "open lop", "go to lop", "lop page", "love of product"),
    _chat(_C.NAVIGATION, "pulse", "open pulse", "go to pulse", "pulse page"),
    _chat(_C.NAVIGATION, "library", "open library", "go to library", "library page"),
    _chat(_C.NAVIGATION, "community", "open community", "go to community",
          "discussions page"),
    _chat(_C.NAVIGATION, "profile", "my profile", "open profile", "go to profile"),
    _chat(_C.NAVIGATION, "settings", "settings", "my settings", "preferences"),
    # Personal stats
    _chat(_C.STATS, "love_points", "love points", "my points", "how many points",
          "point balance", "my credits"),
    _chat(_C.STATS, "activity", "my activity", "recent activity", "what did i do"),
    _chat(_C.STATS, "recognition_stats", "my toast stats", "toast summary",
          "toast stats"),
    _chat(_C.STATS, "engagement", "my engagement", "engagement score", "participation"),
    # Help and greetings
    _chat(_C.HELP, "greeting", "hi", "hello", "hey", "hi there", "hello there",
          "good morning", "good afternoon", "good evening", "howdy", "greetings",
          "yo", "hiya"),
    _chat(_C.HELP, "capabilities", "what can you do", "help", "what can you help with",
          "capabilities", "what do you know", "options"),
    _chat(_C.HELP, "how_to", "how do i", "how to", "teach me", extractors=("topic",)),
    # Keyword fallback, scanned in declaration order when no phrase matched
    _keywords(_C.TOAST, "toast", "recognition", "badge", "award", "celebrate"),
    _keywords(_C.LOP, "lop", "session", "video", "watch", "learning"),
    _keywords(_C.PULSE, "pulse", "signal", "news", "competitor", "market"),
    _keywords(_C.EXPERT, "expert", "who", "find", "person", "team"),
    _keywords(_C.COMMUNITY, "discussion", "question", "answer", "topic", "forum"),
    _keywords(_C.LIBRARY, "document", "playbook", "template", "resource", "library"),
    _keywords(_C.NAVIGATION, "go", "open", "navigate", "take me"),
    _keywords(_C.STATS, "point", "stat", "metric", "score", "credit"),
    _keywords(_C.HELP, "help", "what can", "how"),
)

CHAT_TAXONOMY = Taxonomy(
    name="chat",
    rules=CHAT_RULES,
    policy=ScoringPolicy(
        selection=Selection.LONGEST_PHRASE,
        keyword_match=KeywordMatch.SUBSTRING,
        fallback_confidence=0.4,
    ),
    fallback_category=IntentCategory.UNKNOWN,
)


TOOL_NAMES: tuple[str, ...] = tuple(TOOL_SYNONYMS)
TEAM_NAMES: tuple[str, ...] = tuple(TEAM_SYNONYMS)

_S = SearchIntent
_R = ExpectedResult


def _search(
    intent: SearchIntent,
    expected: ExpectedResult,
    base_confidence: float,
    patterns: tuple[str, ...],
    keywords: tuple[str, ...],
) -> IntentRule:
    return IntentRule(
        category=intent,
        action=intent.value.lower(),
        phrases=patterns,
        keywords=keywords,
        base_confidence=base_confidence,
        expected_result=expected,
        regex=True,
    )


SEARCH_RULES: tuple[IntentRule, ...] = (
    _search(_S.FIND_PERSON, _R.ENTITY_CARD, 0.85, (
        r"who (?:is|knows|can help)",
        r"contact (?:info|information|details)",
        r"(?:find|reach|talk to|message|email)\s+(?:someone|person|expert)",
        r"expert (?:in|on|for|about)",
        r"(?:slack|teams|email) (?:for|of)",
    ), ("who", "contact", "expert", "person", "email", "slack", "teams", "reach out",
        "talk to")),
    _search(_S.FIND_TOOL, _R.ENTITY_CARD, 0.90, (
        r"(?:where is|open|launch|go to)\s+\w+",
        r"link to\s+\w+",
    ), TOOL_NAMES),
    _search(_S.TOOL_ACCESS, _R.ACTIONABLE_ANSWER, 0.90, (
        r"(?:get|request|need|want)\s+(?:\w+\s+)?access",
        r"how (?:do i|to|can i)\s+(?:get|request)\s+\w+",
        r"access (?:to|for)\s+\w+",
        r"\w+\s+access request",
        r"request\s+\w+\s+(?:access|permission)",
    ), ("access", "permission", "request", "login", "account")),
    _search(_S.FIND_FAQ, _R.DIRECT_ANSWER, 0.75, (
        r"how (?:do|does|can|should|would|to)",
        r"what (?:is|are|does|do)",
        r"when (?:do|does|should|is)",
        r"where (?:do|does|can|is)",
        r"why (?:do|does|is|are)",
        r"can i\s+",
        r"is there\s+",
    ), ("how", "what", "when", "where", "why", "faq", "question")),
    _search(_S.EXPLAIN_CONCEPT, _R.DIRECT_ANSWER, 0.85, (
        r"what is (?:a |an |the )?",
        r"(?:explain|define|meaning of)\s+",
        r"what does\s+\w+\s+mean",
        r"tell me about\s+",
    ), ("what is", "explain", "define", "meaning", "understand", "about")),
    _search(_S.LEARN_PROCESS, _R.DIRECT_ANSWER, 0.80, (
        r"how does\s+.+\s+work",
        r"process (?:for|of)\s+",
        r"steps (?:for|to)\s+",
        r"procedure (?:for|to)\s+",
    ), ("process", "steps", "procedure", "workflow", "how does")),
    _search(_S.COMPARE, _R.DIRECT_ANSWER, 0.85, (
        r"\w+\s+(?:vs|versus|or)\s+\w+",
        r"difference between\s+",
        r"compare\s+",
        r"\w+\s+compared to\s+\w+",
    ), ("vs", "versus", "compare", "difference", "between")),
    _search(_S.FIND_RESOURCE, _R.RESOURCE_LIST, 0.70, (
        r"(?:find|search|look for|show)\s+(?:a |the )?\w+",
        r"\w+\s+(?:template|guide|document|doc|checklist)",
    ), ("find", "search", "document", "template", "guide", "resource", "file")),
    _search(_S.FIND_TEAM, _R.ENTITY_CARD, 0.80, (
        r"(?:who|which team)\s+(?:works on|owns|manages)",
        r"\w+\s+team\b",
        r"team (?:for|of)\s+",
    ), TEAM_NAMES + ("team", "group", "department")),
    _search(_S.START_DISCUSSION, _R.ACTIONABLE_ANSWER, 0.75, (
        r"(?:ask|discuss|question about)\s+",
        r"i have a question",
        r"need help with",
    ), ("ask", "discuss", "question", "help with")),
    _search(_S.CONTACT_EXPERT, _R.ENTITY_CARD, 0.80, (
        r"talk to (?:someone|expert|person)",
        r"reach out to",
        r"who can help",
    ), ("talk to", "reach out", "contact", "help", "expert")),
    _search(_S.NAVIGATE, _R.NAVIGATION, 0.85, (
        r"go to\s+",
        r"open\s+",
        r"show me\s+",
        r"take me to\s+",
    ), ("go", "open", "show", "navigate", "take me")),
    _search(_S.LOP_NEXT, _R.ENTITY_CARD, 0.90, (
        r"next lop",
        r"upcoming (?:lop|product talk|session)",
        r"when is (?:the )?(?:next )?lop",
    ), ("next lop", "upcoming lop", "when lop")),
    _search(_S.LOP_FIND, _R.RESOURCE_LIST, 0.85, (
        r"lop (?:about|on|for)\s+",
        r"product talk (?:about|on)\s+",
        r"session (?:about|on)\s+",
    ), ("lop", "product talk", "session", "presentation")),
    _search(_S.LOP_SPEAKER, _R.ENTITY_CARD, 0.80, (
        r"who (?:spoke|presented|talked) (?:about|on)",
        r"\w+(?:'s| 's) lop",
        r"lop by\s+\w+",
    ), ("spoke", "presented", "speaker", "by")),
    _search(_S.BROWSE, _R.RESOURCE_LIST, 0.70, (
        r"(?:all|list|browse|show)\s+(?:the )?\w+s?\b",
    ), ("all", "list", "browse", "show")),
    _search(_S.RECENT, _R.RESOURCE_LIST, 0.75, (
        r"(?:recent|new|latest|fresh)\s+",
        r"what's new",
    ), ("recent", "new", "latest", "fresh")),
    _search(_S.POPULAR, _R.RESOURCE_LIST, 0.75, (
        r"(?:popular|top|trending|most used)\s+",
    ), ("popular", "top", "trending", "most used", "best")),
)

SEARCH_TAXONOMY = Taxonomy(
    name="search",
    rules=SEARCH_RULES,
    policy=ScoringPolicy(
        selection=Selection.ADDITIVE,
        keyword_match=KeywordMatch.TOKENS,
        fallback_confidence=0.5,
    ),
    fallback_category=SearchIntent.GENERAL_SEARCH,
)
