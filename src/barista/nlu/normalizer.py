"""Query normalization: typo correction and synonym canonicalization."""

from __future__ import annotations

import re
import unicodedata

_WHITESPACE_RE = re.compile(r"\s+")
_CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")
_TOKEN_SPLIT_RE = re.compile(r"[\s,;!?()\[\]{}'\"]+")
_TOKEN_CLEAN_RE = re.compile(r"[^a-z0-9-]")

COMMON_TYPOS: dict[str, str] = {
    # Toast / recognition
    "tost": "toast",
    "tosat": "toast",
    "recongnition": "recognition",
    "recgnition": "recognition",
    "recogniton": "recognition",
    "leaderborad": "leaderboard",
    "leaderboad": "leaderboard",
    # Experts
    "expret": "expert",
    "expart": "expert",
    "expertin": "expert in",
    "epxert": "expert",
    "specalist": "specialist",
    # LOP
    "sessons": "sessions",
    "sessioon": "session",
    "upcomming": "upcoming",
    "upcomig": "upcoming",
    # Pulse
    "singal": "signal",
    "singals": "signals",
    "competitve": "competitive",
    "competive": "competitive",
    "regulartory": "regulatory",
    # Skills
    "fihr": "fhir",
    "fhri": "fhir",
    "clams": "claims",
    "cliam": "claim",
    "biling": "billing",
    "billig": "billing",
    "eligiblity": "eligibility",
    "eligibity": "eligibility",
    # Community
    "discusion": "discussion",
    "discusions": "discussions",
    "comunity": "community",
    "communtiy": "community",
    # Library
    "playboks": "playbooks",
    "templats": "templates",
    # General
    "lastest": "latest",
    "recnet": "recent",
    "resent": "recent",
    "shwo": "show",
    "sohw": "show",
    "whats": "what is",
    "wheres": "where is",
}

# Replacement values never contain a key, which keeps normalize() idempotent.
SYNONYMS: dict[str, str] = {
    # Toast
    "kudos": "toast",
    "shoutout": "toast",
    "shout out": "toast",
    "shoutouts": "toast",
    "appreciation": "toast",
    "props": "toast",
    "recognition": "toast",
    "recognitions": "toasts",
    "thanks": "toast",
    # LOP
    "talks": "lop",
    "talk": "lop",
    "product talk": "lop",
    "product talks": "lop",
    "monthly talk": "lop",
    "love of product session": "lop session",
    # Pulse
    "intel": "pulse",
    "intelligence": "pulse",
    "news": "signals",
    "market news": "market signals",
    "competitor news": "competitive signals",
    # Experts
    "specialist": "expert",
    "specialists": "experts",
    "sme": "expert",
    "guru": "expert",
    "who knows": "expert in",
    "who is good at": "expert in",
    "find someone who": "expert in",
    # Community
    "questions": "discussions",
    "q&a": "discussions",
    "qa": "discussions",
    "forum": "community",
    "threads": "discussions",
    # Library
    "docs": "documents",
    "documentation": "documents",
    "guide": "playbook",
    "guides": "playbooks",
    "template": "templates",
}


def _compile_table(table: dict[str, str]) -> tuple[tuple[re.Pattern[str], str], ...]:
    return tuple(
        (re.compile(rf"\b{re.escape(source)}\b", re.IGNORECASE), target)
        for source, target in table.items()
    )


_TYPO_RULES = _compile_table(COMMON_TYPOS)
_SYNONYM_RULES = _compile_table(
    dict(sorted(SYNONYMS.items(), key=lambda item: len(item[0]), reverse=True))
)


def sanitize(query: str, max_length: int | None = None) -> str:
    """Strip control characters and clip overly long input."""

    cleaned = _CONTROL_CHARS_RE.sub("", query).strip()
    if max_length is not None:
        cleaned = cleaned[:max_length]
    return cleaned


def correct_typos(query: str) -> str:
    """Replace known misspellings with their correct spelling."""

    corrected = query.lower()
    for pattern, replacement in _TYPO_RULES:
        corrected = pattern.sub(replacement, corrected)
    return corrected


def canonicalize_synonyms(query: str) -> str:
    """Map term variations to their canonical form, longest synonym first."""

    canonical = query.lower()
    for pattern, replacement in _SYNONYM_RULES:
        canonical = pattern.sub(replacement, canonical)
    return canonical


def normalize(query: str) -> str:
    """Normalize a chat query.

    Applies typo correction, then synonym canonicalization, and collapses
    whitespace. The result is lower-cased and ``normalize(normalize(q))``
    equals ``normalize(q)``.

    Args:
        query: Raw user query.

    Returns:
        Normalized query text.
    """

    collapsed = _WHITESPACE_RE.sub(" ", query).strip()
    normalized = canonicalize_synonyms(correct_typos(collapsed))
    return _WHITESPACE_RE.sub(" ", normalized).strip()


def fold_query(query: str) -> str:
    """Lower-case, strip accents and collapse whitespace."""

    decomposed = unicodedata.normalize("NFD", query.lower().strip())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _WHITESPACE_RE.sub(" ", stripped)


def tokenize(query: str) -> list[str]:
    """Split a query into lower-case alphanumeric tokens."""

    tokens = []
    for raw in _TOKEN_SPLIT_RE.split(fold_query(query)):
        token = _TOKEN_CLEAN_RE.sub("", raw)
        if token:
            tokens.append(token)
    return tokens
