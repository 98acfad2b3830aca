"""Pattern-declared entity extraction for chat intents."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

COMPANIES: tuple[str, ...] = (
    "waystar", "trizetto", "inovalon", "experian", "edifecs", "rhyme", "jopari",
    "pverify", "access healthcare", "omega", "gebbs", "ags health", "cognizant",
    "optum", "change healthcare",
)

SKILLS: tuple[str, ...] = (
    # Healthcare interoperability
    "edi", "fhir", "x12", "hl7", "ccd", "ccda", "837", "835", "270", "271", "276",
    "277",
    # Healthcare domains
    "ehr", "claims", "rcm", "revenue cycle", "billing", "coding", "payer", "provider",
    "eligibility", "prior auth", "prior authorization", "clearinghouse",
    # Technical
    "api", "rest", "graphql", "microservices", "aws", "azure", "gcp",
    # Product and design
    "product", "ux", "ui", "design", "accessibility", "a11y",
    # Data
    "data", "analytics", "sql", "python", "machine learning", "ai",
    # Process
    "agile", "scrum", "okr", "prd", "research", "strategy",
)

# Capitalized words that open sentences rather than names.
NAME_STOPWORDS = frozenset({
    "How", "What", "When", "Where", "Why", "Which", "Who", "The", "This", "That",
    "Find", "Show", "Open", "Ask", "Contact", "Message", "Tell", "Is", "Are",
})

_COMPANY_FALLBACK_RE = re.compile(r"\b(?:on|about|for)\s+(\w+)")
_SKILLS_RE = re.compile(
    r"\b(?:experts? in|who knows|specialists? in|from community)\s+(\w.*?)(?:\?|$)"
)
_SKILL_RE = re.compile(r"\b(?:expert in|who knows|specialist in)\s+(\w.*?)(?:\?|$)")
_TOPIC_RE = re.compile(r"\b(?:about|on|for)\s+(\w.*?)(?:\?|$)")
_SPEAKER_RE = re.compile(r"\b(?:by|from)\s+(\w.*?)(?:\?|$)")
_TAG_RE = re.compile(r"\b(?:on|about|tagged)\s+(\w.*?)(?:\?|$)")
_PERSON_NAME_RE = re.compile(
    r"\b(?:(?:" + "|".join(sorted(NAME_STOPWORDS)) + r")\s+)*"
    r"([A-Z][a-z]+(?:\s+[A-Z][a-z]+){1,2})\b"
)

_AND_OR_RE = re.compile(r"\s+and\s+or\s+", re.IGNORECASE)
_AND_RE = re.compile(r"\s+and\s+", re.IGNORECASE)
_OR_RE = re.compile(r"\s+or\s+", re.IGNORECASE)
_TRAILING_PUNCT_RE = re.compile(r"[?!.,]+$")


class SkillOperator(str, Enum):
    """How multiple requested skills combine."""

    AND = "AND"
    OR = "OR"


@dataclass(frozen=True)
class SkillQuery:
    """Skills named in a query and how they combine."""

    skills: tuple[str, ...]
    operator: SkillOperator


def parse_skills(phrase: str) -> SkillQuery:
    """Split a skill phrase on its connective.

    "fhir and x12" is an AND query, "fhir or edi" (or "fhir and or edi") an OR
    query; otherwise the phrase is split on commas and treated as OR.

    Args:
        phrase: Text following a skill trigger such as "experts in".

    Returns:
        SkillQuery with lower-cased, punctuation-trimmed skills.
    """

    collapsed = _AND_OR_RE.sub(" or ", phrase)
    has_and = bool(_AND_RE.search(collapsed))
    has_or = bool(_OR_RE.search(collapsed))
    operator = SkillOperator.AND if has_and and not has_or else SkillOperator.OR

    if has_and:
        parts = _AND_RE.split(collapsed)
    elif has_or:
        parts = _OR_RE.split(collapsed)
    else:
        parts = collapsed.split(",")

    skills = []
    for part in parts:
        skill = _TRAILING_PUNCT_RE.sub("", part.strip().lower()).strip()
        if skill:
            skills.append(skill)
    return SkillQuery(skills=tuple(skills), operator=operator)


def _first_known(query: str, vocabulary: Iterable[str]) -> str | None:
    return next((term for term in vocabulary if term in query), None)


def _capture(pattern: re.Pattern[str], query: str) -> str | None:
    match = pattern.search(query)
    if not match:
        return None
    value = match.group(1).strip()
    return value or None


def find_person_names(text: str) -> list[tuple[str, int, int]]:
    """Find capitalized two- or three-word sequences that look like names.

    Leading sentence words such as "Find" or "What" are not part of a name.

    Returns:
        (name, start, end) triples in order of appearance.
    """

    names = []
    for match in _PERSON_NAME_RE.finditer(text):
        name = match.group(1)
        if name.split()[0] in NAME_STOPWORDS:
            continue
        names.append((name, match.start(1), match.end(1)))
    return names


def _extract_company(query: str) -> dict[str, str]:
    company = _first_known(query, COMPANIES) or _capture(_COMPANY_FALLBACK_RE, query)
    return {"company": company} if company else {}


def _extract_skills(query: str) -> dict[str, str]:
    phrase = _capture(_SKILLS_RE, query)
    if phrase is None:
        return {}

    parsed = parse_skills(phrase)
    if not parsed.skills:
        return {}
    return {"skills": ",".join(parsed.skills), "operator": parsed.operator.value}


def _extract_skill(query: str) -> dict[str, str]:
    skill = _first_known(query, SKILLS) or _capture(_SKILL_RE, query)
    return {"skill": skill} if skill else {}


def _extract_person(text: str) -> dict[str, str]:
    names = find_person_names(text)
    return {"person": names[0][0]} if names else {}


def _phrase_extractor(name: str, pattern: re.Pattern[str]) -> Callable[[str], dict[str, str]]:
    def extract(query: str) -> dict[str, str]:
        value = _capture(pattern, query)
        return {name: value} if value else {}

    return extract


EXTRACTORS: dict[str, Callable[[str], dict[str, str]]] = {
    "company": _extract_company,
    "skills": _extract_skills,
    "skill": _extract_skill,
    "topic": _phrase_extractor("topic", _TOPIC_RE),
    "speaker": _phrase_extractor("speaker", _SPEAKER_RE),
    "tag": _phrase_extractor("tag", _TAG_RE),
}

# Extractors that need the query's original casing.
CASED_EXTRACTORS: dict[str, Callable[[str], dict[str, str]]] = {
    "person": _extract_person,
}


def extract_entities(
    query: str, extractors: Iterable[str], original: str | None = None
) -> dict[str, str]:
    """Run the named extractors over a query and merge their results.

    Unknown extractor names are skipped.

    Args:
        query: Normalized query text.
        extractors: Extractor names declared by the matched pattern.
        original: Query text before normalization, for extractors that rely
            on capitalization. Defaults to ``query``.

    Returns:
        Entity values keyed by entity name; empty when nothing was found.
    """

    lowered = query.lower()
    entities: dict[str, str] = {}
    for name in extractors:
        if name in CASED_EXTRACTORS:
            entities.update(CASED_EXTRACTORS[name](original or query))
            continue
        extractor = EXTRACTORS.get(name)
        if extractor is None:
            logger.warning(f"Unknown entity extractor: {name}")
            continue
        entities.update(extractor(lowered))
    return entities
