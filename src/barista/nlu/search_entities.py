"""Dictionary-driven entity recognition for inline search queries.

Tools, topics and teams are recognised through alias tables that map every
alias to a canonical name ("wiki" is Confluence, "rcm" is revenue cycle
management). Resource types, actions and portal pillars use flat keyword
tables. Capitalized two- or three-word sequences that no table claims are
reported as person names.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, Sequence

from barista.nlu.entities import find_person_names
from barista.nlu.intents import SearchEntity, SearchEntityType

TOOL_SYNONYMS: dict[str, tuple[str, ...]] = {
    "jira": ("atlassian", "issue tracker", "ticket system", "bug tracker",
             "issue management"),
    "confluence": ("atlassian", "wiki", "documentation", "docs", "knowledge base"),
    "smartsheet": ("spreadsheet", "project tracker", "timeline", "gantt"),
    "slack": ("messaging", "chat", "im", "instant message"),
    "teams": ("microsoft teams", "ms teams", "video call", "meeting"),
    "outlook": ("email", "mail", "calendar", "microsoft outlook"),
    "sharepoint": ("microsoft sharepoint", "file storage", "document library"),
    "figma": ("design", "prototype", "mockup", "ui design", "wireframe"),
    "miro": ("whiteboard", "brainstorm", "diagram", "flowchart"),
    "notion": ("notes", "wiki", "documentation", "workspace"),
    "github": ("git", "code", "repository", "repo", "source control", "version control"),
    "azure": ("azure devops", "ado", "microsoft azure", "cloud"),
    "servicenow": ("itsm", "it service", "service desk", "snow"),
}

TOPIC_SYNONYMS: dict[str, tuple[str, ...]] = {
    "cob": ("coordination of benefits", "coordination", "multiple coverage",
            "dual coverage"),
    "rcm": ("revenue cycle management", "revenue cycle", "billing", "collections"),
    "claims": ("claim processing", "claim adjudication", "claims management"),
    "eligibility": ("member eligibility", "coverage verification", "enrollment"),
    "enrollment": ("member enrollment", "signup", "registration", "onboarding"),
    "compliance": ("regulatory", "regulation", "audit", "hipaa", "cms"),
    "hipaa": ("privacy", "security", "phi", "protected health information"),
    "medicare": ("cms", "government program", "senior", "part a", "part b", "part d"),
    "medicaid": ("state program", "magi", "low income"),
    "subrogation": ("recovery", "third party liability", "tpl", "accident"),
    "eob": ("explanation of benefits", "benefit explanation", "member statement"),
    "era": ("electronic remittance advice", "remittance", "835"),
    "edi": ("electronic data interchange", "837", "270", "271", "x12"),
    "npi": ("national provider identifier", "provider id", "provider number"),
    "prd": ("product requirements", "product spec", "requirements document", "spec"),
    "okr": ("objectives key results", "objectives", "goals", "kpi"),
    "lop": ("love of product", "product talk", "presentation", "session"),
}

TEAM_SYNONYMS: dict[str, tuple[str, ...]] = {
    "platform": ("platform team", "infrastructure", "core platform", "engineering"),
    "rcm": ("revenue cycle", "rcm team", "billing team"),
    "analytics": ("data", "data team", "bi", "business intelligence", "reporting"),
    "product": ("product team", "pm", "product management"),
    "design": ("ux", "ui", "design team", "user experience"),
    "engineering": ("development", "dev", "developers", "software"),
    "it": ("information technology", "tech support", "helpdesk", "it support"),
    "hr": ("human resources", "people team", "people ops"),
    "legal": ("compliance", "legal team", "counsel"),
}

RESOURCE_TYPES: dict[str, str] = {
    "template": "template",
    "templates": "template",
    "guide": "guide",
    "guides": "guide",
    "document": "document",
    "documents": "document",
    "doc": "document",
    "docs": "document",
    "faq": "faq",
    "faqs": "faq",
    "video": "video",
    "videos": "video",
    "presentation": "presentation",
    "presentations": "presentation",
    "slides": "presentation",
    "deck": "presentation",
    "checklist": "checklist",
    "checklists": "checklist",
    "playbook": "playbook",
    "playbooks": "playbook",
    "runbook": "playbook",
}

ACTIONS: dict[str, str] = {
    "access": "access",
    "request": "request",
    "find": "find",
    "search": "find",
    "get": "get",
    "learn": "learn",
    "understand": "learn",
    "contact": "contact",
    "message": "contact",
    "email": "contact",
    "create": "create",
    "new": "create",
    "add": "create",
    "update": "update",
    "edit": "update",
    "modify": "update",
    "delete": "delete",
    "remove": "delete",
    "approve": "approve",
    "review": "review",
}

PILLARS: dict[str, str] = {
    "product craft": "product-craft",
    "product-craft": "product-craft",
    "craft": "product-craft",
    "healthcare": "healthcare-domain",
    "healthcare domain": "healthcare-domain",
    "healthcare-domain": "healthcare-domain",
    "domain": "healthcare-domain",
    "playbook": "internal-playbook",
    "internal playbook": "internal-playbook",
    "internal-playbook": "internal-playbook",
    "internal": "internal-playbook",
}


def _alias_index(table: Mapping[str, Sequence[str]]) -> dict[str, str]:
    # An alias shared by two entries belongs to the first one declared.
    index: dict[str, str] = {}
    for canonical, aliases in table.items():
        index.setdefault(canonical, canonical)
        for alias in aliases:
            index.setdefault(alias, canonical)
    return index


TOOLS = _alias_index(TOOL_SYNONYMS)
TOPICS = _alias_index(TOPIC_SYNONYMS)
TEAMS = _alias_index(TEAM_SYNONYMS)

# Single-token lookups, in priority order.
_TOKEN_TABLES: tuple[tuple[SearchEntityType, Mapping[str, str], float], ...] = (
    (SearchEntityType.TOOL, TOOLS, 0.95),
    (SearchEntityType.TOPIC, TOPICS, 0.90),
    (SearchEntityType.TEAM, TEAMS, 0.85),
    (SearchEntityType.RESOURCE_TYPE, RESOURCE_TYPES, 0.90),
    (SearchEntityType.ACTION, ACTIONS, 0.85),
    (SearchEntityType.PILLAR, PILLARS, 0.90),
)

_PHRASE_TABLES: tuple[tuple[SearchEntityType, Mapping[str, str], float], ...] = (
    (SearchEntityType.TOOL, TOOLS, 0.95),
    (SearchEntityType.TOPIC, TOPICS, 0.90),
    (SearchEntityType.PILLAR, PILLARS, 0.90),
)

_PHRASE_PATTERNS: tuple[tuple[SearchEntityType, re.Pattern[str], str, float], ...] = tuple(
    (entity_type, re.compile(rf"\b{re.escape(phrase)}\b"), canonical, confidence)
    for entity_type, table, confidence in _PHRASE_TABLES
    for phrase, canonical in table.items()
    if " " in phrase
)

PERSON_CONFIDENCE = 0.70


def _overlaps(start: int, end: int, entities: Iterable[SearchEntity]) -> bool:
    return any(start < entity.end and entity.start < end for entity in entities)


def _lookup_token(token: str, start: int) -> SearchEntity | None:
    for entity_type, table, confidence in _TOKEN_TABLES:
        canonical = table.get(token)
        if canonical is not None:
            return SearchEntity(
                type=entity_type,
                value=token,
                normalized_value=canonical,
                confidence=confidence,
                start=start,
                end=start + len(token),
            )
    return None


def extract_search_entities(
    query: str, tokens: Sequence[str]
) -> tuple[SearchEntity, ...]:
    """Recognise tools, topics, teams, resource types, actions, pillars and people.

    Multi-word aliases ("microsoft teams", "revenue cycle") are matched first
    and claim their characters; remaining tokens are then looked up one at a
    time, a token going to the first table that knows it (tool, topic, team,
    resource type, action, pillar). Person names are taken from the raw
    capitalization and dropped when they overlap an entity already found.

    Args:
        query: Sanitized query text, original casing preserved.
        tokens: Lower-case tokens of ``query``, in order.

    Returns:
        Entities sorted by their position in ``query``.
    """

    lowered = query.lower()
    entities: list[SearchEntity] = []
    claimed: set[int] = set()

    for entity_type, pattern, canonical, confidence in _PHRASE_PATTERNS:
        match = pattern.search(lowered)
        if match is None:
            continue
        entities.append(
            SearchEntity(
                type=entity_type,
                value=query[match.start():match.end()],
                normalized_value=canonical,
                confidence=confidence,
                start=match.start(),
                end=match.end(),
            )
        )
        claimed.update(range(match.start(), match.end()))

    cursor = 0
    for token in tokens:
        start = lowered.find(token, cursor)
        if start == -1:
            continue
        cursor = start + len(token)
        if start in claimed:
            continue
        entity = _lookup_token(token, start)
        if entity is not None:
            entities.append(entity)

    for name, start, end in find_person_names(query):
        if _overlaps(start, end, entities):
            continue
        entities.append(
            SearchEntity(
                type=SearchEntityType.PERSON,
                value=name,
                normalized_value=name.lower(),
                confidence=PERSON_CONFIDENCE,
                start=start,
                end=end,
            )
        )

    return tuple(sorted(entities, key=lambda entity: entity.start))
