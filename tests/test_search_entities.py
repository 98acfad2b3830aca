"""Tests for search query entity recognition."""

import pytest

from barista.nlu.intents import SearchEntity, SearchEntityType
from barista.nlu.normalizer import tokenize
from barista.nlu.search_entities import TOOLS, extract_search_entities


def _entities(query: str) -> tuple[SearchEntity, ...]:
    return extract_search_entities(query, tokenize(query))


def test_tool_alias_maps_to_canonical_tool() -> None:
    assert _entities("where is the wiki") == (
        SearchEntity(SearchEntityType.TOOL, "wiki", "confluence", 0.95, 13, 17),
    )


def test_shared_alias_belongs_to_first_tool() -> None:
    assert TOOLS["wiki"] == "confluence"
    assert TOOLS["atlassian"] == "jira"
    assert TOOLS["slack"] == "slack"


def test_multi_word_alias_claims_its_tokens() -> None:
    assert _entities("how do i use microsoft teams") == (
        SearchEntity(SearchEntityType.TOOL, "microsoft teams", "teams", 0.95, 13, 28),
    )


@pytest.mark.parametrize(
    ("query", "entity_type", "normalized"),
    [
        ("coordination of benefits", SearchEntityType.TOPIC, "cob"),
        ("billing", SearchEntityType.TOPIC, "rcm"),
        ("helpdesk", SearchEntityType.TEAM, "it"),
        ("slides", SearchEntityType.RESOURCE_TYPE, "presentation"),
        ("approve", SearchEntityType.ACTION, "approve"),
        ("product craft", SearchEntityType.PILLAR, "product-craft"),
    ],
)
def test_entity_tables(
    query: str, entity_type: SearchEntityType, normalized: str
) -> None:
    (entity,) = _entities(query)

    assert entity.type is entity_type
    assert entity.normalized_value == normalized


def test_tables_are_checked_in_priority_order() -> None:
    # "docs" is both a Confluence alias and a resource type
    (entity,) = _entities("docs")

    assert entity.type is SearchEntityType.TOOL
    assert entity.normalized_value == "confluence"


def test_person_names() -> None:
    entities = _entities("Who is Jane Smith on the Platform Team")

    assert [(e.type, e.value, e.normalized_value) for e in entities] == [
        (SearchEntityType.PERSON, "Jane Smith", "jane smith"),
        (SearchEntityType.TEAM, "platform", "platform"),
    ]
    assert (entities[0].start, entities[0].end) == (7, 17)
    assert entities[0].confidence == 0.7


def test_person_overlapping_a_tool_is_dropped() -> None:
    entities = _entities("Open Microsoft Teams")

    assert [e.type for e in entities] == [SearchEntityType.TOOL]


def test_lowercase_names_are_not_people() -> None:
    assert _entities("jane smith") == ()


def test_empty_query() -> None:
    assert _entities("") == ()
