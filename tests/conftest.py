# tests/conftest.py
"""
Shared test fixtures.
Stub chart: four entities (three Person, one Organisation) and three links.
Mixed property types, one unfetched value, one unlabelled link.
"""
import pytest
from datetime import date

from list_items_api.models.record import EntityRecord, LinkRecord
from list_items_api.models.schema import (
    ChartApplication,
    ChartSchema,
    Image,
    ItemType,
    PropertyType,
)
from list_items_api.models.selection import ChartSelection
from list_items_api.types import UNFETCHED, ItemKind, LinkDirection, ValueType

from list_items_core.services.formatter import DefaultValueFormatter
from list_items_core.tool_view.events import SelectionChangeNotifier


# ── Schema ───────────────────────────────────────────────────────
PERSON = ItemType(
    id="Person",
    display_name="Person",
    property_types=(
        PropertyType("age", "Age", ValueType.INT),
        PropertyType("city", "City"),
        PropertyType("born", "Born", ValueType.DATE),
    ),
    image=Image("person.svg", "Person"),
)

ORGANISATION = ItemType(
    id="Organisation",
    display_name="Organisation",
    property_types=(PropertyType("sector", "Sector"),),
)

KNOWS = ItemType(
    id="Knows",
    display_name="Knows",
    kind=ItemKind.LINK,
    property_types=(PropertyType("since", "Since", ValueType.DATE),),
)

EMPLOYS = ItemType(id="Employs", display_name="Employs", kind=ItemKind.LINK)


def _build_schema() -> ChartSchema:
    return ChartSchema(entity_types=[PERSON, ORGANISATION], link_types=[KNOWS, EMPLOYS])


def _build_selection() -> ChartSelection:
    alice = EntityRecord("e1", PERSON, "Alice",
                         properties=dict(age=30, city="Paris", born=date(1994, 3, 12)))
    bob = EntityRecord("e2", PERSON, "Bob",
                       properties=dict(age=25, city=UNFETCHED))
    acme = EntityRecord("e3", ORGANISATION, "Acme",
                        image=Image("acme.png", "Acme logo"),
                        properties=dict(sector="Retail"))
    carol = EntityRecord("e4", PERSON, "Carol",
                         properties=dict(age=35, city="Berlin"))

    links = [
        LinkRecord("l1", KNOWS, alice, bob, LinkDirection.WITH, "friends",
                   properties=dict(since=date(2015, 1, 1))),
        LinkRecord("l2", EMPLOYS, acme, alice, LinkDirection.AGAINST),
        LinkRecord("l3", KNOWS, bob, carol, LinkDirection.BOTH, "colleagues"),
    ]
    return ChartSelection([alice, bob, acme, carol], links)


# ── Pytest fixtures ──────────────────────────────────────────────

@pytest.fixture
def schema() -> ChartSchema:
    return _build_schema()


@pytest.fixture
def application(schema) -> ChartApplication:
    return ChartApplication(schema=schema, name="stub_chart")


@pytest.fixture
def selection() -> ChartSelection:
    """Freshly built each time — records are mutable."""
    return _build_selection()


@pytest.fixture
def two_people() -> ChartSelection:
    """Alice and Bob only."""
    full = _build_selection()
    return ChartSelection([full.get_entity("e1"), full.get_entity("e2")])


@pytest.fixture
def formatter() -> DefaultValueFormatter:
    """Formatter without bidi isolates, so cell text compares directly."""
    return DefaultValueFormatter(bidi_isolation=False)


@pytest.fixture
def bidi_formatter() -> DefaultValueFormatter:
    return DefaultValueFormatter()


@pytest.fixture
def notifier(selection, application) -> SelectionChangeNotifier:
    return SelectionChangeNotifier(selection, application)


@pytest.fixture
def person_type() -> ItemType:
    return PERSON


@pytest.fixture
def organisation_type() -> ItemType:
    return ORGANISATION


@pytest.fixture
def knows_type() -> ItemType:
    return KNOWS
