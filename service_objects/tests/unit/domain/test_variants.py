"""Unit tests for tagged variants."""

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from service_objects.core.exceptions import ExhaustivenessError
from service_objects.domain.data_object import DataObject
from service_objects.domain.variants import (
    match_variant,
    transition,
    variant,
    variant_members,
    variant_tag,
)


@variant("draft")
class DraftOrder(DataObject):
    order_id: str
    items: tuple[str, ...]


@variant("placed")
class PlacedOrder(DataObject):
    order_id: str
    items: tuple[str, ...]
    placed_at: datetime


@variant("shipped")
class ShippedOrder(DataObject):
    order_id: str
    placed_at: datetime
    tracking_number: str


Order = DraftOrder | PlacedOrder | ShippedOrder

PLACED_AT = datetime(2026, 1, 2, tzinfo=timezone.utc)

HANDLERS = {
    DraftOrder: lambda order: f"{order.order_id}: draft",
    PlacedOrder: lambda order: f"{order.order_id}: placed",
    ShippedOrder: lambda order: f"{order.order_id}: {order.tracking_number}",
}


@pytest.fixture
def draft():
    return DraftOrder(order_id="o-1", items=("book",))


def test_variants_are_frozen_and_tagged(draft):
    assert variant_tag(draft) == "draft"
    assert variant_tag(ShippedOrder) == "shipped"

    with pytest.raises(FrozenInstanceError):
        draft.items = ()


def test_variant_tag_rejects_plain_objects():
    with pytest.raises(TypeError):
        variant_tag(object())


def test_empty_tag_is_rejected():
    with pytest.raises(ValueError):
        variant("")


def test_members_of_union():
    assert variant_members(Order) == (DraftOrder, PlacedOrder, ShippedOrder)
    assert variant_members(DraftOrder) == (DraftOrder,)


def test_duplicate_tags_are_rejected():
    @variant("draft")
    class OtherDraft:
        order_id: str

    with pytest.raises(TypeError, match="share tag"):
        variant_members(DraftOrder | OtherDraft)


def test_transition_carries_shared_fields(draft):
    placed = transition(draft, PlacedOrder, placed_at=PLACED_AT)
    shipped = transition(placed, ShippedOrder, tracking_number="TRK-9")

    assert placed == PlacedOrder(order_id="o-1", items=("book",), placed_at=PLACED_AT)
    assert shipped == ShippedOrder(order_id="o-1", placed_at=PLACED_AT, tracking_number="TRK-9")
    assert isinstance(draft, DraftOrder)


def test_transition_requires_new_fields(draft):
    with pytest.raises(TypeError):
        transition(draft, PlacedOrder)


def test_match_variant_dispatches_each_stage(draft):
    placed = transition(draft, PlacedOrder, placed_at=PLACED_AT)
    shipped = transition(placed, ShippedOrder, tracking_number="TRK-9")

    assert match_variant(draft, HANDLERS, Order) == "o-1: draft"
    assert match_variant(placed, HANDLERS, Order) == "o-1: placed"
    assert match_variant(shipped, HANDLERS, Order) == "o-1: TRK-9"


def test_match_variant_requires_every_stage(draft):
    handlers = {DraftOrder: HANDLERS[DraftOrder], PlacedOrder: HANDLERS[PlacedOrder]}

    with pytest.raises(ExhaustivenessError) as exc_info:
        match_variant(draft, handlers, Order)

    assert exc_info.value.detail == {"missing": ["ShippedOrder"]}


def test_match_variant_rejects_handlers_outside_union(draft):
    handlers = {**HANDLERS, str: lambda value: value}

    with pytest.raises(ExhaustivenessError) as exc_info:
        match_variant(draft, handlers, Order)

    assert exc_info.value.detail == {"unexpected": ["str"]}


def test_match_variant_rejects_foreign_values():
    with pytest.raises(TypeError):
        match_variant("o-1", HANDLERS, Order)
