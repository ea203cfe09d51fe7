from __future__ import annotations

import pytest

from eb_granularity.granularity import CALENDAR_HIERARCHY
from eb_granularity.hierarchy import (
    CRICKET,
    UnitOrder,
    ensure_fine_to_coarse,
    next_coarser,
    resolve_order,
)
from eb_granularity.utils import InvalidOrderError, UnknownUnitError


@pytest.mark.parametrize(
    "lgran, ugran, relation, gap",
    [
        ("over", "over", UnitOrder.IDENTICAL, 0),
        ("over", "inning", UnitOrder.ADJACENT, 1),
        ("index", "over", UnitOrder.ADJACENT, 1),
        ("over", "match", UnitOrder.MULTI_LEVEL, 2),
        ("index", "match", UnitOrder.MULTI_LEVEL, 3),
        ("inning", "over", UnitOrder.REVERSED, -1),
        ("match", "index", UnitOrder.REVERSED, -3),
    ],
)
def test_resolve_order_classifies_pairs(lgran, ugran, relation, gap) -> None:
    result = resolve_order(lgran, ugran, CRICKET)

    assert result.relation is relation
    assert result.gap == gap


def test_resolve_order_reports_next_coarser_unit() -> None:
    assert resolve_order("index", "match", CRICKET).next_unit == "over"
    assert resolve_order("over", "match", CRICKET).next_unit == "inning"
    # The coarsest unit has nothing above it.
    assert resolve_order("match", "over", CRICKET).next_unit is None


@pytest.mark.parametrize("lgran, ugran", [("ball", "over"), ("over", "season")])
def test_resolve_order_unknown_units(lgran, ugran) -> None:
    with pytest.raises(UnknownUnitError):
        resolve_order(lgran, ugran, CRICKET)


def test_next_coarser() -> None:
    assert next_coarser("index", CRICKET) == "over"
    assert next_coarser("inning", CRICKET) == "match"


def test_next_coarser_of_coarsest_unit_raises() -> None:
    with pytest.raises(InvalidOrderError) as excinfo:
        next_coarser("match", CRICKET)

    assert "coarsest" in str(excinfo.value)


def test_ensure_fine_to_coarse_rejects_identical_and_reversed() -> None:
    with pytest.raises(InvalidOrderError) as excinfo:
        ensure_fine_to_coarse("over", "over", CRICKET)
    assert "distinct" in str(excinfo.value)

    with pytest.raises(InvalidOrderError) as excinfo:
        ensure_fine_to_coarse("inning", "over", CRICKET)
    assert "swapping" in str(excinfo.value)


def test_ensure_fine_to_coarse_returns_result() -> None:
    result = ensure_fine_to_coarse("over", "match", CRICKET)

    assert result.relation is UnitOrder.MULTI_LEVEL
    assert result.next_unit == "inning"


def test_resolver_works_on_calendar_hierarchy() -> None:
    assert resolve_order("hour", "day", CALENDAR_HIERARCHY).relation is UnitOrder.ADJACENT
    assert resolve_order("day", "year", CALENDAR_HIERARCHY).relation is UnitOrder.MULTI_LEVEL
    assert resolve_order("week", "day", CALENDAR_HIERARCHY).relation is UnitOrder.REVERSED

    with pytest.raises(UnknownUnitError) as excinfo:
        resolve_order("over", "day", CALENDAR_HIERARCHY)
    assert "calendar unit" in str(excinfo.value)
