from __future__ import annotations

import pytest

from eb_granularity.hierarchy import (
    CRICKET,
    CRICKET_BALLS,
    HierarchyTable,
    base_factor,
    convert_factor,
)
from eb_granularity.utils import InvalidOrderError, UnknownUnitError


@pytest.mark.parametrize(
    "lgran, ugran, expected",
    [
        ("index", "over", 1),
        ("over", "inning", 20),
        ("inning", "match", 2),
        ("over", "match", 40),
        ("index", "match", 40),
    ],
)
def test_convert_factor_cricket(lgran, ugran, expected) -> None:
    assert convert_factor(lgran, ugran, CRICKET) == expected


def test_convert_factor_is_product_of_adjacent_factors() -> None:
    assert convert_factor("ball", "over", CRICKET_BALLS) == 6
    assert convert_factor("ball", "inning", CRICKET_BALLS) == 120
    assert convert_factor("ball", "match", CRICKET_BALLS) == 240


@pytest.mark.parametrize("lgran, ugran", [("over", "over"), ("match", "over")])
def test_convert_factor_requires_fine_to_coarse(lgran, ugran) -> None:
    with pytest.raises(InvalidOrderError):
        convert_factor(lgran, ugran, CRICKET)


def test_convert_factor_unknown_unit() -> None:
    with pytest.raises(UnknownUnitError):
        convert_factor("ball", "match", CRICKET)


def test_convert_factor_ignores_first_factor() -> None:
    table = HierarchyTable(units=("index", "over", "inning"), factors=(99, 1, 20))

    assert convert_factor("index", "inning", table) == 20


def test_base_factor() -> None:
    assert base_factor("index", CRICKET) == 1
    assert base_factor("over", CRICKET) == 1
    assert base_factor("inning", CRICKET) == 20
    assert base_factor("ball", CRICKET_BALLS) == 1
    assert base_factor("inning", CRICKET_BALLS) == 120


def test_convert_factor_does_not_overflow() -> None:
    units = tuple(f"u{i}" for i in range(8))
    table = HierarchyTable(units=units, factors=(1,) + (10_000,) * 7)

    assert convert_factor("u0", "u7", table) == 10_000**7
