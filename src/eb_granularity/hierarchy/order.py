"""
Relative order of two units within a hierarchy.

A granularity ``"<fine>_<coarse>"`` is only meaningful when the fine unit
sits strictly below the coarse unit. ``resolve_order`` classifies a pair of
units as identical, adjacent, multi-level or reversed and reports the unit
one step above the fine unit, which is what the recursive builder peels off
at each level.

The resolver works with any hierarchy exposing ``units`` and ``position()``:
user ``HierarchyTable`` objects and the built-in calendar hierarchy alike.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from ..utils.validation import InvalidOrderError


class _UnitsLike(Protocol):
    """Minimal structural protocol for an ordered, finest-first unit list."""

    @property
    def units(self) -> tuple[str, ...]: ...

    def position(self, unit: str) -> int: ...


class UnitOrder(str, Enum):
    """How two units relate within a hierarchy."""

    IDENTICAL = "identical"
    ADJACENT = "adjacent"
    MULTI_LEVEL = "multi_level"
    REVERSED = "reversed"


@dataclass(frozen=True)
class UnitOrderResult:
    """
    Result of ``resolve_order``.

    Fields:
    - relation: classification of the pair
    - gap: position(ugran) - position(lgran); negative when reversed
    - next_unit: the unit immediately coarser than lgran, or None when lgran
      is the coarsest unit of the hierarchy
    """

    relation: UnitOrder
    gap: int
    next_unit: str | None


def next_coarser(unit: str, hierarchy: _UnitsLike) -> str:
    """
    Return the unit one level above ``unit``.

    Raises
    ------
    UnknownUnitError
        If ``unit`` is not part of the hierarchy.
    InvalidOrderError
        If ``unit`` is already the coarsest unit.
    """
    pos = hierarchy.position(unit)
    if pos + 1 >= len(hierarchy.units):
        raise InvalidOrderError(
            f"{unit!r} is the coarsest unit of the hierarchy; "
            "there is no coarser unit to group it into."
        )
    return hierarchy.units[pos + 1]


def resolve_order(lgran: str, ugran: str, hierarchy: _UnitsLike) -> UnitOrderResult:
    """
    Classify the pair ``(lgran, ugran)``.

    Raises
    ------
    UnknownUnitError
        If either unit is absent from the hierarchy.
    """
    lpos = hierarchy.position(lgran)
    upos = hierarchy.position(ugran)
    gap = upos - lpos

    if gap < 0:
        relation = UnitOrder.REVERSED
    elif gap == 0:
        relation = UnitOrder.IDENTICAL
    elif gap == 1:
        relation = UnitOrder.ADJACENT
    else:
        relation = UnitOrder.MULTI_LEVEL

    units = hierarchy.units
    next_unit = units[lpos + 1] if lpos + 1 < len(units) else None
    return UnitOrderResult(relation=relation, gap=gap, next_unit=next_unit)


def ensure_fine_to_coarse(lgran: str, ugran: str, hierarchy: _UnitsLike) -> UnitOrderResult:
    """
    Resolve the order of ``(lgran, ugran)`` and reject unusable pairs.

    Raises
    ------
    UnknownUnitError
        If either unit is absent from the hierarchy.
    InvalidOrderError
        If the units are identical or given coarse-to-fine.
    """
    result = resolve_order(lgran, ugran, hierarchy)
    if result.relation is UnitOrder.REVERSED:
        raise InvalidOrderError(
            f"Granularities should be of the form finer to coarser; {lgran!r} is "
            f"coarser than {ugran!r}. Try swapping the order of the units."
        )
    if result.relation is UnitOrder.IDENTICAL:
        raise InvalidOrderError(
            f"Units should be distinct to form a granularity; got {lgran!r} twice."
        )
    return result
