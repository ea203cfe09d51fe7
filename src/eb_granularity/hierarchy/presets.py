"""
Named hierarchy presets.

This module defines small, named hierarchy tables for domains that come up
repeatedly, so notebooks and pipelines can refer to a hierarchy by name
instead of re-declaring units and factors on every call.

Presets are pure configuration (no computation). ``resolve_hierarchy`` is the
single place where the user-facing ``hierarchy`` argument of the public
entrypoints is turned into a ``HierarchyTable``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Final, Union

import pandas as pd

from ..utils.validation import InvalidHierarchyError
from .table import HierarchyTable

HierarchyLike = Union[HierarchyTable, pd.DataFrame, Sequence, str]


# ---------------------------------------------------------------------
# Preset definitions
# ---------------------------------------------------------------------

# One row per over: the base unit *is* the over.
CRICKET: Final[HierarchyTable] = HierarchyTable(
    units=("index", "over", "inning", "match"),
    factors=(1, 1, 20, 2),
)

# One row per legal delivery.
CRICKET_BALLS: Final[HierarchyTable] = HierarchyTable(
    units=("ball", "over", "inning", "match"),
    factors=(1, 6, 20, 2),
)

# Public mapping for lookup by name.
HIERARCHY_PRESETS: Final[Mapping[str, HierarchyTable]] = {
    "cricket": CRICKET,
    "cricket_balls": CRICKET_BALLS,
}

# Stable list of preset names (useful for error messages).
HIERARCHY_PRESET_NAMES: Final[Sequence[str]] = tuple(sorted(HIERARCHY_PRESETS.keys()))


def list_hierarchy_presets() -> tuple[HierarchyTable, ...]:
    """List all hierarchy presets in stable (name-sorted) order."""
    return tuple(HIERARCHY_PRESETS[name] for name in HIERARCHY_PRESET_NAMES)


def get_hierarchy_preset(name: str) -> HierarchyTable:
    """
    Retrieve a hierarchy preset by name.

    Parameters
    ----------
    name:
        Preset name, case-insensitive. One of ``HIERARCHY_PRESET_NAMES``.

    Raises
    ------
    KeyError
        If the preset name is unknown.
    """
    key = name.strip().lower()
    try:
        return HIERARCHY_PRESETS[key]
    except KeyError as e:
        valid = ", ".join(HIERARCHY_PRESET_NAMES)
        raise KeyError(f"Unknown hierarchy preset '{name}'. Valid presets: {valid}.") from e


def resolve_hierarchy(hierarchy: HierarchyLike) -> HierarchyTable:
    """
    Resolve the ``hierarchy`` argument of the public entrypoints.

    Parameters
    ----------
    hierarchy:
        Either
        * a ``HierarchyTable`` (returned unchanged),
        * a DataFrame with ``units`` and ``factors`` columns, one row per unit,
        * a sequence of ``(unit, factor)`` pairs, finest first, or
        * the name of a preset.

    Raises
    ------
    InvalidHierarchyError
        If the value cannot be interpreted as a hierarchy, names an unknown
        preset, or describes an invalid table.
    """
    if isinstance(hierarchy, HierarchyTable):
        return hierarchy
    if isinstance(hierarchy, str):
        try:
            return get_hierarchy_preset(hierarchy)
        except KeyError as e:
            raise InvalidHierarchyError(e.args[0]) from e
    if isinstance(hierarchy, pd.DataFrame):
        return HierarchyTable.from_frame(hierarchy)
    if isinstance(hierarchy, Sequence):
        try:
            units, factors = zip(*hierarchy)
        except (TypeError, ValueError) as e:
            raise InvalidHierarchyError(
                "A hierarchy sequence must contain (unit, factor) pairs."
            ) from e
        return HierarchyTable(units=units, factors=factors)

    raise InvalidHierarchyError(
        f"Cannot interpret {type(hierarchy).__name__} as a hierarchy table."
    )
