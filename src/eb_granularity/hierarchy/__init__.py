"""
Hierarchy tables and the unit arithmetic defined over them.

Public API
----------
HierarchyTable
    Immutable finest-first list of units with adjacent conversion factors.
UnitOrder, UnitOrderResult, resolve_order
    Classification of a (fine, coarse) unit pair.
next_coarser
    Unit one level above a given unit.
ensure_fine_to_coarse
    Order resolution that rejects identical or reversed pairs.
convert_factor, base_factor
    Cumulative conversion factors between units.
CRICKET, CRICKET_BALLS, get_hierarchy_preset, resolve_hierarchy
    Named hierarchy presets and coercion of user-supplied hierarchies.
"""

from .convert import base_factor, convert_factor
from .order import (
    UnitOrder,
    UnitOrderResult,
    ensure_fine_to_coarse,
    next_coarser,
    resolve_order,
)
from .presets import (
    CRICKET,
    CRICKET_BALLS,
    HIERARCHY_PRESET_NAMES,
    HIERARCHY_PRESETS,
    get_hierarchy_preset,
    list_hierarchy_presets,
    resolve_hierarchy,
)
from .table import HierarchyTable

__all__ = [
    "CRICKET",
    "CRICKET_BALLS",
    "HIERARCHY_PRESETS",
    "HIERARCHY_PRESET_NAMES",
    "HierarchyTable",
    "UnitOrder",
    "UnitOrderResult",
    "base_factor",
    "convert_factor",
    "ensure_fine_to_coarse",
    "get_hierarchy_preset",
    "list_hierarchy_presets",
    "next_coarser",
    "resolve_hierarchy",
    "resolve_order",
]
