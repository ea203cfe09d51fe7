from __future__ import annotations

from math import prod

from ..utils.validation import InvalidOrderError
from .table import HierarchyTable


def convert_factor(lgran: str, ugran: str, hierarchy: HierarchyTable) -> int:
    """
    Number of ``lgran`` units in one ``ugran`` unit.

    This is the telescoping product of the adjacent factors on the path from
    ``lgran`` up to ``ugran``:

        convert_factor("over", "match", CRICKET) == 20 * 2 == 40

    Parameters
    ----------
    lgran, ugran : str
        Fine and coarse unit; ``lgran`` must be strictly finer.

    hierarchy : HierarchyTable
        Table supplying the adjacent factors.

    Raises
    ------
    UnknownUnitError
        If either unit is absent from the table.
    InvalidOrderError
        If ``lgran`` is not strictly finer than ``ugran``.
    """
    lpos = hierarchy.position(lgran)
    upos = hierarchy.position(ugran)
    if lpos >= upos:
        raise InvalidOrderError(
            f"Cannot convert {lgran!r} into {ugran!r}: the first unit must be "
            "strictly finer than the second."
        )
    return prod(hierarchy.factors[lpos + 1 : upos + 1])


def base_factor(unit: str, hierarchy: HierarchyTable) -> int:
    """
    Number of base (finest) units in one ``unit``; 1 for the base unit itself.
    """
    if hierarchy.position(unit) == 0:
        return 1
    return convert_factor(hierarchy.finest, unit, hierarchy)
