from __future__ import annotations

import logging

import numpy as np

from ..hierarchy.convert import convert_factor
from ..hierarchy.order import UnitOrder, ensure_fine_to_coarse
from ..hierarchy.table import HierarchyTable
from .single import as_index_array, build_single_granularity

logger = logging.getLogger(__name__)


def build_granularity(
    index_values,
    lgran: str,
    ugran: str,
    hierarchy: HierarchyTable,
) -> np.ndarray:
    """
    Position of each row within ``ugran``, counted in ``lgran`` steps.

    Adjacent units are computed directly by ``build_single_granularity``.
    For units more than one level apart, let ``mid`` be the unit right above
    ``lgran``; the result is the mixed-radix combination

        low + convert_factor(lgran, mid) * (high - 1)

    where ``low`` is the position of ``lgran`` within ``mid`` and ``high``
    the position of ``mid`` within ``ugran``. Both sub-problems span fewer
    levels, so the recursion bottoms out at adjacent pairs.

    Parameters
    ----------
    index_values : array-like
        Raw index values measured in the finest unit of ``hierarchy``.

    lgran, ugran : str
        Fine and coarse unit of the granularity.

    hierarchy : HierarchyTable

    Returns
    -------
    numpy.ndarray
        int64 positions in ``[1, convert_factor(lgran, ugran)]``.

    Raises
    ------
    UnknownUnitError
        If either unit is not in ``hierarchy``.
    InvalidOrderError
        If the units are identical or given coarse-to-fine.
    IndexValueError
        If the index values are not finite numbers.
    """
    order = ensure_fine_to_coarse(lgran, ugran, hierarchy)
    x = as_index_array(index_values)
    return _build(x, lgran, ugran, hierarchy, order.relation, order.next_unit)


def _build(
    x: np.ndarray,
    lgran: str,
    ugran: str,
    hierarchy: HierarchyTable,
    relation: UnitOrder,
    mid: str | None,
) -> np.ndarray:
    # Preconditions were checked by build_granularity; the sub-problems
    # below are fine-to-coarse by construction.
    if relation is UnitOrder.ADJACENT:
        return build_single_granularity(x, lgran, hierarchy)

    logger.debug("Splitting %s_%s at %r", lgran, ugran, mid)

    low = build_single_granularity(x, lgran, hierarchy)

    upper = ensure_fine_to_coarse(mid, ugran, hierarchy)
    high = _build(x, mid, ugran, hierarchy, upper.relation, upper.next_unit)

    step = convert_factor(lgran, mid, hierarchy)
    return low + step * (high - 1)
