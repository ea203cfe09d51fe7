from __future__ import annotations

import numpy as np

from ..hierarchy.convert import base_factor, convert_factor
from ..hierarchy.order import next_coarser
from ..hierarchy.table import HierarchyTable
from ..utils.validation import IndexValueError

# Largest magnitude at which float64 still represents every integer exactly.
MAX_INDEX_MAGNITUDE = 2**53


def as_index_array(index_values) -> np.ndarray:
    """
    Copy index values into a finite float64 array.

    Raises
    ------
    IndexValueError
        If the values are not numeric, not one-dimensional, contain NaN / inf,
        or exceed ``MAX_INDEX_MAGNITUDE`` in absolute value.
    """
    try:
        arr = np.array(index_values, dtype=float)
    except (TypeError, ValueError) as e:
        raise IndexValueError("Index values must be numeric.") from e

    if arr.ndim != 1:
        raise IndexValueError(f"Index values must be one-dimensional; got shape {arr.shape}.")
    if not np.isfinite(arr).all():
        raise IndexValueError("Index values contain NaN or infinite values.")
    if arr.size and np.abs(arr).max() >= MAX_INDEX_MAGNITUDE:
        raise IndexValueError(
            f"Index values must be smaller than 2**53 in absolute value; "
            f"got {float(arr[np.argmax(np.abs(arr))])!r}."
        )
    return arr


def build_single_granularity(
    index_values,
    lgran: str,
    hierarchy: HierarchyTable,
) -> np.ndarray:
    """
    Position of each row within the unit immediately above ``lgran``.

    The computation has two steps:

    1. linearize: ``ceil(x / base_factor(lgran))`` counts how many whole
       ``lgran`` units have elapsed up to and including the row.
    2. circularize: the count is reduced modulo
       ``denom = convert_factor(lgran, next_coarser(lgran))``, with ``denom``
       (not 0) marking the last position.

    Parameters
    ----------
    index_values : array-like
        Raw index values measured in the finest unit of ``hierarchy``.

    lgran : str
        Fine unit; must have a coarser unit above it.

    hierarchy : HierarchyTable

    Returns
    -------
    numpy.ndarray
        int64 positions in ``[1, denom]``, one per index value.
    """
    x = as_index_array(index_values)
    ugran = next_coarser(lgran, hierarchy)

    linear_gran = np.ceil(x / base_factor(lgran, hierarchy)).astype(np.int64)

    denom = convert_factor(lgran, ugran, hierarchy)
    # np.mod follows the sign of the divisor, so negative counts still wrap
    # into [0, denom).
    circular_gran = np.mod(linear_gran, denom)
    return np.where(circular_gran == 0, denom, circular_gran).astype(np.int64)
