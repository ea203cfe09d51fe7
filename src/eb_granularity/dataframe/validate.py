from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from ..granularity.calendar import CALENDAR_HIERARCHY, build_calendar_granularity, is_calendar_index
from ..granularity.names import parse_granularity_name
from ..granularity.recursive import build_granularity
from ..hierarchy.order import ensure_fine_to_coarse
from ..hierarchy.presets import HierarchyLike, resolve_hierarchy
from ..utils.validation import (
    InvalidOrderError,
    InvalidUnitError,
    MissingGranularityNameError,
    MissingHierarchyError,
    UnderivableGranularityError,
    ensure_columns_present,
    ensure_numeric_index,
    resolve_index,
)

logger = logging.getLogger(__name__)

# pandas.api.types.infer_dtype results accepted for object columns.
_NUMERIC_INFERRED = frozenset({"integer", "floating", "mixed-integer-float"})


def validate_granularity(
    df: pd.DataFrame,
    granularity: str | None,
    hierarchy: HierarchyLike | None,
    validate_col: str,
    *,
    index_col: str | None = None,
) -> bool:
    """
    Check whether an existing column equals the computed granularity.

    Parameters
    ----------
    df : pandas.DataFrame
        Input data with a declared index (see ``create_granularity``).

    granularity : str
        Granularity to recompute, e.g. ``"over_inning"``. It must be
        derivable from ``hierarchy``: both halves listed as units, fine
        before coarse.

    hierarchy : HierarchyTable, DataFrame, sequence of pairs, or str
        Hierarchy of units. May be None for calendar indices, in which case
        the built-in calendar hierarchy is used.

    validate_col : str
        Column holding the reference values.

    index_col : str, optional
        Column holding the index values, when the index is not the
        DataFrame's own index.

    Returns
    -------
    bool
        True if every row of ``validate_col`` equals the recomputed
        granularity, False otherwise. A mismatch is a normal negative result
        and never raises. An empty dataset trivially validates.

    Raises
    ------
    NotATimeSeriesError
        If ``df`` is not a DataFrame with a declared numeric or calendar index.
    MissingGranularityNameError
        If ``granularity`` is None or empty.
    MissingHierarchyError
        If the index is not calendar-typed and no hierarchy is supplied.
    UnderivableGranularityError
        If ``granularity`` cannot be formed from the hierarchy.
    MissingColumnError
        If ``validate_col`` is not a column of ``df``.
    """
    context = "validate_granularity"
    index = resolve_index(df, index_col, context=context)

    if granularity is None or not str(granularity).strip():
        raise MissingGranularityNameError(
            f"[{context}] Provide the granularity that needs to be validated."
        )

    calendar = is_calendar_index(index)
    if calendar:
        units = CALENDAR_HIERARCHY
    elif hierarchy is None:
        raise MissingHierarchyError(
            f"[{context}] A hierarchy table must be provided when the index "
            f"{index.name!r} is not date-time (dtype {index.dtype})."
        )
    else:
        units = resolve_hierarchy(hierarchy)
        ensure_numeric_index(index, context=context)

    try:
        spec = parse_granularity_name(granularity)
        ensure_fine_to_coarse(spec.fine, spec.coarse, units)
    except (InvalidUnitError, InvalidOrderError) as e:
        raise UnderivableGranularityError(
            f"[{context}] Granularity to be validated needs to be one that can be "
            f"formed from the hierarchy (units: {list(units.units)}): {e}"
        ) from e

    ensure_columns_present(df, [validate_col], context=context)

    if not len(index):
        return True

    if calendar:
        computed = build_calendar_granularity(index, spec.fine, spec.coarse)
    else:
        computed = build_granularity(index.to_numpy(), spec.fine, spec.coarse, units)

    reference = _as_numeric(df[validate_col])
    if reference is None:
        logger.info("Column %r is not numeric; it cannot equal %s", validate_col, spec.name)
        return False

    mismatched = int(np.count_nonzero(reference != computed))
    if mismatched:
        logger.info(
            "Column %r differs from %s in %d of %d rows",
            validate_col,
            spec.name,
            mismatched,
            len(computed),
        )
        return False
    return True


def _as_numeric(values: pd.Series) -> np.ndarray | None:
    """
    Reference values as float64, or None if they are not comparable with an
    integer granularity.

    Only real numbers qualify. Booleans, strings and other objects are never
    converted; categorical columns are compared by the values of their
    categories, not by code.
    """
    if values.isna().any():
        return None

    if isinstance(values.dtype, pd.CategoricalDtype):
        if not _is_real_number_dtype(values.cat.categories.dtype):
            return None
        values = values.astype(values.cat.categories.dtype)
    elif values.dtype == object:
        if pd.api.types.infer_dtype(values, skipna=False) not in _NUMERIC_INFERRED:
            return None
        values = values.astype(float)
    elif not _is_real_number_dtype(values.dtype):
        return None

    return values.to_numpy(dtype=float)


def _is_real_number_dtype(dtype) -> bool:
    return (
        pd.api.types.is_numeric_dtype(dtype)
        and not pd.api.types.is_bool_dtype(dtype)
        and not pd.api.types.is_complex_dtype(dtype)
    )
