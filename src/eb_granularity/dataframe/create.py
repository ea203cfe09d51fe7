from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from ..granularity.calendar import CalendarConfig, build_calendar_granularity, is_calendar_index
from ..granularity.names import GranularitySpec, parse_granularity_name
from ..granularity.recursive import build_granularity
from ..hierarchy.presets import HierarchyLike, resolve_hierarchy
from ..hierarchy.table import HierarchyTable
from ..utils.validation import (
    MissingGranularityNameError,
    MissingHierarchyError,
    UnknownUnitError,
    ensure_numeric_index,
    resolve_index,
)

logger = logging.getLogger(__name__)


def create_granularity(
    df: pd.DataFrame,
    granularity: str | None,
    hierarchy: HierarchyLike | None = None,
    *,
    index_col: str | None = None,
    config: CalendarConfig | None = None,
) -> pd.DataFrame:
    """
    Add a granularity column computed from the declared index of ``df``.

    Parameters
    ----------
    df : pandas.DataFrame
        Input data. Its index must be declared, either by naming the
        DataFrame index (``df.set_index("data_index")``) or via ``index_col``.

    granularity : str
        Name of the granularity to create, of the form ``"<fine>_<coarse>"``,
        e.g. ``"over_inning"`` or ``"hour_day"``. The new column is named
        after it.

        If ``df`` already has a column of that name, the column is returned
        converted to ``category`` and is not recomputed.

    hierarchy : HierarchyTable, DataFrame, sequence of pairs, or str, optional
        Hierarchy of units for non-calendar indices. Ignored for calendar
        indices (datetime64, Period, ``datetime.date``), which use the
        built-in calendar hierarchy.

    index_col : str, optional
        Column holding the index values, when the index is not the
        DataFrame's own index.

    config : CalendarConfig, optional
        Display options for calendar granularities.

    Returns
    -------
    pandas.DataFrame
        A copy of ``df`` with one additional ``category`` column named
        ``granularity``.

    Raises
    ------
    NotATimeSeriesError
        If ``df`` is not a DataFrame with a declared numeric or calendar index.
    MissingGranularityNameError
        If ``granularity`` is None or empty.
    MissingHierarchyError
        If the index is not calendar-typed and no hierarchy is supplied.
    InvalidUnitError
        If either half of ``granularity`` is not a recognized unit.
    InvalidOrderError
        If the two halves are identical or given coarse-to-fine.
    """
    index = resolve_index(df, index_col, context="create_granularity")

    if granularity is None or not str(granularity).strip():
        raise MissingGranularityNameError(
            "[create_granularity] Provide the granularity that needs to be computed."
        )

    out = df.copy()

    # Column treated as an existing granularity.
    if granularity in out.columns:
        logger.debug("Column %r already present; converting to category", granularity)
        out[granularity] = out[granularity].astype("category")
        return out

    if is_calendar_index(index):
        spec = parse_granularity_name(granularity)
        logger.debug("Calendar index %r: building %s", index.name, spec.name)
        values = build_calendar_granularity(index, spec.fine, spec.coarse, config=config)
    else:
        if hierarchy is None:
            raise MissingHierarchyError(
                "[create_granularity] A hierarchy table must be provided when the "
                f"index {index.name!r} is not date-time (dtype {index.dtype})."
            )
        table = resolve_hierarchy(hierarchy)
        ensure_numeric_index(index, context="create_granularity")
        spec = parse_granularity_name(granularity)
        _check_units_listed(spec, table)
        logger.debug("Index %r: building %s over units %s", index.name, spec.name, table.units)
        values = build_granularity(index.to_numpy(), spec.fine, spec.coarse, table)

    if isinstance(values, pd.Categorical):
        out[granularity] = values
    else:
        out[granularity] = pd.Categorical(np.asarray(values))
    return out


def _check_units_listed(spec: GranularitySpec, table: HierarchyTable) -> None:
    """
    Raise ``UnknownUnitError`` naming the half of ``spec`` missing from ``table``.
    """
    for part, unit in (("Lower", spec.fine), ("Upper", spec.coarse)):
        if unit not in table:
            raise UnknownUnitError(
                f"{part} part of granularity {spec.name!r} ({unit!r}) must be listed "
                f"as a unit in the hierarchy table (units: {list(table.units)})."
            )
