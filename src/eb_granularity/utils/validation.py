from __future__ import annotations

from typing import Sequence

import pandas as pd
from pandas.api.types import is_bool_dtype, is_numeric_dtype


class GranularityError(ValueError):
    """
    Base class for every error raised by eb-granularity.

    This is a thin wrapper around ValueError so callers can catch a more
    specific exception type if they want to distinguish granularity issues
    from other ValueErrors.
    """


class DataFrameValidationError(GranularityError):
    """Error raised when an input pandas.DataFrame fails a validation check."""


class NotATimeSeriesError(DataFrameValidationError):
    """The dataset is not a DataFrame with a declared, orderable index."""


class IndexValueError(DataFrameValidationError):
    """The index holds values that cannot be mapped onto a hierarchy (NaN / inf)."""


class MissingColumnError(DataFrameValidationError, KeyError):
    """A column required by the call is absent from the DataFrame."""

    # KeyError.__str__ would wrap the message in quotes.
    __str__ = ValueError.__str__


class MissingHierarchyError(GranularityError):
    """A non-calendar index was supplied without a hierarchy table."""


class InvalidHierarchyError(GranularityError):
    """A hierarchy table violates its structural invariants."""


class MissingGranularityNameError(GranularityError):
    """No granularity name was supplied."""


class InvalidUnitError(GranularityError):
    """A granularity name refers to a unit the hierarchy does not define."""


class UnknownUnitError(InvalidUnitError):
    """A unit name is absent from the hierarchy table it was looked up in."""


class MalformedGranularityNameError(InvalidUnitError):
    """A granularity name is not of the form ``"<fine>_<coarse>"``."""


class InvalidOrderError(GranularityError):
    """Two units are identical, or given coarse-to-fine instead of fine-to-coarse."""


class UnderivableGranularityError(GranularityError):
    """The granularity cannot be formed from the given hierarchy table."""


def _prefix(context: str | None) -> str:
    return f"[{context}] " if context is not None else ""


def ensure_columns_present(
    df: pd.DataFrame,
    required: Sequence[str],
    *,
    context: str | None = None,
) -> None:
    """
    Ensure that all required columns are present in a DataFrame.

    Parameters
    ----------
    df : pandas.DataFrame
        The DataFrame to validate.

    required : sequence of str
        Column names that must be present in ``df``.

    context : str, optional
        Optional context string to include in the error message
        (e.g. the name of the calling function).

    Raises
    ------
    MissingColumnError
        If one or more required columns are missing.
    """
    missing = [c for c in required if c not in df.columns]
    if not missing:
        return

    raise MissingColumnError(
        f"{_prefix(context)}DataFrame is missing required columns: {missing}"
    )


def resolve_index(
    df: pd.DataFrame,
    index_col: str | None = None,
    *,
    context: str | None = None,
) -> pd.Series:
    """
    Return the declared index of a DataFrame as a Series.

    The index is either the column named by ``index_col`` or, when
    ``index_col`` is None, the DataFrame's own index provided it has been
    declared by giving it a name (``df.set_index("data_index")``). An
    unnamed default index is not treated as a declared index.

    Parameters
    ----------
    df : pandas.DataFrame
        The dataset.

    index_col : str, optional
        Column holding the index values.

    context : str, optional
        Optional context string to include in the error message.

    Returns
    -------
    pandas.Series
        Index values aligned positionally with the rows of ``df`` and
        carrying a default RangeIndex.

    Raises
    ------
    NotATimeSeriesError
        If ``df`` is not a DataFrame, has no declared index, or the index
        contains missing values.
    MissingColumnError
        If ``index_col`` is not a column of ``df``.
    """
    prefix = _prefix(context)
    if not isinstance(df, pd.DataFrame):
        raise NotATimeSeriesError(
            f"{prefix}Expected a pandas.DataFrame with a declared index, "
            f"got {type(df).__name__}."
        )

    if index_col is not None:
        ensure_columns_present(df, [index_col], context=context)
        values = df[index_col]
        name = index_col
    else:
        if isinstance(df.index, pd.MultiIndex) or df.index.name is None:
            raise NotATimeSeriesError(
                f"{prefix}DataFrame has no declared index. Name the index "
                "(e.g. df.set_index('data_index')) or pass index_col."
            )
        values = df.index.to_series()
        name = df.index.name

    if values.isna().any():
        raise NotATimeSeriesError(
            f"{prefix}Index {name!r} contains missing values."
        )

    return values.reset_index(drop=True).rename(name)


def ensure_numeric_index(
    index: pd.Series,
    *,
    context: str | None = None,
) -> None:
    """
    Ensure that non-calendar index values are numeric.

    Raises
    ------
    NotATimeSeriesError
        If the index dtype is not numeric (booleans are rejected).
    """
    if not is_numeric_dtype(index.dtype) or is_bool_dtype(index.dtype):
        raise NotATimeSeriesError(
            f"{_prefix(context)}Index {index.name!r} must be numeric or date-time; "
            f"got dtype {index.dtype}."
        )
