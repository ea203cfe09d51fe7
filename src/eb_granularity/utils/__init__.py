"""
Utility helpers for the eb-granularity package.

Currently includes:
    - the error taxonomy shared by every module
    - DataFrame validation utilities
"""

from .validation import (
    DataFrameValidationError,
    GranularityError,
    IndexValueError,
    InvalidHierarchyError,
    InvalidOrderError,
    InvalidUnitError,
    MalformedGranularityNameError,
    MissingColumnError,
    MissingGranularityNameError,
    MissingHierarchyError,
    NotATimeSeriesError,
    UnderivableGranularityError,
    UnknownUnitError,
    ensure_columns_present,
    ensure_numeric_index,
    resolve_index,
)

__all__ = [
    "DataFrameValidationError",
    "GranularityError",
    "IndexValueError",
    "InvalidHierarchyError",
    "InvalidOrderError",
    "InvalidUnitError",
    "MalformedGranularityNameError",
    "MissingColumnError",
    "MissingGranularityNameError",
    "MissingHierarchyError",
    "NotATimeSeriesError",
    "UnderivableGranularityError",
    "UnknownUnitError",
    "ensure_columns_present",
    "ensure_numeric_index",
    "resolve_index",
]
