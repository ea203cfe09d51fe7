"""
Electric Barometer Granularity Toolkit (EB Granularity)

This package derives granularities, i.e. categorical groupings at varying
levels of coarseness, from the ordered index of a pandas DataFrame. Calendar
indices use a built-in calendar hierarchy ("hour_day", "day_week"); any other
numeric index uses a user-declared hierarchy of nested units and their
conversion factors ("over_inning", "inning_match").

Logging is silent unless the application configures the ``eb_granularity``
logger (or the root logger).
"""

import logging

from .dataframe import create_granularity, validate_granularity
from .granularity import (
    CALENDAR_HIERARCHY,
    CalendarConfig,
    GranularitySpec,
    build_calendar_granularity,
    build_granularity,
    build_single_granularity,
    parse_granularity_name,
)
from .hierarchy import (
    CRICKET,
    CRICKET_BALLS,
    HierarchyTable,
    UnitOrder,
    UnitOrderResult,
    base_factor,
    convert_factor,
    get_hierarchy_preset,
    next_coarser,
    resolve_order,
)
from .utils.validation import (
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
)

_logger = logging.getLogger("eb_granularity")
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__all__ = [
    "CALENDAR_HIERARCHY",
    "CRICKET",
    "CRICKET_BALLS",
    "CalendarConfig",
    "DataFrameValidationError",
    "GranularityError",
    "GranularitySpec",
    "HierarchyTable",
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
    "UnitOrder",
    "UnitOrderResult",
    "UnknownUnitError",
    "base_factor",
    "build_calendar_granularity",
    "build_granularity",
    "build_single_granularity",
    "convert_factor",
    "create_granularity",
    "get_hierarchy_preset",
    "next_coarser",
    "parse_granularity_name",
    "resolve_order",
    "validate_granularity",
]

__version__ = "0.1.0"
