"""
Array-level granularity builders.

These functions operate on raw index values (numpy arrays, lists, Series)
and return one position per value. DataFrame-level entrypoints live in
``eb_granularity.dataframe``.
"""

from .calendar import (
    CALENDAR_HIERARCHY,
    CalendarConfig,
    CalendarHierarchy,
    build_calendar_granularity,
    is_calendar_index,
)
from .names import GranularitySpec, parse_granularity_name
from .recursive import build_granularity
from .single import build_single_granularity

__all__ = [
    "CALENDAR_HIERARCHY",
    "CalendarConfig",
    "CalendarHierarchy",
    "GranularitySpec",
    "build_calendar_granularity",
    "build_granularity",
    "build_single_granularity",
    "is_calendar_index",
    "parse_granularity_name",
]
