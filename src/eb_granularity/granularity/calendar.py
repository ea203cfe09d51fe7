"""
Calendar granularities for date-time indices.

Date-time indices do not need a user hierarchy: they are mapped onto a fixed
calendar hierarchy

    second < minute < qhour < hhour < hour < day < week < fortnight
           < month < quarter < semester < year

and the position of a timestamp within a coarse unit is read off pandas'
datetime accessors. Results follow the same contract as the generic path:
1-indexed integer positions, one per row (e.g. ``hour_day`` in 1..24,
``day_week`` in 1..7 with Monday = 1).

Conventions
-----------
- Weeks start on Monday.
- Fortnights are pairs of weeks counted from Monday 1970-01-05.
- Fine units up to ``fortnight`` have a fixed length and are counted from the
  start of the coarse unit; ``month``, ``quarter`` and ``semester`` are
  counted in calendar months. Hence ``week_month`` is ``ceil(day / 7)``.
- tz-aware timestamps are reduced to their local wall-clock time; no
  time-zone arithmetic is performed.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Final

import numpy as np
import pandas as pd
from pandas.api.types import is_datetime64_any_dtype

from ..hierarchy.order import ensure_fine_to_coarse
from ..utils.validation import UnknownUnitError


@dataclass(frozen=True)
class CalendarHierarchy:
    """Built-in finest-first calendar units (no conversion factors)."""

    units: tuple[str, ...]

    def position(self, unit: str) -> int:
        try:
            return self.units.index(unit)
        except ValueError:
            raise UnknownUnitError(
                f"Unit {unit!r} is not a recognized calendar unit "
                f"(units: {list(self.units)})."
            ) from None

    def __contains__(self, unit: object) -> bool:
        return unit in self.units


CALENDAR_HIERARCHY: Final[CalendarHierarchy] = CalendarHierarchy(
    units=(
        "second",
        "minute",
        "qhour",
        "hhour",
        "hour",
        "day",
        "week",
        "fortnight",
        "month",
        "quarter",
        "semester",
        "year",
    )
)

# Fine units with a fixed length.
_FIXED_LENGTH: Final[dict[str, pd.Timedelta]] = {
    "second": pd.Timedelta(seconds=1),
    "minute": pd.Timedelta(minutes=1),
    "qhour": pd.Timedelta(minutes=15),
    "hhour": pd.Timedelta(minutes=30),
    "hour": pd.Timedelta(hours=1),
    "day": pd.Timedelta(days=1),
    "week": pd.Timedelta(weeks=1),
    "fortnight": pd.Timedelta(weeks=2),
}

# Units counted in calendar months.
_MONTHS: Final[dict[str, int]] = {
    "month": 1,
    "quarter": 3,
    "semester": 6,
    "year": 12,
}

_FLOOR_FREQ: Final[dict[str, str]] = {
    "second": "s",
    "minute": "min",
    "qhour": "15min",
    "hhour": "30min",
    "hour": "h",
    "day": "D",
}

_FORTNIGHT_ORIGIN: Final[pd.Timestamp] = pd.Timestamp("1970-01-05")  # a Monday

_MONTH_NAMES: Final[tuple[str, ...]] = tuple(
    pd.date_range("2000-01-01", periods=12, freq="MS").month_name()
)
_DAY_NAMES: Final[tuple[str, ...]] = tuple(
    pd.date_range("2000-01-03", periods=7, freq="D").day_name()
)


@dataclass(frozen=True)
class CalendarConfig:
    """
    Display options for calendar granularities.

    label:
        If True, ``month_year`` is returned as month names and ``day_week`` as
        weekday names (ordered categorical). Other granularities are always
        integer positions.
    abbr:
        With ``label=True``, use three-letter names ("Jan", "Mon").
    """

    label: bool = False
    abbr: bool = True


def is_calendar_index(values: pd.Series) -> bool:
    """
    True for datetime64 (naive or tz-aware), Period, or ``datetime.date`` values.
    """
    if is_datetime64_any_dtype(values.dtype) or isinstance(values.dtype, pd.PeriodDtype):
        return True
    if values.dtype == object and len(values):
        return all(isinstance(v, (dt.date, pd.Timestamp, pd.Period)) for v in values)
    return False


def to_timestamps(values: pd.Series) -> pd.Series:
    """Convert calendar values to naive wall-clock datetime64 values."""
    if isinstance(values.dtype, pd.PeriodDtype):
        ts = values.dt.start_time
    elif is_datetime64_any_dtype(values.dtype):
        ts = values
    else:
        ts = pd.Series(
            [v.start_time if isinstance(v, pd.Period) else v for v in values],
            index=values.index,
        )
        ts = pd.to_datetime(ts)

    if getattr(ts.dt, "tz", None) is not None:
        ts = ts.dt.tz_localize(None)
    return ts.reset_index(drop=True)


def _start_of(ts: pd.Series, unit: str) -> pd.Series:
    if unit in _FLOOR_FREQ:
        return ts.dt.floor(_FLOOR_FREQ[unit])

    if unit in ("week", "fortnight"):
        week_start = ts.dt.normalize() - pd.to_timedelta(ts.dt.dayofweek, unit="D")
        if unit == "week":
            return week_start
        weeks = (week_start - _FORTNIGHT_ORIGIN) // pd.Timedelta(weeks=1)
        return week_start - pd.to_timedelta((weeks % 2) * 7, unit="D")

    months = _MONTHS[unit]
    start_month = (ts.dt.month - 1) // months * months + 1
    return pd.to_datetime(
        pd.DataFrame({"year": ts.dt.year, "month": start_month, "day": 1})
    )


def _calendar_positions(ts: pd.Series, lgran: str, ugran: str) -> np.ndarray:
    start = _start_of(ts, ugran)
    if lgran in _FIXED_LENGTH:
        pos = (ts - start) // _FIXED_LENGTH[lgran] + 1
    else:
        elapsed = (ts.dt.year - start.dt.year) * 12 + (ts.dt.month - start.dt.month)
        pos = elapsed // _MONTHS[lgran] + 1
    return pos.to_numpy(dtype=np.int64)


def _labelled(ts: pd.Series, lgran: str, ugran: str, config: CalendarConfig) -> pd.Categorical | None:
    if lgran == "month" and ugran == "year":
        names, categories = ts.dt.month_name(), _MONTH_NAMES
    elif lgran == "day" and ugran == "week":
        names, categories = ts.dt.day_name(), _DAY_NAMES
    else:
        return None

    if config.abbr:
        names = names.str[:3]
        categories = tuple(c[:3] for c in categories)
    return pd.Categorical(names, categories=list(categories), ordered=True)


def build_calendar_granularity(
    index_values,
    lgran: str,
    ugran: str,
    config: CalendarConfig | None = None,
) -> np.ndarray | pd.Categorical:
    """
    Position of each timestamp within ``ugran``, counted in ``lgran`` steps.

    Parameters
    ----------
    index_values : array-like
        datetime64, Period, or ``datetime.date`` values.

    lgran, ugran : str
        Calendar units from ``CALENDAR_HIERARCHY``, fine first.

    config : CalendarConfig, optional
        Display options. Defaults to integer positions.

    Returns
    -------
    numpy.ndarray or pandas.Categorical
        int64 positions, or an ordered categorical of names when
        ``config.label`` applies to the granularity.

    Raises
    ------
    UnknownUnitError
        If either unit is not a calendar unit.
    InvalidOrderError
        If the units are identical or given coarse-to-fine.
    """
    ensure_fine_to_coarse(lgran, ugran, CALENDAR_HIERARCHY)
    config = config or CalendarConfig()

    ts = to_timestamps(pd.Series(index_values))

    if config.label:
        labelled = _labelled(ts, lgran, ugran, config)
        if labelled is not None:
            return labelled

    return _calendar_positions(ts, lgran, ugran)
