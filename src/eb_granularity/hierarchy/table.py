"""
Hierarchy tables for non-temporal granularities.

A hierarchy table lists the units of an index from finest to coarsest along
with the conversion factor linking each unit to the one below it. For
cricket data:

    units   = ("index", "over", "inning", "match")
    factors = (1,       1,      20,       2)

reads as "one over is one index step, one inning is 20 overs, one match is
2 innings". ``factors[0]`` has no unit below it; it is kept so that the two
sequences stay parallel but is never read.

Tables are validated once at construction and are immutable afterwards, so
the builders downstream can rely on a duplicate-free, finest-first ordering.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from typing import Final

import pandas as pd

from ..utils.validation import InvalidHierarchyError, UnknownUnitError

UNIT_SEPARATOR: Final[str] = "_"


@dataclass(frozen=True)
class HierarchyTable:
    """
    Ordered units (finest first) and their adjacent conversion factors.

    Parameters
    ----------
    units:
        Unit names, finest first. Must be unique, non-empty strings that do
        not contain ``"_"`` (the separator used in granularity names).
    factors:
        Parallel sequence of positive integers. ``factors[i]`` (i > 0) is the
        number of ``units[i - 1]`` in one ``units[i]``. ``factors[0]`` is a
        placeholder and is ignored.
    """

    units: tuple[str, ...]
    factors: tuple[int, ...]

    def __post_init__(self) -> None:
        units = tuple(self.units)
        factors = tuple(self.factors)

        if len(units) != len(factors):
            raise InvalidHierarchyError(
                f"units and factors must have the same length; "
                f"got {len(units)} units and {len(factors)} factors."
            )
        if len(units) < 2:
            raise InvalidHierarchyError(
                f"A hierarchy needs at least two units; got {list(units)}."
            )

        for u in units:
            if not isinstance(u, str) or not u:
                raise InvalidHierarchyError(f"Unit names must be non-empty strings; got {u!r}.")
            if UNIT_SEPARATOR in u:
                raise InvalidHierarchyError(
                    f"Unit name {u!r} must not contain {UNIT_SEPARATOR!r}, "
                    "which separates the two halves of a granularity name."
                )

        dupes = sorted({u for u in units if units.count(u) > 1})
        if dupes:
            raise InvalidHierarchyError(f"Unit names must be unique; duplicated: {dupes}.")

        clean: list[int] = [factors[0]]
        for unit, f in zip(units[1:], factors[1:]):
            clean.append(_as_positive_int(f, unit))

        # Stored as tuples whatever sequence the caller passed.
        object.__setattr__(self, "units", units)
        object.__setattr__(self, "factors", tuple(clean))

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def position(self, unit: str) -> int:
        """
        Zero-based position of ``unit`` (0 is the finest unit).

        Raises
        ------
        UnknownUnitError
            If ``unit`` is not one of ``units``.
        """
        try:
            return self.units.index(unit)
        except ValueError:
            raise UnknownUnitError(
                f"Unit {unit!r} is not listed in the hierarchy table "
                f"(units: {list(self.units)})."
            ) from None

    def __contains__(self, unit: object) -> bool:
        return unit in self.units

    def __len__(self) -> int:
        return len(self.units)

    @property
    def finest(self) -> str:
        return self.units[0]

    @property
    def coarsest(self) -> str:
        return self.units[-1]

    # ------------------------------------------------------------------
    # DataFrame interop
    # ------------------------------------------------------------------
    @classmethod
    def from_frame(
        cls,
        df: pd.DataFrame,
        units_col: str = "units",
        factors_col: str = "factors",
    ) -> "HierarchyTable":
        """
        Build a table from a two-column DataFrame, one row per unit.

        Rows must already be ordered finest first.
        """
        missing = [c for c in (units_col, factors_col) if c not in df.columns]
        if missing:
            raise InvalidHierarchyError(
                f"Hierarchy DataFrame is missing required columns: {missing}"
            )
        return cls(
            units=tuple(df[units_col].tolist()),
            factors=tuple(df[factors_col].tolist()),
        )

    def to_frame(self, units_col: str = "units", factors_col: str = "factors") -> pd.DataFrame:
        return pd.DataFrame({units_col: list(self.units), factors_col: list(self.factors)})


def _as_positive_int(value, unit: str) -> int:
    if isinstance(value, bool):
        raise InvalidHierarchyError(f"Conversion factor for {unit!r} must be an integer; got {value!r}.")
    if isinstance(value, Integral):
        out = int(value)
    elif isinstance(value, float) and value.is_integer():
        out = int(value)
    else:
        raise InvalidHierarchyError(
            f"Conversion factor for {unit!r} must be a positive integer; got {value!r}."
        )
    if out <= 0:
        raise InvalidHierarchyError(
            f"Conversion factor for {unit!r} must be a positive integer; got {value!r}."
        )
    return out
