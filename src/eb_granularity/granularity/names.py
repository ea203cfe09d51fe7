from __future__ import annotations

from dataclasses import dataclass

from ..hierarchy.table import UNIT_SEPARATOR
from ..utils.validation import MalformedGranularityNameError, MissingGranularityNameError


@dataclass(frozen=True)
class GranularitySpec:
    """A (fine, coarse) unit pair, e.g. ``GranularitySpec("over", "inning")``."""

    fine: str
    coarse: str

    @property
    def name(self) -> str:
        return f"{self.fine}{UNIT_SEPARATOR}{self.coarse}"


def parse_granularity_name(name: str | None) -> GranularitySpec:
    """
    Split ``"<fine>_<coarse>"`` at the first underscore.

    Raises
    ------
    MissingGranularityNameError
        If ``name`` is None or empty.
    MalformedGranularityNameError
        If either half is missing.
    """
    if name is None or (isinstance(name, str) and not name.strip()):
        raise MissingGranularityNameError(
            "Provide the granularity that needs to be computed, e.g. 'over_inning'."
        )
    if not isinstance(name, str):
        raise MalformedGranularityNameError(
            f"Granularity name must be a string; got {type(name).__name__}."
        )

    fine, sep, coarse = name.strip().partition(UNIT_SEPARATOR)
    if not sep or not fine or not coarse:
        raise MalformedGranularityNameError(
            f"Granularity name {name!r} must be of the form '<fine>_<coarse>', "
            "e.g. 'over_inning'."
        )
    return GranularitySpec(fine=fine, coarse=coarse)
