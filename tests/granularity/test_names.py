from __future__ import annotations

import pytest

from eb_granularity.granularity import GranularitySpec, parse_granularity_name
from eb_granularity.utils import (
    InvalidUnitError,
    MalformedGranularityNameError,
    MissingGranularityNameError,
)


def test_parse_granularity_name() -> None:
    spec = parse_granularity_name("over_inning")

    assert spec == GranularitySpec(fine="over", coarse="inning")
    assert spec.name == "over_inning"


def test_parse_splits_at_first_underscore() -> None:
    spec = parse_granularity_name("hour_day_extra")

    assert spec.fine == "hour"
    assert spec.coarse == "day_extra"


@pytest.mark.parametrize("name", [None, "", "   "])
def test_missing_name(name) -> None:
    with pytest.raises(MissingGranularityNameError):
        parse_granularity_name(name)


@pytest.mark.parametrize("name", ["overinning", "_inning", "over_", "_", 12])
def test_malformed_name(name) -> None:
    with pytest.raises(MalformedGranularityNameError):
        parse_granularity_name(name)


def test_malformed_name_is_an_invalid_unit_error() -> None:
    with pytest.raises(InvalidUnitError):
        parse_granularity_name("overinning")
