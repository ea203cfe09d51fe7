from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from eb_granularity.utils import (
    DataFrameValidationError,
    GranularityError,
    MissingColumnError,
    NotATimeSeriesError,
    ensure_columns_present,
    ensure_numeric_index,
    resolve_index,
)


def test_ensure_columns_present_passes_when_all_columns_exist():
    df = pd.DataFrame({"a": [1, 2], "b": [3, 4]})

    # Should not raise
    ensure_columns_present(df, ["a", "b"], context="test")


def test_ensure_columns_present_raises_with_missing_columns_and_context():
    df = pd.DataFrame({"a": [1, 2]})

    with pytest.raises(MissingColumnError) as excinfo:
        ensure_columns_present(df, ["a", "b"], context="my_function")

    msg = str(excinfo.value)
    assert "my_function" in msg
    assert "missing required columns" in msg.lower()
    assert "['b']" in msg
    # No KeyError-style quoting of the whole message.
    assert not msg.startswith('"')


def test_missing_column_error_is_both_value_and_key_error():
    """Callers can catch it as ValueError or as KeyError."""
    df = pd.DataFrame({"a": [1]})

    with pytest.raises(ValueError):
        ensure_columns_present(df, ["a", "b"])
    with pytest.raises(KeyError):
        ensure_columns_present(df, ["a", "b"])


def test_dataframe_validation_error_is_granularity_and_value_error():
    assert issubclass(DataFrameValidationError, GranularityError)
    assert issubclass(GranularityError, ValueError)


def test_resolve_index_uses_named_dataframe_index():
    df = pd.DataFrame({"x": [10, 20, 30]}, index=pd.Index([5, 6, 7], name="data_index"))

    index = resolve_index(df)

    assert index.name == "data_index"
    assert index.tolist() == [5, 6, 7]
    assert isinstance(index.index, pd.RangeIndex)


def test_resolve_index_uses_index_col_when_given():
    df = pd.DataFrame({"t": [3, 4], "x": [1, 2]})

    index = resolve_index(df, "t")

    assert index.name == "t"
    assert index.tolist() == [3, 4]


def test_resolve_index_rejects_undeclared_index():
    df = pd.DataFrame({"x": [1, 2, 3]})

    with pytest.raises(NotATimeSeriesError) as excinfo:
        resolve_index(df, context="caller")

    assert "caller" in str(excinfo.value)
    assert "no declared index" in str(excinfo.value)


@pytest.mark.parametrize("data", [[1, 2, 3], np.arange(3), pd.Series([1, 2, 3])])
def test_resolve_index_rejects_non_dataframes(data):
    with pytest.raises(NotATimeSeriesError):
        resolve_index(data)


def test_resolve_index_rejects_missing_index_values():
    df = pd.DataFrame({"t": [1.0, np.nan, 3.0], "x": [1, 2, 3]}).set_index("t")

    with pytest.raises(NotATimeSeriesError) as excinfo:
        resolve_index(df)

    assert "missing values" in str(excinfo.value)


def test_resolve_index_missing_index_col_raises_missing_column():
    df = pd.DataFrame({"x": [1, 2]})

    with pytest.raises(MissingColumnError):
        resolve_index(df, "t")


def test_ensure_numeric_index_accepts_ints_and_floats():
    ensure_numeric_index(pd.Series([1, 2, 3], name="i"))
    ensure_numeric_index(pd.Series([1.5, 2.5], name="f"))


@pytest.mark.parametrize(
    "values",
    [
        pd.Series(["a", "b"], name="s"),
        pd.Series([True, False], name="b"),
    ],
)
def test_ensure_numeric_index_rejects_other_dtypes(values):
    with pytest.raises(NotATimeSeriesError) as excinfo:
        ensure_numeric_index(values, context="ctx")

    assert "must be numeric or date-time" in str(excinfo.value)
