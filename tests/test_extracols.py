import numpy as np
import pandas as pd
import pytest

from src.outsink.core.exceptions import (
    DuplicateArgumentName,
    NonScalarExtraColumn,
    UnnamedArgument,
)
from src.outsink.services.extracols import extracols, split_arguments, validate_named


def test_extracols_returns_named_scalars():
    assert extracols(run=1, label="x") == {"run": 1, "label": "x"}


def test_extracols_unwraps_length_one_sequences():
    extra = extracols(run=[7], seed=np.array([3]))
    assert extra == {"run": 7, "seed": 3}
    assert type(extra["seed"]) is int


def test_extracols_rejects_unnamed():
    with pytest.raises(UnnamedArgument):
        extracols(1, run=2)


def test_extracols_rejects_long_values_listing_all_of_them():
    with pytest.raises(NonScalarExtraColumn) as e:
        extracols(run=1, a=[1, 2], b=(1, 2, 3))

    assert e.value.lengths == {"a": 2, "b": 3}
    msg = str(e.value)
    assert "a=2" in msg
    assert "b=3" in msg
    assert "run" not in msg


def test_extracols_rejects_empty_value():
    with pytest.raises(NonScalarExtraColumn):
        extracols(run=[])


def test_string_is_a_scalar():
    assert extracols(label="long text") == {"label": "long text"}


def test_named_series_counts_as_named():
    items = split_arguments([pd.Series([1, 2], name="a")], {"b": 1})
    assert [name for name, _ in items] == ["a", "b"]


def test_unnamed_series_is_unnamed():
    with pytest.raises(UnnamedArgument) as e:
        validate_named(split_arguments([1, pd.Series([1])], {}))
    assert e.value.position == 0


def test_empty_name_is_unnamed():
    with pytest.raises(UnnamedArgument):
        validate_named([("", 1)])


def test_duplicates_are_listed():
    with pytest.raises(DuplicateArgumentName) as e:
        validate_named([("a", 1), ("b", 2), ("a", 3), ("b", 4), ("c", 5)])

    assert e.value.names == ("a", "b")
    assert "a, b" in str(e.value)


def test_batch_mode_keeps_sequences():
    values = validate_named([("a", [1, 2, 3]), ("b", 1)])
    assert values == {"a": [1, 2, 3], "b": 1}
