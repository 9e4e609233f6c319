import numpy as np
import pandas as pd
import pytest

from src.outsink.core.exceptions import IncompatibleLengths
from src.outsink.services.recycle import as_list, recycle, value_length


def test_scalar_recycled_to_longest():
    cols, nrows = recycle({"a": 1, "b": [1, 2, 3, 4, 5]})
    assert nrows == 5
    assert cols["a"] == [1, 1, 1, 1, 1]
    assert cols["b"] == [1, 2, 3, 4, 5]


def test_multiple_recycles_whole_sequence():
    cols, nrows = recycle({"a": [1, 2], "b": range(4)})
    assert nrows == 4
    assert cols["a"] == [1, 2, 1, 2]


def test_non_multiple_fails_naming_columns():
    with pytest.raises(IncompatibleLengths) as e:
        recycle({"x": [1, 2], "y": [1, 2, 3, 4, 5]})

    assert e.value.nrows == 5
    assert e.value.lengths == {"y": 5, "x": 2}
    assert "x=2" in str(e.value)


def test_zero_length_with_scalars_gives_zero_rows():
    cols, nrows = recycle({"a": [], "b": 1})
    assert nrows == 0
    assert cols == {"a": [], "b": []}


def test_zero_length_with_longer_value_fails():
    with pytest.raises(IncompatibleLengths):
        recycle({"a": [], "b": [1, 2]})


def test_numpy_and_pandas_values_become_python_lists():
    assert as_list(np.array([1, 2])) == [1, 2]
    assert type(as_list(np.int64(3))[0]) is int
    assert as_list(pd.Series([1.5, 2.5])) == [1.5, 2.5]
    assert as_list("abc") == ["abc"]


def test_value_length():
    assert value_length(3) == 1
    assert value_length("abc") == 1
    assert value_length((1, 2)) == 2
    assert value_length(np.zeros((2, 3))) == 6
