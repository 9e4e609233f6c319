from __future__ import annotations

from typing import Any, Mapping

import numpy as np
import pandas as pd

from src.outsink.core.exceptions import IncompatibleLengths

# str/bytes are scalars; everything else that is not listed here is a scalar too
_SEQUENCE_TYPES = (list, tuple, range, np.ndarray, pd.Series, pd.Index)


def value_length(value: Any) -> int:
    if isinstance(value, np.ndarray):
        return int(value.size)
    if isinstance(value, _SEQUENCE_TYPES):
        return len(value)
    return 1


def as_list(value: Any) -> list[Any]:
    """Значение -> список python-скаляров (numpy-типы распаковываются)."""
    if isinstance(value, np.ndarray):
        return np.ravel(value).tolist()
    if isinstance(value, (pd.Series, pd.Index)):
        return value.tolist()
    if isinstance(value, (list, tuple, range)):
        return [_unbox(v) for v in value]
    return [_unbox(value)]


def _unbox(value: Any) -> Any:
    if isinstance(value, np.generic):
        return value.item()
    return value


def _fits(length: int, nrows: int) -> bool:
    if length == nrows or length == 1:
        return True
    return 0 < length <= nrows and nrows % length == 0


def recycle(values: Mapping[str, Any]) -> tuple[dict[str, list[Any]], int]:
    """Привести значения батча к общей длине.

    Общая длина = максимальная длина (или 0, если есть пустое значение).
    Каждая длина должна делить общую нацело, иначе IncompatibleLengths.
    """
    columns = {name: as_list(v) for name, v in values.items()}
    lengths = {name: len(col) for name, col in columns.items()}

    if 0 in lengths.values():
        nrows = 0
    else:
        nrows = max(lengths.values(), default=0)

    bad = {name: n for name, n in lengths.items() if not _fits(n, nrows)}
    if bad:
        # show the column that set the target length too
        longest = max(lengths, key=lambda name: lengths[name])
        raise IncompatibleLengths({longest: lengths[longest], **bad}, nrows)

    recycled = {
        name: (col * (nrows // len(col)) if col else [])
        for name, col in columns.items()
    }
    return recycled, nrows
