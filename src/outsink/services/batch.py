from __future__ import annotations

from typing import Any, Mapping, Sequence

import pandas as pd

from src.outsink.ports.sink import Row
from src.outsink.services.extracols import split_arguments, validate_named
from src.outsink.services.recycle import recycle


def build_columns(
    args: Sequence[Any],
    values: Mapping[str, Any],
    extra: Mapping[str, Any],
) -> tuple[dict[str, list[Any]], int]:
    # extra columns go after the call's own columns
    items = split_arguments(args, values) + list(extra.items())
    return recycle(validate_named(items))


def build_frame(
    args: Sequence[Any],
    values: Mapping[str, Any],
    extra: Mapping[str, Any],
) -> pd.DataFrame:
    columns, _ = build_columns(args, values, extra)
    return pd.DataFrame(columns)


def build_rows(
    args: Sequence[Any],
    values: Mapping[str, Any],
    extra: Mapping[str, Any],
) -> list[Row]:
    columns, nrows = build_columns(args, values, extra)
    names = list(columns)
    return [
        {name: columns[name][i] for name in names}
        for i in range(nrows)
    ]
