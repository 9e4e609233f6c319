from __future__ import annotations

import pandas as pd


def union_columns(left: pd.DataFrame, right: pd.DataFrame) -> list[str]:
    seen = list(left.columns)
    return seen + [c for c in right.columns if c not in seen]


def bind_rows(acc: pd.DataFrame, batch: pd.DataFrame) -> pd.DataFrame:
    """Дописать batch к acc по объединению колонок.

    Колонки, которых нет у одной из сторон, заполняются NA для её строк.
    Порядок колонок: сначала acc, затем новые колонки batch.
    """
    columns = union_columns(acc, batch)

    if len(batch) == 0:
        return acc.reindex(columns=columns)

    if len(acc) == 0:
        return batch.reindex(columns=columns).reset_index(drop=True)

    left = acc.reindex(columns=columns)
    right = batch.reindex(columns=columns)
    return pd.concat([left, right], ignore_index=True)
