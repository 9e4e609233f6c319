from __future__ import annotations

from collections import Counter
from typing import Any, Iterable, Mapping, Optional

import pandas as pd

from src.outsink.core.exceptions import (
    DuplicateArgumentName,
    NonScalarExtraColumn,
    UnnamedArgument,
)
from src.outsink.services.recycle import as_list, value_length

Item = tuple[Optional[str], Any]


def split_arguments(args: Iterable[Any], kwargs: Mapping[str, Any]) -> list[Item]:
    """Аргументы вызова -> пары (name, value).

    Позиционный аргумент безымянный, если это не pd.Series с непустым name.
    """
    items: list[Item] = []
    for value in args:
        name = None
        if isinstance(value, pd.Series) and isinstance(value.name, str):
            name = value.name
        items.append((name, value))
    items.extend(kwargs.items())
    return items


def validate_named(items: Iterable[Item], *, scalar: bool = False) -> dict[str, Any]:
    items = list(items)

    for pos, (name, _) in enumerate(items):
        if not name:
            raise UnnamedArgument(pos)

    counts = Counter(name for name, _ in items)
    dups = [name for name, n in counts.items() if n > 1]
    if dups:
        raise DuplicateArgumentName(dups)

    values = dict(items)
    if not scalar:
        return values

    lengths = {name: value_length(v) for name, v in values.items()}
    bad = {name: n for name, n in lengths.items() if n != 1}
    if bad:
        raise NonScalarExtraColumn(bad)

    return {name: as_list(v)[0] for name, v in values.items()}


def extracols(*args: Any, **kwargs: Any) -> dict[str, Any]:
    """Проверить extra-колонки: все именованы, имена уникальны, длина ровно 1."""
    return validate_named(split_arguments(args, kwargs), scalar=True)
