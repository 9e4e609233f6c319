from __future__ import annotations

import logging
import math
from typing import Any, Iterable, Mapping

from src.outsink.core.exceptions import WriteFailed
from src.outsink.ports.target import TextTarget
from src.outsink.services.recycle import as_list

logger = logging.getLogger("outsink")


def format_line(values: Iterable[Any], *, na_rep: str = "NA", float_digits: int = 7) -> str:
    """Значения -> строка "v1 v2 ... \\n" (каждое значение + пробел, затем перевод строки)."""
    tokens = []
    for value in values:
        for item in as_list(value):
            tokens.append(_render(item, na_rep=na_rep, float_digits=float_digits))
    return "".join(f"{t} " for t in tokens) + "\n"


def _render(item: Any, *, na_rep: str, float_digits: int) -> str:
    if item is None:
        return na_rep
    if isinstance(item, float):
        if math.isnan(item):
            return na_rep
        return format(item, f".{float_digits}g")
    return str(item)


class StreamSink:
    """Пишет значения аргументов строкой текста в stream. Имена аргументов игнорируются.

    Extra-колонки (create_sink(stream, run=1)) дописываются в конец каждой строки.
    """

    def __init__(
        self,
        stream: TextTarget,
        extra: Mapping[str, Any] | None = None,
        *,
        na_rep: str = "NA",
        float_digits: int = 7,
    ) -> None:
        self._stream = stream
        self._extra = dict(extra or {})
        self._na_rep = na_rep
        self._float_digits = float_digits

    def __call__(self, *args: Any, **values: Any) -> None:
        if not args and not values:
            return None

        line = format_line(
            [*args, *values.values(), *self._extra.values()],
            na_rep=self._na_rep,
            float_digits=self._float_digits,
        )

        try:
            self._stream.write(line)
        except (OSError, ValueError) as exc:
            logger.warning("stream write failed err=%r", exc)
            raise WriteFailed(f"stream write failed: {exc}") from exc
        return None
