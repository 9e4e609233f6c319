from __future__ import annotations

import logging
from typing import Any, Mapping

import pandas as pd

from src.outsink.services.batch import build_frame
from src.outsink.services.binding import bind_rows

logger = logging.getLogger("outsink")


class TabularSink:
    """Дописывает батчи в DataFrame; sink() без аргументов отдаёт накопленную таблицу.

    Переданный DataFrame не мутируется: каждый append создаёт новый frame,
    который sink держит у себя. Наружу отдаётся только копия.
    """

    def __init__(self, frame: pd.DataFrame, extra: Mapping[str, Any] | None = None) -> None:
        self._frame = frame
        self._extra = dict(extra or {})

    @property
    def rows(self) -> int:
        return len(self._frame)

    @property
    def columns(self) -> list[str]:
        return list(self._frame.columns)

    def append(self, batch: pd.DataFrame) -> pd.DataFrame:
        self._frame = bind_rows(self._frame, batch)
        logger.debug(
            "tabular append rows=%d total_rows=%d columns=%s",
            len(batch),
            len(self._frame),
            list(self._frame.columns),
        )
        return self._frame.copy()

    def __call__(self, *args: Any, **values: Any) -> pd.DataFrame:
        if not args and not values:
            return self._frame.copy()
        return self.append(build_frame(args, values, self._extra))
