from __future__ import annotations

import logging
from typing import Any, Mapping

import pandas as pd

from src.outsink.adapters.tabular import TabularSink
from src.outsink.core.enums import SinkState
from src.outsink.services.batch import build_frame

logger = logging.getLogger("outsink")


class DeferredTabularSink:
    """DataFrame-sink без исходной таблицы: колонки создаются первым вызовом с данными.

    UNINITIALIZED -> INITIALIZED ровно один раз, на первом успешном data-call.
    """

    def __init__(self, extra: Mapping[str, Any] | None = None) -> None:
        self._extra = dict(extra or {})
        self._state = SinkState.UNINITIALIZED
        self._inner: TabularSink | None = None

    @property
    def state(self) -> SinkState:
        return self._state

    def __call__(self, *args: Any, **values: Any) -> pd.DataFrame:
        if self._inner is not None:
            return self._inner(*args, **values)

        if not args and not values:
            return pd.DataFrame()

        batch = build_frame(args, values, self._extra)
        inner = TabularSink(batch.iloc[0:0], self._extra)
        result = inner.append(batch)

        self._inner = inner
        self._state = SinkState.INITIALIZED
        logger.debug("deferred sink initialized columns=%s", list(batch.columns))
        return result
