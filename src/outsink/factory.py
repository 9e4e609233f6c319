from __future__ import annotations

import io
import logging
from typing import Any, Callable, Mapping

import pandas as pd

from src.config.settings import get_settings
from src.outsink.adapters.database import DatabaseSink, DbTable
from src.outsink.adapters.deferred import DeferredTabularSink
from src.outsink.adapters.stream import StreamSink
from src.outsink.adapters.tabular import TabularSink
from src.outsink.core.enums import TargetKind
from src.outsink.core.exceptions import UnsupportedTargetKind
from src.outsink.ports.sink import Sink
from src.outsink.services.extracols import extracols

logger = logging.getLogger("outsink")


def classify_target(target: Any) -> TargetKind:
    if target is None:
        return TargetKind.EMPTY
    if isinstance(target, pd.DataFrame):
        return TargetKind.TABULAR
    if isinstance(target, DbTable):
        return TargetKind.DATABASE
    if isinstance(target, io.TextIOBase):
        return TargetKind.STREAM
    raise UnsupportedTargetKind(type(target).__name__)


def _stream_sink(target: Any, extra: Mapping[str, Any]) -> StreamSink:
    settings = get_settings()
    return StreamSink(
        target,
        extra,
        na_rep=settings.stream_na_rep,
        float_digits=settings.stream_float_digits,
    )


_BUILDERS: dict[TargetKind, Callable[[Any, Mapping[str, Any]], Sink]] = {
    TargetKind.TABULAR: lambda target, extra: TabularSink(target, extra),
    TargetKind.DATABASE: lambda target, extra: DatabaseSink(target, extra),
    TargetKind.STREAM: _stream_sink,
    TargetKind.EMPTY: lambda _target, extra: DeferredTabularSink(extra),
}


def create_sink(target: Any = None, /, *args: Any, **extra_columns: Any) -> Sink:
    """Создать output sink для target.

    DataFrame -> append строк в таблицу, DbTable -> INSERT в таблицу БД,
    текстовый stream -> строка текста на вызов, None -> DataFrame "на лету".
    Именованные extra_columns (скаляры) добавляются к каждому батчу.
    Stream принимается только текстовый из иерархии io (io.TextIOBase);
    прочие writer-объекты (например codecs.StreamWriter) -> UnsupportedTargetKind.
    """
    extra = extracols(*args, **extra_columns)
    kind = classify_target(target)
    sink = _BUILDERS[kind](target, extra)
    logger.debug("sink created kind=%s extra=%s", kind.value, sorted(extra))
    return sink
