from __future__ import annotations

from .adapters.database import DatabaseSink, DbTable
from .adapters.deferred import DeferredTabularSink
from .adapters.stream import StreamSink
from .adapters.tabular import TabularSink
from .factory import classify_target, create_sink

__all__ = [
    "create_sink",
    "classify_target",
    "DbTable",
    "TabularSink",
    "DeferredTabularSink",
    "DatabaseSink",
    "StreamSink",
]
