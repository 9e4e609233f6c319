from __future__ import annotations

from enum import Enum


class TargetKind(str, Enum):
    TABULAR = "TABULAR"
    DATABASE = "DATABASE"
    STREAM = "STREAM"
    EMPTY = "EMPTY"


class SinkState(str, Enum):
    UNINITIALIZED = "UNINITIALIZED"
    INITIALIZED = "INITIALIZED"
