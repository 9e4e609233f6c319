from __future__ import annotations

from .enums import SinkState, TargetKind
from .exceptions import (
    DuplicateArgumentName,
    IncompatibleLengths,
    NonScalarExtraColumn,
    SinkError,
    UnnamedArgument,
    UnsupportedTargetKind,
    WriteFailed,
)

__all__ = [
    "SinkState",
    "TargetKind",
    "SinkError",
    "UnsupportedTargetKind",
    "UnnamedArgument",
    "DuplicateArgumentName",
    "NonScalarExtraColumn",
    "IncompatibleLengths",
    "WriteFailed",
]
