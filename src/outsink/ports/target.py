from __future__ import annotations

from typing import Any, Protocol, Sequence

from src.outsink.ports.sink import Row


class AppendTarget(Protocol):
    """Внешняя таблица, в которую можно дописывать строки (append)."""

    name: str

    def append(self, rows: Sequence[Row]) -> int:
        """Дописать строки и вернуть число записанных."""
        ...


class TextTarget(Protocol):
    def write(self, s: str, /) -> Any:
        ...
