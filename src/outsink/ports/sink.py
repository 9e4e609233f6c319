from __future__ import annotations

from typing import Any, Mapping, Protocol


Row = Mapping[str, Any]


class Sink(Protocol):
    """Sink принимает именованные значения батчами; sink() без аргументов отдаёт результат."""

    def __call__(self, *args: Any, **values: Any) -> Any:
        ...
