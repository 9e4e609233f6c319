from __future__ import annotations

from typing import Iterable


class SinkError(Exception):
    """Базовая ошибка output sink'ов."""


class UnsupportedTargetKind(SinkError, TypeError):
    """Для объекта такого типа sink не создаётся."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"don't know how to handle target of type {kind!r}")


class UnnamedArgument(SinkError, ValueError):
    """Все аргументы sink'а должны быть именованными."""

    def __init__(self, position: int | None = None) -> None:
        self.position = position
        where = f" (position {position})" if position is not None else ""
        super().__init__(f"all arguments must be named{where}")


class DuplicateArgumentName(SinkError, ValueError):
    def __init__(self, names: Iterable[str]) -> None:
        self.names = tuple(names)
        super().__init__(f"duplicated argument names: {', '.join(self.names)}")


class NonScalarExtraColumn(SinkError, ValueError):
    """Extra-колонка должна быть скаляром (длина ровно 1)."""

    def __init__(self, lengths: dict[str, int]) -> None:
        self.lengths = dict(lengths)
        listed = ", ".join(f"{name}={n}" for name, n in self.lengths.items())
        super().__init__(f"extra columns must have length 1, got: {listed}")


class IncompatibleLengths(SinkError, ValueError):
    """Длины значений батча нельзя привести к общей длине (recycling)."""

    def __init__(self, lengths: dict[str, int], nrows: int) -> None:
        self.lengths = dict(lengths)
        self.nrows = nrows
        listed = ", ".join(f"{name}={n}" for name, n in self.lengths.items())
        super().__init__(f"can't recycle to common length {nrows}: {listed}")


class WriteFailed(SinkError):
    """Запись в target (БД или stream) не удалась. Повторов нет."""

    def __init__(self, message: str, *, disconnect: bool = False) -> None:
        self.disconnect = disconnect
        super().__init__(message)
