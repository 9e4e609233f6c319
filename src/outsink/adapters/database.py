from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Union

import pandas as pd
from sqlalchemy import column, insert, literal_column, select, table
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from src.outsink.core.exceptions import WriteFailed
from src.outsink.ports.sink import Row
from src.outsink.ports.target import AppendTarget
from src.outsink.services.batch import build_rows
from src.outsink.services.db_errors import is_db_disconnect

logger = logging.getLogger("outsink")


@dataclass(frozen=True, slots=True)
class DbTable:
    """Ссылка на живую таблицу в БД: bind (Engine или Connection) + имя таблицы.

    С Engine каждый append идёт в своей транзакции (engine.begin()).
    С Connection транзакцией владеет вызывающий код (commit/rollback на нём).
    Пустой батч (0 строк) в БД не отправляется: append вернёт 0, даже если
    колонок батча нет в таблице.
    """

    bind: Union[Engine, Connection]
    name: str
    schema: Optional[str] = None

    def _clause(self, names: Sequence[str] = ()):
        return table(self.name, *(column(n) for n in names), schema=self.schema)

    def append(self, rows: Sequence[Row]) -> int:
        if not rows:
            return 0

        stmt = insert(self._clause(list(rows[0])))
        payload = [dict(r) for r in rows]

        if isinstance(self.bind, Engine):
            with self.bind.begin() as conn:
                conn.execute(stmt, payload)
        else:
            self.bind.execute(stmt, payload)
        return len(payload)

    def collect(self) -> pd.DataFrame:
        """Прочитать текущее содержимое таблицы (sink сам никогда не читает)."""
        stmt = select(literal_column("*")).select_from(self._clause())

        if isinstance(self.bind, Engine):
            with self.bind.connect() as conn:
                return pd.read_sql(stmt, conn)
        return pd.read_sql(stmt, self.bind)


class DatabaseSink:
    """Каждый data-call = один INSERT батча в таблицу. Локального буфера нет."""

    def __init__(self, target: AppendTarget, extra: Mapping[str, Any] | None = None) -> None:
        self._target = target
        self._extra = dict(extra or {})

    def __call__(self, *args: Any, **values: Any) -> Any:
        if not args and not values:
            return self._target

        rows = build_rows(args, values, self._extra)

        try:
            written = self._target.append(rows)
        except SQLAlchemyError as exc:
            disconnect = is_db_disconnect(exc)
            logger.warning(
                "append to table=%s failed rows=%d disconnect=%s err=%r",
                self._target.name, len(rows), disconnect, exc,
            )
            raise WriteFailed(
                f"append to table {self._target.name!r} failed: {exc}",
                disconnect=disconnect,
            ) from exc

        logger.debug("database append table=%s written=%d", self._target.name, written)
        return written
