from __future__ import annotations

from sqlalchemy.exc import DBAPIError, InterfaceError, OperationalError

_DISCONNECT_MARKERS = (
    "connection is closed",
    "connection was closed",
    "connection does not exist",
    "connection refused",
    "connect call failed",
    "no address associated with hostname",
    "the database system is starting up",
    "closed in the middle of operation",
    "server closed the connection",
    "unable to open database file",
)


def is_db_disconnect(exc: BaseException) -> bool:
    """Ошибка связана с потерей соединения (а не со схемой/данными)?

    Sink сам не ретраит; флаг нужен вызывающему коду для своей политики повторов.
    """
    if (isinstance(exc, DBAPIError) and
            getattr(exc, "connection_invalidated", False)):
        return True

    if isinstance(exc, (OperationalError, InterfaceError, OSError)):
        msg = str(exc).lower()
        return any(marker in msg for marker in _DISCONNECT_MARKERS)

    return False
