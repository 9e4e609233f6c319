from .binding import bind_rows
from .extracols import extracols, validate_named
from .recycle import recycle

__all__ = [
    "bind_rows",
    "extracols",
    "validate_named",
    "recycle",
]
