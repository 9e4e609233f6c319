from __future__ import annotations

import logging
import sys
from typing import Any

from sqlalchemy import Column, Integer, MetaData, Table, create_engine

from src.config.settings import get_settings
from src.outsink.adapters.database import DbTable
from src.outsink.factory import create_sink

logger = logging.getLogger("outsink")


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] [outsink] %(message)s",
    )


def run_simulation(niter: int = 10, output: Any = None, **extra: Any) -> Any:
    """Mock итеративной симуляции: niter вызовов sink'а, затем sink().

    output: target для create_sink (None -> DataFrame "на лету") или уже готовый sink.
    """
    if callable(output):
        if extra:
            raise TypeError("extra columns can't be added to an existing sink")
        sink = output
    else:
        sink = create_sink(output, **extra)

    for i in range(1, niter + 1):
        sink(
            iter=i,
            a=range(i, i + 6),
            b=range(i + 1, i + 7),
        )
    return sink()


def _demo_table(name: str) -> Table:
    return Table(
        name,
        MetaData(),
        Column("iter", Integer),
        Column("a", Integer),
        Column("b", Integer),
        Column("run", Integer),
    )


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    niter = settings.demo_niter

    logger.info("Simulation starting niter=%d", niter)

    frame = run_simulation(niter, run=1)
    frame = run_simulation(niter, frame, run=2)
    logger.info(
        "in-memory result rows=%d columns=%s", len(frame), list(frame.columns)
    )

    engine = create_engine(settings.demo_db_url)
    try:
        _demo_table(settings.demo_table).create(engine, checkfirst=True)
        handle = run_simulation(niter, DbTable(engine, settings.demo_table), run=3)
        stored = handle.collect()
        logger.info("database result table=%s rows=%d", handle.name, len(stored))
    finally:
        engine.dispose()

    run_simulation(min(niter, 3), sys.stdout)
    logger.info("Simulation finished")


if __name__ == "__main__":
    main()
