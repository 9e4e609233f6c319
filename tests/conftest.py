import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.pool import StaticPool

from src.config.settings import get_settings


@pytest.fixture
def engine():
    """In-memory SQLite с пустой таблицей output(a, b)."""
    eng = create_engine("sqlite://", poolclass=StaticPool)
    with eng.begin() as conn:
        conn.execute(text("CREATE TABLE output (a REAL, b REAL)"))
    yield eng
    eng.dispose()


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
