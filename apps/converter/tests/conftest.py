import logging
import sqlite3
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlite_utils import Database

# Add the src directories to the path for imports
repo_root = Path(__file__).parent.parent.parent.parent
sys.path.insert(0, str(repo_root / "lib" / "core" / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from radix_core.config import ConverterSettings  # noqa: E402
from radix_core.history import HistoryStore  # noqa: E402
from radix_core.session import ConversionSession  # noqa: E402

from converter.main import app  # noqa: E402
from converter.routes.api import get_session  # noqa: E402


@pytest.fixture
def test_logger() -> logging.Logger:
    return logging.getLogger("converter_api_tests")


@pytest.fixture
def history_db(tmp_path) -> Database:
    return Database(sqlite3.connect(tmp_path / "history.db", check_same_thread=False))


@pytest.fixture
def session(history_db, test_logger) -> ConversionSession:
    store = HistoryStore(history_db, test_logger)
    return ConversionSession(store, test_logger, settings=ConverterSettings())


@pytest.fixture
def client(session) -> TestClient:
    """TestClient bound to a session backed by a temporary database."""
    app.dependency_overrides[get_session] = lambda: session
    yield TestClient(app)
    app.dependency_overrides.clear()
