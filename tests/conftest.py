import sqlite3
from pathlib import Path

import pytest

from sqlscript.core.configuration import ParserConfiguration

RESOURCES_DIR = Path(__file__).parent / "resources"

INIT_STATEMENTS = [
    "DROP TABLE IF EXISTS foo;",
    "DROP TABLE IF EXISTS bar;",
    "CREATE TABLE foo (id INT, name varchar(100));",
    "CREATE TABLE bar (id INT, title varchar(100));",
]


@pytest.fixture
def configuration() -> ParserConfiguration:
    """Default parser configuration"""
    return ParserConfiguration.default()


@pytest.fixture
def init_sql() -> Path:
    """Bundled init.sql script"""
    return RESOURCES_DIR / "sql" / "init.sql"


@pytest.fixture
def classpath(monkeypatch) -> Path:
    """Put the test resources directory on sys.path"""
    monkeypatch.syspath_prepend(str(RESOURCES_DIR))
    return RESOURCES_DIR


@pytest.fixture
def write_sql(tmp_path):
    """Write SQL content to a file in a temporary directory"""

    def _write(content: str, name: str = "script.sql") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sqlite_connection():
    """In-memory SQLite connection"""
    connection = sqlite3.connect(":memory:")
    yield connection
    connection.close()
