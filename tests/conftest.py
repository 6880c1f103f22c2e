import os
import sqlite3

import pytest

from insertunit.compiler.quoting import quote_identifier

# Override with an absolute path or ":memory:" via the environment
SQLITE_DB_PATH = os.getenv("SQLITE_DB_PATH", os.path.join("static", "test-sqlite", "db.sqlite"))

@pytest.fixture(scope="session")
def sqlite_connection():
    """
    Yields a sqlite3 connection to the test database file.
    The database file is created if missing and reset at the start of the session.
    """
    if SQLITE_DB_PATH != ":memory:":
        db_dir = os.path.dirname(SQLITE_DB_PATH)
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)

        if os.path.exists(SQLITE_DB_PATH):
            os.remove(SQLITE_DB_PATH)

    conn = sqlite3.connect(SQLITE_DB_PATH)
    try:
        yield conn
    finally:
        conn.close()

@pytest.fixture(scope="function")
def sqlite_create_table(sqlite_connection):
    """
    A fixture that runs a CREATE TABLE statement and drops the table after the test.
    """
    created_tables = []

    def _create(table_name, column_sql):
        sqlite_connection.execute(f"CREATE TABLE {quote_identifier(table_name)} ({column_sql})")
        created_tables.append(table_name)
        return table_name

    yield _create

    for table_name in reversed(created_tables):
        sqlite_connection.execute(f"DROP TABLE IF EXISTS {quote_identifier(table_name)}")
    sqlite_connection.commit()
