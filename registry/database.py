"""Database schema and connection management for SQLite."""

import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from registry.config import DATABASE_PATH

_write_lock = threading.Lock()


def init_database() -> None:
    """
    Initialize database and create tables if they don't exist.
    """
    db_path = Path(DATABASE_PATH)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    with get_db_connection() as conn:
        cursor = conn.cursor()

        cursor.execute("""
            CREATE TABLE IF NOT EXISTS cells (
                region INTEGER NOT NULL,
                cell_key BLOB NOT NULL,
                value BLOB NOT NULL,
                PRIMARY KEY(region, cell_key)
            ) WITHOUT ROWID
        """)

        cursor.execute("""
            CREATE TABLE IF NOT EXISTS events (
                event_id INTEGER PRIMARY KEY AUTOINCREMENT,
                event_type TEXT NOT NULL,
                payload BLOB NOT NULL,
                block_height INTEGER NOT NULL,
                created_at TEXT NOT NULL
            )
        """)

        cursor.execute("""
            CREATE INDEX IF NOT EXISTS idx_events_type ON events(event_type)
        """)

        conn.commit()


@contextmanager
def get_db_connection() -> Generator[sqlite3.Connection, None, None]:
    """
    Context manager for database connections.
    """
    conn = sqlite3.connect(DATABASE_PATH, timeout=30)
    conn.row_factory = sqlite3.Row
    try:
        yield conn
    finally:
        conn.close()


@contextmanager
def write_transaction() -> Generator[sqlite3.Connection, None, None]:
    """
    Open a connection holding the process and database write locks for one
    mutation.

    Commits when the block exits normally and rolls back on any exception,
    so a failed mutation leaves nothing behind.
    """
    with _write_lock, get_db_connection() as conn:
        conn.execute("BEGIN IMMEDIATE")
        try:
            yield conn
            conn.commit()
        except BaseException:
            conn.rollback()
            raise
