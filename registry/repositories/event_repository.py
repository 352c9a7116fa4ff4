"""Event repository: append-only log of registry notifications."""

import sqlite3
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List

from common.logging_config import get_logger
from registry.database import get_db_connection

logger = get_logger(__name__)


@dataclass
class StoredEvent:
    event_id: int
    event_type: str
    payload: bytes
    block_height: int
    created_at: datetime


class EventRepository:
    @staticmethod
    def append_event(
        event_type: str,
        payload: bytes,
        block_height: int,
        conn: sqlite3.Connection
    ) -> int:
        """
        Append an event inside the caller's transaction.

        Returns:
            The new event_id
        """
        cursor = conn.cursor()
        cursor.execute(
            """
            INSERT INTO events (event_type, payload, block_height, created_at)
            VALUES (?, ?, ?, ?)
            """,
            (event_type, payload, block_height, datetime.now(timezone.utc).isoformat())
        )
        logger.debug(f"Appended event [event_id={cursor.lastrowid}] [type={event_type}]")
        return cursor.lastrowid

    @staticmethod
    def list_events(after_id: int = 0, limit: int = 50) -> List[StoredEvent]:
        with get_db_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT event_id, event_type, payload, block_height, created_at
                FROM events
                WHERE event_id > ?
                ORDER BY event_id
                LIMIT ?
                """,
                (after_id, limit)
            )
            rows = cursor.fetchall()

            return [
                StoredEvent(
                    event_id=row["event_id"],
                    event_type=row["event_type"],
                    payload=bytes(row["payload"]),
                    block_height=row["block_height"],
                    created_at=datetime.fromisoformat(row["created_at"]),
                )
                for row in rows
            ]
