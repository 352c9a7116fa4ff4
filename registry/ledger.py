"""Ambient ledger position (height and time) for mutating calls."""

import sqlite3
import time
from typing import Callable

from common.types import CallContext
from registry.database import get_db_connection
from registry.storage.layout import StoredU256
from registry.storage.safe_math import checked_add


class LedgerClock:
    """
    Hands out the height and timestamp a mutation is recorded at.

    Height is one past the highest sealed height. Calls opened before either
    of them commits share a height, the way transactions share a block.
    """

    def __init__(self, height: StoredU256, time_source: Callable[[], float] = time.time):
        self.height = height
        self.time_source = time_source

    def current_height(self) -> int:
        with get_db_connection() as conn:
            return self.height.get(conn)

    def next_context(self, caller: bytes) -> CallContext:
        return CallContext(
            caller=caller,
            block_height=checked_add(self.current_height(), 1),
            timestamp=int(self.time_source()),
        )

    def seal(self, block_height: int, conn: sqlite3.Connection) -> None:
        """Record a committed mutation's height inside its transaction."""
        if block_height > self.height.get(conn):
            self.height.set(block_height, conn)
