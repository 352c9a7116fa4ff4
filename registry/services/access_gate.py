"""Pause gate consulted before every registry mutation."""

import sqlite3

from common.logging_config import get_logger
from registry.database import get_db_connection, write_transaction
from registry.exceptions import PausedError, UnauthorizedError
from registry.storage.layout import StoredBoolean, StoredU256
from registry.storage.safe_math import address_to_word, format_address, word_to_address

logger = get_logger(__name__)


class AccessGate:
    def __init__(self, paused: StoredBoolean, operator: StoredU256):
        self.paused = paused
        self.operator = operator

    def require_passable(self, conn: sqlite3.Connection) -> None:
        """
        Raises:
            PausedError: If the registry is paused
        """
        if self.paused.get(conn):
            raise PausedError("Registry is paused")

    def is_paused(self) -> bool:
        with get_db_connection() as conn:
            return self.paused.get(conn)

    def operator_address(self) -> bytes:
        with get_db_connection() as conn:
            return word_to_address(self.operator.get(conn))

    def record_operator(self, operator: bytes, conn: sqlite3.Connection) -> bool:
        """
        Record the operator if none is recorded yet.

        Returns:
            False if a different operator was recorded earlier
        """
        recorded = self.operator.get(conn)
        if recorded == 0:
            self.operator.set(address_to_word(operator), conn)
            return True
        return recorded == address_to_word(operator)

    def set_paused(self, caller: bytes, desired: bool) -> None:
        """
        Open or close the gate. Only the recorded operator may call this.

        Raises:
            UnauthorizedError: If ``caller`` is not the recorded operator
        """
        with write_transaction() as conn:
            operator = self.operator.get(conn)
            if operator == 0 or address_to_word(caller) != operator:
                raise UnauthorizedError(
                    f"Caller {format_address(caller)} is not the registry operator"
                )
            self.paused.set(desired, conn)

        logger.info(f"Registry {'paused' if desired else 'unpaused'} by {format_address(caller)}")
