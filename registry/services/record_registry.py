"""Append-only registry of file records keyed by content identifier."""

import sqlite3
from typing import Callable, List, Tuple

from common.constants import ADDRESS_SIZE_BYTES, MAX_IDENTIFIER_BYTES, ORDINAL_STRIDE, U256_MAX
from common.logging_config import get_logger
from common.types import CallContext, FileRecord
from registry.database import get_db_connection, write_transaction
from registry.events import FileRegisteredEvent
from registry.exceptions import (
    AlreadyRegisteredError,
    InvalidInputError,
    OutOfRangeError,
)
from registry.ledger import LedgerClock
from registry.repositories.event_repository import EventRepository
from registry.services.access_gate import AccessGate
from registry.storage.key_deriver import derive_key_for
from registry.storage.layout import RegistryLayout
from registry.storage.safe_math import (
    address_to_word,
    checked_add,
    checked_mul,
    word_to_address,
)
from registry.storage.string_store import ChunkedStringStore

logger = get_logger(__name__)

EventListener = Callable[[FileRegisteredEvent], None]


class RecordRegistry:
    """
    Records are written once and never changed. Ordinal ``i`` names the
    i-th successful registration for the lifetime of the store.
    """

    def __init__(self, layout: RegistryLayout, gate: AccessGate, clock: LedgerClock):
        self.layout = layout
        self.gate = gate
        self.clock = clock
        self.names = ChunkedStringStore(layout.file_name_chunks)
        self.identifiers = ChunkedStringStore(layout.cid_chunks)
        self._listeners: List[EventListener] = []

    def subscribe(self, listener: EventListener) -> None:
        self._listeners.append(listener)

    def register(self, identifier: str, name: str, size: int, context: CallContext) -> bool:
        """
        Record that ``identifier`` named ``name`` with ``size`` bytes existed at
        the context's height and time, uploaded by the context's caller.

        Raises:
            PausedError: If the gate is closed
            InvalidInputError: For an empty or oversized identifier, an empty name or a bad size
            AlreadyRegisteredError: If the identifier already has a record
        """
        with write_transaction() as conn:
            self.gate.require_passable(conn)
            self._validate(identifier, name, size, context)

            key = derive_key_for(identifier)
            if self.layout.file_exists.get(key, conn) == 1:
                raise AlreadyRegisteredError(f"Identifier already registered: {identifier}")

            self.layout.file_sizes.set(key, size, conn)
            self.layout.file_uploaders.set(key, address_to_word(context.caller), conn)
            self.layout.file_blocks.set(key, context.block_height, conn)
            self.layout.file_timestamps.set(key, context.timestamp, conn)
            self.layout.file_exists.set(key, 1, conn)

            self.names.store(key, name, conn)

            ordinal = self.layout.total_files.get(conn)
            self.identifiers.store(checked_mul(ordinal, ORDINAL_STRIDE), identifier, conn)
            self.layout.total_files.set(checked_add(ordinal, 1), conn)

            self.clock.seal(context.block_height, conn)

            event = FileRegisteredEvent(size=size, uploader=context.caller)
            EventRepository.append_event(event.event_type, event.encode(), context.block_height, conn)

        logger.info(
            f"Registered file [ordinal={ordinal}] [identifier={identifier}] "
            f"[size={size}] [block={context.block_height}]"
        )
        self._emit(event)
        return True

    def get_by_identifier(self, identifier: str) -> FileRecord:
        """
        Look up a record. A miss returns ``FileRecord.missing()``, never an error.
        """
        with get_db_connection() as conn:
            return self._read_record(identifier, conn)

    def exists_only(self, identifier: str) -> bool:
        with get_db_connection() as conn:
            return self.layout.file_exists.get(derive_key_for(identifier), conn) == 1

    def total_count(self) -> int:
        with get_db_connection() as conn:
            return self.layout.total_files.get(conn)

    def get_by_ordinal(self, index: int) -> FileRecord:
        """
        Raises:
            InvalidInputError: If ``index`` is negative
            OutOfRangeError: If ``index`` is not below the record count
        """
        with get_db_connection() as conn:
            total = self.layout.total_files.get(conn)
            return self._read_ordinal(index, total, conn)

    def list_records(self, offset: int, limit: int) -> Tuple[int, List[FileRecord]]:
        """
        Read a page of records in registration order.

        Returns:
            Tuple of (total count, records at ordinals offset .. offset + limit - 1)
        """
        if offset < 0 or limit < 0:
            raise InvalidInputError("offset and limit must be non-negative")

        with get_db_connection() as conn:
            total = self.layout.total_files.get(conn)
            end = min(offset + limit, total)
            records = [self._read_ordinal(index, total, conn) for index in range(offset, end)]
            return total, records

    def _validate(self, identifier: str, name: str, size: int, context: CallContext) -> None:
        if len(context.caller) != ADDRESS_SIZE_BYTES:
            raise InvalidInputError(f"Caller address must be {ADDRESS_SIZE_BYTES} bytes")
        if not identifier:
            raise InvalidInputError("Identifier cannot be empty")
        if len(identifier.encode("utf-8")) > MAX_IDENTIFIER_BYTES:
            raise InvalidInputError(
                f"Identifier exceeds {MAX_IDENTIFIER_BYTES} bytes"
            )
        if not name:
            raise InvalidInputError("File name cannot be empty")
        if isinstance(size, bool) or not isinstance(size, int):
            raise InvalidInputError("File size must be an integer")
        if size <= 0:
            raise InvalidInputError("File size cannot be zero")
        if size > U256_MAX:
            raise InvalidInputError("File size exceeds 256 bits")

    def _read_ordinal(self, index: int, total: int, conn: sqlite3.Connection) -> FileRecord:
        if index < 0:
            raise InvalidInputError(f"Ordinal cannot be negative: {index}")
        if index >= total:
            raise OutOfRangeError(f"Ordinal {index} out of range (count={total})")

        identifier = self.identifiers.load(checked_mul(index, ORDINAL_STRIDE), conn)
        return self._read_record(identifier, conn)

    def _read_record(self, identifier: str, conn: sqlite3.Connection) -> FileRecord:
        key = derive_key_for(identifier)
        if self.layout.file_exists.get(key, conn) != 1:
            return FileRecord.missing()

        return FileRecord(
            identifier=identifier,
            name=self.names.load(key, conn),
            size=self.layout.file_sizes.get(key, conn),
            uploader=word_to_address(self.layout.file_uploaders.get(key, conn)),
            block_height=self.layout.file_blocks.get(key, conn),
            timestamp=self.layout.file_timestamps.get(key, conn),
            exists=True,
        )

    def _emit(self, event: FileRegisteredEvent) -> None:
        for listener in self._listeners:
            try:
                listener(event)
            except Exception as e:
                logger.error(f"Event listener failed for {event.event_type}: {e}", exc_info=True)
