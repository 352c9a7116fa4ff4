"""Named storage regions and typed handles over the cell substrate."""

import sqlite3
from dataclasses import dataclass
from enum import IntEnum

from registry.repositories.cell_repository import CellRepository

SCALAR_KEY = 0


class StorageRegion(IntEnum):
    """
    Every keyspace the registry writes to. Values are persisted in the cells
    table; existing members must never be renumbered.
    """
    PAUSED = 1
    TOTAL_FILES = 2
    FILE_SIZES = 3
    FILE_UPLOADERS = 4
    FILE_BLOCKS = 5
    FILE_TIMESTAMPS = 6
    FILE_EXISTS = 7
    FILE_NAME_CHUNKS = 8
    CID_CHUNKS = 9
    OPERATOR = 10
    LEDGER_HEIGHT = 11


@dataclass(frozen=True)
class StoredMapU256:
    """Word-to-word map confined to one region."""
    region: StorageRegion

    def get(self, key: int, conn: sqlite3.Connection) -> int:
        return CellRepository.read_cell(self.region, key, conn)

    def set(self, key: int, value: int, conn: sqlite3.Connection) -> None:
        CellRepository.write_cell(self.region, key, value, conn)


@dataclass(frozen=True)
class StoredU256:
    """Single word held in its own region."""
    region: StorageRegion

    def get(self, conn: sqlite3.Connection) -> int:
        return CellRepository.read_cell(self.region, SCALAR_KEY, conn)

    def set(self, value: int, conn: sqlite3.Connection) -> None:
        CellRepository.write_cell(self.region, SCALAR_KEY, value, conn)


@dataclass(frozen=True)
class StoredBoolean:
    """Single flag held in its own region, stored as 0 or 1."""
    region: StorageRegion

    def get(self, conn: sqlite3.Connection) -> bool:
        return CellRepository.read_cell(self.region, SCALAR_KEY, conn) == 1

    def set(self, value: bool, conn: sqlite3.Connection) -> None:
        CellRepository.write_cell(self.region, SCALAR_KEY, 1 if value else 0, conn)


@dataclass(frozen=True)
class RegistryLayout:
    """
    Handles for all registry state, built once when the store is initialized.
    """
    paused: StoredBoolean
    total_files: StoredU256
    operator: StoredU256
    ledger_height: StoredU256
    file_sizes: StoredMapU256
    file_uploaders: StoredMapU256
    file_blocks: StoredMapU256
    file_timestamps: StoredMapU256
    file_exists: StoredMapU256
    file_name_chunks: StoredMapU256
    cid_chunks: StoredMapU256

    @classmethod
    def build(cls) -> "RegistryLayout":
        return cls(
            paused=StoredBoolean(StorageRegion.PAUSED),
            total_files=StoredU256(StorageRegion.TOTAL_FILES),
            operator=StoredU256(StorageRegion.OPERATOR),
            ledger_height=StoredU256(StorageRegion.LEDGER_HEIGHT),
            file_sizes=StoredMapU256(StorageRegion.FILE_SIZES),
            file_uploaders=StoredMapU256(StorageRegion.FILE_UPLOADERS),
            file_blocks=StoredMapU256(StorageRegion.FILE_BLOCKS),
            file_timestamps=StoredMapU256(StorageRegion.FILE_TIMESTAMPS),
            file_exists=StoredMapU256(StorageRegion.FILE_EXISTS),
            file_name_chunks=StoredMapU256(StorageRegion.FILE_NAME_CHUNKS),
            cid_chunks=StoredMapU256(StorageRegion.CID_CHUNKS),
        )
