"""Variable-length strings over fixed-width cells."""

import sqlite3

from common.constants import CELL_SIZE_BYTES
from registry.storage.layout import StoredMapU256
from registry.storage.safe_math import bytes_to_word, checked_add, word_to_bytes


def chunk_count(length: int) -> int:
    """Number of chunk cells needed for ``length`` bytes."""
    return (length + CELL_SIZE_BYTES - 1) // CELL_SIZE_BYTES


class ChunkedStringStore:
    """
    Stores UTF-8 strings in one region of 32-byte cells.

    The cell at ``base_key`` holds the byte length; cells ``base_key + 1``
    onward hold the bytes in 32-byte chunks, left-packed, the last one
    zero-padded. Readers never look past the recorded length.
    """

    def __init__(self, cells: StoredMapU256):
        self.cells = cells

    def store(self, base_key: int, value: str, conn: sqlite3.Connection) -> None:
        data = value.encode("utf-8")
        self.cells.set(base_key, len(data), conn)

        for index in range(chunk_count(len(data))):
            start = index * CELL_SIZE_BYTES
            chunk = data[start:start + CELL_SIZE_BYTES].ljust(CELL_SIZE_BYTES, b"\x00")
            slot = checked_add(base_key, index + 1)
            self.cells.set(slot, bytes_to_word(chunk), conn)

    def load(self, base_key: int, conn: sqlite3.Connection) -> str:
        length = self.cells.get(base_key, conn)
        if length == 0:
            return ""

        buffer = bytearray()
        for index in range(chunk_count(length)):
            slot = checked_add(base_key, index + 1)
            buffer.extend(word_to_bytes(self.cells.get(slot, conn)))

        return bytes(buffer[:length]).decode("utf-8")
