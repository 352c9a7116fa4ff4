"""Cell repository: fixed-width (region, key) -> 32-byte value storage."""

import sqlite3

from registry.storage.safe_math import bytes_to_word, word_to_bytes


class CellRepository:
    @staticmethod
    def read_cell(region: int, key: int, conn: sqlite3.Connection) -> int:
        """
        Read one cell as a word. Cells never written read as zero.
        """
        cursor = conn.cursor()
        cursor.execute(
            "SELECT value FROM cells WHERE region = ? AND cell_key = ?",
            (region, word_to_bytes(key))
        )
        row = cursor.fetchone()

        if row is None:
            return 0

        return bytes_to_word(row["value"])

    @staticmethod
    def write_cell(region: int, key: int, value: int, conn: sqlite3.Connection) -> None:
        cursor = conn.cursor()
        cursor.execute(
            """
            INSERT INTO cells (region, cell_key, value)
            VALUES (?, ?, ?)
            ON CONFLICT(region, cell_key) DO UPDATE SET value = excluded.value
            """,
            (region, word_to_bytes(key), word_to_bytes(value))
        )
