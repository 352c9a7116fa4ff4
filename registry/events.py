"""Notifications emitted by registry mutations."""

from dataclasses import dataclass

from common.constants import ADDRESS_SIZE_BYTES, CELL_SIZE_BYTES
from registry.storage.safe_math import bytes_to_word, word_to_bytes

FILE_REGISTERED = "FileRegistered"


@dataclass(frozen=True)
class FileRegisteredEvent:
    """
    Emitted once per successful registration.
    """
    size: int
    uploader: bytes
    event_type: str = FILE_REGISTERED

    def encode(self) -> bytes:
        """32-byte big-endian size followed by the 32-byte uploader."""
        return word_to_bytes(self.size) + self.uploader

    @classmethod
    def decode(cls, payload: bytes) -> "FileRegisteredEvent":
        if len(payload) != CELL_SIZE_BYTES + ADDRESS_SIZE_BYTES:
            raise ValueError(f"Malformed {FILE_REGISTERED} payload: {len(payload)} bytes")
        return cls(
            size=bytes_to_word(payload[:CELL_SIZE_BYTES]),
            uploader=bytes(payload[CELL_SIZE_BYTES:]),
        )
