"""Shared data type definitions (FileRecord, CallContext)."""

from dataclasses import dataclass

from common.constants import ZERO_ADDRESS


@dataclass(frozen=True)
class FileRecord:
    """
    One registered claim of existence for a content identifier.
    """
    identifier: str
    name: str
    size: int
    uploader: bytes
    block_height: int
    timestamp: int
    exists: bool

    @classmethod
    def missing(cls) -> "FileRecord":
        """
        Sentinel returned for a lookup that found nothing.
        """
        return cls(
            identifier="",
            name="",
            size=0,
            uploader=ZERO_ADDRESS,
            block_height=0,
            timestamp=0,
            exists=False,
        )


@dataclass(frozen=True)
class CallContext:
    """
    Resolved caller identity and ledger position of a mutating call.
    """
    caller: bytes
    block_height: int
    timestamp: int
