"""Pydantic schemas for file record endpoints."""

from typing import List

from pydantic import BaseModel

from common.types import FileRecord
from registry.storage.safe_math import format_address


class RegisterFileRequest(BaseModel):
    """Request model for registering a file record."""
    identifier: str
    name: str
    size: int


class RegisterFileResponse(BaseModel):
    """Response model for file registration."""
    success: bool


class FileRecordResponse(BaseModel):
    """Response model for a file record (zeroed with exists=False on a miss)."""
    identifier: str
    name: str
    size: int
    uploader: str
    block_height: int
    timestamp: int
    exists: bool

    @classmethod
    def from_record(cls, record: FileRecord) -> "FileRecordResponse":
        return cls(
            identifier=record.identifier,
            name=record.name,
            size=record.size,
            uploader=format_address(record.uploader),
            block_height=record.block_height,
            timestamp=record.timestamp,
            exists=record.exists,
        )


class ExistsResponse(BaseModel):
    exists: bool


class CountResponse(BaseModel):
    count: int


class ListRecordsResponse(BaseModel):
    """Response model for a page of records in registration order."""
    total: int
    offset: int
    files: List[FileRecordResponse]


class EventResponse(BaseModel):
    """Response model for a FileRegistered event."""
    event_id: int
    event_type: str
    size: int
    uploader: str
    block_height: int
    created_at: str


class EventListResponse(BaseModel):
    events: List[EventResponse]
