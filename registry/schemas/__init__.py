"""Pydantic schemas for API request/response validation."""

from registry.schemas.common import ErrorResponse
from registry.schemas.files import (
    CountResponse,
    EventListResponse,
    EventResponse,
    ExistsResponse,
    FileRecordResponse,
    ListRecordsResponse,
    RegisterFileRequest,
    RegisterFileResponse,
)
from registry.schemas.admin import PauseRequest, PauseStateResponse

__all__ = [
    "ErrorResponse",
    "CountResponse",
    "EventListResponse",
    "EventResponse",
    "ExistsResponse",
    "FileRecordResponse",
    "ListRecordsResponse",
    "RegisterFileRequest",
    "RegisterFileResponse",
    "PauseRequest",
    "PauseStateResponse",
]
