"""File record API routes."""

from fastapi import APIRouter, Depends, Query, status

from common.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from registry.auth import get_caller_address
from registry.schemas.files import (
    CountResponse,
    ExistsResponse,
    FileRecordResponse,
    ListRecordsResponse,
    RegisterFileRequest,
    RegisterFileResponse,
)
from registry.service_locator import get_record_registry

router = APIRouter(prefix="/files", tags=["Files"])


@router.post("", response_model=RegisterFileResponse, status_code=status.HTTP_201_CREATED)
async def register_file(
    request: RegisterFileRequest,
    caller: bytes = Depends(get_caller_address)
):
    """
    Register a content identifier with its name and size.

    Parameters:
        - identifier: Content identifier returned by the pinning service
        - name: Display name
        - size: Size in bytes (> 0)
        - X-Caller-Address header: uploader identity (required)

    Raises:
        - 400: Empty identifier/name, oversized identifier or non-positive size
        - 401: Missing or malformed caller address
        - 409: Identifier already registered
        - 423: Registry paused
    """
    registry = get_record_registry()
    context = registry.clock.next_context(caller)

    success = registry.register(
        identifier=request.identifier,
        name=request.name,
        size=request.size,
        context=context,
    )

    return RegisterFileResponse(success=success)


@router.get("", response_model=ListRecordsResponse)
async def list_files(
    offset: int = Query(0, ge=0),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
):
    """
    Page through records in registration order.
    """
    total, records = get_record_registry().list_records(offset, limit)

    return ListRecordsResponse(
        total=total,
        offset=offset,
        files=[FileRecordResponse.from_record(record) for record in records],
    )


@router.get("/count", response_model=CountResponse)
async def total_count():
    return CountResponse(count=get_record_registry().total_count())


@router.get("/exists", response_model=ExistsResponse)
async def exists_only(identifier: str = Query(...)):
    return ExistsResponse(exists=get_record_registry().exists_only(identifier))


@router.get("/lookup", response_model=FileRecordResponse)
async def get_by_identifier(identifier: str = Query(...)):
    """
    Look up a record by identifier. A miss is a 200 with exists=false and zeroed fields.
    """
    record = get_record_registry().get_by_identifier(identifier)
    return FileRecordResponse.from_record(record)


@router.get("/index/{index}", response_model=FileRecordResponse)
async def get_by_ordinal(index: int):
    """
    Fetch the record registered at ordinal ``index``.

    Raises:
        - 400: Negative index
        - 404: Index not below the record count
    """
    record = get_record_registry().get_by_ordinal(index)
    return FileRecordResponse.from_record(record)
