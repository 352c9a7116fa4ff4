"""Operator API routes (pause gate)."""

from fastapi import APIRouter, Depends

from registry.auth import get_caller_address
from registry.schemas.admin import PauseRequest, PauseStateResponse
from registry.service_locator import get_record_registry

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post("/pause", response_model=PauseStateResponse)
async def set_paused(
    request: PauseRequest,
    caller: bytes = Depends(get_caller_address)
):
    """
    Open or close the registration gate.

    Raises:
        - 401: Missing or malformed caller address
        - 403: Caller is not the recorded operator
    """
    gate = get_record_registry().gate
    gate.set_paused(caller, request.paused)
    return PauseStateResponse(paused=gate.is_paused())


@router.get("/paused", response_model=PauseStateResponse)
async def is_paused():
    return PauseStateResponse(paused=get_record_registry().gate.is_paused())
