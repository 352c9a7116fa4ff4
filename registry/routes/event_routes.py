"""Event log API routes."""

from fastapi import APIRouter, Query

from common.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from registry.events import FileRegisteredEvent
from registry.repositories.event_repository import EventRepository
from registry.schemas.files import EventListResponse, EventResponse
from registry.storage.safe_math import format_address

router = APIRouter(prefix="/events", tags=["Events"])


@router.get("", response_model=EventListResponse)
async def list_events(
    after_id: int = Query(0, ge=0),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
):
    """
    Page through FileRegistered events with event_id greater than ``after_id``.
    """
    stored = EventRepository.list_events(after_id=after_id, limit=limit)

    events = []
    for item in stored:
        event = FileRegisteredEvent.decode(item.payload)
        events.append(
            EventResponse(
                event_id=item.event_id,
                event_type=item.event_type,
                size=event.size,
                uploader=format_address(event.uploader),
                block_height=item.block_height,
                created_at=item.created_at.isoformat(),
            )
        )

    return EventListResponse(events=events)
