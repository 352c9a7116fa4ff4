"""Repository layer for data access."""

from registry.repositories.cell_repository import CellRepository
from registry.repositories.event_repository import EventRepository, StoredEvent

__all__ = [
    "CellRepository",
    "EventRepository",
    "StoredEvent",
]
