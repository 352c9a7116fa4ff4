"""Command request data types for CLI."""

from dataclasses import dataclass
from typing import Literal, Optional, Union


@dataclass(frozen=True)
class RegisterCommand:
    """Register an identifier with an explicit name and size."""

    identifier: str
    name: str
    size: int
    command: Literal["register"] = "register"


@dataclass(frozen=True)
class AddCommand:
    """Register an identifier using a local file's name and size."""

    identifier: str
    file_path: str
    command: Literal["add"] = "add"


@dataclass(frozen=True)
class VerifyCommand:
    """Show the record registered for an identifier."""

    identifier: str
    command: Literal["verify"] = "verify"


@dataclass(frozen=True)
class ExistsCommand:
    """Check whether an identifier is registered."""

    identifier: str
    command: Literal["exists"] = "exists"


@dataclass(frozen=True)
class CountCommand:
    """Show the total number of records."""

    command: Literal["count"] = "count"


@dataclass(frozen=True)
class ShowCommand:
    """Show the record at a registration index."""

    index: int
    command: Literal["show"] = "show"


@dataclass(frozen=True)
class BrowseCommand:
    """List records in registration order."""

    offset: int
    limit: int
    command: Literal["browse"] = "browse"


@dataclass(frozen=True)
class EventsCommand:
    """List FileRegistered events after an event id."""

    after_id: int
    command: Literal["events"] = "events"


@dataclass(frozen=True)
class PauseCommand:
    """Close or reopen registrations."""

    paused: bool
    command: Literal["pause"] = "pause"


@dataclass(frozen=True)
class StatusCommand:
    """Show the pause gate state."""

    command: Literal["status"] = "status"


@dataclass(frozen=True)
class IdentityCommand:
    """Show or set the caller address sent with mutating requests."""

    address: Optional[str] = None
    command: Literal["identity"] = "identity"


CommandRequest = Union[
    RegisterCommand,
    AddCommand,
    VerifyCommand,
    ExistsCommand,
    CountCommand,
    ShowCommand,
    BrowseCommand,
    EventsCommand,
    PauseCommand,
    StatusCommand,
    IdentityCommand,
]
