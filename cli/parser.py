"""Command parser for CLI input."""

import shlex

from cli.constants import DEFAULT_BROWSE_LIMIT
from common.constants import MAX_PAGE_SIZE
from cli.models import (
    AddCommand,
    BrowseCommand,
    CommandRequest,
    CountCommand,
    EventsCommand,
    ExistsCommand,
    IdentityCommand,
    PauseCommand,
    RegisterCommand,
    ShowCommand,
    StatusCommand,
    VerifyCommand,
)


class ParseError(Exception):
    """Raised when command parsing fails."""

    pass


def parse_command(input_line: str) -> CommandRequest:
    """Parse user input into a command object.

    Args:
        input_line: Raw user input from REPL

    Returns:
        One of the command dataclasses in cli.models

    Raises:
        ParseError: If command syntax is invalid
    """
    if not input_line.strip():
        raise ParseError("Empty command")

    try:
        tokens = shlex.split(input_line)
    except ValueError as e:
        raise ParseError(f"Invalid syntax: {e}")

    if not tokens:
        raise ParseError("Empty command")

    command_name, args = tokens[0], tokens[1:]

    if command_name == "register":
        return _parse_register(args)
    elif command_name == "add":
        return _parse_add(args)
    elif command_name == "verify":
        return VerifyCommand(identifier=_single_identifier("verify", args))
    elif command_name == "exists":
        return ExistsCommand(identifier=_single_identifier("exists", args))
    elif command_name == "count":
        _no_arguments("count", args)
        return CountCommand()
    elif command_name == "show":
        return _parse_show(args)
    elif command_name == "browse":
        return _parse_browse(args)
    elif command_name == "events":
        return _parse_events(args)
    elif command_name == "pause":
        _no_arguments("pause", args)
        return PauseCommand(paused=True)
    elif command_name == "unpause":
        _no_arguments("unpause", args)
        return PauseCommand(paused=False)
    elif command_name == "status":
        _no_arguments("status", args)
        return StatusCommand()
    elif command_name == "identity":
        return _parse_identity(args)
    else:
        raise ParseError(f"Unknown command: {command_name}")


def _parse_register(args: list[str]) -> RegisterCommand:
    """Parse 'register <identifier> <name> <size>' command."""
    if len(args) != 3:
        raise ParseError("register requires exactly 3 arguments: <identifier> <name> <size>")

    identifier, name, size_text = args
    size = _parse_int("size", size_text)
    if size <= 0:
        raise ParseError("size must be a positive integer")

    return RegisterCommand(identifier=identifier, name=name, size=size)


def _parse_add(args: list[str]) -> AddCommand:
    """Parse 'add <identifier> <file_path>' command."""
    if len(args) != 2:
        raise ParseError("add requires exactly 2 arguments: <identifier> <file_path>")

    identifier, file_path = args
    return AddCommand(identifier=identifier, file_path=file_path)


def _parse_show(args: list[str]) -> ShowCommand:
    """Parse 'show <index>' command."""
    if len(args) != 1:
        raise ParseError("show requires exactly 1 argument: <index>")

    index = _parse_int("index", args[0])
    if index < 0:
        raise ParseError("index must be zero or greater")

    return ShowCommand(index=index)


def _parse_browse(args: list[str]) -> BrowseCommand:
    """Parse 'browse [offset] [limit]' command."""
    if len(args) > 2:
        raise ParseError("browse accepts at most 2 arguments: [offset] [limit]")

    offset = _parse_int("offset", args[0]) if args else 0
    limit = _parse_int("limit", args[1]) if len(args) > 1 else DEFAULT_BROWSE_LIMIT

    if offset < 0:
        raise ParseError("offset must be zero or greater")
    if limit <= 0:
        raise ParseError("limit must be a positive integer")
    if limit > MAX_PAGE_SIZE:
        raise ParseError(f"limit must be at most {MAX_PAGE_SIZE}")

    return BrowseCommand(offset=offset, limit=limit)


def _parse_events(args: list[str]) -> EventsCommand:
    """Parse 'events [after_id]' command."""
    if len(args) > 1:
        raise ParseError("events accepts at most 1 argument: [after_id]")

    after_id = _parse_int("after_id", args[0]) if args else 0
    if after_id < 0:
        raise ParseError("after_id must be zero or greater")

    return EventsCommand(after_id=after_id)


def _parse_identity(args: list[str]) -> IdentityCommand:
    """Parse 'identity [address]' command."""
    if len(args) > 1:
        raise ParseError("identity accepts at most 1 argument: [address]")

    return IdentityCommand(address=args[0] if args else None)


def _single_identifier(command_name: str, args: list[str]) -> str:
    if len(args) != 1:
        raise ParseError(f"{command_name} requires exactly 1 argument: <identifier>")
    return args[0]


def _no_arguments(command_name: str, args: list[str]) -> None:
    if args:
        raise ParseError(f"{command_name} takes no arguments")


def _parse_int(field: str, text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ParseError(f"{field} must be an integer, got '{text}'")
