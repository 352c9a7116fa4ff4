"""Command handler functions for CLI operations."""

from pathlib import Path
from typing import Optional

from common.logging_config import get_logger
from cli.config import Config
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
from cli.registry_client import RegistryClient

logger = get_logger(__name__)


DEFAULT_CONFIG_PATH = Path.home() / '.scribe' / 'config.json'

_client: Optional[RegistryClient] = None
_config_path: Path = DEFAULT_CONFIG_PATH


def set_config_path(path: Path) -> None:
    """Use ``path`` for the client config; drops any client already built."""
    global _client, _config_path
    _config_path = path
    if _client is not None:
        _client.close()
    _client = None


def get_client() -> RegistryClient:
    """
    Get or create global RegistryClient instance.

    Returns:
        RegistryClient instance
    """
    global _client
    if _client is None:
        logger.debug(f"Creating new RegistryClient instance [config={_config_path}]")
        _client = RegistryClient(Config(_config_path))
    return _client


def handle_register(cmd: RegisterCommand, client: Optional[RegistryClient] = None) -> str:
    """
    Handle 'register' command.

    Args:
        cmd: RegisterCommand with identifier, name and size
        client: Optional RegistryClient for dependency injection (testing)
    """
    logger.info(f"Executing register command: identifier={cmd.identifier}")
    if client is None:
        client = get_client()
    return client.register_file(cmd.identifier, cmd.name, cmd.size)


def handle_add(cmd: AddCommand, client: Optional[RegistryClient] = None) -> str:
    logger.info(f"Executing add command: identifier={cmd.identifier} path={cmd.file_path}")
    if client is None:
        client = get_client()
    return client.add_file(cmd.identifier, cmd.file_path)


def handle_verify(cmd: VerifyCommand, client: Optional[RegistryClient] = None) -> str:
    if client is None:
        client = get_client()
    return client.verify(cmd.identifier)


def handle_exists(cmd: ExistsCommand, client: Optional[RegistryClient] = None) -> str:
    if client is None:
        client = get_client()
    return client.exists(cmd.identifier)


def handle_count(cmd: CountCommand, client: Optional[RegistryClient] = None) -> str:
    if client is None:
        client = get_client()
    return client.count()


def handle_show(cmd: ShowCommand, client: Optional[RegistryClient] = None) -> str:
    if client is None:
        client = get_client()
    return client.show(cmd.index)


def handle_browse(cmd: BrowseCommand, client: Optional[RegistryClient] = None) -> str:
    """
    Handle 'browse' command.

    Args:
        cmd: BrowseCommand with offset and limit
        client: Optional RegistryClient for dependency injection (testing)
    """
    logger.info(f"Executing browse command: offset={cmd.offset} limit={cmd.limit}")
    if client is None:
        client = get_client()
    return client.browse(cmd.offset, cmd.limit)


def handle_events(cmd: EventsCommand, client: Optional[RegistryClient] = None) -> str:
    if client is None:
        client = get_client()
    return client.events(cmd.after_id)


def handle_pause(cmd: PauseCommand, client: Optional[RegistryClient] = None) -> str:
    logger.info(f"Executing {'pause' if cmd.paused else 'unpause'} command")
    if client is None:
        client = get_client()
    return client.set_paused(cmd.paused)


def handle_status(cmd: StatusCommand, client: Optional[RegistryClient] = None) -> str:
    if client is None:
        client = get_client()
    return client.status()


def handle_identity(cmd: IdentityCommand, client: Optional[RegistryClient] = None) -> str:
    if client is None:
        client = get_client()
    return client.set_identity(cmd.address)


HANDLERS = {
    RegisterCommand: handle_register,
    AddCommand: handle_add,
    VerifyCommand: handle_verify,
    ExistsCommand: handle_exists,
    CountCommand: handle_count,
    ShowCommand: handle_show,
    BrowseCommand: handle_browse,
    EventsCommand: handle_events,
    PauseCommand: handle_pause,
    StatusCommand: handle_status,
    IdentityCommand: handle_identity,
}


def dispatch_command(cmd: CommandRequest, client: Optional[RegistryClient] = None) -> str:
    """Dispatch parsed command to appropriate handler."""
    handler = HANDLERS.get(type(cmd))
    if handler is None:
        return f"Unknown command type: {type(cmd)}"
    return handler(cmd, client)
