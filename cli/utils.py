"""Utility functions for CLI operations."""

import re
from datetime import datetime, timezone

ADDRESS_PATTERN = re.compile(r'^(0[xX])?[0-9a-fA-F]{64}$')


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in bytes to human-readable format with appropriate unit.

    Uses binary units (1024-based) and automatically selects the most
    appropriate unit (B, KiB, MiB, GiB, TiB).

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string with size and unit (e.g., "1.50 MiB", "512 B")
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"

    units = ['KiB', 'MiB', 'GiB', 'TiB']
    size = size_bytes / 1024.0

    for unit in units:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0

    return f"{size:.2f} PiB"


def format_timestamp(timestamp: int) -> str:
    """
    Render Unix seconds as an ISO-8601 UTC string.

    Out-of-range values fall back to the raw number.
    """
    try:
        return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime('%Y-%m-%dT%H:%M:%SZ')
    except (OverflowError, OSError, ValueError):
        return str(timestamp)


def normalize_address(address: str) -> str:
    """
    Validate a caller address and return it 0x-prefixed and lowercase.

    Raises:
        ValueError: If the address is not 64 hex digits
    """
    value = address.strip()
    if not ADDRESS_PATTERN.match(value):
        raise ValueError("Address must be 64 hex digits, optionally 0x-prefixed")
    if value[:2].lower() == '0x':
        value = value[2:]
    return '0x' + value.lower()


def shorten_address(address: str, keep: int = 10) -> str:
    """Abbreviate a long hex address for tabular output."""
    if len(address) <= keep * 2:
        return address
    return f"{address[:keep]}...{address[-4:]}"
