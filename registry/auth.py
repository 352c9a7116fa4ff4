"""Caller identity resolution for mutating routes."""

from typing import Optional

from fastapi import Header, HTTPException, status

from registry.storage.safe_math import parse_address


async def get_caller_address(x_caller_address: Optional[str] = Header(None)) -> bytes:
    """
    FastAPI dependency resolving the caller identity set by the upstream
    identity layer. The value is trusted once it parses.

    Args:
        x_caller_address: X-Caller-Address header value (32-byte hex, 0x prefix optional)

    Returns:
        32-byte caller address

    Raises:
        HTTPException: 401 if the header is missing or malformed
    """
    if not x_caller_address:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-Caller-Address header"
        )

    try:
        return parse_address(x_caller_address)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid caller address: {e}"
        )
