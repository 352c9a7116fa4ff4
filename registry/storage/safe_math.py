"""Checked 256-bit unsigned arithmetic and word encoding helpers."""

import re

from common.constants import ADDRESS_SIZE_BYTES, CELL_SIZE_BYTES, U256_MAX
from registry.exceptions import ArithmeticOverflowError

ADDRESS_PATTERN = re.compile(rf"^(0[xX])?(?P<digits>[0-9a-fA-F]{{{ADDRESS_SIZE_BYTES * 2}}})$")


def _require_word(value: int) -> None:
    if value < 0 or value > U256_MAX:
        raise ArithmeticOverflowError(f"Value out of 256-bit unsigned range: {value}")


def checked_add(a: int, b: int) -> int:
    """
    Add two 256-bit unsigned words, failing instead of wrapping.

    Raises:
        ArithmeticOverflowError: If an operand or the sum leaves the word range
    """
    _require_word(a)
    _require_word(b)
    result = a + b
    if result > U256_MAX:
        raise ArithmeticOverflowError(f"Addition overflow: {a} + {b}")
    return result


def checked_mul(a: int, b: int) -> int:
    """
    Multiply two 256-bit unsigned words, failing instead of wrapping.

    Raises:
        ArithmeticOverflowError: If an operand or the product leaves the word range
    """
    _require_word(a)
    _require_word(b)
    result = a * b
    if result > U256_MAX:
        raise ArithmeticOverflowError(f"Multiplication overflow: {a} * {b}")
    return result


def word_to_bytes(value: int) -> bytes:
    """Encode a word as a 32-byte big-endian cell value."""
    _require_word(value)
    return value.to_bytes(CELL_SIZE_BYTES, "big")


def bytes_to_word(data: bytes) -> int:
    """Decode a big-endian cell value (at most 32 bytes)."""
    if len(data) > CELL_SIZE_BYTES:
        raise ValueError(f"Cell value too wide: {len(data)} bytes")
    return int.from_bytes(data, "big")


def address_to_word(address: bytes) -> int:
    """Pack a 32-byte identity into a word."""
    if len(address) != ADDRESS_SIZE_BYTES:
        raise ValueError(f"Address must be {ADDRESS_SIZE_BYTES} bytes, got {len(address)}")
    return int.from_bytes(address, "big")


def word_to_address(value: int) -> bytes:
    """Unpack a word into a 32-byte identity."""
    return word_to_bytes(value)


def parse_address(text: str) -> bytes:
    """
    Parse a hex address ("0x" prefix optional) into 32 bytes.

    Raises:
        ValueError: If the text is not exactly 32 bytes of hex
    """
    match = ADDRESS_PATTERN.match(text.strip())
    if match is None:
        raise ValueError(f"Address must be {ADDRESS_SIZE_BYTES * 2} hex digits")
    return bytes.fromhex(match.group("digits"))


def format_address(address: bytes) -> str:
    """Render a 32-byte identity as 0x-prefixed hex."""
    return "0x" + address.hex()
