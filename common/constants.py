"""Project-wide constants (cell geometry, stride, word bounds, default ports)."""

CELL_SIZE_BYTES: int = 32  # width of one storage cell

WORD_BITS: int = 256
U256_MAX: int = (1 << WORD_BITS) - 1

# Ordinal-indexed strings start at ordinal * ORDINAL_STRIDE. The base cell holds
# the length, so an identifier may use at most ORDINAL_STRIDE - 1 chunk cells.
ORDINAL_STRIDE: int = 256
MAX_IDENTIFIER_BYTES: int = (ORDINAL_STRIDE - 1) * CELL_SIZE_BYTES

ADDRESS_SIZE_BYTES: int = 32
ZERO_ADDRESS: bytes = b"\x00" * ADDRESS_SIZE_BYTES

DEFAULT_REGISTRY_PORT: int = 8000
DEFAULT_PAGE_SIZE: int = 20
MAX_PAGE_SIZE: int = 200
