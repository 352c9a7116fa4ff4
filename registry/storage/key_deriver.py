"""Derivation of fixed-width content keys from content identifiers."""

FNV_OFFSET_BASIS = 0xCBF29CE484222325
FNV_PRIME = 0x100000001B3
MASK_64 = 0xFFFFFFFFFFFFFFFF


def derive_key(identifier: bytes) -> int:
    """
    Map identifier bytes to a 256-bit content key.

    Two 64-bit FNV-style accumulators run over the input; the second also mixes
    in the byte position. The key words, least significant first, are
    ``lo, hi, ~hi, ~lo``. Pure function of the bytes: no state, no cache.
    """
    hi = FNV_OFFSET_BASIS
    lo = FNV_PRIME
    for position, byte in enumerate(identifier):
        hi = ((hi ^ byte) * FNV_PRIME) & MASK_64
        lo = ((lo ^ ((byte + position) & MASK_64)) * FNV_OFFSET_BASIS) & MASK_64

    return (
        lo
        | (hi << 64)
        | ((~hi & MASK_64) << 128)
        | ((~lo & MASK_64) << 192)
    )


def derive_key_for(identifier: str) -> int:
    """Derive the content key of an identifier string (UTF-8)."""
    return derive_key(identifier.encode("utf-8"))
