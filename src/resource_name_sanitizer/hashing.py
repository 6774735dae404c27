"""FNV-1a hashing used for the collision-avoiding name suffix."""

from __future__ import annotations

FNV32_OFFSET_BASIS = 0x811C9DC5
FNV32_PRIME = 0x01000193
HASH_HEX_LENGTH = 8


def fnv1a_32(data: bytes) -> int:
    """Return the 32-bit FNV-1a hash of ``data``."""
    value = FNV32_OFFSET_BASIS
    for byte in data:
        value ^= byte
        value = (value * FNV32_PRIME) & 0xFFFFFFFF
    return value


def content_hash(value: str) -> str:
    """Render the FNV-1a hash of the UTF-8 encoded ``value`` as 8 lowercase hex digits."""
    return f"{fnv1a_32(value.encode('utf-8')):08x}"


def hash_length_for(max_length: int) -> int:
    """Number of hash characters that fit in a name of ``max_length``.

    Short limits get half their length so the suffix never swallows the name.
    """
    if max_length < HASH_HEX_LENGTH:
        return max_length // 2
    return HASH_HEX_LENGTH
