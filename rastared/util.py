"""Timestamps and native-order 32-bit integer conversion."""

from __future__ import annotations

import sys
import time

_MASK32 = 0xFFFFFFFF


def current_ts() -> int:
    """Return the monotonic clock in milliseconds, truncated to 32 bits."""
    return (time.monotonic_ns() // 1_000_000) & _MASK32


def is_big_endian() -> bool:
    """Return True if the host stores integers big-endian."""
    return sys.byteorder == "big"


def long_to_bytes(value: int) -> bytes:
    """Encode the low 32 bits of ``value`` as 4 bytes in host byte order."""
    return (value & _MASK32).to_bytes(4, sys.byteorder)


def bytes_to_long(data: bytes) -> int:
    """Decode the first 4 bytes of ``data`` as an unsigned host-order integer."""
    raw = bytes(data)
    if len(raw) < 4:
        raise ValueError(f"need at least 4 bytes, got {len(raw)}")
    return int.from_bytes(raw[:4], sys.byteorder)