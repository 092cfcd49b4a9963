"""SipHash-2-4 and HalfSipHash-2-4 keyed hashes used for the SR layer safety code."""

from __future__ import annotations

_MASK64 = 0xFFFFFFFFFFFFFFFF
_MASK32 = 0xFFFFFFFF

_C_ROUNDS = 2
_D_ROUNDS = 4


def _rotl64(x: int, b: int) -> int:
    return ((x << b) | (x >> (64 - b))) & _MASK64


def _rotl32(x: int, b: int) -> int:
    return ((x << b) | (x >> (32 - b))) & _MASK32


def _sipround(v0: int, v1: int, v2: int, v3: int) -> tuple[int, int, int, int]:
    v0 = (v0 + v1) & _MASK64
    v1 = _rotl64(v1, 13) ^ v0
    v0 = _rotl64(v0, 32)
    v2 = (v2 + v3) & _MASK64
    v3 = _rotl64(v3, 16) ^ v2
    v0 = (v0 + v3) & _MASK64
    v3 = _rotl64(v3, 21) ^ v0
    v2 = (v2 + v1) & _MASK64
    v1 = _rotl64(v1, 17) ^ v2
    v2 = _rotl64(v2, 32)
    return v0, v1, v2, v3


def _halfsipround(v0: int, v1: int, v2: int, v3: int) -> tuple[int, int, int, int]:
    v0 = (v0 + v1) & _MASK32
    v1 = _rotl32(v1, 5) ^ v0
    v0 = _rotl32(v0, 16)
    v2 = (v2 + v3) & _MASK32
    v3 = _rotl32(v3, 8) ^ v2
    v0 = (v0 + v3) & _MASK32
    v3 = _rotl32(v3, 7) ^ v0
    v2 = (v2 + v1) & _MASK32
    v1 = _rotl32(v1, 13) ^ v2
    v2 = _rotl32(v2, 16)
    return v0, v1, v2, v3


def siphash(data: bytes, key: bytes, outlen: int = 8) -> bytes:
    """Return the SipHash-2-4 of ``data`` under a 16-byte ``key`` (8 or 16 bytes out)."""
    if outlen not in (8, 16):
        raise ValueError(f"siphash output length must be 8 or 16, not {outlen}")
    key = bytes(key)
    if len(key) < 16:
        raise ValueError("siphash needs a key of at least 16 bytes")
    data = bytes(data)

    k0 = int.from_bytes(key[0:8], "little")
    k1 = int.from_bytes(key[8:16], "little")
    v0 = 0x736F6D6570736575 ^ k0
    v1 = 0x646F72616E646F6D ^ k1
    v2 = 0x6C7967656E657261 ^ k0
    v3 = 0x7465646279746573 ^ k1

    if outlen == 16:
        v1 ^= 0xEE

    full = len(data) - len(data) % 8
    for offset in range(0, full, 8):
        m = int.from_bytes(data[offset:offset + 8], "little")
        v3 ^= m
        for _ in range(_C_ROUNDS):
            v0, v1, v2, v3 = _sipround(v0, v1, v2, v3)
        v0 ^= m

    b = ((len(data) & 0xFF) << 56) | int.from_bytes(data[full:], "little")

    v3 ^= b
    for _ in range(_C_ROUNDS):
        v0, v1, v2, v3 = _sipround(v0, v1, v2, v3)
    v0 ^= b

    v2 ^= 0xEE if outlen == 16 else 0xFF
    for _ in range(_D_ROUNDS):
        v0, v1, v2, v3 = _sipround(v0, v1, v2, v3)
    out = (v0 ^ v1 ^ v2 ^ v3).to_bytes(8, "little")

    if outlen == 8:
        return out

    v1 ^= 0xDD
    for _ in range(_D_ROUNDS):
        v0, v1, v2, v3 = _sipround(v0, v1, v2, v3)
    return out + (v0 ^ v1 ^ v2 ^ v3).to_bytes(8, "little")


def halfsiphash(data: bytes, key: bytes, outlen: int = 8) -> bytes:
    """Return the HalfSipHash-2-4 of ``data`` under an 8-byte ``key`` (4 or 8 bytes out)."""
    if outlen not in (4, 8):
        raise ValueError(f"halfsiphash output length must be 4 or 8, not {outlen}")
    key = bytes(key)
    if len(key) < 8:
        raise ValueError("halfsiphash needs a key of at least 8 bytes")
    data = bytes(data)

    k0 = int.from_bytes(key[0:4], "little")
    k1 = int.from_bytes(key[4:8], "little")
    v0 = k0
    v1 = k1
    v2 = 0x6C796765 ^ k0
    v3 = 0x74656462 ^ k1

    if outlen == 8:
        v1 ^= 0xEE

    full = len(data) - len(data) % 4
    for offset in range(0, full, 4):
        m = int.from_bytes(data[offset:offset + 4], "little")
        v3 ^= m
        for _ in range(_C_ROUNDS):
            v0, v1, v2, v3 = _halfsipround(v0, v1, v2, v3)
        v0 ^= m

    b = ((len(data) << 24) & _MASK32) | int.from_bytes(data[full:], "little")

    v3 ^= b
    for _ in range(_C_ROUNDS):
        v0, v1, v2, v3 = _halfsipround(v0, v1, v2, v3)
    v0 ^= b

    v2 ^= 0xEE if outlen == 8 else 0xFF
    for _ in range(_D_ROUNDS):
        v0, v1, v2, v3 = _halfsipround(v0, v1, v2, v3)
    out = (v1 ^ v3).to_bytes(4, "little")

    if outlen == 4:
        return out

    v1 ^= 0xDD
    for _ in range(_D_ROUNDS):
        v0, v1, v2, v3 = _halfsipround(v0, v1, v2, v3)
    return out + (v1 ^ v3).to_bytes(4, "little")


def generate_siphash24(data: bytes, key: bytes, hash_type: int) -> bytes:
    """Compute the safety code for ``hash_type``.

    Type 1 gives an 8-byte HalfSipHash, type 2 a 16-byte SipHash; any other
    type means no checksum and yields 8 zero bytes.
    """
    if hash_type == 1:
        return halfsiphash(data, key, 8)
    if hash_type == 2:
        return siphash(data, key, 16)
    return bytes(8)