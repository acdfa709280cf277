"""32-bit string hash functions."""

from __future__ import annotations

_MASK = 0xFFFFFFFF
_FNV_PRIME = 16777619
_FNV_OFFSET = 2166136261


def _as_bytes(data: bytes | bytearray | str) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def hash_string(data: bytes | bytearray | str) -> int:
    """Polynomial hash ``h = 31 * h + byte`` truncated to 32 bits."""
    value = 0
    for byte in _as_bytes(data):
        value = (31 * value + byte) & _MASK
    return value


def hash_fnv1a(data: bytes | bytearray | str) -> int:
    """32-bit FNV-1a hash.

    Bytes of 0x80 and above are sign-extended before the xor, as a signed
    ``char`` would be.
    """
    value = _FNV_OFFSET
    for byte in _as_bytes(data):
        if byte >= 0x80:
            byte |= 0xFFFFFF00
        value = ((value ^ byte) * _FNV_PRIME) & _MASK
    return value