"""SHA-1 message digest (FIPS PUB 180-1) computed in pure Python."""

from __future__ import annotations

import struct

_MASK = 0xFFFFFFFF
_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)
_ROUND_CONSTANTS = (0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xCA62C1D6)
_BLOCK_SIZE = 64
_MAX_MESSAGE_BITS = 1 << 64


def _rotl(value: int, bits: int) -> int:
    return ((value << bits) & _MASK) | (value >> (32 - bits))


def _compress(state: list[int], block: bytes) -> None:
    words = list(struct.unpack(">16I", block))
    for t in range(16, 80):
        words.append(_rotl(words[t - 3] ^ words[t - 8] ^ words[t - 14] ^ words[t - 16], 1))

    a, b, c, d, e = state
    for t, word in enumerate(words):
        if t < 20:
            f = (b & c) | (~b & d)
            k = _ROUND_CONSTANTS[0]
        elif t < 40:
            f = b ^ c ^ d
            k = _ROUND_CONSTANTS[1]
        elif t < 60:
            f = (b & c) | (b & d) | (c & d)
            k = _ROUND_CONSTANTS[2]
        else:
            f = b ^ c ^ d
            k = _ROUND_CONSTANTS[3]
        temp = (_rotl(a, 5) + (f & _MASK) + e + word + k) & _MASK
        a, b, c, d, e = temp, a, _rotl(b, 30), c, d

    for i, value in enumerate((a, b, c, d, e)):
        state[i] = (state[i] + value) & _MASK


class SHA1:
    """Incremental SHA-1 hasher.

    Once :meth:`digest` has been taken the message is final; feeding more
    non-empty data raises ValueError.
    """

    digest_size = 20
    block_size = _BLOCK_SIZE

    def __init__(self, data: bytes = b"") -> None:
        self._state = list(_INITIAL_STATE)
        self._buffer = bytearray()
        self._length = 0
        self._digest: bytes | None = None
        self.update(data)

    def update(self, data: bytes) -> None:
        """Append ``data`` to the message."""
        chunk = bytes(data)
        if not chunk:
            return
        if self._digest is not None:
            raise ValueError("cannot update a SHA-1 hash after its digest was computed")
        if (self._length + len(chunk)) * 8 >= _MAX_MESSAGE_BITS:
            raise OverflowError("message is too long for SHA-1")
        self._length += len(chunk)
        self._buffer.extend(chunk)
        full = len(self._buffer) - len(self._buffer) % _BLOCK_SIZE
        for start in range(0, full, _BLOCK_SIZE):
            _compress(self._state, bytes(self._buffer[start:start + _BLOCK_SIZE]))
        del self._buffer[:full]

    def digest(self) -> bytes:
        """Return the 20-byte digest, finalising the message on first call."""
        if self._digest is None:
            tail = bytearray(self._buffer)
            tail.append(0x80)
            tail.extend(b"\x00" * ((56 - len(tail)) % _BLOCK_SIZE))
            tail.extend(struct.pack(">Q", self._length * 8))
            for start in range(0, len(tail), _BLOCK_SIZE):
                _compress(self._state, bytes(tail[start:start + _BLOCK_SIZE]))
            self._buffer.clear()
            self._digest = struct.pack(">5I", *self._state)
        return self._digest

    def hexdigest(self) -> str:
        """Return the digest as 40 lowercase hexadecimal characters."""
        return self.digest().hex()


def sha1(data: bytes) -> bytes:
    """Return the SHA-1 digest of ``data``."""
    return SHA1(data).digest()