"""Fixed-size bit set."""

from __future__ import annotations


class BitSet:
    """A set of bits addressed by position; out-of-range positions are ignored."""

    def __init__(self, num_bits: int) -> None:
        if num_bits < 0:
            raise ValueError("num_bits must not be negative")
        num_bytes = num_bits // 8 + 1
        self._bits = bytearray(num_bytes)
        self._size = num_bytes * 8

    def __len__(self) -> int:
        return self._size

    def _locate(self, bit: int) -> tuple[int, int] | None:
        if not 0 <= bit < self._size:
            return None
        return bit // 8, 0x80 >> (bit % 8)

    def set(self, bit: int) -> None:
        """Set the bit at ``bit`` to 1."""
        location = self._locate(bit)
        if location is not None:
            index, mask = location
            self._bits[index] |= mask

    def unset(self, bit: int) -> None:
        """Set the bit at ``bit`` to 0."""
        location = self._locate(bit)
        if location is not None:
            index, mask = location
            self._bits[index] &= ~mask & 0xFF

    def test(self, bit: int) -> bool:
        """Return True if the bit at ``bit`` is set."""
        location = self._locate(bit)
        if location is None:
            return False
        index, mask = location
        return bool(self._bits[index] & mask)