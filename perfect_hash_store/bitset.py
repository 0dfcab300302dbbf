# ==================================================
# perfect_hash_store/bitset.py
# ==================================================
from __future__ import annotations

from typing import Iterator

import numpy as np

from .const import BITS_PER_BYTE, BIT_OFFSET, BIT_ORDER


class BitSet:
    """Fixed-length bit vector packed eight bits per byte."""

    __slots__ = ("size", "bits")

    def __init__(self, size: int, bits: bytearray | None = None):
        n_bytes = (size + BITS_PER_BYTE - 1) // BITS_PER_BYTE
        if bits is not None and len(bits) != n_bytes:
            raise ValueError(f"{size} bits need {n_bytes} bytes, got {len(bits)}")
        self.size = size
        self.bits = bits if bits is not None else bytearray(n_bytes)

    # -- single bits -------------------------------------------------------
    def get(self, bit: int) -> bool:
        return bool(self.bits[bit // BITS_PER_BYTE] & (1 << (bit & BIT_OFFSET)))

    def set(self, bit: int) -> bool:
        """Set ``bit``; return its previous value."""
        byte_i   = bit // BITS_PER_BYTE
        bit_mask = 1 << (bit & BIT_OFFSET)
        was      = self.bits[byte_i] & bit_mask
        self.bits[byte_i] |= bit_mask
        return bool(was)

    def clear(self, bit: int) -> bool:
        """Clear ``bit``; return its previous value."""
        byte_i   = bit // BITS_PER_BYTE
        bit_mask = 1 << (bit & BIT_OFFSET)
        was      = self.bits[byte_i] & bit_mask
        self.bits[byte_i] &= ~bit_mask & 0xFF
        return bool(was)

    # -- bulk queries --------------------------------------------------------
    def _unpacked(self) -> np.ndarray:
        raw = np.frombuffer(bytes(self.bits), dtype=np.uint8)
        return np.unpackbits(raw, count=self.size, bitorder=BIT_ORDER)

    def count(self) -> int:
        return int(np.count_nonzero(self._unpacked()))

    def any(self) -> bool:
        return bool(self._unpacked().any())

    def all(self) -> bool:
        return bool(self._unpacked().all())

    def reset(self):
        self.bits[:] = bytes(len(self.bits))

    def iter_set(self) -> Iterator[int]:
        """Ascending indices of set bits, read live byte by byte."""
        for byte_i in range(len(self.bits)):
            if not self.bits[byte_i]:
                continue
            base = byte_i * BITS_PER_BYTE
            for off in range(BITS_PER_BYTE):
                bit = base + off
                if bit >= self.size:
                    return
                if self.bits[byte_i] & (1 << off):
                    yield bit

    # ----------------------------------------------------------------------
    def copy(self) -> "BitSet":
        return BitSet(self.size, bytearray(self.bits))

    def __len__(self):
        return self.size

    def __eq__(self, other):
        if not isinstance(other, BitSet):
            return NotImplemented
        return self.size == other.size and self.bits == other.bits

    __hash__ = None

    def __repr__(self):
        shown = "".join("1" if b else "0" for b in self._unpacked()[:64])
        more  = "…" if self.size > 64 else ""
        return f"BitSet({self.size}, {shown}{more})"
