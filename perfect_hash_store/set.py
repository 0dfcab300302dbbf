# ==================================================
# perfect_hash_store/set.py
# ==================================================
from __future__ import annotations

import copy
import logging
from typing import Any, Iterable, Iterator, Optional

from . import const
from .bitset import BitSet
from .hashing import check_index, is_invertible, require_inverse

logger = logging.getLogger(__name__)

PREVIEW_KEYS = 16


class Set:
    """A mutable, perfectly hashed set stored as one bit per domain key.

    Memory is ``descriptor.size() / 8`` bytes whatever the fill level, so it
    suits dense sets over small-to-medium domains.
    """

    __slots__ = ("descriptor", "checked", "_size", "_bits")

    def __init__(self, descriptor, checked: Optional[bool] = None):
        self.descriptor = descriptor
        self.checked    = const.CHECKED if checked is None else checked
        self._size      = descriptor.size()
        self._bits      = BitSet(self._size)
        logger.debug("Set: %d bits for %r (checked=%s)",
                     self._size, descriptor, self.checked)

    # ------------------------------------------------------------------
    def _index(self, key) -> int:
        index = self.descriptor.hash(key)
        if self.checked:
            check_index(index, self._size, key)
        return index

    @property
    def capacity(self) -> int:
        return self._size

    def insert(self, key) -> bool:
        """Add ``key``; True if it was not in the set before."""
        return not self._bits.set(self._index(key))

    def remove(self, key) -> bool:
        """Drop ``key``; True if it was in the set before."""
        return self._bits.clear(self._index(key))

    def contains(self, key) -> bool:
        return self._bits.get(self._index(key))

    def add(self, key):
        self.insert(key)

    def discard(self, key):
        self.remove(key)

    def update(self, keys: Iterable[Any]):
        for key in keys:
            self.insert(key)

    def iter(self) -> Iterator[Any]:
        """Keys of the set in ascending index order (needs ``invert``)."""
        invert = require_inverse(self.descriptor, "Set iteration").invert
        for index in self._bits.iter_set():
            yield invert(index)

    def is_empty(self) -> bool:
        return not self._bits.any()

    def is_full(self) -> bool:
        return self._bits.all()

    def clear(self):
        self._bits.reset()
        logger.debug("cleared %d bits", self._size)

    def copy(self) -> "Set":
        dup = Set.__new__(Set)
        dup.descriptor = copy.copy(self.descriptor)
        dup.checked    = self.checked
        dup._size      = self._size
        dup._bits      = self._bits.copy()
        return dup

    __copy__ = copy

    # -- python protocols --------------------------------------------------
    def __contains__(self, key):
        return self.contains(key)

    def __iter__(self):
        return self.iter()

    def __len__(self):
        return self._bits.count()

    def __eq__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.descriptor == other.descriptor and self._bits == other._bits

    __hash__ = None

    def __repr__(self):
        if is_invertible(self.descriptor):
            invert = self.descriptor.invert
            keys   = (invert(i) for i in self._bits.iter_set())
        else:
            keys   = self._bits.iter_set()
        shown = []
        for n, key in enumerate(keys):
            if n == PREVIEW_KEYS:
                shown.append("...")
                break
            shown.append(repr(key))
        return f"Set({self.descriptor!r}, {{{', '.join(shown)}}})"
