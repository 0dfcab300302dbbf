# ==================================================
# perfect_hash_store/map.py
# ==================================================
"""Perfectly hashed maps.

Two flavours share one layout, a list of ``descriptor.size()`` slots indexed
directly by ``descriptor.hash(key)``:

* ``Map`` tracks which slots were written and treats the rest as absent.
* ``FullMap`` fills every slot at construction, so ``get`` never misses.
"""
from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Iterable, Iterator, Optional, Sequence, Tuple

from . import const
from .exceptions import DescriptorError
from .hashing import check_index, is_invertible, require_inverse

logger = logging.getLogger(__name__)

_EMPTY   = object()      # slot never written / removed
_MISSING = object()      # no default passed to pop()

PREVIEW_ITEMS = 8


class _SlotMap:
    __slots__ = ("descriptor", "checked", "_size", "_slots")

    def _attach(self, descriptor, slots: list, checked: Optional[bool]):
        self.descriptor = descriptor
        self.checked    = const.CHECKED if checked is None else checked
        self._size      = descriptor.size()
        self._slots     = slots
        logger.debug("%s: %d slots for %r (checked=%s)",
                     type(self).__name__, self._size, descriptor, self.checked)

    # ------------------------------------------------------------------
    def _index(self, key) -> int:
        index = self.descriptor.hash(key)
        if self.checked:
            check_index(index, self._size, key)
        return index

    @property
    def capacity(self) -> int:
        """Number of slots, i.e. ``descriptor.size()``."""
        return self._size

    def _occupied(self) -> Iterator[Tuple[int, Any]]:
        for i in range(self._size):
            value = self._slots[i]
            if value is not _EMPTY:
                yield i, value

    # -- iteration -----------------------------------------------------------
    def items(self) -> Iterator[Tuple[Any, Any]]:
        """``(key, value)`` pairs in ascending index order.

        Needs an invertible descriptor.  Each call starts a fresh walk and
        every slot is read when it is reached, not up front.
        """
        invert = require_inverse(self.descriptor, "items()").invert
        for i, value in self._occupied():
            yield invert(i), value

    def keys(self) -> Iterator[Any]:
        for key, _ in self.items():
            yield key

    def values(self) -> Iterator[Any]:
        for _, value in self._occupied():
            yield value

    def __iter__(self):
        return self.keys()

    def update(self, pairs: Iterable[Tuple[Any, Any]]):
        for key, value in pairs:
            self.insert(key, value)

    # ----------------------------------------------------------------------
    def copy(self):
        """Copy with its own descriptor and slot list; values are shared."""
        dup = type(self).__new__(type(self))
        _SlotMap._attach(dup, copy.copy(self.descriptor), list(self._slots), self.checked)
        return dup

    __copy__ = copy

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.descriptor == other.descriptor and self._slots == other._slots

    __hash__ = None

    def __repr__(self):
        if is_invertible(self.descriptor):
            invert = self.descriptor.invert
            pairs  = ((invert(i), v) for i, v in self._occupied())
        else:
            pairs  = self._occupied()
        shown = []
        for n, (k, v) in enumerate(pairs):
            if n == PREVIEW_ITEMS:
                shown.append("...")
                break
            shown.append(f"{k!r}: {v!r}")
        return f"{type(self).__name__}({self.descriptor!r}, {{{', '.join(shown)}}})"


# ======================================================================
class Map(_SlotMap):
    """Map that distinguishes "absent" from "present with a value".

    ``get`` returns ``None`` (or the given default) for keys never inserted;
    ``m[key]`` raises ``KeyError`` for them, like ``dict``.
    """

    __slots__ = ("_len",)

    def __init__(self, descriptor, checked: Optional[bool] = None):
        self._attach(descriptor, [_EMPTY] * descriptor.size(), checked)
        self._len = 0

    def insert(self, key, value):
        """Store ``value`` for ``key``; return the value it replaced, or None."""
        index = self._index(key)
        old   = self._slots[index]
        self._slots[index] = value
        if old is _EMPTY:
            self._len += 1
            return None
        return old

    def get(self, key, default=None):
        value = self._slots[self._index(key)]
        return default if value is _EMPTY else value

    def remove(self, key):
        """Empty the slot for ``key``; return what was stored, or None."""
        index = self._index(key)
        old   = self._slots[index]
        if old is _EMPTY:
            return None
        self._slots[index] = _EMPTY
        self._len -= 1
        return old

    def contains(self, key) -> bool:
        return self._slots[self._index(key)] is not _EMPTY

    def pop(self, key, default=_MISSING):
        index = self._index(key)
        old   = self._slots[index]
        if old is _EMPTY:
            if default is _MISSING:
                raise KeyError(key)
            return default
        self._slots[index] = _EMPTY
        self._len -= 1
        return old

    def setdefault(self, key, default=None):
        index = self._index(key)
        if self._slots[index] is _EMPTY:
            self._slots[index] = default
            self._len += 1
        return self._slots[index]

    def clear(self):
        self._slots[:] = [_EMPTY] * self._size
        self._len = 0
        logger.debug("cleared %d slots", self._size)

    def copy(self) -> "Map":
        dup = super().copy()
        dup._len = self._len
        return dup

    __copy__ = copy

    # -- mapping protocol ----------------------------------------------------
    def __getitem__(self, key):
        value = self._slots[self._index(key)]
        if value is _EMPTY:
            raise KeyError(key)
        return value

    def __setitem__(self, key, value):
        self.insert(key, value)

    def __delitem__(self, key):
        self.pop(key)

    def __contains__(self, key):
        return self.contains(key)

    def __len__(self):
        return self._len

    def is_empty(self) -> bool:
        return self._len == 0


# ======================================================================
class FullMap(_SlotMap):
    """Map in which every key of the domain always has a value.

    Slots start out as ``default_factory()`` (``None`` without a factory),
    so lookups return a value directly and never report absence.
    """

    __slots__ = ("default_factory",)

    def __init__(self, descriptor, default_factory: Optional[Callable[[], Any]] = None,
                 checked: Optional[bool] = None):
        size = descriptor.size()
        if default_factory is None:
            slots = [None] * size
        else:
            slots = [default_factory() for _ in range(size)]
        self._attach(descriptor, slots, checked)
        self.default_factory = default_factory

    @classmethod
    def from_element(cls, descriptor, value, checked: Optional[bool] = None) -> "FullMap":
        """Every slot holds its own shallow copy of ``value``."""
        return cls(descriptor, default_factory=lambda: copy.copy(value), checked=checked)

    @classmethod
    def from_initial(cls, descriptor, values: Sequence[Any],
                     checked: Optional[bool] = None) -> "FullMap":
        """Adopt ``values`` as the slots; ``values[i]`` belongs to ``invert(i)``."""
        slots = list(values)
        if len(slots) != descriptor.size():
            raise DescriptorError(
                f"{len(slots)} initial values for a domain of size {descriptor.size()}")
        m = cls.__new__(cls)
        m._attach(descriptor, slots, checked)
        m.default_factory = None
        return m

    def _fresh(self):
        return None if self.default_factory is None else self.default_factory()

    def insert(self, key, value):
        """Store ``value`` for ``key``; return the value it replaced."""
        index = self._index(key)
        old   = self._slots[index]
        self._slots[index] = value
        return old

    def get(self, key):
        return self._slots[self._index(key)]

    def remove(self, key):
        """Reset ``key`` to a fresh default; return the value it held."""
        index = self._index(key)
        old   = self._slots[index]
        self._slots[index] = self._fresh()
        return old

    def contains(self, key) -> bool:
        self._index(key)
        return True

    def clear(self):
        """Reset every slot to a fresh default."""
        self._slots[:] = [self._fresh() for _ in range(self._size)]
        logger.debug("reset %d slots", self._size)

    def copy(self) -> "FullMap":
        dup = super().copy()
        dup.default_factory = self.default_factory
        return dup

    __copy__ = copy

    __getitem__ = get

    def __setitem__(self, key, value):
        self._slots[self._index(key)] = value

    def __contains__(self, key):
        return self.contains(key)

    def __len__(self):
        return self._size
