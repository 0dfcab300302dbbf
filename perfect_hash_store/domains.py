# ==================================================
# perfect_hash_store/domains.py
# ==================================================
"""Ready-made descriptors for two common dense key domains."""
from __future__ import annotations

from math import isqrt, prod
from typing import Tuple

from .exceptions import DescriptorError, IndexOutOfRange


class Grid:
    """Points of an n-dimensional box, first coordinate varying fastest.

    ``Grid(10, 20, 30).hash((x, y, z)) == x + 10*y + 200*z``; a coordinate
    outside its dimension raises ``IndexOutOfRange``.
    """

    def __init__(self, *dims: int):
        if not dims:
            raise DescriptorError("Grid needs at least one dimension")
        if any(d <= 0 for d in dims):
            raise DescriptorError(f"Grid dimensions must be positive, got {dims}")
        self.dims    = tuple(dims)
        self._size   = prod(dims)
        strides, acc = [], 1
        for d in dims:
            strides.append(acc)
            acc *= d
        self.strides = tuple(strides)

    def hash(self, key: Tuple[int, ...]) -> int:
        if len(key) != len(self.dims):
            raise DescriptorError(
                f"{key!r} has {len(key)} coordinates, {self!r} needs {len(self.dims)}")
        index = 0
        for c, d, s in zip(key, self.dims, self.strides):
            if c < 0 or c >= d:
                raise IndexOutOfRange(c, d, key)
            index += c * s
        return index

    def size(self) -> int:
        return self._size

    def invert(self, index: int) -> Tuple[int, ...]:
        coords = []
        for d in self.dims:
            index, c = divmod(index, d)
            coords.append(c)
        return tuple(coords)

    def __eq__(self, other):
        return isinstance(other, Grid) and other.dims == self.dims

    def __hash__(self):
        return hash(("Grid", self.dims))

    def __repr__(self):
        return f"Grid({', '.join(map(str, self.dims))})"


class UnorderedPairs:
    """Unordered pairs ``{u, v}`` with ``u, v < n``, diagonal included.

    Pairs are laid out by their larger element: ``(a, b)`` with ``a <= b``
    lands at ``a + b*(b+1)/2``, so ``hash((u, v)) == hash((v, u))``.
    """

    def __init__(self, n: int):
        if n < 0:
            raise DescriptorError(f"UnorderedPairs needs n >= 0, got {n}")
        self.n = n

    @staticmethod
    def size_when(n: int) -> int:
        return (n + 1) * n // 2

    def hash(self, key: Tuple[int, int]) -> int:
        u, v = key
        for c in (u, v):
            if c < 0 or c >= self.n:
                raise IndexOutOfRange(c, self.n, key)
        a, b = (v, u) if u > v else (u, v)
        return a + self.size_when(b)

    def size(self) -> int:
        return self.size_when(self.n)

    def invert(self, index: int) -> Tuple[int, int]:
        # largest b with size_when(b) <= index
        b = (isqrt(8 * index + 1) - 1) // 2
        return index - self.size_when(b), b

    def __eq__(self, other):
        return isinstance(other, UnorderedPairs) and other.n == self.n

    def __hash__(self):
        return hash(("UnorderedPairs", self.n))

    def __repr__(self):
        return f"UnorderedPairs({self.n})"
