# ==================================================
# perfect_hash_store/hashing.py
# ==================================================
"""Capabilities a key-domain descriptor provides to the containers.

A descriptor is any object with ``hash(key) -> int`` and ``size() -> int``.
If it also has ``invert(index) -> key`` the containers can generate keys,
which is what iteration needs.  Nothing here has to be subclassed: the
protocols are structural and only used for ``isinstance`` probes and typing.
"""
from __future__ import annotations

import logging
from typing import Any, Hashable, Iterable, Iterator, Optional, Protocol, runtime_checkable

from .exceptions import DescriptorError, IndexOutOfRange, NotInvertibleError

logger = logging.getLogger(__name__)


@runtime_checkable
class PerfectHash(Protocol):
    """Injective map from a known key domain onto ``range(size())``."""

    def hash(self, key: Any) -> int: ...

    def size(self) -> int: ...


@runtime_checkable
class HashInverse(PerfectHash, Protocol):
    """A ``PerfectHash`` that can rebuild the key stored at an index."""

    def invert(self, index: int) -> Any: ...


def is_invertible(descriptor) -> bool:
    return isinstance(descriptor, HashInverse)


def require_inverse(descriptor, what: str = "iteration"):
    if not is_invertible(descriptor):
        raise NotInvertibleError(
            f"{what} needs {type(descriptor).__name__}.invert(index)")
    return descriptor


def check_index(index: int, size: int, key=None) -> int:
    """Return ``index`` unchanged, or raise ``IndexOutOfRange``."""
    if index < 0 or index >= size:
        raise IndexOutOfRange(index, size, key)
    return index


def iter_domain(descriptor) -> Iterator[Any]:
    """Yield every key of the domain in ascending index order."""
    require_inverse(descriptor, "domain iteration")
    for i in range(descriptor.size()):
        yield descriptor.invert(i)


# ----------------------------------------------------------------------
def validate(descriptor, keys: Optional[Iterable[Hashable]] = None,
             aliases: bool = False) -> int:
    """Check that ``descriptor`` really is a perfect hash.

    Containers never call this; it is meant for tests and for debugging a
    hand-written descriptor.  With ``keys`` every given key is checked for
    range and collisions.  Without ``keys`` the descriptor must be
    invertible and the whole domain is walked.

    For an invertible descriptor ``invert(hash(k)) == k`` must hold for every
    key, so two distinct keys can never share an index.  Descriptors that
    accept several spellings of one key (``UnorderedPairs`` takes ``(u, v)``
    and ``(v, u)``) pass ``aliases=True``: a key then only has to hash to the
    same index as its canonical form ``invert(hash(k))``.

    Returns the number of distinct indices covered.
    """
    size = descriptor.size()
    if not isinstance(size, int) or size < 0:
        raise DescriptorError(f"size() must be a non-negative int, got {size!r}")
    if descriptor.size() != size:
        raise DescriptorError("size() changed between calls")

    invertible = is_invertible(descriptor)
    if keys is None:
        require_inverse(descriptor, "validation without explicit keys")
        keys = iter_domain(descriptor)

    seen: dict[int, Any] = {}
    for key in keys:
        try:
            index = descriptor.hash(key)
        except IndexOutOfRange as exc:
            raise DescriptorError(f"hash({key!r}) rejected the key: {exc}") from exc
        if not isinstance(index, int) or index < 0 or index >= size:
            raise DescriptorError(
                f"hash({key!r}) = {index!r} is outside [0, {size})")

        if invertible:
            back = descriptor.invert(index)
            if descriptor.hash(back) != index:
                raise DescriptorError(
                    f"invert({index}) = {back!r} does not hash back to {index}")
            if back != key and not aliases:
                raise DescriptorError(
                    f"invert(hash({key!r})) = {back!r}; {key!r} collides with "
                    f"{back!r} at {index}")
        elif index in seen and seen[index] != key:
            raise DescriptorError(
                f"collision: {seen[index]!r} and {key!r} both hash to {index}")
        seen[index] = key

    logger.debug("validated %d keys of %s (size %d)",
                 len(seen), type(descriptor).__name__, size)
    return len(seen)
