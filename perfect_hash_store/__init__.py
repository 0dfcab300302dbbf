"""perfect_hash_store: mutable containers over caller-defined perfect hashes.

The caller describes a key domain with an object providing ``hash(key)`` and
``size()`` (and optionally ``invert(index)``); ``Map``, ``FullMap`` and ``Set``
then store one slot or bit per index and access it directly.
"""
from .bitset import BitSet
from .domains import Grid, UnorderedPairs
from .exceptions import DescriptorError, IndexOutOfRange, NotInvertibleError, PerfectHashError
from .hashing import HashInverse, PerfectHash, is_invertible, iter_domain, validate
from .map import FullMap, Map
from .set import Set

__all__ = [
    "Map", "FullMap", "Set", "BitSet",
    "PerfectHash", "HashInverse", "is_invertible", "iter_domain", "validate",
    "Grid", "UnorderedPairs",
    "PerfectHashError", "IndexOutOfRange", "DescriptorError", "NotInvertibleError",
]
