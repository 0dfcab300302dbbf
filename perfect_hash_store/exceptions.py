# ==================================================
# perfect_hash_store/exceptions.py
# ==================================================

class PerfectHashError(Exception):
    """Base exception for perfect_hash_store errors."""
    pass

class IndexOutOfRange(PerfectHashError, IndexError):
    """Raised when a descriptor hashes a key outside ``[0, size)``."""

    def __init__(self, index, size, key=None):
        self.index = index
        self.size  = size
        self.key   = key
        if key is None:
            msg = f"index {index} out of range for domain of size {size}"
        else:
            msg = f"key {key!r} maps to {index}, outside [0, {size})"
        super().__init__(msg)

class DescriptorError(PerfectHashError, ValueError):
    """Raised when a descriptor or its initial data breaks the perfect-hash contract."""
    pass

class NotInvertibleError(PerfectHashError, TypeError):
    """Raised when keys must be generated but the descriptor has no ``invert``."""
    pass
