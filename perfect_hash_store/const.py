# ==================================================
# perfect_hash_store/const.py
# ==================================================
import os

# Bounds-check every index the descriptor hands back (checked containers).
# PERFECT_HASH_STORE_CHECKED=0 switches the default to unchecked.
CHECKED = os.getenv("PERFECT_HASH_STORE_CHECKED", "1").strip().lower() \
    not in ("0", "false", "no", "off")

BITS_PER_BYTE = 8
BIT_OFFSET    = BITS_PER_BYTE - 1   # bit i -> mask 1 << (i & BIT_OFFSET)
BIT_ORDER     = "little"            # bit i -> byte i // BITS_PER_BYTE
