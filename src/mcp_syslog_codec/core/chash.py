"""Jump consistent hash (Lamping & Veach, 2014).

Maps an integer key onto one of ``buckets`` buckets so that growing the bucket
count from n to n + 1 only moves about 1 / (n + 1) of the keys.
"""

from __future__ import annotations

_MASK64 = 0xFFFF_FFFF_FFFF_FFFF
_KEY_STEP = 2862933555777941757
_JUMP_STEP = 2147483648.0  # 2**31


def jump(key: int, buckets: int) -> int:
    """Return the bucket in ``[0, buckets)`` for ``key``."""
    if buckets < 1:
        raise ValueError("buckets must be >= 1")
    bucket = -1
    j = 0
    while j < buckets:
        bucket = j
        key = ((key * _KEY_STEP) & _MASK64) + 1
        j = int((bucket + 1) * (_JUMP_STEP / float((key >> 33) + 1)))
    return bucket
