from __future__ import annotations

import math

from ..core.enums import IntensityBucket


BUCKET_COUNT = 5

# Indexed by IntensityBucket; NONE is visually distinct from VERY_LOW
BUCKET_COLORS: tuple[str, ...] = (
    "#f3f4f6",  # no activity
    "#fee2e2",  # 0-20%
    "#fed7aa",  # 20-40%
    "#fde047",  # 40-60%
    "#4ade80",  # 60-80%
    "#22c55e",  # 80-100%
)


def bucketize(intensity: float) -> IntensityBucket:
    if intensity == 0:
        return IntensityBucket.NONE
    index = min(math.floor(intensity * BUCKET_COUNT), BUCKET_COUNT - 1)
    return IntensityBucket(index + 1)


def bucket_label(bucket: IntensityBucket) -> str:
    if bucket == IntensityBucket.NONE:
        return "No sales"
    step = 100 // BUCKET_COUNT
    low = (bucket - 1) * step
    return f"{low}-{low + step}%"


def bucket_color(bucket: IntensityBucket) -> str:
    return BUCKET_COLORS[bucket]
