"""Tests for intensity bucketing."""

from __future__ import annotations

import pytest

from sales_visuals.core.enums import IntensityBucket
from sales_visuals.encoding.buckets import (
    BUCKET_COLORS,
    BUCKET_COUNT,
    bucket_color,
    bucket_label,
    bucketize,
)


@pytest.mark.parametrize(
    ("intensity", "expected"),
    [
        (0, 0),
        (0.0, 0),
        (1e-9, 1),
        (0.19999, 1),
        (0.2, 2),
        (0.39, 2),
        (0.4, 3),
        (0.6, 4),
        (0.79, 4),
        (0.8, 5),
        (0.99, 5),
        (1.0, 5),
    ],
)
def test_bucket_boundaries(intensity: float, expected: int) -> None:
    assert bucketize(intensity) == expected


def test_bucketize_returns_enum() -> None:
    assert bucketize(0) is IntensityBucket.NONE
    assert bucketize(1.0) is IntensityBucket.VERY_HIGH


def test_bucketize_is_monotonic() -> None:
    samples = [i / 1000 for i in range(1001)]
    buckets = [bucketize(s) for s in samples]
    assert all(a <= b for a, b in zip(buckets, buckets[1:]))
    assert buckets[0] == IntensityBucket.NONE
    assert buckets[-1] == IntensityBucket.VERY_HIGH


def test_top_bucket_does_not_overflow() -> None:
    assert bucketize(1.0) == BUCKET_COUNT


def test_one_color_per_bucket() -> None:
    assert len(BUCKET_COLORS) == BUCKET_COUNT + 1
    assert len(set(BUCKET_COLORS)) == len(BUCKET_COLORS)
    assert bucket_color(IntensityBucket.NONE) != bucket_color(IntensityBucket.VERY_LOW)


def test_bucket_labels() -> None:
    assert bucket_label(IntensityBucket.NONE) == "No sales"
    assert bucket_label(IntensityBucket.VERY_LOW) == "0-20%"
    assert bucket_label(IntensityBucket.MEDIUM) == "40-60%"
    assert bucket_label(IntensityBucket.VERY_HIGH) == "80-100%"
