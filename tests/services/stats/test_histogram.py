"""
Unit tests for histogram detail derivation.
"""

import math

from memstats.services.stats.histogram import (
    MAX_BUCKET_INDEX,
    BucketAndCount,
    HistogramDetail,
    bucket_counts,
)


def test_bucketing_truncates_and_clamps_negatives():
    """Negatives fall in bucket 0, others truncate toward zero, sorted by bucket."""
    counts = bucket_counts([-5.0, 0.3, 0.9, 2.7, 2.9, 2.95])

    assert counts == [BucketAndCount(0, 1, 3), BucketAndCount(2, 3, 3)]


def test_buckets_are_sorted_ascending():
    counts = bucket_counts([9.5, 1.0, 4.2, 1.7, 9.1])

    assert [c.lower for c in counts] == [1, 4, 9]
    assert [c.count for c in counts] == [2, 1, 2]
    assert all(c.upper == c.lower + 1 for c in counts)


def test_huge_values_land_in_last_bucket():
    counts = bucket_counts([float(MAX_BUCKET_INDEX), 1e12, math.inf])

    assert counts == [BucketAndCount(MAX_BUCKET_INDEX - 1, MAX_BUCKET_INDEX, 3)]


def test_nan_and_negative_infinity_land_in_bucket_zero():
    counts = bucket_counts([math.nan, -math.inf, 0.0])

    assert counts == [BucketAndCount(0, 1, 3)]


def test_empty_samples_have_no_buckets():
    assert bucket_counts([]) == []
    assert HistogramDetail([]).counts == []


def test_detail_returns_plain_ints():
    """Counts are built from Python ints so they compare and serialize cleanly."""
    (bucket,) = HistogramDetail([3.3]).counts

    assert bucket == (3, 4, 1)
    assert all(type(v) is int for v in bucket)


def test_detail_captures_samples_at_creation():
    """Later changes to the source list do not leak into an existing detail."""
    samples = [1.5]
    detail = HistogramDetail(samples)
    samples.append(7.0)

    assert detail.counts == [BucketAndCount(1, 2, 1)]
