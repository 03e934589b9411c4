"""Histogram detail derivation from raw stat samples.

Samples are bucketed into unit-width integer ranges ``[k, k + 1)``. The
derivation is stateless: every access recomputes from the captured samples.
"""

from typing import List, NamedTuple, Protocol, Dict, Sequence

import numpy as np

# Largest bucket index representable as a signed 32-bit int
MAX_BUCKET_INDEX = 2**31 - 1


class BucketAndCount(NamedTuple):
    """Number of samples that fell in ``[lower, upper)``."""
    lower: int
    upper: int
    count: int


def bucket_indices(samples: Sequence[float]) -> np.ndarray:
    """Map every sample to a non-negative integer bucket index.

    Negative values and NaN land in bucket 0, values at or beyond
    ``MAX_BUCKET_INDEX`` land in the last bucket, everything else is
    truncated toward zero.
    """
    values = np.asarray(samples, dtype=np.float64)
    values = np.nan_to_num(values, nan=0.0, posinf=float(MAX_BUCKET_INDEX), neginf=-1.0)
    values = np.where(values < 0, 0.0, values)
    values = np.where(values >= MAX_BUCKET_INDEX, MAX_BUCKET_INDEX - 1, values)
    return np.trunc(values).astype(np.int64)


def bucket_counts(samples: Sequence[float]) -> List[BucketAndCount]:
    """Count samples per bucket, sorted ascending by bucket start."""
    if len(samples) == 0:
        return []
    buckets, counts = np.unique(bucket_indices(samples), return_counts=True)
    return [
        BucketAndCount(int(bucket), int(bucket) + 1, int(count))
        for bucket, count in zip(buckets, counts)
    ]


class HistogramDetail:
    """Bucketed distribution of a stat's samples at the time it was requested."""

    __slots__ = ("_samples",)

    def __init__(self, samples: Sequence[float]):
        self._samples = tuple(samples)

    @property
    def counts(self) -> List[BucketAndCount]:
        return bucket_counts(self._samples)

    def __repr__(self) -> str:
        return f"HistogramDetail(counts={self.counts!r})"


class WithHistogramDetails(Protocol):
    """Receivers that can expose their stats as bucketed distributions."""

    def histogram_details(self) -> Dict[str, HistogramDetail]:
        """Bucketed detail for every stat, keyed by the stat's display name."""
        ...
