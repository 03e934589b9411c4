"""Pydantic V2 models for stats snapshots and diagnostics responses.

These models are what the receivers' ``snapshot()`` return and what the
diagnostics endpoints serialize.
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict

from .verbosity import Verbosity


class CounterModel(BaseModel):
    """Current value of a single counter"""
    model_config = ConfigDict(from_attributes=True)

    name: List[str]
    display: str
    value: int
    verbosity: Optional[Verbosity] = None


class StatModel(BaseModel):
    """Samples recorded by a single stat, with count and mean"""
    model_config = ConfigDict(from_attributes=True)

    name: List[str]
    display: str
    samples: List[float]
    count: int
    mean: Optional[float] = None
    verbosity: Optional[Verbosity] = None


class GaugeModel(BaseModel):
    """Value a gauge's producer returned when the snapshot was taken"""
    model_config = ConfigDict(from_attributes=True)

    name: List[str]
    display: str
    value: float
    verbosity: Optional[Verbosity] = None


class StatsSnapshotModel(BaseModel):
    """Root envelope for everything a receiver holds"""
    model_config = ConfigDict(from_attributes=True)

    timestamp: float
    counters: List[CounterModel]
    stats: List[StatModel]
    gauges: List[GaugeModel]


class BucketAndCountModel(BaseModel):
    """Samples counted in the bucket [lower, upper)"""
    model_config = ConfigDict(from_attributes=True)

    lower: int
    upper: int
    count: int


class HistogramModel(BaseModel):
    """Bucketed distribution of one stat"""
    model_config = ConfigDict(from_attributes=True)

    name: str
    buckets: List[BucketAndCountModel]


class StatsHealthModel(BaseModel):
    """Lightweight health check response"""
    model_config = ConfigDict(from_attributes=True)

    receiver_enabled: bool
    counter_count: int
    stat_count: int
    gauge_count: int
    version: str
