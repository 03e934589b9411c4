"""Verbosity levels attached to stat names."""

from enum import Enum


class Verbosity(str, Enum):
    """Classification of how interesting a metric is to export.

    Receivers only record the tag; filtering on it is left to consumers.
    """

    DEFAULT = "default"
    DEBUG = "debug"
