"""StatName - structural key for every metric in a receiver.

A name is an ordered tuple of string segments. Two names are equal only when
their segments are equal element-wise, so ``("a", "b")`` and ``("a/b",)`` are
different metrics even though both display as ``a/b``.
"""

from typing import Iterable


SEPARATOR = "/"


class StatName(tuple):
    """Immutable, hashable sequence of name segments.

    Being a ``tuple`` subclass, a plain tuple with the same segments is an
    equal key, so tests can look entries up with ``receiver.counters[("a", "b")]``.
    """

    __slots__ = ()

    def __new__(cls, segments: Iterable[str]) -> "StatName":
        segments = tuple(segments)
        if not segments:
            raise ValueError("A stat name needs at least one segment")
        for segment in segments:
            if not isinstance(segment, str):
                raise TypeError(f"Stat name segments must be str, got {type(segment).__name__}")
            if not segment:
                raise ValueError(f"Empty segment in stat name {segments!r}")
        return super().__new__(cls, segments)

    @classmethod
    def of(cls, *segments: str) -> "StatName":
        return cls(segments)

    @property
    def display(self) -> str:
        """Joined form used for printing only, never for identity."""
        return SEPARATOR.join(self)

    def child(self, *segments: str) -> "StatName":
        return StatName(tuple(self) + segments)

    def __str__(self) -> str:
        return self.display

    def __repr__(self) -> str:
        return f"StatName({tuple(self)!r})"
