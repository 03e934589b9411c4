"""
Unit tests for StatName, the structural key of every metric.
"""

import pytest

from memstats.services.stats.name import StatName


def test_equality_is_by_segments_not_display():
    """Names that print the same but have different segments are different keys."""
    nested = StatName.of("a", "b")
    flat = StatName.of("a/b")

    assert nested.display == flat.display == "a/b"
    assert nested != flat
    assert len({nested, flat}) == 2


def test_plain_tuple_is_an_equal_key():
    """A StatName can be looked up with a plain tuple of the same segments."""
    table = {StatName.of("x", "y"): 1}

    assert table[("x", "y")] == 1
    assert hash(StatName.of("x", "y")) == hash(("x", "y"))


def test_str_and_repr():
    name = StatName(["http", "requests"])

    assert str(name) == "http/requests"
    assert repr(name) == "StatName(('http', 'requests'))"


def test_child_appends_segments():
    name = StatName.of("http").child("status", "200")

    assert name == ("http", "status", "200")
    assert isinstance(name, StatName)


def test_segments_are_not_normalized():
    """Slashes and whitespace inside a segment are kept as-is."""
    name = StatName.of(" a/b ", "c")

    assert tuple(name) == (" a/b ", "c")


@pytest.mark.parametrize("segments", [(), ("a", ""), ("",)])
def test_rejects_empty_names_and_segments(segments):
    with pytest.raises(ValueError):
        StatName(segments)


def test_rejects_non_string_segments():
    with pytest.raises(TypeError):
        StatName.of("a", 1)
