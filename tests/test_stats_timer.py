"""
Tests for the time_stat / async_time_stat context managers.
"""

import asyncio
import time

import pytest

from memstats.services.stats import async_time_stat, time_stat


def test_time_stat_records_one_sample(receiver):
    stat = receiver.stat("op_ms")

    with time_stat(stat):
        time.sleep(0.01)

    (sample,) = stat.read()
    assert sample >= 5.0


def test_time_stat_records_even_when_block_raises(receiver):
    stat = receiver.stat("op_ms")

    with pytest.raises(KeyError):
        with time_stat(stat):
            raise KeyError("boom")

    assert len(stat.read()) == 1


def test_time_stat_units(receiver):
    seconds = receiver.stat("op_s")
    micros = receiver.stat("op_us")

    with time_stat(seconds, unit="s"), time_stat(micros, unit="us"):
        time.sleep(0.01)

    assert seconds.read()[0] < 1.0
    assert micros.read()[0] >= 5_000.0


def test_time_stat_rejects_unknown_unit(receiver):
    with pytest.raises(ValueError, match="Unsupported time unit"):
        with time_stat(receiver.stat("op"), unit="minutes"):
            pass

    assert receiver.stat("op").read() == []


@pytest.mark.asyncio
async def test_async_time_stat_records_awaited_block(receiver):
    stat = receiver.stat("op_ms")

    async with async_time_stat(stat):
        await asyncio.sleep(0.01)

    (sample,) = stat.read()
    assert sample >= 5.0
