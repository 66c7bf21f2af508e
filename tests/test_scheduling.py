import asyncio

import pytest

from storefront.scheduling import PeriodicTask


@pytest.mark.asyncio
async def test_periodic_task_ticks_until_stopped():
    ticks = []
    task = PeriodicTask("test", 0.01, lambda: ticks.append(1))

    task.start()
    assert task.running
    await asyncio.sleep(0.06)
    task.stop()
    count = len(ticks)

    assert count >= 1
    assert not task.running
    await asyncio.sleep(0.03)
    assert len(ticks) == count


@pytest.mark.asyncio
async def test_periodic_task_awaits_async_callbacks():
    ticks = []

    async def tick():
        ticks.append(1)

    task = PeriodicTask("async", 0.01, tick)
    task.start()
    await asyncio.sleep(0.05)
    task.stop()
    assert ticks


@pytest.mark.asyncio
async def test_failing_tick_does_not_kill_the_timer():
    calls = []

    def boom():
        calls.append(1)
        raise RuntimeError("tick failed")

    task = PeriodicTask("boom", 0.01, boom)
    task.start()
    await asyncio.sleep(0.08)
    assert task.running
    task.stop()
    assert len(calls) >= 2


@pytest.mark.asyncio
async def test_restart_replaces_previous_timer():
    task = PeriodicTask("restart", 10, lambda: None)
    task.start()
    first = task._task
    task.start()
    await asyncio.sleep(0)
    assert first.cancelled()
    assert task.running
    task.stop()
