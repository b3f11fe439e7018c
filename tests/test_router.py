import asyncio

import pytest

from wearlink.huawei.frame import TransportFrame
from wearlink.huawei.router import PendingRequests, Router


@pytest.mark.asyncio
async def test_pending_resolve():
    pending = PendingRequests()
    future = await pending.register(1, 2)
    frame = TransportFrame(1, 2, b"ok")
    assert await pending.resolve(frame) is True
    assert await future == frame
    assert await pending.resolve(frame) is False


@pytest.mark.asyncio
async def test_pending_unknown_key():
    pending = PendingRequests()
    await pending.register(1, 2)
    assert await pending.resolve(TransportFrame(1, 3, b"")) is False


@pytest.mark.asyncio
async def test_pending_dropped_waiter_raises():
    pending = PendingRequests()
    future = await pending.register(1, 2)
    future.cancel()
    with pytest.raises(RuntimeError):
        await pending.resolve(TransportFrame(1, 2, b""))


@pytest.mark.asyncio
async def test_reregister_cancels_previous():
    pending = PendingRequests()
    first = await pending.register(4, 4)
    second = await pending.register(4, 4)
    assert first.cancelled()
    frame = TransportFrame(4, 4, b"x")
    assert await pending.resolve(frame) is True
    assert second.result() == frame


@pytest.mark.asyncio
async def test_router_prefers_pending():
    router = Router()
    subscription = router.subscribe()
    future = await router.register(7, 1)
    frame = TransportFrame(7, 1, b"reply")
    await router.route(frame)
    assert future.result() == frame
    assert len(subscription) == 0


@pytest.mark.asyncio
async def test_router_broadcasts_unclaimed():
    router = Router()
    first = router.subscribe()
    second = router.subscribe()
    frame = TransportFrame(1, 9, b"event")
    await router.route(frame)
    assert await asyncio.wait_for(first.recv(), 1) == frame
    assert await asyncio.wait_for(second.recv(), 1) == frame


@pytest.mark.asyncio
async def test_late_subscriber_misses_earlier_frames():
    router = Router()
    await router.route(TransportFrame(1, 1, b"early"))
    subscription = router.subscribe()
    late = TransportFrame(1, 2, b"late")
    await router.route(late)
    assert await asyncio.wait_for(subscription.recv(), 1) == late
    assert len(subscription) == 0


@pytest.mark.asyncio
async def test_subscription_waits_for_frame():
    router = Router()
    subscription = router.subscribe()
    receiver = asyncio.create_task(subscription.recv())
    await asyncio.sleep(0)
    frame = TransportFrame(2, 2, b"later")
    await router.route(frame)
    assert await asyncio.wait_for(receiver, 1) == frame


@pytest.mark.asyncio
async def test_capacity_drops_oldest():
    router = Router(capacity=2)
    subscription = router.subscribe()
    frames = [TransportFrame(1, n, b"") for n in range(3)]
    for frame in frames:
        await router.route(frame)
    assert subscription.missed == 1
    assert await subscription.recv() == frames[1]
    assert await subscription.recv() == frames[2]