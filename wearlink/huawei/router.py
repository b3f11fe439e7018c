"""Dispatch of incoming frames to waiting requests or async subscribers."""

from __future__ import annotations

import asyncio
import weakref
from collections import deque

from wearlink.huawei.frame import TransportFrame

_Key = tuple[int, int]


class PendingRequests:
    """Requests awaiting a reply, keyed by ``(service_id, command_id)``."""

    def __init__(self) -> None:
        self._waiting: dict[_Key, asyncio.Future[TransportFrame]] = {}

    async def register(self, service_id: int, command_id: int) -> asyncio.Future[TransportFrame]:
        """Return a future completed by the next matching frame.

        A previous waiter for the same key is cancelled.
        """
        future: asyncio.Future[TransportFrame] = asyncio.get_running_loop().create_future()
        previous = self._waiting.pop((service_id, command_id), None)
        if previous is not None:
            previous.cancel()
        self._waiting[(service_id, command_id)] = future
        return future

    async def resolve(self, frame: TransportFrame) -> bool:
        """Hand ``frame`` to its waiter; ``False`` if nobody was waiting."""
        future = self._waiting.pop((frame.service_id, frame.command_id), None)
        if future is None:
            return False
        if future.done():
            raise RuntimeError("pending request dropped")
        future.set_result(frame)
        return True


class Subscription:
    """Receives frames that no request claimed, keeping at most ``capacity``."""

    def __init__(self, capacity: int) -> None:
        self._queue: deque[TransportFrame] = deque()
        self._capacity = capacity
        self._ready = asyncio.Event()
        self.missed = 0

    def _deliver(self, frame: TransportFrame) -> None:
        if len(self._queue) >= self._capacity:
            self._queue.popleft()
            self.missed += 1
        self._queue.append(frame)
        self._ready.set()

    def __len__(self) -> int:
        return len(self._queue)

    async def recv(self) -> TransportFrame:
        while not self._queue:
            self._ready.clear()
            await self._ready.wait()
        return self._queue.popleft()

    def __aiter__(self) -> Subscription:
        return self

    async def __anext__(self) -> TransportFrame:
        return await self.recv()


class Router:
    """Routes frames to pending requests, otherwise broadcasts them."""

    def __init__(self, capacity: int = 128) -> None:
        self._pending = PendingRequests()
        self._capacity = capacity
        self._subscribers: weakref.WeakSet[Subscription] = weakref.WeakSet()

    def subscribe(self) -> Subscription:
        subscription = Subscription(self._capacity)
        self._subscribers.add(subscription)
        return subscription

    async def register(self, service_id: int, command_id: int) -> asyncio.Future[TransportFrame]:
        return await self._pending.register(service_id, command_id)

    async def route(self, frame: TransportFrame) -> None:
        if not await self._pending.resolve(frame):
            for subscription in list(self._subscribers):
                subscription._deliver(frame)