"""State of a Maestro session with a pair of buds."""

from __future__ import annotations

import dataclasses
import time
import weakref
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from wearlink.maestro.conn_state import ConnectionState, parse_connection_state
from wearlink.maestro.control import GestureClassifier, parse_battery
from wearlink.maestro.frame import ChannelState, MaestroFrame, encode_frame
from wearlink.maestro.handshake import HandshakeState, build_init_payload, parse_ack_payload
from wearlink.maestro.keepalive import KeepaliveState
from wearlink.maestro.rfcomm import RfcommDescriptor
from wearlink.maestro.settings import SettingId, build_toggle, parse_snapshot
from wearlink.maestro.status import parse_status
from wearlink.maestro.wear_touch import EarEvent, EarState, GestureComplete, parse_wear_touch

_EVENT_CAPACITY = 128
_HANDSHAKE_CHANNEL = 2
_DATA_CHANNELS = (5, 6, 7, 8, 9, 10, 11)


@dataclass
class MaestroConfig:
    adapter: str | None = None
    keepalive_interval: float = 2.0


class MaestroEventKind(Enum):
    HANDSHAKE = "handshake"
    CONNECTION_STATE = "connection_state"
    BATTERY = "battery"
    WEAR_TOUCH = "wear_touch"
    GESTURE = "gesture"
    SETTING = "setting"
    STATUS = "status"
    FRAME = "frame"


@dataclass(frozen=True)
class MaestroEvent:
    kind: MaestroEventKind
    value: Any


class EventReceiver:
    """Events published after subscribing, keeping at most ``capacity``."""

    def __init__(self, capacity: int) -> None:
        self._queue: deque[MaestroEvent] = deque()
        self._capacity = capacity
        self.missed = 0

    def _deliver(self, event: MaestroEvent) -> None:
        if len(self._queue) >= self._capacity:
            self._queue.popleft()
            self.missed += 1
        self._queue.append(event)

    def __len__(self) -> int:
        return len(self._queue)

    def __iter__(self) -> Iterator[MaestroEvent]:
        while self._queue:
            yield self._queue.popleft()

    def drain(self) -> list[MaestroEvent]:
        """Remove and return every queued event."""
        return list(self)


class PixelBudsASession:
    """Builds outgoing frames and interprets incoming ones."""

    def __init__(self, address: str, config: MaestroConfig | None = None) -> None:
        self.address = address
        self.config = config or MaestroConfig()
        self.descriptor: RfcommDescriptor | None = None
        self.handshake = HandshakeState()
        self.connection_state: ConnectionState | None = None
        self.last_ear_state = EarState.BOTH_OUT
        self.settings: dict[SettingId, int] = {}
        self.channels: dict[int, ChannelState] = {}
        self._keepalive = KeepaliveState()
        self._gestures = GestureClassifier()
        self._receivers: weakref.WeakSet[EventReceiver] = weakref.WeakSet()

    def events(self) -> EventReceiver:
        """Subscribe to events emitted from now on."""
        receiver = EventReceiver(_EVENT_CAPACITY)
        self._receivers.add(receiver)
        return receiver

    def _emit(self, kind: MaestroEventKind, value: Any) -> None:
        event = MaestroEvent(kind, value)
        for receiver in list(self._receivers):
            receiver._deliver(event)

    def build_handshake_frames(self) -> list[bytes]:
        """Frames opening the handshake channel and every data channel."""
        init = build_init_payload(int(time.time() * 1000), 0)
        frames = [encode_frame(0x01, _HANDSHAKE_CHANNEL, 0, init)]
        for channel in _DATA_CHANNELS:
            self.channels[channel] = ChannelState.OPEN_SENT
            frames.append(encode_frame(0x01, channel, 0, b""))
        return frames

    def next_keepalive_frame(self) -> bytes:
        return encode_frame(0x09, 8, 0, self._keepalive.next_ping())

    def set_in_ear_detection(self, enabled: bool) -> bytes:
        return encode_frame(0x03, 10, 0, build_toggle(SettingId.IN_EAR_DETECT, int(enabled)))

    def ingest_frame(self, frame: MaestroFrame) -> None:
        """Update session state from ``frame`` and emit the resulting events."""
        self._emit(MaestroEventKind.FRAME, frame)
        kind, channel, payload = frame.frame_type, frame.channel, frame.payload

        if kind == 0x02 and channel == _HANDSHAKE_CHANNEL:
            parse_ack_payload(payload, self.handshake)
            self._emit(MaestroEventKind.HANDSHAKE, dataclasses.replace(self.handshake))
        elif kind == 0x02:
            self.channels[channel] = ChannelState.OPEN
        elif channel == 3 and kind in (0x05, 0x10):
            update = parse_battery(payload, self.last_ear_state)
            if update is not None:
                self._emit(MaestroEventKind.BATTERY, update)
            else:
                self._gestures.note_ch3_payload(payload)
        elif channel == 5 and kind in (0x05, 0x87):
            state = parse_connection_state(payload)
            if state is not None:
                self.connection_state = state
                self._emit(MaestroEventKind.CONNECTION_STATE, state)
        elif channel == 9 and kind in (0x05, 0x87):
            for event in parse_wear_touch(payload):
                if isinstance(event, EarEvent):
                    self.last_ear_state = event.state
                if isinstance(event, GestureComplete):
                    gesture = self._gestures.classify_from_discriminator(event.code)
                    self._emit(MaestroEventKind.GESTURE, gesture)
                self._emit(MaestroEventKind.WEAR_TOUCH, event)
        elif channel == 10 and kind in (0x05, 0x87):
            snapshot = parse_snapshot(payload)
            if snapshot is not None:
                self.settings[snapshot.setting] = snapshot.value
                self._emit(MaestroEventKind.SETTING, snapshot)
        elif channel == 11 and kind == 0x05:
            status = parse_status(payload)
            if status is not None:
                self._emit(MaestroEventKind.STATUS, status)
        # Keepalive replies on channel 8 need no action.