"""Maestro link-layer frames exchanged over the RFCOMM channel."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class FrameType(IntEnum):
    """Known values of the first byte of a Maestro frame."""

    OPEN = 0x01
    OPEN_ACK = 0x02
    DATA_TO_BUDS = 0x03
    CLOSE = 0x04
    DATA_FROM_BUDS = 0x05
    PING = 0x09
    RESPONSE_FROM_BUDS = 0x0E
    UNKNOWN_0X10 = 0x10
    STATE_SNAPSHOT = 0x87


class ChannelState(Enum):
    """Lifecycle of a logical Maestro channel."""

    CLOSED = "closed"
    OPEN_SENT = "open_sent"
    OPEN = "open"


@dataclass(frozen=True)
class MaestroFrame:
    """One decoded Maestro frame."""

    frame_type: int
    channel: int
    flags: int
    payload: bytes


def encode_frame(frame_type: int, channel: int, flags: int, payload: bytes) -> bytes:
    """Encode a frame; single-byte payloads use the compact three-byte form."""
    payload = bytes(payload)
    if len(payload) == 1:
        return bytes((frame_type, channel, payload[0]))
    return bytes((frame_type, channel, flags, len(payload) & 0xFF)) + payload


def parse_frame(buf: bytes) -> tuple[MaestroFrame, int] | None:
    """Parse one frame from the start of ``buf``.

    Returns the frame and the number of bytes it used, or ``None`` when
    more data is needed.
    """
    buf = bytes(buf)
    size = len(buf)
    if size < 3:
        return None
    if size == 3 or (buf[2] != 0x00 and buf[3] > (size & 0xFF)):
        return MaestroFrame(buf[0], buf[1], 0, buf[2:3]), 3
    length = buf[3]
    if size < 4 + length:
        return None
    return MaestroFrame(buf[0], buf[1], buf[2], buf[4 : 4 + length]), 4 + length