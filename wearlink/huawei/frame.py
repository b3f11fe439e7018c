"""Huawei transport framing: magic byte, length, slice header and CRC-16."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

MAGIC = 0x5A
_HEADER_LEN = 3
_CRC_LEN = 2


class FrameError(ValueError):
    """Base class for transport framing errors."""


class BadMagic(FrameError):
    def __init__(self) -> None:
        super().__init__("bad magic")


class BadCrc(FrameError):
    def __init__(self) -> None:
        super().__init__("bad crc")


class Truncated(FrameError):
    def __init__(self) -> None:
        super().__init__("frame too short")


class MissingSliceHeader(FrameError):
    def __init__(self) -> None:
        super().__init__("slice missing header")


@dataclass(frozen=True)
class TransportFrame:
    """A complete service/command message."""

    service_id: int
    command_id: int
    payload: bytes = b""


class SliceKind(IntEnum):
    """Slice state byte on the wire."""

    UNSLICED = 0x00
    FIRST = 0x01
    MIDDLE = 0x02
    LAST = 0x03


@dataclass(frozen=True)
class EncodedSlice:
    """One encoded packet together with its slice position."""

    kind: SliceKind
    index: int
    data: bytes


def _build_crc_table() -> tuple[int, ...]:
    table = []
    for value in range(256):
        crc = value
        for _ in range(8):
            crc = (crc >> 1) ^ 0x8408 if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


_CRC_TABLE = _build_crc_table()


def crc16(data: bytes) -> int:
    """CRC-16/IBM-SDLC (X.25): reflected 0x1021, init and xor-out 0xFFFF."""
    crc = 0xFFFF
    for byte in data:
        crc = (crc >> 8) ^ _CRC_TABLE[(crc ^ byte) & 0xFF]
    return crc ^ 0xFFFF


def _validate_crc(data: bytes) -> None:
    expected = int.from_bytes(data[-_CRC_LEN:], "big")
    if crc16(data[_HEADER_LEN:-_CRC_LEN]) != expected:
        raise BadCrc()


def _encode_slice(kind: int, index: int, body: bytes) -> bytes:
    head = bytes((MAGIC,)) + ((len(body) + 2) & 0xFFFF).to_bytes(2, "big")
    checked = bytes((kind, index)) + body
    return head + checked + crc16(checked).to_bytes(2, "big")


def _decode_slice(data: bytes) -> TransportFrame:
    if len(data) < 10:
        raise Truncated()
    _validate_crc(data)
    return TransportFrame(data[5], data[6], bytes(data[7:-_CRC_LEN]))


def _decode_continuation(data: bytes) -> bytes:
    if len(data) < 8:
        raise Truncated()
    _validate_crc(data)
    return bytes(data[5:-_CRC_LEN])


def _inspect_slice(data: bytes) -> EncodedSlice:
    if len(data) < 8:
        raise Truncated()
    if data[0] != MAGIC:
        raise BadMagic()
    _validate_crc(data)
    try:
        kind = SliceKind(data[3])
    except ValueError:
        raise Truncated() from None
    return EncodedSlice(kind, data[4], bytes(data))


@dataclass
class _Partial:
    service_id: int
    command_id: int
    payload: bytearray
    last_index: int


class SliceReassembler:
    """Joins sliced packets back into complete frames."""

    def __init__(self) -> None:
        self._current: _Partial | None = None

    def push(self, slice: EncodedSlice) -> TransportFrame | None:
        """Feed one slice; return a frame when one is complete."""
        if slice.kind is SliceKind.UNSLICED:
            return _decode_slice(slice.data)
        if slice.kind is SliceKind.FIRST:
            head = _decode_slice(slice.data)
            self._current = _Partial(
                head.service_id, head.command_id, bytearray(head.payload), slice.index
            )
            return None
        if slice.kind is SliceKind.MIDDLE:
            current = self._current
            if current is None or slice.index <= current.last_index:
                raise MissingSliceHeader()
            current.last_index = slice.index
            current.payload += _decode_continuation(slice.data)
            return None
        current, self._current = self._current, None
        if current is None or slice.index <= current.last_index:
            raise MissingSliceHeader()
        current.payload += _decode_continuation(slice.data)
        return TransportFrame(current.service_id, current.command_id, bytes(current.payload))


def encode_frame(frame: TransportFrame, slice_size: int) -> list[EncodedSlice]:
    """Encode a frame, splitting it into slices if it exceeds ``slice_size``."""
    full = bytes((frame.service_id, frame.command_id)) + bytes(frame.payload)
    if len(full) + 6 <= slice_size:
        return [EncodedSlice(SliceKind.UNSLICED, 0, _encode_slice(SliceKind.UNSLICED, 0, full))]

    max_chunk = max(slice_size - 7, 1)
    slices = []
    index = 0
    for offset in range(0, len(full), max_chunk):
        chunk = full[offset : offset + max_chunk]
        if offset == 0:
            kind = SliceKind.FIRST
        elif offset + len(chunk) == len(full):
            kind = SliceKind.LAST
        else:
            kind = SliceKind.MIDDLE
        slices.append(EncodedSlice(kind, index, _encode_slice(kind, index, chunk)))
        index = (index + 1) & 0xFF
    return slices


def parse_stream(buf: bytearray, reassembler: SliceReassembler) -> list[TransportFrame]:
    """Consume complete packets from ``buf`` and return the frames they finish."""
    frames = []
    while len(buf) >= 5:
        if buf[0] != MAGIC:
            raise BadMagic()
        body_len = int.from_bytes(buf[1:3], "big")
        total = _HEADER_LEN + body_len + _CRC_LEN
        if len(buf) < total:
            break
        packet = bytes(buf[:total])
        del buf[:total]
        frame = reassembler.push(_inspect_slice(packet))
        if frame is not None:
            frames.append(frame)
    return frames