"""Minimal protobuf wire-format helpers (varint and length-delimited fields)."""

from __future__ import annotations

from dataclasses import dataclass

_MASK64 = (1 << 64) - 1
_MIN_SIGNED64 = -(1 << 63)


class ProtoError(ValueError):
    """Raised when protobuf data is truncated or uses an unsupported wire type."""


@dataclass(frozen=True)
class ProtoField:
    """A decoded field: an ``int`` for varints, ``bytes`` for length-delimited."""

    number: int
    value: int | bytes


def decode_varint(data: bytes) -> tuple[int, int]:
    """Decode a varint at the start of ``data``; return ``(value, length)``."""
    value = 0
    for index, byte in enumerate(data):
        value |= (byte & 0x7F) << (7 * index)
        if not byte & 0x80:
            return value & _MASK64, index + 1
    raise ProtoError("truncated protobuf")


def decode_fields(data: bytes) -> list[ProtoField]:
    """Decode every field of a message, in wire order."""
    view = memoryview(bytes(data))
    fields: list[ProtoField] = []
    while view:
        key, used = decode_varint(view)
        view = view[used:]
        number, wire_type = key >> 3, key & 0x07
        if wire_type == 0:
            value, used = decode_varint(view)
            fields.append(ProtoField(number, value))
            view = view[used:]
        elif wire_type == 2:
            length, used = decode_varint(view)
            view = view[used:]
            if len(view) < length:
                raise ProtoError("truncated protobuf")
            fields.append(ProtoField(number, bytes(view[:length])))
            view = view[length:]
        else:
            raise ProtoError("truncated protobuf")
    return fields


def encode_varint(value: int) -> bytes:
    """Encode a 64-bit value as a varint; negative values wrap as two's complement."""
    if not _MIN_SIGNED64 <= value <= _MASK64:
        raise ValueError(f"value {value} does not fit in 64 bits")
    value &= _MASK64
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def encode_varint_field(field_number: int, value: int) -> bytes:
    """Encode a varint field (wire type 0) with its key."""
    return encode_varint(field_number << 3) + encode_varint(value)