"""Channel 2: the initial handshake with the buds."""

from __future__ import annotations

from dataclasses import dataclass

from wearlink.maestro.protobuf import ProtoError, decode_fields, encode_varint_field

_CAPABILITY_BITMAP_LEN = 6


@dataclass
class HandshakeState:
    """What the buds have reported during the handshake."""

    model: str | None = None
    sample_rate_hz: int | None = None
    bit_depth: int | None = None
    capability_bitmap: bytes | None = None


def build_init_payload(timestamp_ms: int, tz_offset_minutes: int) -> bytes:
    """Build the payload of the channel-2 open request."""
    return (
        encode_varint_field(1, 6)
        + encode_varint_field(2, timestamp_ms)
        + encode_varint_field(3, tz_offset_minutes)
        + encode_varint_field(14, 2)
    )


def parse_ack_payload(payload: bytes, state: HandshakeState) -> HandshakeState:
    """Merge an acknowledgement payload into ``state`` and return it."""
    payload = bytes(payload)
    if len(payload) == _CAPABILITY_BITMAP_LEN:
        state.capability_bitmap = payload
        return state
    try:
        fields = decode_fields(payload)
    except ProtoError:
        return state
    for field in fields:
        if field.number == 1 and isinstance(field.value, bytes):
            state.model = field.value.decode("utf-8", errors="replace")
        elif field.number == 4 and isinstance(field.value, int):
            state.sample_rate_hz = field.value & 0xFFFFFFFF
        elif field.number == 7 and isinstance(field.value, int):
            state.bit_depth = field.value & 0xFFFFFFFF
    return state