"""Channel 11: periodic device status reports."""

from __future__ import annotations

from dataclasses import dataclass

from wearlink.maestro.protobuf import ProtoError, decode_fields

_FIELD_NAMES = {
    2: "seq_num",
    5: "audio_mode",
    6: "wear_state",
    11: "conn_mask",
    12: "tick_us",
}


@dataclass
class DeviceStatus:
    seq_num: int | None = None
    audio_mode: int | None = None
    wear_state: int | None = None
    conn_mask: int | None = None
    tick_us: int | None = None


def parse_status(payload: bytes) -> DeviceStatus | None:
    """Decode a status report; ``None`` if the payload is not valid protobuf."""
    try:
        fields = decode_fields(payload)
    except ProtoError:
        return None
    status = DeviceStatus()
    for field in fields:
        name = _FIELD_NAMES.get(field.number)
        if name is not None and isinstance(field.value, int):
            setattr(status, name, field.value)
    return status