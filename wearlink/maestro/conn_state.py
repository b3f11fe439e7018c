"""Channel 5: connection state reports."""

from __future__ import annotations

from enum import IntEnum

from wearlink.maestro.protobuf import ProtoError, decode_fields

_MASK64 = (1 << 64) - 1


class ConnectionState(IntEnum):
    """Connection state; unlisted codes become ``UNKNOWN_<code>`` members."""

    IDLE = 0
    CONNECTED = 1
    RECONNECTING = 3
    STREAMING = 4

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, int) and 0 <= value <= _MASK64:
            member = int.__new__(cls, value)
            member._name_ = f"UNKNOWN_{value}"
            member._value_ = value
            return member
        return None

    @property
    def known(self) -> bool:
        """Whether this is one of the named states."""
        return self._name_ in type(self).__members__


def parse_connection_state(payload: bytes) -> ConnectionState | None:
    """Return the state in field 1 of the payload, if present and decodable."""
    try:
        fields = decode_fields(payload)
    except ProtoError:
        return None
    for field in fields:
        if field.number == 1 and isinstance(field.value, int):
            return ConnectionState(field.value)
    return None