"""Channel 3: battery reports and gesture hints."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from wearlink.maestro.protobuf import ProtoError, decode_fields
from wearlink.maestro.wear_touch import EarState


class BudSide(Enum):
    LEFT = "left"
    RIGHT = "right"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class BatteryUpdate:
    bud_side: BudSide
    bud_percent: int
    in_case: bool
    case_percent: int | None


class GestureEvent(Enum):
    TAP = "tap"
    DOUBLE_TAP = "double_tap"
    TRIPLE_TAP = "triple_tap"
    LONG_PRESS = "long_press"
    UNKNOWN = "unknown"


_DISCRIMINATORS = {
    0x14: GestureEvent.TAP,
    0x16: GestureEvent.DOUBLE_TAP,
    0x15: GestureEvent.TRIPLE_TAP,
    0x1F: GestureEvent.LONG_PRESS,
}

_PROTO_HINTS = {1: GestureEvent.LONG_PRESS, 2: GestureEvent.TAP}


@dataclass
class GestureClassifier:
    """Turns gesture discriminators into events, using channel-3 hints as fallback."""

    pending_proto_hint: GestureEvent | None = None

    def note_ch3_payload(self, payload: bytes) -> None:
        """Remember any gesture hint carried in a channel-3 protobuf payload."""
        try:
            fields = decode_fields(payload)
        except ProtoError:
            return
        for field in fields:
            if field.number == 1 and isinstance(field.value, int):
                hint = _PROTO_HINTS.get(field.value)
                if hint is not None:
                    self.pending_proto_hint = hint

    def classify_from_discriminator(self, discrim: int) -> GestureEvent:
        known = _DISCRIMINATORS.get(discrim)
        if known is not None:
            return known
        return self.pending_proto_hint or GestureEvent.UNKNOWN


def parse_battery(payload: bytes, last_ear_state: EarState) -> BatteryUpdate | None:
    """Decode a three-byte battery report, or return ``None`` if it is not one."""
    payload = bytes(payload)
    if len(payload) != 3 or payload[0] != 0xE4:
        return None
    if last_ear_state is EarState.LEFT_IN:
        side = BudSide.LEFT
    elif last_ear_state is EarState.RIGHT_IN:
        side = BudSide.RIGHT
    else:
        side = BudSide.UNKNOWN
    return BatteryUpdate(
        bud_side=side,
        bud_percent=payload[1] & 0x7F,
        in_case=bool(payload[1] & 0x80),
        case_percent=None if payload[2] == 0xFF else payload[2],
    )