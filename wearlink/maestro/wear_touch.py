"""Channel 9: wear detection, lid and touch events."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class EarState(Enum):
    BOTH_OUT = "both_out"
    RIGHT_IN = "right_in"
    LEFT_IN = "left_in"
    BOTH_IN = "both_in"


class LidState(Enum):
    CLOSED = "closed"
    OPEN = "open"


class TouchEvent(Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class LidEvent:
    state: LidState


@dataclass(frozen=True)
class EarEvent:
    state: EarState


@dataclass(frozen=True)
class TouchInput:
    touch: TouchEvent


@dataclass(frozen=True)
class GestureComplete:
    code: int


@dataclass(frozen=True)
class PrimaryBud:
    is_primary: bool


WearTouchEvent = Union[LidEvent, EarEvent, TouchInput, GestureComplete, PrimaryBud]

_EAR_STATES = {1: EarState.RIGHT_IN, 2: EarState.LEFT_IN, 3: EarState.BOTH_IN}


def parse_wear_touch(payload: bytes) -> list[WearTouchEvent]:
    """Decode the events carried by a channel-9 payload."""
    payload = bytes(payload)
    if len(payload) < 2 or payload[0] != 0x0A:
        return []
    inner_len = payload[1]
    if len(payload) < 2 + inner_len:
        return []
    inner = payload[2 : 2 + inner_len]

    events: list[WearTouchEvent] = []
    i = 0
    while i < len(inner):
        code = inner[i]
        has_arg = i + 1 < len(inner)
        if code == 0x01 and has_arg:
            events.append(LidEvent(LidState.CLOSED if inner[i + 1] == 0 else LidState.OPEN))
            i += 2
        elif code == 0x03 and has_arg:
            events.append(EarEvent(_EAR_STATES.get(inner[i + 1], EarState.BOTH_OUT)))
            i += 2
        elif code == 0x04 and has_arg:
            events.append(PrimaryBud(inner[i + 1] != 0))
            i += 2
        elif code == 0x05:
            events.append(TouchInput(TouchEvent.LEFT))
            i += 1
        elif code == 0x06:
            events.append(TouchInput(TouchEvent.RIGHT))
            i += 1
        elif code == 0x0B and has_arg:
            events.append(GestureComplete(inner[i + 1]))
            i += 2
        elif code == 0x1F:
            events.append(GestureComplete(0x1F))
            i += 1
        else:
            i += 1
    return events