import pytest

from wearlink.maestro.wear_touch import (
    EarEvent,
    EarState,
    GestureComplete,
    LidEvent,
    LidState,
    PrimaryBud,
    TouchEvent,
    TouchInput,
    parse_wear_touch,
)


@pytest.mark.parametrize(
    ("value", "state"), [(0, LidState.CLOSED), (1, LidState.OPEN), (7, LidState.OPEN)]
)
def test_lid(value, state):
    assert parse_wear_touch(bytes([0x0A, 0x02, 0x01, value])) == [LidEvent(state)]


@pytest.mark.parametrize(
    ("value", "state"),
    [
        (0, EarState.BOTH_OUT),
        (1, EarState.RIGHT_IN),
        (2, EarState.LEFT_IN),
        (3, EarState.BOTH_IN),
        (9, EarState.BOTH_OUT),
    ],
)
def test_ear(value, state):
    assert parse_wear_touch(bytes([0x0A, 0x02, 0x03, value])) == [EarEvent(state)]


def test_composite_payload():
    payload = bytes([0x0A, 0x06, 0x05, 0x06, 0x04, 0x01, 0x0B, 0x16])
    assert parse_wear_touch(payload) == [
        TouchInput(TouchEvent.LEFT),
        TouchInput(TouchEvent.RIGHT),
        PrimaryBud(True),
        GestureComplete(0x16),
    ]


def test_standalone_long_press_marker():
    assert parse_wear_touch(bytes([0x0A, 0x01, 0x1F])) == [GestureComplete(0x1F)]


def test_unknown_bytes_skipped():
    payload = bytes([0x0A, 0x03, 0x77, 0x04, 0x00])
    assert parse_wear_touch(payload) == [PrimaryBud(False)]


@pytest.mark.parametrize(
    "payload",
    [b"", b"\x0a", bytes([0x0B, 0x02, 0x01, 0x00]), bytes([0x0A, 0x05, 0x01])],
)
def test_bad_header_yields_nothing(payload):
    assert parse_wear_touch(payload) == []


def test_missing_argument_is_skipped():
    assert parse_wear_touch(bytes([0x0A, 0x01, 0x0B])) == []


def test_bytes_after_inner_ignored():
    assert parse_wear_touch(bytes([0x0A, 0x01, 0x05, 0x06])) == [TouchInput(TouchEvent.LEFT)]