import pytest

from wearlink.maestro.conn_state import ConnectionState, parse_connection_state
from wearlink.maestro.protobuf import encode_varint, encode_varint_field


@pytest.mark.parametrize(
    ("code", "state"),
    [
        (0, ConnectionState.IDLE),
        (1, ConnectionState.CONNECTED),
        (3, ConnectionState.RECONNECTING),
        (4, ConnectionState.STREAMING),
    ],
)
def test_known_states(code, state):
    result = parse_connection_state(encode_varint_field(1, code))
    assert result is state
    assert result.known


def test_unknown_state_keeps_code():
    result = parse_connection_state(encode_varint_field(1, 7))
    assert result == ConnectionState(7)
    assert result.value == 7
    assert not result.known


def test_first_field_one_wins():
    payload = encode_varint_field(2, 1) + encode_varint_field(1, 4) + encode_varint_field(1, 0)
    assert parse_connection_state(payload) is ConnectionState.STREAMING


def test_missing_field():
    assert parse_connection_state(encode_varint_field(2, 1)) is None


def test_bytes_field_one_ignored():
    payload = encode_varint((1 << 3) | 2) + encode_varint(1) + b"\x01"
    assert parse_connection_state(payload) is None


def test_invalid_payload():
    assert parse_connection_state(b"\x80") is None