import pytest

from wearlink.maestro.protobuf import (
    ProtoError,
    ProtoField,
    decode_fields,
    decode_varint,
    encode_varint,
    encode_varint_field,
)


def test_decode_single_byte_varint():
    assert decode_varint(b"\x05") == (5, 1)


def test_decode_multi_byte_varint_ignores_trailing():
    assert decode_varint(b"\x96\x01\xff") == (150, 2)


@pytest.mark.parametrize("value", [0, 1, 127, 128, 300, 1 << 32, (1 << 64) - 1])
def test_varint_round_trip(value):
    encoded = encode_varint(value)
    assert decode_varint(encoded) == (value, len(encoded))


def test_negative_varint_wraps_to_unsigned():
    encoded = encode_varint(-1)
    assert decode_varint(encoded)[0] == (1 << 64) - 1


@pytest.mark.parametrize("value", [1 << 64, -(1 << 63) - 1])
def test_encode_out_of_range(value):
    with pytest.raises(ValueError):
        encode_varint(value)


@pytest.mark.parametrize("data", [b"", b"\x80", b"\x80\x80"])
def test_truncated_varint(data):
    with pytest.raises(ProtoError):
        decode_varint(data)


def test_decode_fields_mixed():
    data = (
        encode_varint_field(2, 300)
        + encode_varint((5 << 3) | 2)
        + encode_varint(3)
        + b"abc"
    )
    assert decode_fields(data) == [ProtoField(2, 300), ProtoField(5, b"abc")]


def test_decode_fields_empty():
    assert decode_fields(b"") == []


def test_unsupported_wire_type():
    with pytest.raises(ProtoError):
        decode_fields(encode_varint((1 << 3) | 1) + bytes(8))


def test_truncated_length_delimited():
    with pytest.raises(ProtoError):
        decode_fields(encode_varint((1 << 3) | 2) + encode_varint(5) + b"ab")


def test_missing_varint_value():
    with pytest.raises(ProtoError):
        decode_fields(encode_varint(1 << 3))