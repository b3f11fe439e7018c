from wearlink.maestro.protobuf import encode_varint, encode_varint_field
from wearlink.maestro.status import DeviceStatus, parse_status


def test_all_fields():
    payload = (
        encode_varint_field(2, 17)
        + encode_varint_field(5, 3)
        + encode_varint_field(6, 2)
        + encode_varint_field(11, 0x0F)
        + encode_varint_field(12, 123_456_789)
    )
    assert parse_status(payload) == DeviceStatus(
        seq_num=17, audio_mode=3, wear_state=2, conn_mask=0x0F, tick_us=123_456_789
    )


def test_later_field_overrides_earlier():
    payload = encode_varint_field(2, 1) + encode_varint_field(2, 9)
    assert parse_status(payload).seq_num == 9


def test_unknown_and_bytes_fields_ignored():
    payload = (
        encode_varint_field(3, 44)
        + encode_varint((5 << 3) | 2)
        + encode_varint(2)
        + b"ab"
        + encode_varint_field(6, 1)
    )
    assert parse_status(payload) == DeviceStatus(wear_state=1)


def test_empty_payload():
    assert parse_status(b"") == DeviceStatus()


def test_invalid_payload():
    assert parse_status(b"\x10\x80") is None