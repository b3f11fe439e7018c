import time

from wearlink.capture import FrameLog


def test_timestamp_is_current():
    before = time.time_ns() // 1_000_000
    log = FrameLog("tx", "write", b"\x5a\x00", "hello")
    after = time.time_ns() // 1_000_000
    assert before <= log.timestamp_ms <= after


def test_fields_are_kept():
    log = FrameLog("rx", "notify", bytearray(b"\x01\x02"), "detail text")
    assert log.direction == "rx"
    assert log.characteristic == "notify"
    assert log.raw == b"\x01\x02"
    assert log.detail == "detail text"


def test_explicit_timestamp():
    log = FrameLog("tx", "write", b"", timestamp_ms=42)
    assert log.timestamp_ms == 42
    assert log.detail == ""