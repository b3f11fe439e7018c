from wearlink.maestro.keepalive import KeepaliveState, is_pong


def test_ping_sequence():
    state = KeepaliveState()
    assert state.next_ping() == bytes([0x38, 0])
    assert state.next_ping() == bytes([0x38, 1])
    assert state.next_seq == 2


def test_ping_sequence_wraps():
    state = KeepaliveState()
    pings = [state.next_ping() for _ in range(257)]
    assert [p[1] for p in pings[:256]] == list(range(256))
    assert pings[256] == bytes([0x38, 0])


def test_is_pong():
    assert is_pong(b"\x01")
    assert is_pong(b"\x01\x05")
    assert not is_pong(b"")
    assert not is_pong(b"\x38\x01")