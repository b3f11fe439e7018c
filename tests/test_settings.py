import pytest

from wearlink.maestro.settings import SettingId, SettingSnapshot, build_toggle, parse_snapshot


def test_in_ear_toggle_bytes():
    assert build_toggle(SettingId.IN_EAR_DETECT, 1) == bytes([0x1A, 0x02, 0x08, 1])


@pytest.mark.parametrize("setting", list(SettingId))
@pytest.mark.parametrize("value", [0, 1, 200])
def test_round_trip(setting, value):
    snapshot = parse_snapshot(build_toggle(setting, value))
    assert snapshot == SettingSnapshot(setting, value)
    assert snapshot.setting.known


def test_unknown_tag():
    snapshot = parse_snapshot(bytes([0x1A, 0x02, 0x99, 3]))
    assert snapshot == SettingSnapshot(SettingId(0x99), 3)
    assert snapshot.setting.value == 0x99
    assert not snapshot.setting.known
    assert build_toggle(snapshot.setting, 3) == bytes([0x1A, 0x02, 0x99, 3])


def test_extra_bytes_ignored():
    assert parse_snapshot(bytes([0x1A, 0x02, 0x58, 1, 0xAA])) == SettingSnapshot(
        SettingId.TOUCH_CONTROLS, 1
    )


@pytest.mark.parametrize(
    "payload", [b"", bytes([0x1A, 0x02, 0x08]), bytes([0x1A, 0x03, 0x08, 1])]
)
def test_not_a_snapshot(payload):
    assert parse_snapshot(payload) is None


def test_invalid_tag_rejected():
    with pytest.raises(ValueError):
        build_toggle(0x100, 1)