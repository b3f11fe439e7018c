"""Channel 10: device settings snapshots and toggles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

_HEADER = b"\x1a\x02"


class SettingId(IntEnum):
    """Settings keyed by their wire tag; unlisted tags become ``UNKNOWN_0x..``."""

    IN_EAR_DETECT = 0x08
    USAGE_DIAGNOSTICS = 0x18
    ADAPTIVE_SOUND = 0x28
    UNKNOWN_F7 = 0x38
    FIRMWARE_AUTO_UPDATE = 0x40
    UNKNOWN_F10 = 0x50
    TOUCH_CONTROLS = 0x58
    UNKNOWN_F12 = 0x60
    VOLUME_EQ = 0x68
    BASS_EQ_LEVEL = 0x70

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, int) and 0 <= value <= 0xFF:
            member = int.__new__(cls, value)
            member._name_ = f"UNKNOWN_0x{value:02x}"
            member._value_ = value
            return member
        return None

    @property
    def known(self) -> bool:
        """Whether this is one of the named settings."""
        return self._name_ in type(self).__members__


@dataclass(frozen=True)
class SettingSnapshot:
    setting: SettingId
    value: int


def parse_snapshot(payload: bytes) -> SettingSnapshot | None:
    """Decode a setting snapshot, or return ``None`` if the payload is not one."""
    payload = bytes(payload)
    if len(payload) < 4 or payload[:2] != _HEADER:
        return None
    return SettingSnapshot(SettingId(payload[2]), payload[3])


def build_toggle(setting: SettingId | int, value: int) -> bytes:
    """Build the payload that sets ``setting`` to ``value``."""
    return _HEADER + bytes((SettingId(setting), value))