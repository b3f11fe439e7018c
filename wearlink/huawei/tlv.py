"""Tag-length-value containers with one-byte tags and 16-bit lengths."""

from __future__ import annotations

from collections.abc import Iterator


class TlvError(ValueError):
    """Raised when TLV data ends in the middle of an entry."""


class Tlv:
    """Ordered multimap of tags to byte values."""

    def __init__(self) -> None:
        self._entries: dict[int, list[bytes]] = {}

    def push_bytes(self, tag: int, value: bytes) -> None:
        self._entries.setdefault(tag, []).append(bytes(value))

    def push_u8(self, tag: int, value: int) -> None:
        self.push_bytes(tag, value.to_bytes(1, "big"))

    def push_u16(self, tag: int, value: int) -> None:
        self.push_bytes(tag, value.to_bytes(2, "big"))

    def push_u32(self, tag: int, value: int) -> None:
        self.push_bytes(tag, value.to_bytes(4, "big"))

    def get_first(self, tag: int) -> bytes | None:
        values = self._entries.get(tag)
        return values[0] if values else None

    def get_u8(self, tag: int) -> int | None:
        value = self.get_first(tag)
        return value[0] if value else None

    def _get_int(self, tag: int, size: int) -> int | None:
        value = self.get_first(tag)
        if value is None or len(value) < size:
            return None
        return int.from_bytes(value[:size], "big")

    def get_u16(self, tag: int) -> int | None:
        return self._get_int(tag, 2)

    def get_u32(self, tag: int) -> int | None:
        return self._get_int(tag, 4)

    def __iter__(self) -> Iterator[tuple[int, bytes]]:
        """Yield ``(tag, value)`` pairs in ascending tag order."""
        for tag in sorted(self._entries):
            for value in self._entries[tag]:
                yield tag, value

    def encode(self) -> bytes:
        return b"".join(
            bytes((tag,)) + (len(value) & 0xFFFF).to_bytes(2, "big") + value
            for tag, value in self
        )

    @classmethod
    def decode(cls, data: bytes) -> Tlv:
        data = bytes(data)
        tlv = cls()
        offset = 0
        while offset < len(data):
            if offset + 3 > len(data):
                raise TlvError("truncated tlv")
            tag = data[offset]
            length = int.from_bytes(data[offset + 1 : offset + 3], "big")
            offset += 3
            if offset + length > len(data):
                raise TlvError("truncated tlv")
            tlv.push_bytes(tag, data[offset : offset + length])
            offset += length
        return tlv

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tlv):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"Tlv({list(self)!r})"