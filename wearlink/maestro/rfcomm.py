"""RFCOMM endpoint description and byte-stream reassembly for Maestro frames."""

from __future__ import annotations

from dataclasses import dataclass

from wearlink.maestro.frame import MaestroFrame, parse_frame

MAESTRO_SERVER_CHANNEL = 13


@dataclass(frozen=True)
class RfcommDescriptor:
    """An RFCOMM server channel and the DLCI derived from it."""

    server_channel: int
    dlci: int

    @classmethod
    def from_server_channel(cls, server_channel: int) -> RfcommDescriptor:
        """Build a descriptor; the DLCI is twice the channel, capped at 255."""
        return cls(server_channel, min(server_channel * 2, 0xFF))


def discover_maestro_descriptor() -> RfcommDescriptor:
    """Return the descriptor of the Maestro service."""
    return RfcommDescriptor.from_server_channel(MAESTRO_SERVER_CHANNEL)


def connect_maestro(descriptor: RfcommDescriptor) -> RfcommDescriptor:
    """Check that ``descriptor`` can be connected to and return it."""
    if descriptor.dlci == 0:
        raise ValueError("invalid maestro dlci")
    return descriptor


class Reassembler:
    """Buffers incoming bytes and yields complete Maestro frames."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    def push(self, data: bytes) -> list[MaestroFrame]:
        """Append ``data`` and return every frame that is now complete."""
        self._buffer += data
        frames = []
        while (parsed := parse_frame(self._buffer)) is not None:
            frame, consumed = parsed
            del self._buffer[:consumed]
            frames.append(frame)
        return frames