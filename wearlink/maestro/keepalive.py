"""Channel 8: keepalive pings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class KeepaliveState:
    """Sequence counter for outgoing pings."""

    next_seq: int = 0

    def next_ping(self) -> bytes:
        """Return the next ping payload and advance the sequence number."""
        payload = bytes((0x38, self.next_seq))
        self.next_seq = (self.next_seq + 1) & 0xFF
        return payload


def is_pong(payload: bytes) -> bool:
    """Whether the payload is a keepalive reply."""
    return len(payload) > 0 and payload[0] == 0x01