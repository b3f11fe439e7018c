"""Records of frames seen on the wire, for capture logs."""

from __future__ import annotations

import time
from dataclasses import dataclass, field


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


@dataclass(frozen=True)
class FrameLog:
    """One logged frame, stamped with the time it was recorded."""

    direction: str
    characteristic: str
    raw: bytes
    detail: str = ""
    timestamp_ms: int = field(default_factory=_now_ms)

    def __post_init__(self) -> None:
        object.__setattr__(self, "raw", bytes(self.raw))
        object.__setattr__(self, "detail", str(self.detail))