"""Raw lidar packet message."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Packet:
    """A raw MSOP or DIFOP packet with its metadata."""

    timestamp: float = 0.0
    seq: int = 0
    is_difop: bool = False
    is_frame_begin: bool = False
    buf: bytearray = field(default_factory=bytearray)

    def copy(self) -> Packet:
        """Return a new packet holding a copy of the payload only.

        Metadata fields of the copy keep their defaults.
        """
        return Packet(buf=bytearray(self.buf))