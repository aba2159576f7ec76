"""Constant decoder parameters shared by the lidar models."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Any, Sequence

from rsdriver.block_iterator import float32


class EchoMode(enum.Enum):
    """Whether a lidar reports one return or two per firing."""

    ECHO_SINGLE = "single"
    ECHO_DUAL = "dual"


@dataclass(frozen=True)
class DecoderConstParam:
    """Fixed packet layout and range parameters of a lidar model."""

    msop_len: int
    difop_len: int
    msop_id_len: int
    difop_id_len: int
    msop_id: bytes
    difop_id: bytes
    block_id: bytes
    laser_num: int
    blocks_per_pkt: int
    channels_per_block: int
    distance_min: float
    distance_max: float
    distance_res: float
    temperature_res: float


@dataclass(frozen=True)
class MechConstParam(DecoderConstParam):
    """Constant parameters of a mechanical (spinning) lidar."""

    rx: float = 0.0
    ry: float = 0.0
    rz: float = 0.0
    block_duration: float = 0.0
    chan_tss: tuple[float, ...] = ()
    chan_azis: tuple[float, ...] = ()

    def with_firing_times(self, blk_ts: float, firing_tss: Sequence[float]) -> MechConstParam:
        """Return a copy timed by ``blk_ts`` and per-channel firing times (microseconds)."""
        span = float32(blk_ts)
        fired = [float32(t) for t in firing_tss]
        return replace(
            self,
            block_duration=float32(span / 1_000_000),
            chan_tss=tuple(t / 1_000_000 for t in fired),
            chan_azis=tuple(float32(t / span) for t in fired),
        )

    def with_channels(self, chan_azis: Sequence[float], chan_tss: Sequence[float]) -> MechConstParam:
        """Return a copy with the given per-channel azimuth fractions and time offsets."""
        return replace(self, chan_azis=tuple(chan_azis), chan_tss=tuple(chan_tss))

    def evolve(self, **changes: Any) -> MechConstParam:
        """Return a copy with ``changes`` applied."""
        return replace(self, **changes)


@dataclass
class CalibrationAngle:
    """One angle calibration entry: magnitude and sign flag."""

    value: int = 0
    sign: int = 0


def split_blocks_per_frame(echo_mode: EchoMode, blks_per_frame: int, dual_doubles: bool) -> int:
    """Number of blocks after which a frame is split.

    With ``dual_doubles`` a dual-return frame has twice the blocks of a
    single-return one; otherwise a single-return frame has half of them.
    """
    dual = echo_mode is EchoMode.ECHO_DUAL
    if dual_doubles:
        return blks_per_frame << 1 if dual else blks_per_frame
    return blks_per_frame if dual else blks_per_frame >> 1