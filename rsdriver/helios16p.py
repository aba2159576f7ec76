"""Model parameters of the 16-laser Helios mechanical lidar."""

from __future__ import annotations

from rsdriver.block_iterator import (
    Rs16DualReturnBlockIterator,
    Rs16SingleReturnBlockIterator,
    float32,
)
from rsdriver.params import EchoMode, MechConstParam, split_blocks_per_frame

BLOCK_TS = 55.56

FIRING_TSS = (
    0.00, 3.15, 6.30, 9.45, 13.26, 17.08, 20.56, 23.71,
    26.53, 27.77, 31.49, 32.73, 36.46, 38.94, 41.42, 43.91,
    55.56, 58.70, 61.85, 65.00, 68.82, 72.64, 76.12, 79.27,
    82.08, 83.32, 87.05, 88.29, 92.01, 94.50, 96.98, 99.46,
)


def const_param() -> MechConstParam:
    """Return the constant parameters of this model."""
    return MechConstParam(
        msop_len=1248,
        difop_len=1248,
        msop_id_len=4,
        difop_id_len=8,
        msop_id=bytes([0x55, 0xAA, 0x05, 0x5A]),
        difop_id=bytes([0xA5, 0xFF, 0x00, 0x5A, 0x11, 0x11, 0x55, 0x55]),
        block_id=bytes([0xFF, 0xEE]),
        laser_num=16,
        blocks_per_pkt=12,
        channels_per_block=32,
        distance_min=0.4,
        distance_max=200.0,
        distance_res=0.0025,
        temperature_res=0.0625,
        rx=0.03498,
        ry=-0.015,
        rz=0.0,
        block_duration=float32(float32(BLOCK_TS) / 1_000_000),
    )


PACKET_DURATION = const_param().block_duration * const_param().blocks_per_pkt * 2


def echo_mode(mode: int) -> EchoMode:
    """Map the DIFOP return-mode byte to an echo mode (0 is dual)."""
    return EchoMode.ECHO_DUAL if mode == 0x00 else EchoMode.ECHO_SINGLE


def channel_timing(mode: EchoMode) -> tuple[tuple[float, ...], tuple[float, ...]]:
    """Per-channel azimuth fractions and time offsets for ``mode``."""
    if mode is EchoMode.ECHO_SINGLE:
        return Rs16SingleReturnBlockIterator.calc_channel(BLOCK_TS, FIRING_TSS)
    return Rs16DualReturnBlockIterator.calc_channel(BLOCK_TS, FIRING_TSS)


def frame_blocks(mode: EchoMode, blks_per_frame: int) -> int:
    """Blocks per split frame: a single-return frame holds half the blocks."""
    return split_blocks_per_frame(mode, blks_per_frame, dual_doubles=False)