"""Model parameters of the 80-laser mechanical lidar."""

from __future__ import annotations

from rsdriver.block_iterator import float32
from rsdriver.params import EchoMode, MechConstParam, split_blocks_per_frame

BLOCK_TS = 55.56
LASERS = 80
LIDAR_TYPE_80 = 0x07
LIDAR_TYPE_80V = 0x08

FIRING_TSS_80 = (
    0.0, 0.0, 0.0, 0.0, 1.217, 1.217, 1.217, 1.217,
    2.434, 2.434, 3.652, 3.652, 3.652, 4.869, 4.869, 6.086,
    6.086, 7.304, 7.304, 8.521, 8.521, 9.739, 9.739, 11.323,
    11.323, 12.907, 12.907, 14.924, 14.924, 16.941, 16.941, 16.941,
    16.941, 18.959, 18.959, 18.959, 18.959, 20.976, 20.976, 20.976,
    20.976, 23.127, 23.127, 23.127, 23.127, 25.278, 25.278, 25.278,
    25.278, 27.428, 27.428, 27.428, 27.428, 29.579, 29.579, 29.579,
    29.579, 31.963, 31.963, 31.963, 31.963, 34.347, 34.347, 34.347,
    34.347, 36.498, 36.498, 36.498, 36.498, 38.648, 38.648, 40.666,
    40.666, 42.683, 50.603, 52.187, 52.187, 52.187, 53.771, 53.771,
)

FIRING_TSS_80V = (
    0.0, 0.0, 0.0, 0.0, 1.217, 1.217, 1.217, 1.217,
    2.434, 2.434, 2.434, 2.434, 3.652, 3.652, 3.652, 3.652,
    4.869, 4.869, 4.869, 4.869, 6.086, 6.086, 6.086, 6.086,
    7.304, 7.304, 7.304, 7.304, 8.521, 8.521, 8.521, 8.521,
    9.739, 9.739, 9.739, 9.739, 11.323, 11.323, 11.323, 11.323,
    12.907, 12.907, 12.907, 12.907, 14.924, 14.924, 14.924, 14.924,
    16.941, 16.941, 16.941, 16.941, 18.959, 18.959, 18.959, 18.959,
    20.976, 20.976, 20.976, 20.976, 23.127, 23.127, 23.127, 23.127,
    25.278, 25.278, 25.278, 25.278, 27.428, 27.428, 27.428, 27.428,
    29.579, 29.579, 29.579, 29.579, 31.963, 31.963, 31.963, 31.963,
)


def const_param() -> MechConstParam:
    """Return the constant parameters of this model.

    Channel timing depends on the lidar sub-type reported in each MSOP
    header; see :func:`channel_timing`.
    """
    return MechConstParam(
        msop_len=1248,
        difop_len=1248,
        msop_id_len=4,
        difop_id_len=8,
        msop_id=bytes([0x55, 0xAA, 0x05, 0x5A]),
        difop_id=bytes([0xA5, 0xFF, 0x00, 0x5A, 0x11, 0x11, 0x55, 0x55]),
        block_id=bytes([0xFE]),
        laser_num=80,
        blocks_per_pkt=4,
        channels_per_block=80,
        distance_min=1.0,
        distance_max=250.0,
        distance_res=0.005,
        temperature_res=0.0625,
        rx=0.02892,
        ry=-0.013,
        rz=0.0,
        block_duration=float32(float32(BLOCK_TS) / 1_000_000),
    )


def echo_mode(mode: int) -> EchoMode:
    """Map the DIFOP return-mode byte to an echo mode (0 to 2 are single)."""
    return EchoMode.ECHO_SINGLE if mode in (0x00, 0x01, 0x02) else EchoMode.ECHO_DUAL


def channel_timing(lidar_type: int) -> tuple[tuple[float, ...], tuple[float, ...]]:
    """Per-channel azimuth fractions and time offsets (seconds) for a sub-type.

    Sub-type 0x08 is the 80v variant; every other value uses the 80 table.
    """
    firing_tss = FIRING_TSS_80V if lidar_type == LIDAR_TYPE_80V else FIRING_TSS_80
    span = float32(BLOCK_TS)
    fired = [float32(t) for t in firing_tss]
    az_percents = tuple(float32(t / span) for t in fired)
    ts_diffs = tuple(t / 1_000_000 for t in fired)
    return az_percents, ts_diffs


def frame_blocks(mode: EchoMode, blks_per_frame: int) -> int:
    """Blocks per split frame: a dual-return frame holds twice the blocks."""
    return split_blocks_per_frame(mode, blks_per_frame, dual_doubles=True)