"""Model parameters of the 32-laser blind-spot mechanical lidar."""

from __future__ import annotations

from rsdriver.params import EchoMode, MechConstParam, split_blocks_per_frame

BLOCK_TS = 55.52

FIRING_TSS = (
    0.00, 2.56, 5.12, 7.68, 10.24, 12.80, 15.36, 17.92,
    25.68, 28.24, 30.80, 33.36, 35.92, 38.48, 41.04, 43.60,
    1.28, 3.84, 6.40, 8.96, 11.52, 14.08, 16.64, 19.20,
    26.96, 29.52, 32.08, 34.64, 37.20, 39.76, 42.32, 44.88,
)


def const_param() -> MechConstParam:
    """Return the constant parameters of this model, channel timing included."""
    base = MechConstParam(
        msop_len=1248,
        difop_len=1248,
        msop_id_len=8,
        difop_id_len=8,
        msop_id=bytes([0x55, 0xAA, 0x05, 0x0A, 0x5A, 0xA5, 0x50, 0xA0]),
        difop_id=bytes([0xA5, 0xFF, 0x00, 0x5A, 0x11, 0x11, 0x55, 0x55]),
        block_id=bytes([0xFF, 0xEE]),
        laser_num=32,
        blocks_per_pkt=12,
        channels_per_block=32,
        distance_min=0.1,
        distance_max=100.0,
        distance_res=0.005,
        temperature_res=0.0625,
        rx=0.01473,
        ry=0.0085,
        rz=0.09427,
    )
    return base.with_firing_times(BLOCK_TS, FIRING_TSS)


def echo_mode(mode: int) -> EchoMode:
    """Map the DIFOP return-mode byte to an echo mode (0 is dual)."""
    return EchoMode.ECHO_DUAL if mode == 0x00 else EchoMode.ECHO_SINGLE


def frame_blocks(mode: EchoMode, blks_per_frame: int) -> int:
    """Blocks per split frame: a dual-return frame holds twice the blocks."""
    return split_blocks_per_frame(mode, blks_per_frame, dual_doubles=True)