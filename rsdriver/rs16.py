"""Model parameters and DIFOP adaptation for the 16-laser mechanical lidar."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from rsdriver.block_iterator import (
    Rs16DualReturnBlockIterator,
    Rs16SingleReturnBlockIterator,
    float32,
)
from rsdriver.params import CalibrationAngle, EchoMode, MechConstParam

LASERS = 16
PITCH_CALI_LEN = LASERS * 3
BLOCK_TS = 55.50

FIRING_TSS = (
    0.00, 2.80, 5.60, 8.40, 11.20, 14.00, 16.80, 19.60,
    22.40, 25.20, 28.00, 30.80, 33.60, 36.40, 39.20, 42.00,
    55.50, 58.30, 61.10, 63.90, 66.70, 69.50, 72.30, 75.10,
    77.90, 80.70, 83.50, 86.30, 89.10, 91.90, 94.70, 97.50,
)


def const_param() -> MechConstParam:
    """Return the constant parameters of this model."""
    return MechConstParam(
        msop_len=1248,
        difop_len=1248,
        msop_id_len=8,
        difop_id_len=8,
        msop_id=bytes([0x55, 0xAA, 0x05, 0x0A, 0x5A, 0xA5, 0x50, 0xA0]),
        difop_id=bytes([0xA5, 0xFF, 0x00, 0x5A, 0x11, 0x11, 0x55, 0x55]),
        block_id=bytes([0xFF, 0xEE]),
        laser_num=16,
        blocks_per_pkt=12,
        channels_per_block=32,
        distance_min=0.2,
        distance_max=150.0,
        distance_res=0.005,
        temperature_res=0.0625,
        rx=0.03825,
        ry=-0.01088,
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


@dataclass
class AdapterDifop:
    """The DIFOP fields the common decoding needs, in a model-neutral form."""

    rpm: int = 0
    fov: Any = None
    return_mode: int = 0
    vert_angle_cali: list[CalibrationAngle] = field(default_factory=list)
    horiz_angle_cali: list[CalibrationAngle] = field(default_factory=list)


def difop_to_adapter(pitch_cali: bytes, rpm: int, fov: Any, return_mode: int) -> AdapterDifop:
    """Convert the 24-bit pitch calibration into vertical calibration angles.

    Each laser's pitch is stored big-endian in thousandths of a degree and is
    reduced to hundredths; the first eight lasers are marked with sign 1.
    """
    if len(pitch_cali) < PITCH_CALI_LEN:
        raise ValueError(f"{PITCH_CALI_LEN} pitch calibration bytes expected, got {len(pitch_cali)}")
    vert = []
    for laser in range(LASERS):
        raw = int.from_bytes(pitch_cali[laser * 3:laser * 3 + 3], "big")
        value = int(raw * 0.01) & 0xFFFF  # higher resolution to lower one
        vert.append(CalibrationAngle(value=value, sign=1 if laser < 8 else 0))
    return AdapterDifop(
        rpm=rpm,
        fov=fov,
        return_mode=return_mode,
        vert_angle_cali=vert,
        horiz_angle_cali=[CalibrationAngle() for _ in range(LASERS)],
    )