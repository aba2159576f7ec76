"""Packet layout and parameters of the M2 solid-state lidar."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from rsdriver.block_iterator import float32
from rsdriver.params import DecoderConstParam, EchoMode

FRAME_DURATION = 0.1
SINGLE_PKT_NUM = 1260
VECTOR_BASE = 32768
PACKET_DURATION = FRAME_DURATION / SINGLE_PKT_NUM

_HEADER = struct.Struct(">4sHHBB10s10sBb")
_CHANNEL = struct.Struct(">HhhhBB")
_BLOCK_HEAD = struct.Struct(">BB")
CHANNELS_PER_BLOCK = 5
BLOCKS_PER_PKT = 25
BLOCK_SIZE = _BLOCK_HEAD.size + CHANNELS_PER_BLOCK * _CHANNEL.size
RESERVED_LEN = 4


def const_param() -> DecoderConstParam:
    """Return the constant parameters of this model.

    ``temperature_res`` holds the offset subtracted from the raw temperature.
    """
    return DecoderConstParam(
        msop_len=1336,
        difop_len=256,
        msop_id_len=4,
        difop_id_len=8,
        msop_id=bytes([0x55, 0xAA, 0x5A, 0xA5]),
        difop_id=bytes([0xA5, 0xFF, 0x00, 0x5A, 0x11, 0x11, 0x55, 0x55]),
        block_id=bytes([0x00, 0x00]),
        laser_num=5,
        blocks_per_pkt=BLOCKS_PER_PKT,
        channels_per_block=CHANNELS_PER_BLOCK,
        distance_min=0.2,
        distance_max=200.0,
        distance_res=0.005,
        temperature_res=80.0,
    )


def echo_mode(mode: int) -> EchoMode:
    """Map the DIFOP return-mode byte to an echo mode (0 is dual)."""
    return EchoMode.ECHO_DUAL if mode == 0x00 else EchoMode.ECHO_SINGLE


@dataclass(frozen=True)
class M2Header:
    """MSOP header fields; the timestamp is kept as its raw 10 bytes."""

    id: bytes
    pkt_seq: int
    protocol_version: int
    return_mode: int
    time_mode: int
    timestamp: bytes
    reserved: bytes
    lidar_type: int
    temperature: int


@dataclass(frozen=True)
class M2Channel:
    """One return: raw distance, direction vector and intensity."""

    distance: int
    x: int
    y: int
    z: int
    intensity: int
    point_attribute: int

    def point(self, distance_res: float) -> tuple[float, float, float]:
        """Return the ``(x, y, z)`` position in metres, scaled by ``distance_res``."""
        distance = float32(self.distance * float32(distance_res))
        return tuple(  # type: ignore[return-value]
            float32(float32(v * distance) / VECTOR_BASE) for v in (self.x, self.y, self.z)
        )


@dataclass(frozen=True)
class M2Block:
    """A block of returns sharing one time offset (microseconds)."""

    time_offset: int
    return_seq: int
    channels: tuple[M2Channel, ...]


@dataclass(frozen=True)
class M2MsopPacket:
    """A parsed MSOP packet."""

    header: M2Header
    blocks: tuple[M2Block, ...]
    reserved: bytes

    def temperature(self) -> float:
        """Lidar temperature in degrees Celsius."""
        return float32(self.header.temperature - const_param().temperature_res)


def _parse_block(data: bytes, offset: int) -> M2Block:
    time_offset, return_seq = _BLOCK_HEAD.unpack_from(data, offset)
    start = offset + _BLOCK_HEAD.size
    channels = tuple(
        M2Channel(*_CHANNEL.unpack_from(data, start + chan * _CHANNEL.size))
        for chan in range(CHANNELS_PER_BLOCK)
    )
    return M2Block(time_offset=time_offset, return_seq=return_seq, channels=channels)


def parse_msop(data: bytes) -> M2MsopPacket:
    """Parse one MSOP packet; raise ``ValueError`` if it is too short."""
    size = const_param().msop_len
    if len(data) < size:
        raise ValueError(f"MSOP packet needs {size} bytes, got {len(data)}")
    header = M2Header(*_HEADER.unpack_from(data, 0))
    blocks = tuple(
        _parse_block(data, _HEADER.size + blk * BLOCK_SIZE) for blk in range(BLOCKS_PER_PKT)
    )
    reserved_off = _HEADER.size + BLOCKS_PER_PKT * BLOCK_SIZE
    return M2MsopPacket(
        header=header,
        blocks=blocks,
        reserved=bytes(data[reserved_off:reserved_off + RESERVED_LEN]),
    )