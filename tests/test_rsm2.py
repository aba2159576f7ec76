import struct

import pytest

from rsdriver.params import EchoMode
from rsdriver.rsm2 import (
    BLOCK_SIZE,
    VECTOR_BASE,
    M2Channel,
    const_param,
    echo_mode,
    parse_msop,
)


def _packet(seq=0x0102, temperature=100, channel=(200, 16384, -16384, 0, 9, 1), time_offset=7):
    header = struct.pack(
        ">4sHHBB10s10sBb",
        bytes([0x55, 0xAA, 0x5A, 0xA5]), seq, 3, 4, 0, b"\x00" * 10, b"\x00" * 10, 0x0A, temperature,
    )
    block = struct.pack(">BB", time_offset, 1) + struct.pack(">HhhhBB", *channel) * 5
    return header + block * 25 + b"\x00" * 4


@pytest.mark.parametrize("mode,expected", [
    (0x00, EchoMode.ECHO_DUAL),
    (0x04, EchoMode.ECHO_SINGLE),
    (0x05, EchoMode.ECHO_SINGLE),
    (0x06, EchoMode.ECHO_SINGLE),
])
def test_echo_mode(mode, expected):
    assert echo_mode(mode) is expected


def test_const_param_layout():
    param = const_param()
    assert param.msop_len == 1336
    assert param.difop_len == 256
    assert param.blocks_per_pkt == 25
    assert param.channels_per_block == 5
    assert param.temperature_res == 80.0


def test_packet_size_matches_msop_len():
    assert len(_packet()) == const_param().msop_len
    assert BLOCK_SIZE * 25 + 32 + 4 == const_param().msop_len


def test_parse_header_fields():
    pkt = parse_msop(_packet())
    assert pkt.header.id == bytes([0x55, 0xAA, 0x5A, 0xA5])
    assert pkt.header.pkt_seq == 0x0102
    assert pkt.header.protocol_version == 3
    assert pkt.header.return_mode == 4
    assert pkt.header.lidar_type == 0x0A


def test_parse_blocks_and_channels():
    pkt = parse_msop(_packet())
    assert len(pkt.blocks) == 25
    assert all(len(block.channels) == 5 for block in pkt.blocks)
    block = pkt.blocks[24]
    assert block.time_offset == 7
    assert block.return_seq == 1
    assert block.channels[4] == M2Channel(200, 16384, -16384, 0, 9, 1)


def test_temperature_subtracts_offset():
    assert parse_msop(_packet(temperature=100)).temperature() == 100 - const_param().temperature_res
    assert parse_msop(_packet(temperature=-20)).temperature() == -20 - const_param().temperature_res


def test_channel_point_scales_by_distance():
    channel = M2Channel(200, 16384, -16384, 0, 9, 1)
    x, y, z = channel.point(0.005)
    distance = 200 * 0.005
    assert x == pytest.approx(distance * 16384 / VECTOR_BASE)
    assert y == pytest.approx(-x)
    assert z == 0.0


def test_channel_point_zero_distance():
    assert M2Channel(0, 1000, 2000, 3000, 0, 0).point(0.005) == (0.0, 0.0, 0.0)


def test_parse_rejects_short_packet():
    with pytest.raises(ValueError):
        parse_msop(_packet()[:-1])