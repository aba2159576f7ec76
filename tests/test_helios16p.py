import pytest

from rsdriver import helios16p
from rsdriver.params import EchoMode


@pytest.mark.parametrize("mode", [0x04, 0x05, 0x06, 0x01, 0xFF])
def test_echo_mode_single(mode):
    assert helios16p.echo_mode(mode) is EchoMode.ECHO_SINGLE


def test_echo_mode_dual():
    assert helios16p.echo_mode(0x00) is EchoMode.ECHO_DUAL


def test_const_param_layout():
    param = helios16p.const_param()
    assert param.msop_id_len == 4
    assert param.msop_id == bytes([0x55, 0xAA, 0x05, 0x5A])
    assert param.difop_id == bytes([0xA5, 0xFF, 0x00, 0x5A, 0x11, 0x11, 0x55, 0x55])
    assert param.block_id == bytes([0xFF, 0xEE])
    assert param.laser_num == 16
    assert param.channels_per_block == 32
    assert param.distance_min == 0.4
    assert param.distance_max == 200.0
    assert param.distance_res == 0.0025


def test_block_and_packet_duration():
    param = helios16p.const_param()
    assert param.block_duration == pytest.approx(55.56e-6, rel=1e-6)
    assert helios16p.PACKET_DURATION == pytest.approx(param.block_duration * 24)


def test_single_channel_timing():
    az_percents, ts_diffs = helios16p.channel_timing(EchoMode.ECHO_SINGLE)
    assert len(az_percents) == len(ts_diffs) == 32
    for firing, ts in zip(helios16p.FIRING_TSS, ts_diffs):
        assert ts * 1_000_000 == pytest.approx(firing, rel=1e-6, abs=1e-9)
    assert list(az_percents) == sorted(az_percents)
    assert all(0.0 <= azi < 1.0 for azi in az_percents)


def test_dual_channel_timing_repeats_first_sixteen():
    az_percents, ts_diffs = helios16p.channel_timing(EchoMode.ECHO_DUAL)
    assert len(az_percents) == 32
    assert az_percents[:16] == az_percents[16:]
    assert ts_diffs[:16] == ts_diffs[16:]


def test_dual_fractions_double_single_ones():
    single, _ = helios16p.channel_timing(EchoMode.ECHO_SINGLE)
    dual, _ = helios16p.channel_timing(EchoMode.ECHO_DUAL)
    for s, d in zip(single[:16], dual[:16]):
        assert d == pytest.approx(2 * s, rel=1e-6, abs=1e-12)


def test_frame_blocks():
    assert helios16p.frame_blocks(EchoMode.ECHO_DUAL, 1801) == 1801
    assert helios16p.frame_blocks(EchoMode.ECHO_SINGLE, 1801) == 900
    assert helios16p.frame_blocks(EchoMode.ECHO_SINGLE, 3602) == 1801