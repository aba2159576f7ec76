from rsdriver.packet import Packet


def test_defaults():
    pkt = Packet()
    assert pkt.timestamp == 0.0
    assert pkt.seq == 0
    assert not pkt.is_difop
    assert not pkt.is_frame_begin
    assert pkt.buf == bytearray()


def test_sized_buffer_is_zeroed():
    pkt = Packet(buf=bytearray(5))
    assert pkt.buf == bytearray(b"\x00" * 5)


def test_copy_duplicates_payload():
    pkt = Packet(timestamp=1.5, seq=7, is_difop=True, buf=bytearray(b"\x01\x02\x03"))
    clone = pkt.copy()
    assert clone.buf == pkt.buf
    clone.buf[0] = 0xFF
    assert pkt.buf[0] == 0x01


def test_copy_keeps_only_payload():
    pkt = Packet(timestamp=2.0, seq=9, is_difop=True, is_frame_begin=True, buf=bytearray(b"ab"))
    clone = pkt.copy()
    assert clone.seq == 0
    assert clone.timestamp == 0.0
    assert not clone.is_difop
    assert not clone.is_frame_begin