import pytest

from sshare.codec import Share, decode_share, encode_share
from sshare.errors import MalformedShare


def test_encode_layout():
    record = encode_share(1, 0x0102, 3)
    assert record == b"\x01\x00\x00\x00\x02\x01\x00"


def test_value_zero_extended():
    assert encode_share(2, 0, 4) == b"\x02\x00\x00\x00" + b"\x00" * 4


def test_decode_infers_width():
    share = decode_share(b"\x03\x00\x00\x00\x48\x49\x00")
    assert share == Share(index=3, value=0x4948, width=3)
    assert share.secret_length == 2
    assert share.to_bytes() == b"\x03\x00\x00\x00\x48\x49\x00"


def test_large_index():
    record = encode_share(0xFFFFFFFF, 1, 1)
    assert decode_share(record).index == 0xFFFFFFFF


@pytest.mark.parametrize("record", [b"", b"\x01", b"\x01\x00\x00\x00"])
def test_truncated_records(record):
    with pytest.raises(MalformedShare):
        decode_share(record)


def test_encode_rejects_bad_input():
    with pytest.raises(ValueError):
        encode_share(1 << 32, 1, 2)
    with pytest.raises(ValueError):
        encode_share(-1, 1, 2)
    with pytest.raises(ValueError):
        encode_share(1, 1 << 16, 2)
    with pytest.raises(ValueError):
        encode_share(1, -5, 2)
    with pytest.raises(ValueError):
        encode_share(1, 0, 0)
