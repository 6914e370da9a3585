import itertools

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from sshare import combine, distribute, split
from sshare.codec import decode_share
from sshare.errors import InvalidShareCount, InvalidThreshold

HI = bytes([72, 73])


def test_split_secret():
    parts = distribute(b"secret", 5, 3)
    assert len(parts) == 5
    assert [p.index for p in parts] == [1, 2, 3, 4, 5]
    assert all(p.width == 7 for p in parts)


def test_reconstruct_secret_success():
    records = split(b"424242", 6, 4)
    assert combine(records[:4]) == b"424242"
    assert combine(records) == b"424242"


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_every_threshold_subset(n):
    secret = b"\x00threshold\xff"
    for t in range(1, n + 1):
        records = split(secret, n, t)
        for subset in itertools.combinations(records, t):
            assert combine(list(subset)) == secret


def test_scenario_hi_two_of_three():
    records = split(HI, 3, 2)
    assert [decode_share(r).index for r in records] == [1, 2, 3]
    for pair in [(0, 2), (1, 2), (0, 1)]:
        assert combine([records[i] for i in pair]) == HI


def test_scenario_hi_single_share_is_not_enough():
    records = split(HI, 3, 2)
    # no error: the combiner cannot tell that the threshold was not met
    assert combine(records[:1]) != HI


def test_below_threshold_gives_wrong_secret():
    secret = bytes(range(16))
    records = split(secret, 5, 4)
    for subset in itertools.combinations(records, 3):
        assert combine(list(subset)) != secret


def test_scenario_empty_secret():
    shares = distribute(b"", 5, 3)
    assert all(share.width == 1 and share.value in (0, 1) for share in shares)
    records = [share.to_bytes() for share in shares]
    assert combine(records[:3]) == b""
    assert combine(records[2:]) == b""


def test_threshold_one_shares_equal_secret():
    secret = b"open"
    shares = distribute(secret, 4, 1)
    expected = int.from_bytes(secret, "little")
    assert all(share.value == expected for share in shares)
    for share in shares:
        assert combine([share.to_bytes()]) == secret


def test_single_share_edge_case():
    assert combine(split(b"\x4d", 1, 1)) == b"\x4d"


def test_all_required():
    records = split(b"\x58\x00", 4, 4)
    assert combine(records) == b"\x58\x00"


def test_trailing_zero_bytes_survive():
    secret = b"abc\x00\x00"
    assert combine(split(secret, 3, 2)[1:]) == secret


@pytest.mark.parametrize("n, t", [(2, 3), (0, 0), (3, 0), (0, 1)])
def test_invalid_parameters(n, t):
    with pytest.raises(InvalidThreshold):
        distribute(b"x", n, t)


def test_share_count_bounded_by_field():
    assert len(distribute(b"x", 256, 2)) == 256
    with pytest.raises(InvalidShareCount):
        distribute(b"x", 257, 2)


def test_corruption_changes_output():
    records = split(HI, 3, 2)
    used = [records[0], records[1]]
    for which in range(2):
        for bit in range(8 * 3):
            tampered = bytearray(used[which])
            tampered[4 + bit // 8] ^= 1 << (bit % 8)
            mixed = list(used)
            mixed[which] = bytes(tampered)
            assert combine(mixed) != HI


@settings(max_examples=60, deadline=None)
@given(
    secret=st.binary(max_size=12),
    n=st.integers(min_value=1, max_value=6),
    data=st.data(),
)
def test_round_trip_property(secret, n, data):
    t = data.draw(st.integers(min_value=1, max_value=n))
    records = split(secret, n, t)
    chosen = data.draw(
        st.lists(st.sampled_from(range(n)), min_size=t, max_size=t, unique=True)
    )
    assert combine([records[i] for i in chosen]) == secret
