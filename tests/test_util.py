import sys

import pytest
from hypothesis import given, strategies as st

from rastared.util import bytes_to_long, current_ts, is_big_endian, long_to_bytes


def test_is_big_endian_matches_host():
    assert is_big_endian() == (sys.byteorder == "big")


@given(st.integers(min_value=0, max_value=0xFFFFFFFF))
def test_round_trip(value):
    encoded = long_to_bytes(value)
    assert len(encoded) == 4
    assert bytes_to_long(encoded) == value


@given(st.binary(min_size=4, max_size=4))
def test_bytes_round_trip(raw):
    assert long_to_bytes(bytes_to_long(raw)) == raw


def test_host_order_layout():
    encoded = long_to_bytes(0x01020304)
    if is_big_endian():
        assert encoded == b"\x01\x02\x03\x04"
    else:
        assert encoded == b"\x04\x03\x02\x01"


def test_value_truncated_to_32_bits():
    assert long_to_bytes(0x1_0000_0005) == long_to_bytes(5)


def test_bytes_to_long_uses_first_four_bytes():
    assert bytes_to_long(b"\x07\x00\x00\x07\xff\xff") == bytes_to_long(b"\x07\x00\x00\x07")


def test_bytes_to_long_rejects_short_input():
    with pytest.raises(ValueError):
        bytes_to_long(b"\x01\x02\x03")


def test_current_ts_is_32_bit_and_advances():
    first = current_ts()
    second = current_ts()
    assert 0 <= first <= 0xFFFFFFFF
    assert 0 <= second <= 0xFFFFFFFF
    assert (second - first) & 0xFFFFFFFF < 1000