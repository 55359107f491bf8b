import pytest

from casebook.crypto.verify import verify_16, verify_32


def test_equal_16():
    data = bytes(range(16))
    assert verify_16(data, bytes(data)) is True


def test_last_byte_differs_16():
    data = bytes(range(16))
    other = data[:15] + bytes([data[15] ^ 1])
    assert verify_16(data, other) is False


def test_only_prefix_is_compared():
    left = bytes(range(20))
    right = bytes(range(16)) + bytes(4)
    assert verify_16(left, right) is True


def test_equal_and_unequal_32():
    data = bytes(range(32))
    assert verify_32(data, bytes(data)) is True
    assert verify_32(data, bytes([data[0] ^ 0x80]) + data[1:]) is False


def test_short_input_rejected():
    with pytest.raises(ValueError):
        verify_32(bytes(31), bytes(32))
    with pytest.raises(ValueError):
        verify_16(bytes(16), bytes(10))