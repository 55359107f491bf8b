import pytest

from casebook.crypto.curve25519 import BASE_POINT, scalarmult, scalarmult_base

ALICE_SCALAR = bytes.fromhex(
    "77076d0a7318a57d3c16c17251b26645df4c2f87ebc0992ab177fba51db92c2a"
)
BOB_SCALAR = bytes.fromhex(
    "5dab087e624a8a4b79e17f8b83800ee66f3bb1292618b6fd1c2f8b27ff88e0eb"
)


def test_published_public_value():
    assert scalarmult_base(ALICE_SCALAR) == bytes.fromhex(
        "8520f0098930a754748b7ddcb43ef75a0dbf3a0d26381af4eba4a98eaa9b4e6a"
    )


def test_shared_value_agrees():
    from_alice = scalarmult(ALICE_SCALAR, scalarmult_base(BOB_SCALAR))
    from_bob = scalarmult(BOB_SCALAR, scalarmult_base(ALICE_SCALAR))
    assert from_alice == from_bob
    assert from_alice == bytes.fromhex(
        "4a5d9d5ba4ce2de1728e3bf480350f25e07e21c947d19e3376f09b3c1e161742"
    )


def test_base_is_nine():
    scalar = bytes(range(32))
    assert scalarmult_base(scalar) == scalarmult(scalar, BASE_POINT)


def test_clamped_bits_are_ignored():
    scalar = bytearray(range(40, 72))
    variant = bytearray(scalar)
    variant[0] ^= 0x07
    variant[31] ^= 0x80
    assert scalarmult_base(bytes(scalar)) == scalarmult_base(bytes(variant))


def test_top_bit_of_point_is_ignored():
    scalar = bytes(range(32))
    point = bytearray(scalarmult_base(bytes(range(1, 33))))
    flipped = bytearray(point)
    flipped[31] ^= 0x80
    assert scalarmult(scalar, bytes(point)) == scalarmult(scalar, bytes(flipped))


def test_bad_lengths():
    with pytest.raises(ValueError):
        scalarmult(bytes(31), BASE_POINT)
    with pytest.raises(ValueError):
        scalarmult(bytes(32), bytes(33))