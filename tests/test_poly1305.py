import pytest

from casebook.crypto.poly1305 import onetimeauth, onetimeauth_verify

MATERIAL = bytes(range(1, 33))


def test_published_vector():
    tag = onetimeauth(
        b"Cryptographic Forum Research Group",
        bytes.fromhex(
            "85d6be7857556d337f4452fe42d506a8"
            "0103808afb0db2fd4abff6af4149f51b"
        ),
    )
    assert tag == bytes.fromhex("a8061dc1305136c6c22b8baf0c0127a9")


@pytest.mark.parametrize("message", [b"", b"a", bytes(16), bytes(range(100))])
def test_zero_multiplier_gives_pad(message):
    material = bytes(16) + bytes(range(16))
    assert onetimeauth(message, material) == material[16:]


def test_verify_accepts_and_rejects():
    message = bytes(range(77))
    tag = onetimeauth(message, MATERIAL)
    assert len(tag) == 16
    assert onetimeauth_verify(tag, message, MATERIAL) is True
    assert onetimeauth_verify(tag, message + b"x", MATERIAL) is False
    forged = bytes([tag[0] ^ 1]) + tag[1:]
    assert onetimeauth_verify(forged, message, MATERIAL) is False


def test_bad_key_length():
    with pytest.raises(ValueError):
        onetimeauth(b"abc", bytes(31))