"""Public-key authenticated encryption: Curve25519, XSalsa20 and Poly1305.

Messages and boxes use the same zero-padded layout as the secret box.
"""

from casebook.crypto.curve25519 import scalarmult, scalarmult_base
from casebook.crypto.randombytes import randombytes
from casebook.crypto.salsa20 import SIGMA, core_hsalsa20
from casebook.crypto.secretbox import secretbox, secretbox_open

__all__ = [
    "PUBLIC_KEY_BYTES",
    "SECRET_KEY_BYTES",
    "NONCE_BYTES",
    "box_keypair",
    "box_beforenm",
    "box_afternm",
    "box_open_afternm",
    "box",
    "box_open",
]

PUBLIC_KEY_BYTES = 32
SECRET_KEY_BYTES = 32
NONCE_BYTES = 24


def box_keypair():
    """Return a fresh ``(public_key, secret_key)`` pair."""
    secret_key = randombytes(SECRET_KEY_BYTES)
    return scalarmult_base(secret_key), secret_key


def box_beforenm(public_key, secret_key):
    """Return the 32-byte key shared between ``secret_key`` and ``public_key``."""
    shared_point = scalarmult(secret_key, public_key)
    return core_hsalsa20(bytes(16), shared_point, SIGMA)


def box_afternm(message, nonce, shared_key):
    """Encrypt a zero-padded ``message`` under a precomputed shared key."""
    return secretbox(message, nonce, shared_key)


def box_open_afternm(ciphertext, nonce, shared_key):
    """Verify and decrypt a box under a precomputed shared key."""
    return secretbox_open(ciphertext, nonce, shared_key)


def box(message, nonce, public_key, secret_key):
    """Encrypt a zero-padded ``message`` from ``secret_key`` to ``public_key``."""
    return box_afternm(message, nonce, box_beforenm(public_key, secret_key))


def box_open(ciphertext, nonce, public_key, secret_key):
    """Verify and decrypt a box sent by ``public_key`` to ``secret_key``."""
    return box_open_afternm(ciphertext, nonce, box_beforenm(public_key, secret_key))