"""XSalsa20-Poly1305 authenticated encryption in the zero-padded layout.

Plaintexts start with 32 zero bytes; boxes start with 16 zero bytes
followed by the 16-byte authenticator.
"""

from casebook.crypto.poly1305 import onetimeauth, onetimeauth_verify
from casebook.crypto.salsa20 import stream, stream_xor
from casebook.crypto.verify import CryptoError

__all__ = ["ZERO_BYTES", "BOX_ZERO_BYTES", "secretbox", "secretbox_open"]

ZERO_BYTES = 32
BOX_ZERO_BYTES = 16


def secretbox(message, nonce, key):
    """Encrypt and authenticate a zero-padded ``message``."""
    message = bytes(message)
    if len(message) < ZERO_BYTES:
        raise ValueError(f"message must be at least {ZERO_BYTES} bytes")
    boxed = bytearray(stream_xor(message, nonce, key))
    boxed[16:32] = onetimeauth(bytes(boxed[32:]), bytes(boxed[:32]))
    boxed[:BOX_ZERO_BYTES] = bytes(BOX_ZERO_BYTES)
    return bytes(boxed)


def secretbox_open(ciphertext, nonce, key):
    """Verify and decrypt a box; raise CryptoError if it was tampered with."""
    ciphertext = bytes(ciphertext)
    if len(ciphertext) < ZERO_BYTES:
        raise ValueError(f"ciphertext must be at least {ZERO_BYTES} bytes")
    auth_key = stream(32, nonce, key)
    if not onetimeauth_verify(ciphertext[16:32], ciphertext[32:], auth_key):
        raise CryptoError("ciphertext failed authentication")
    plain = bytearray(stream_xor(ciphertext, nonce, key))
    plain[:ZERO_BYTES] = bytes(ZERO_BYTES)
    return bytes(plain)