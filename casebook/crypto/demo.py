"""Command that boxes a fixed message between two fresh key pairs."""

import sys

from casebook.crypto.box import NONCE_BYTES, box, box_keypair, box_open
from casebook.crypto.randombytes import randombytes
from casebook.crypto.verify import CryptoError

__all__ = ["MESSAGE", "PADDING", "hexdump", "main"]

MESSAGE = "This is a cross-platform test of crypto_box/crypto_box_open."
PADDING = 32


def hexdump(data):
    """Return ``data`` as upper-case hexadecimal text."""
    return bytes(data).hex().upper()


def _show(title, data):
    print(title)
    print(hexdump(data))


def main(argv=None):
    """Encrypt and decrypt the demo message, printing every intermediate value."""
    nonce = randombytes(NONCE_BYTES)
    _show("Nonce: ", nonce)

    public_key, secret_key = box_keypair()
    public_key2, secret_key2 = box_keypair()
    _show("Public key: ", public_key)
    _show("\nSecret key: ", secret_key)
    _show("Public key2: ", public_key2)
    _show("\nSecret key2: ", secret_key2)

    padded = bytes(PADDING) + MESSAGE.encode()
    ciphertext = box(padded, nonce, public_key2, secret_key)
    print("crypto_box returned: 0")
    _show("\nCipher text: ", ciphertext)

    try:
        decrypted = box_open(ciphertext, nonce, public_key, secret_key2)
    except CryptoError:
        print("crypto_box_open returned: -1")
        sys.stdout.flush()
        return 1
    print("crypto_box_open returned: 0")
    _show("\nDecrypted text: ", decrypted)
    print(decrypted[PADDING:].decode())
    sys.stdout.flush()
    return 0