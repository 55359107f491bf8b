"""Poly1305 one-time authenticator."""

from casebook.crypto.verify import verify_16

__all__ = ["onetimeauth", "onetimeauth_verify"]

_P = (1 << 130) - 5
_CLAMP = 0x0FFFFFFC0FFFFFFC0FFFFFFC0FFFFFFF
_MASK128 = (1 << 128) - 1


def onetimeauth(message, key):
    """Return the 16-byte Poly1305 tag of ``message`` under a 32-byte key."""
    key = bytes(key)
    if len(key) != 32:
        raise ValueError(f"key must be 32 bytes, got {len(key)}")
    message = bytes(message)
    r = int.from_bytes(key[:16], "little") & _CLAMP
    s = int.from_bytes(key[16:], "little")
    h = 0
    for offset in range(0, len(message), 16):
        chunk = message[offset:offset + 16] + b"\x01"
        h = (h + int.from_bytes(chunk, "little")) * r % _P
    return ((h + s) & _MASK128).to_bytes(16, "little")


def onetimeauth_verify(tag, message, key):
    """Return True when ``tag`` authenticates ``message`` under ``key``."""
    return verify_16(tag, onetimeauth(message, key))