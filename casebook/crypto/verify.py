"""Constant-time comparison of fixed-size byte strings."""

import hmac

__all__ = ["CryptoError", "verify_16", "verify_32"]


class CryptoError(Exception):
    """Raised when a message fails authentication or verification."""


def _verify(x, y, size):
    x = bytes(x)
    y = bytes(y)
    if len(x) < size or len(y) < size:
        raise ValueError(f"both inputs need at least {size} bytes")
    return hmac.compare_digest(x[:size], y[:size])


def verify_16(x, y):
    """Return True when the first 16 bytes of ``x`` and ``y`` are equal."""
    return _verify(x, y, 16)


def verify_32(x, y):
    """Return True when the first 32 bytes of ``x`` and ``y`` are equal."""
    return _verify(x, y, 32)