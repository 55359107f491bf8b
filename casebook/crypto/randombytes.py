"""Operating-system backed source of random bytes."""

import os

__all__ = ["RandomSourceError", "randombytes"]


class RandomSourceError(RuntimeError):
    """Raised when the system random source cannot deliver bytes."""


def randombytes(length):
    """Return ``length`` bytes from the operating system's random source."""
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    try:
        return os.urandom(length)
    except (OSError, NotImplementedError) as exc:
        raise RandomSourceError("generating random data failed") from exc