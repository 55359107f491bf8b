"""X25519 scalar multiplication on Curve25519."""

__all__ = ["BASE_POINT", "scalarmult", "scalarmult_base"]

_P = 2**255 - 19
_A24 = 121665
BASE_POINT = bytes([9]) + bytes(31)


def _require(name, value):
    value = bytes(value)
    if len(value) != 32:
        raise ValueError(f"{name} must be 32 bytes, got {len(value)}")
    return value


def _clamp(scalar):
    clamped = bytearray(scalar)
    clamped[0] &= 248
    clamped[31] = (clamped[31] & 127) | 64
    return int.from_bytes(clamped, "little")


def scalarmult(scalar, point):
    """Return the 32-byte u-coordinate of ``scalar`` times ``point``."""
    k = _clamp(_require("scalar", scalar))
    x1 = (int.from_bytes(_require("point", point), "little") & ((1 << 255) - 1)) % _P
    x2, z2, x3, z3 = 1, 0, x1, 1
    swap = 0
    for t in reversed(range(255)):
        bit = (k >> t) & 1
        if swap ^ bit:
            x2, x3 = x3, x2
            z2, z3 = z3, z2
        swap = bit
        a = (x2 + z2) % _P
        aa = a * a % _P
        b = (x2 - z2) % _P
        bb = b * b % _P
        e = (aa - bb) % _P
        c = (x3 + z3) % _P
        d = (x3 - z3) % _P
        da = d * a % _P
        cb = c * b % _P
        x3 = (da + cb) ** 2 % _P
        z3 = x1 * (da - cb) ** 2 % _P
        x2 = aa * bb % _P
        z2 = e * (aa + _A24 * e) % _P
    if swap:
        x2, z2 = x3, z3
    return (x2 * pow(z2, _P - 2, _P) % _P).to_bytes(32, "little")


def scalarmult_base(scalar):
    """Return ``scalar`` times the standard base point."""
    return scalarmult(scalar, BASE_POINT)