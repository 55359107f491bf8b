"""Salsa20 and HSalsa20 cores and the Salsa20/XSalsa20 stream ciphers."""

import struct

__all__ = [
    "SIGMA",
    "core_salsa20",
    "core_hsalsa20",
    "stream_salsa20",
    "stream_salsa20_xor",
    "stream",
    "stream_xor",
]

SIGMA = b"expand 32-byte k"
_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _require(name, value, size):
    value = bytes(value)
    if len(value) != size:
        raise ValueError(f"{name} must be {size} bytes, got {len(value)}")
    return value


def _rotl(value, count):
    value &= _MASK32
    return ((value << count) | (value >> (32 - count))) & _MASK32


def _rounds(inp, key, const):
    inp = _require("input", inp, 16)
    key = _require("key", key, 32)
    const = _require("constant", const, 16)
    c = struct.unpack("<4I", const)
    k = struct.unpack("<8I", key)
    n = struct.unpack("<4I", inp)
    x = [0] * 16
    for i in range(4):
        x[5 * i] = c[i]
        x[1 + i] = k[i]
        x[6 + i] = n[i]
        x[11 + i] = k[4 + i]
    start = list(x)
    for _ in range(20):
        w = [0] * 16
        for j in range(4):
            t = [x[(5 * j + 4 * m) % 16] for m in range(4)]
            t[1] ^= _rotl(t[0] + t[3], 7)
            t[2] ^= _rotl(t[1] + t[0], 9)
            t[3] ^= _rotl(t[2] + t[1], 13)
            t[0] ^= _rotl(t[3] + t[2], 18)
            for m, value in enumerate(t):
                w[4 * j + (j + m) % 4] = value
        x = w
    return x, start


def core_salsa20(inp, key, const=SIGMA):
    """Return the 64-byte Salsa20 block for a 16-byte input and 32-byte key."""
    x, start = _rounds(inp, key, const)
    return struct.pack("<16I", *((a + b) & _MASK32 for a, b in zip(x, start)))


def core_hsalsa20(inp, key, const=SIGMA):
    """Return the 32-byte HSalsa20 output for a 16-byte input and 32-byte key."""
    x, _ = _rounds(inp, key, const)
    return struct.pack("<8I", x[0], x[5], x[10], x[15], x[6], x[7], x[8], x[9])


def _xor(left, right):
    size = len(left)
    value = int.from_bytes(left, "little") ^ int.from_bytes(right[:size], "little")
    return value.to_bytes(size, "little")


def stream_salsa20_xor(message, nonce, key):
    """Encrypt or decrypt ``message`` with Salsa20 under an 8-byte nonce."""
    message = bytes(message)
    nonce = _require("nonce", nonce, 8)
    key = _require("key", key, 32)
    out = bytearray()
    counter = 0
    for offset in range(0, len(message), 64):
        block = core_salsa20(nonce + counter.to_bytes(8, "little"), key, SIGMA)
        out += _xor(message[offset:offset + 64], block)
        counter = (counter + 1) & _MASK64
    return bytes(out)


def stream_salsa20(length, nonce, key):
    """Return ``length`` bytes of Salsa20 keystream."""
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    return stream_salsa20_xor(bytes(length), nonce, key)


def _subkey(nonce, key):
    nonce = _require("nonce", nonce, 24)
    return nonce[16:], core_hsalsa20(nonce[:16], key, SIGMA)


def stream(length, nonce, key):
    """Return ``length`` bytes of XSalsa20 keystream for a 24-byte nonce."""
    tail, subkey = _subkey(nonce, key)
    return stream_salsa20(length, tail, subkey)


def stream_xor(message, nonce, key):
    """Encrypt or decrypt ``message`` with XSalsa20 under a 24-byte nonce."""
    tail, subkey = _subkey(nonce, key)
    return stream_salsa20_xor(message, tail, subkey)