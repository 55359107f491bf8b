"""Salsa20, Poly1305, SHA-512 and Curve25519 primitives with secret and public-key boxes."""