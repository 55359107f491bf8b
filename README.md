# casebook

`casebook` has two parts, and neither needs anything outside the standard library:

- `casebook.crypto` holds compact, readable implementations of classic
  encryption primitives: Salsa20/HSalsa20/XSalsa20 streams, Poly1305 one-time
  authentication, authenticated secret boxes, SHA-512, X25519 scalar
  multiplication and public-key boxes.
- `casebook.contests` holds self-contained solvers for a set of algorithmic
  contest problems. Each module has a plain function for the problem and a
  command-line entry point that reads the usual input format.

The cryptographic code is written for clarity and study. It is not
constant-time and has not been hardened for production use.

## Installation

```
pip install .
```

To run the test suite, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Cryptography

### Public-key boxes

`box_keypair()` returns a fresh `(public key, secret key)` pair of 32-byte
strings. A box message starts with 32 zero bytes of padding.

```python
from casebook.crypto.box import box_keypair, box, box_open
from casebook.crypto.randombytes import randombytes

alice = box_keypair()
bob = box_keypair()
nonce = randombytes(24)

message = bytes(32) + b"hello"
ciphertext = box(message, nonce, bob[0], alice[1])
plaintext = box_open(ciphertext, nonce, alice[0], bob[1])
assert plaintext[32:] == b"hello"
```

`box_open` raises `casebook.crypto.verify.CryptoError` when the ciphertext
does not authenticate. `box_beforenm`, `box_afternm` and `box_open_afternm`
split the work so that one shared key can be used for many messages.

### Secret-key boxes and streams

`casebook.crypto.secretbox` provides `secretbox` and `secretbox_open`, which
take a 24-byte nonce and a 32-byte key; messages start with 32 zero bytes and
boxes with 16. The stream ciphers under them live in `casebook.crypto.salsa20`
(`stream`, `stream_xor`, `stream_salsa20`, `stream_salsa20_xor`,
`core_salsa20`, `core_hsalsa20`), and the authenticator in
`casebook.crypto.poly1305` (`onetimeauth`, `onetimeauth_verify`).

### Hashing

```python
from casebook.crypto.sha512 import sha512

digest = sha512(b"abc")
assert len(digest) == 64
```

`hashblocks(state, message)` runs the block compression function over the
whole 128-byte blocks of a message, starting from a 64-byte state.

### Key exchange

`casebook.crypto.curve25519` provides `scalarmult(scalar, point)` and
`scalarmult_base(scalar)` over 32-byte strings.

### Verification helpers and randomness

`casebook.crypto.verify` has `verify_16` and `verify_32`, which compare the
first 16 or 32 bytes of two strings in constant time.
`casebook.crypto.randombytes.randombytes(length)` draws bytes from the
operating system and raises `RandomSourceError` if that fails.

### Demo

```
casebook-box-demo
```

generates two key pairs and a random nonce, boxes a fixed message from one
key pair to the other, opens it again, and prints every step as upper-case
hex. The same formatting is available as `casebook.crypto.demo.hexdump`.

### What is not included

There are no digital signatures: the package can hash with SHA-512 and
exchange keys over Curve25519, but it cannot sign messages or check
signatures.

## Contest solvers

Every module in `casebook.contests` solves one problem and can be run as a
command that reads the problem's input from standard input and writes the
answers to standard output:

```
casebook-2061b < input.txt
```

| Command | Module | Function |
| --- | --- | --- |
| `casebook-2061b` | `p2061b` | `find_trapezoid(sticks)` |
| `casebook-2061c` | `p2061c` | `count_configurations(claims)` |
| `casebook-2062d` | `p2062d` | `min_balanced_value(bounds, edges)` |
| `casebook-2063e` | `p2063e` | `triangle_pair_sum(n, edges)` |
| `casebook-2064d` | `p2064d` | `eat_counts(weights, queries)` |
| `casebook-2064e` | `p2064e` | `count_final_orders(permutation, colors)` |
| `casebook-2065d` | `p2065d` | `max_score(arrays)` |
| `casebook-2066c` | `p2066c` | `count_valid_sequences(values)` |
| `casebook-2066f` | `p2066f` | `transform_operations(source, target)` |
| `casebook-2067b` | `p2067b` | `can_equalize(values)` |
| `casebook-2067c` | `p2067c` | `min_ops_to_seven(n)` |
| `casebook-2069b` | `p2069b` | `min_steps(grid)` |
| `casebook-2069c` | `p2069c` | `count_beautiful_subsequences(values)` |
| `casebook-2071b` | `p2071b` | `is_blocked(n)`, `build_permutation(n)` |
| `casebook-2071c` | `p2071c` | `postorder(n, start, edges)` |
| `casebook-2071e` | `p2071e` | `expected_pairs(probabilities, edges)` |
| `casebook-2073d` | `p2073d` | `TowerTree` |
| `casebook-2073f` | `p2073f` | `min_costs(points, queries)` |
| `casebook-2074d` | `p2074d` | `count_points(centers, radii)` |
| `casebook-2075c` | `p2075c` | `count_paintings(n, paints)` |
| `casebook-2075d` | `p2075d` | `min_cost(x, y)` |
| `casebook-2077a` | `p2077a` | `reconstruct(values)` |
| `casebook-2077c` | `p2077c` | `query_answers(bits, flips)` |
| `casebook-2077d` | `p2077d` | `best_subsequence(values)` |

The functions can also be called directly:

```python
from casebook.contests.p2067c import min_ops_to_seven

print(min_ops_to_seven(51))
```