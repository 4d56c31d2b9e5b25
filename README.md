# digestkit

Hash functions used around secp256k1 key and address handling:
SHA-256, SHA-512 (with HMAC and PBKDF2), RIPEMD-160 and Keccak-256,
plus fixed-size and four-at-a-time helpers for the common 32-, 33- and
65-byte inputs.

SHA-256, SHA-512 and RIPEMD-160 are written in pure Python in
`digestkit.sha256`, `digestkit.sha512`, `digestkit.ripemd160` and
`digestkit.rmd160`. The convenience module `digestkit.hashing` uses the
standard library's `hashlib` for SHA-256 and `pycryptodome` for
RIPEMD-160 and Keccak-256.

## Installation

```
pip install digestkit
```

For running the tests:

```
pip install "digestkit[test]"
pytest
```

## Streaming hashers

```python
from digestkit.sha256 import Sha256
from digestkit.ripemd160 import Ripemd160
from digestkit.sha512 import Sha512

h = Sha256()
h.update(b"hello ")
h.update(b"world")
print(h.hexdigest())

r = Ripemd160()
r.update(b"abc")
print(r.hexdigest())

s = Sha512()
s.update(b"abc")
print(s.hexdigest())
```

Each hasher also accepts initial data in its constructor, and `digest()`
can be called any number of times without ending the hash.

`digestkit.rmd160.RMD160Context` is a second RIPEMD-160 hasher with
`update(data)` and `final()`; `final()` returns the digest and resets the
context for a new message. `rmd160_data(data)` hashes in one call.

The compression functions are available directly as
`digestkit.sha256.compress(state, block)` and
`digestkit.ripemd160.compress(state, block)`; they take a tuple of words
and one 64-byte block and return the new state.

## One-shot functions

```python
from digestkit.sha256 import sha256, sha256_hex, sha256_file
from digestkit.ripemd160 import ripemd160, ripemd160_hex
from digestkit.sha512 import sha512, sha512_hex, hmac_sha512, pbkdf2_hmac_sha512

digest = sha256(b"abc")
print(sha256_hex(digest))
print(sha256_file("some_file.bin").hex())

hash160 = ripemd160(sha256(b"\x02" + bytes(32)))
print(ripemd160_hex(hash160))

key = b"secret"
mac = hmac_sha512(key, b"message")

password = b"password"
seed = pbkdf2_hmac_sha512(password, b"mnemonic", 2048, 64)
```

`sha256_file` raises `OSError` (such as `FileNotFoundError`) when the
file cannot be read. The `*_hex` functions raise `ValueError` when the
digest is not of the right length.

`hmac_sha512` uses only the first 128 bytes of its key; longer keys are
truncated, not hashed. `pbkdf2_hmac_sha512` replaces a password of 128
bytes or more by its SHA-512 digest, treats an iteration count of 0 as 1,
and raises `ValueError` for a negative iteration count or length.

## Fixed-size and batched helpers

```python
from digestkit.sha256_fixed import sha256_33, sha256_65, sha256_checksum
from digestkit.ripemd160 import ripemd160_32
from digestkit.ripemd160_batch import ripemd160_32_batch
from digestkit.sha256_batch import sha256_block_batch
from digestkit.sha256_batch2 import sha256_two_block_batch
from digestkit.sha256_batch_checksum import sha256_checksum_batch

compressed_pubkey = b"\x02" + bytes(32)
sha256_33(compressed_pubkey)                 # SHA-256 of a 33-byte input
ripemd160_32(sha256_33(compressed_pubkey))   # RIPEMD-160 of a 32-byte input
sha256_checksum(b"\x00" + bytes(20))         # first 4 bytes of double SHA-256
```

`sha256_33`, `sha256_65` and `ripemd160_32` require inputs of exactly
33, 65 and 32 bytes; `sha256_checksum` accepts at most 55 bytes. Other
sizes raise `ValueError`.

The batch functions take exactly four inputs and return four results in
the same order:

- `sha256_block_batch(blocks)`: four already padded 64-byte blocks, one
  compression each from the initial state.
- `sha256_two_block_batch(blocks)`: four already padded 128-byte
  messages, two compressions each.
- `sha256_checksum_batch(blocks)`: four already padded 64-byte blocks;
  returns the first 4 bytes of the double SHA-256 of each.
- `ripemd160_32_batch(inputs)`: RIPEMD-160 of four 32-byte inputs.

## Convenience layer

`digestkit.hashing` bundles the most used calls: `sha256`, `rmd160`,
`keccak` (Keccak-256 with the original padding, not SHA3-256),
`sha256_4` and `rmd160_4` (four inputs of equal length, digests in
order; unequal lengths raise `ValueError`), and `sha256_file`.

```python
from digestkit.hashing import keccak
print(keccak(b"").hex())
```

## What it does not do

digestkit is a library only. It has no command-line tool, no key search
or address scanning, and no bloom filters or other storage; it computes
digests of the bytes it is given.