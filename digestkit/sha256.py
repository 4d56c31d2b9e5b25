"""SHA-256 message digest: compression function, streaming hasher and helpers."""

from __future__ import annotations

import os
import struct
from typing import Iterable, Sequence, Union

BytesLike = Union[bytes, bytearray, memoryview]

DIGEST_SIZE = 32
BLOCK_SIZE = 64
_READ_CHUNK = 8192
_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

INITIAL_STATE: tuple[int, ...] = (
    0x6A09E667,
    0xBB67AE85,
    0x3C6EF372,
    0xA54FF53A,
    0x510E527F,
    0x9B05688C,
    0x1F83D9AB,
    0x5BE0CD19,
)

_K: tuple[int, ...] = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5,
    0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC,
    0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7,
    0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3,
    0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5,
    0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)


def _rotr(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & _MASK32


def compress(state: Sequence[int], block: BytesLike) -> tuple[int, ...]:
    """Apply the SHA-256 compression function to one 64-byte block.

    Returns the new eight-word state; the given state is left untouched.
    """
    if len(state) != 8:
        raise ValueError(f"state must hold 8 words, got {len(state)}")
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"block must be {BLOCK_SIZE} bytes, got {len(block)}")

    w = list(struct.unpack(">16I", block))
    for i in range(16, 64):
        x, y = w[i - 15], w[i - 2]
        s0 = _rotr(x, 7) ^ _rotr(x, 18) ^ (x >> 3)
        s1 = _rotr(y, 17) ^ _rotr(y, 19) ^ (y >> 10)
        w.append((w[i - 16] + s0 + w[i - 7] + s1) & _MASK32)

    a, b, c, d, e, f, g, h = state
    for k, wi in zip(_K, w):
        big_s1 = _rotr(e, 6) ^ _rotr(e, 11) ^ _rotr(e, 25)
        ch = g ^ (e & (f ^ g))
        t1 = (h + big_s1 + ch + k + wi) & _MASK32
        big_s0 = _rotr(a, 2) ^ _rotr(a, 13) ^ _rotr(a, 22)
        maj = (a & b) ^ (a & c) ^ (b & c)
        t2 = (big_s0 + maj) & _MASK32
        h, g, f, e, d, c, b, a = g, f, e, (d + t1) & _MASK32, c, b, a, (t1 + t2) & _MASK32

    return tuple(
        (old + new) & _MASK32 for old, new in zip(state, (a, b, c, d, e, f, g, h))
    )


def _compress_all(state: tuple[int, ...], data: bytes) -> tuple[int, ...]:
    for offset in range(0, len(data), BLOCK_SIZE):
        state = compress(state, data[offset:offset + BLOCK_SIZE])
    return state


def _state_bytes(state: Iterable[int]) -> bytes:
    return struct.pack(">8I", *state)


class Sha256:
    """Incremental SHA-256 hasher."""

    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def __init__(self, data: BytesLike = b"") -> None:
        self._state = INITIAL_STATE
        self._buffer = b""
        self._length = 0
        if data:
            self.update(data)

    def update(self, data: BytesLike) -> None:
        """Feed more bytes into the hash."""
        chunk = bytes(data)
        self._length += len(chunk)
        pending = self._buffer + chunk
        whole = len(pending) - len(pending) % BLOCK_SIZE
        self._state = _compress_all(self._state, pending[:whole])
        self._buffer = pending[whole:]

    def digest(self) -> bytes:
        """Return the 32-byte digest of everything fed so far."""
        padding = b"\x80" + bytes((55 - self._length) % BLOCK_SIZE)
        bit_length = struct.pack(">Q", (self._length << 3) & _MASK64)
        tail = self._buffer + padding + bit_length
        return _state_bytes(_compress_all(self._state, tail))

    def hexdigest(self) -> str:
        """Return the digest as lower-case hexadecimal."""
        return self.digest().hex()


def sha256(data: BytesLike) -> bytes:
    """Return the SHA-256 digest of ``data``."""
    return Sha256(data).digest()


def sha256_hex(digest: BytesLike) -> str:
    """Format a 32-byte digest as lower-case hexadecimal."""
    if len(digest) != DIGEST_SIZE:
        raise ValueError(f"digest must be {DIGEST_SIZE} bytes, got {len(digest)}")
    return bytes(digest).hex()


def sha256_file(path: Union[str, os.PathLike]) -> bytes:
    """Return the SHA-256 digest of a file's contents.

    Raises ``OSError`` (for example ``FileNotFoundError``) if the file cannot be read.
    """
    hasher = Sha256()
    with open(path, "rb") as handle:
        while chunk := handle.read(_READ_CHUNK):
            hasher.update(chunk)
    return hasher.digest()