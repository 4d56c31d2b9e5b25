"""RIPEMD-160 message digest: compression function, streaming hasher and helpers."""

from __future__ import annotations

import struct
from typing import Callable, Sequence, Union

BytesLike = Union[bytes, bytearray, memoryview]

DIGEST_SIZE = 20
BLOCK_SIZE = 64
SHORT_INPUT_SIZE = 32
_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

INITIAL_STATE: tuple[int, ...] = (
    0x67452301,
    0xEFCDAB89,
    0x98BADCFE,
    0x10325476,
    0xC3D2E1F0,
)

_LEFT_ORDER: tuple[int, ...] = (
    0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15,
    7, 4, 13, 1, 10, 6, 15, 3, 12, 0, 9, 5, 2, 14, 11, 8,
    3, 10, 14, 4, 9, 15, 8, 1, 2, 7, 0, 6, 13, 11, 5, 12,
    1, 9, 11, 10, 0, 8, 12, 4, 13, 3, 7, 15, 14, 5, 6, 2,
    4, 0, 5, 9, 7, 12, 2, 10, 14, 1, 3, 8, 11, 6, 15, 13,
)

_RIGHT_ORDER: tuple[int, ...] = (
    5, 14, 7, 0, 9, 2, 11, 4, 13, 6, 15, 8, 1, 10, 3, 12,
    6, 11, 3, 7, 0, 13, 5, 10, 14, 15, 8, 12, 4, 9, 1, 2,
    15, 5, 1, 3, 7, 14, 6, 9, 11, 8, 12, 2, 10, 0, 4, 13,
    8, 6, 4, 1, 3, 11, 15, 0, 5, 12, 2, 13, 9, 7, 10, 14,
    12, 15, 10, 4, 1, 5, 8, 7, 6, 2, 13, 14, 0, 3, 9, 11,
)

_LEFT_SHIFTS: tuple[int, ...] = (
    11, 14, 15, 12, 5, 8, 7, 9, 11, 13, 14, 15, 6, 7, 9, 8,
    7, 6, 8, 13, 11, 9, 7, 15, 7, 12, 15, 9, 11, 7, 13, 12,
    11, 13, 6, 7, 14, 9, 13, 15, 14, 8, 13, 6, 5, 12, 7, 5,
    11, 12, 14, 15, 14, 15, 9, 8, 9, 14, 5, 6, 8, 6, 5, 12,
    9, 15, 5, 11, 6, 8, 13, 12, 5, 12, 13, 14, 11, 8, 5, 6,
)

_RIGHT_SHIFTS: tuple[int, ...] = (
    8, 9, 9, 11, 13, 15, 15, 5, 7, 7, 8, 11, 14, 14, 12, 6,
    9, 13, 15, 7, 12, 8, 9, 11, 7, 7, 12, 7, 6, 15, 13, 11,
    9, 7, 15, 11, 8, 6, 6, 14, 12, 13, 5, 14, 13, 13, 7, 5,
    15, 5, 8, 11, 14, 14, 6, 14, 6, 9, 12, 9, 12, 5, 15, 8,
    8, 5, 12, 9, 12, 5, 14, 6, 8, 13, 6, 5, 15, 13, 11, 11,
)


def _f1(x: int, y: int, z: int) -> int:
    return x ^ y ^ z


def _f2(x: int, y: int, z: int) -> int:
    return (x & y) | (~x & _MASK32 & z)


def _f3(x: int, y: int, z: int) -> int:
    return (x | (~y & _MASK32)) ^ z


def _f4(x: int, y: int, z: int) -> int:
    return (x & z) | (~z & _MASK32 & y)


def _f5(x: int, y: int, z: int) -> int:
    return x ^ (y | (~z & _MASK32))


_Boolean = Callable[[int, int, int], int]

_LEFT_ROUNDS: tuple[tuple[_Boolean, int], ...] = (
    (_f1, 0x00000000),
    (_f2, 0x5A827999),
    (_f3, 0x6ED9EBA1),
    (_f4, 0x8F1BBCDC),
    (_f5, 0xA953FD4E),
)

_RIGHT_ROUNDS: tuple[tuple[_Boolean, int], ...] = (
    (_f5, 0x50A28BE6),
    (_f4, 0x5C4DD124),
    (_f3, 0x6D703EF3),
    (_f2, 0x7A6D76E9),
    (_f1, 0x00000000),
)


def _rotl(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK32


def _line(
    state: Sequence[int],
    words: Sequence[int],
    order: Sequence[int],
    shifts: Sequence[int],
    rounds: Sequence[tuple[_Boolean, int]],
) -> tuple[int, int, int, int, int]:
    a, b, c, d, e = state
    for j, (index, shift) in enumerate(zip(order, shifts)):
        func, k = rounds[j // 16]
        t = (_rotl((a + func(b, c, d) + words[index] + k) & _MASK32, shift) + e) & _MASK32
        a, b, c, d, e = e, t, b, _rotl(c, 10), d
    return a, b, c, d, e


def compress(state: Sequence[int], block: BytesLike) -> tuple[int, ...]:
    """Apply the RIPEMD-160 compression function to one 64-byte block.

    Returns the new five-word state; the given state is left untouched.
    """
    if len(state) != 5:
        raise ValueError(f"state must hold 5 words, got {len(state)}")
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"block must be {BLOCK_SIZE} bytes, got {len(block)}")

    words = struct.unpack("<16I", block)
    a1, b1, c1, d1, e1 = _line(state, words, _LEFT_ORDER, _LEFT_SHIFTS, _LEFT_ROUNDS)
    a2, b2, c2, d2, e2 = _line(state, words, _RIGHT_ORDER, _RIGHT_SHIFTS, _RIGHT_ROUNDS)
    s0, s1, s2, s3, s4 = state
    return (
        (s1 + c1 + d2) & _MASK32,
        (s2 + d1 + e2) & _MASK32,
        (s3 + e1 + a2) & _MASK32,
        (s4 + a1 + b2) & _MASK32,
        (s0 + b1 + c2) & _MASK32,
    )


def _compress_all(state: tuple[int, ...], data: bytes) -> tuple[int, ...]:
    for offset in range(0, len(data), BLOCK_SIZE):
        state = compress(state, data[offset:offset + BLOCK_SIZE])
    return state


def _state_bytes(state: Sequence[int]) -> bytes:
    return struct.pack("<5I", *state)


class Ripemd160:
    """Incremental RIPEMD-160 hasher."""

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
        """Return the 20-byte digest of everything fed so far."""
        padding = b"\x80" + bytes((55 - self._length) % BLOCK_SIZE)
        bit_length = struct.pack("<Q", (self._length << 3) & _MASK64)
        tail = self._buffer + padding + bit_length
        return _state_bytes(_compress_all(self._state, tail))

    def hexdigest(self) -> str:
        """Return the digest as lower-case hexadecimal."""
        return self.digest().hex()


def ripemd160(data: BytesLike) -> bytes:
    """Return the RIPEMD-160 digest of ``data``."""
    return Ripemd160(data).digest()


# Padding of a 32-byte message: end marker, zeros, little-endian bit length 256.
_SHORT_TAIL = b"\x80" + bytes(23) + struct.pack("<Q", SHORT_INPUT_SIZE << 3)


def ripemd160_32(data: BytesLike) -> bytes:
    """Return the RIPEMD-160 digest of a 32-byte input using a single compression."""
    raw = bytes(data)
    if len(raw) != SHORT_INPUT_SIZE:
        raise ValueError(f"input must be {SHORT_INPUT_SIZE} bytes, got {len(raw)}")
    return _state_bytes(compress(INITIAL_STATE, raw + _SHORT_TAIL))


def ripemd160_hex(digest: BytesLike) -> str:
    """Format a 20-byte digest as lower-case hexadecimal."""
    if len(digest) != DIGEST_SIZE:
        raise ValueError(f"digest must be {DIGEST_SIZE} bytes, got {len(digest)}")
    return bytes(digest).hex()