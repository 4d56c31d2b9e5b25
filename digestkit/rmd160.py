"""RIPEMD-160 with a resettable context: init, update, final, plus a one-shot helper."""

from __future__ import annotations

import struct
from typing import Union

from digestkit.ripemd160 import BLOCK_SIZE, INITIAL_STATE, _state_bytes, compress

BytesLike = Union[bytes, bytearray, memoryview]

HASH_BYTES = 20
HASH_WORDS = 5
BLOCK_WORDS = 16
_MASK32 = 0xFFFFFFFF


class RMD160Context:
    """RIPEMD-160 hashing context.

    Byte counts are kept as a low and a high 32-bit word, as the message
    length in bits is ``8 * (bytes_lo + 2**32 * bytes_hi)``.
    """

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self._state = INITIAL_STATE
        self._buffer = b""
        self.bytes_lo = 0
        self.bytes_hi = 0

    def update(self, data: BytesLike) -> None:
        """Feed more bytes into the hash."""
        chunk = bytes(data)
        total = self.bytes_lo + len(chunk)
        self.bytes_hi = (self.bytes_hi + (total >> 32)) & _MASK32
        self.bytes_lo = total & _MASK32

        pending = self._buffer + chunk
        whole = len(pending) - len(pending) % BLOCK_SIZE
        state = self._state
        for offset in range(0, whole, BLOCK_SIZE):
            state = compress(state, pending[offset:offset + BLOCK_SIZE])
        self._state = state
        self._buffer = pending[whole:]

    def final(self) -> bytes:
        """Return the 20-byte digest and wipe the context, ready for a new message."""
        length = self.bytes_lo
        low_bits = (length << 3) & _MASK32
        high_bits = ((length >> 29) | (self.bytes_hi << 3)) & _MASK32

        tail = self._buffer + b"\x80"
        if len(tail) > BLOCK_SIZE - 8:
            tail += bytes(BLOCK_SIZE - len(tail))
        tail += bytes((BLOCK_SIZE - 8 - len(tail)) % BLOCK_SIZE)
        tail += struct.pack("<2I", low_bits, high_bits)

        state = self._state
        for offset in range(0, len(tail), BLOCK_SIZE):
            state = compress(state, tail[offset:offset + BLOCK_SIZE])
        self._reset()
        return _state_bytes(state)


def rmd160_data(data: BytesLike) -> bytes:
    """Return the RIPEMD-160 digest of ``data``."""
    context = RMD160Context()
    context.update(data)
    return context.final()