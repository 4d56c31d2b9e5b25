"""SHA-256 shortcuts for fixed-size inputs: 33- and 65-byte keys and 4-byte checksums."""

from __future__ import annotations

import struct
from typing import Union

from digestkit.sha256 import BLOCK_SIZE, INITIAL_STATE, _state_bytes, compress

BytesLike = Union[bytes, bytearray, memoryview]

COMPRESSED_KEY_SIZE = 33
UNCOMPRESSED_KEY_SIZE = 65
CHECKSUM_SIZE = 4
MAX_CHECKSUM_INPUT = 55

_PAD = b"\x80"
# Padding of a second pass over a 32-byte digest: end marker, zeros, bit length 256.
_DIGEST_TAIL = _PAD + bytes(23) + struct.pack(">Q", 256)


def _pad_message(data: bytes, blocks: int) -> bytes:
    """Pad ``data`` to exactly ``blocks`` SHA-256 blocks with its bit length at the end."""
    total = blocks * BLOCK_SIZE
    zeros = total - len(data) - len(_PAD) - 8
    return data + _PAD + bytes(zeros) + struct.pack(">Q", len(data) << 3)


def _double_first_word(block: bytes) -> bytes:
    """Hash one padded block, hash the resulting digest again, keep the first word.

    The four bytes come back big-endian, as the leading bytes of the double digest.
    """
    first = _state_bytes(compress(INITIAL_STATE, block))
    second = compress(INITIAL_STATE, first + _DIGEST_TAIL)
    return struct.pack(">I", second[0])


def _require_length(data: BytesLike, size: int) -> bytes:
    raw = bytes(data)
    if len(raw) != size:
        raise ValueError(f"input must be {size} bytes, got {len(raw)}")
    return raw


def sha256_33(data: BytesLike) -> bytes:
    """Return the SHA-256 digest of a 33-byte input using a single compression."""
    raw = _require_length(data, COMPRESSED_KEY_SIZE)
    return _state_bytes(compress(INITIAL_STATE, _pad_message(raw, 1)))


def sha256_65(data: BytesLike) -> bytes:
    """Return the SHA-256 digest of a 65-byte input using two compressions."""
    raw = _require_length(data, UNCOMPRESSED_KEY_SIZE)
    padded = _pad_message(raw, 2)
    state = compress(INITIAL_STATE, padded[:BLOCK_SIZE])
    state = compress(state, padded[BLOCK_SIZE:])
    return _state_bytes(state)


def sha256_checksum(data: BytesLike) -> bytes:
    """Return the first four bytes of SHA-256(SHA-256(data)).

    The input must fit in one block with its padding, i.e. at most 55 bytes.
    """
    raw = bytes(data)
    if len(raw) > MAX_CHECKSUM_INPUT:
        raise ValueError(
            f"checksum input must be at most {MAX_CHECKSUM_INPUT} bytes, got {len(raw)}"
        )
    return _double_first_word(_pad_message(raw, 1))