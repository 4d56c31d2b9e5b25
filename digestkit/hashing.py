"""General-purpose digests: SHA-256, RIPEMD-160 and Keccak-256, singly, in fours, or over a file."""

from __future__ import annotations

import hashlib
import os
from typing import Union

from Crypto.Hash import RIPEMD160
from Crypto.Hash import keccak as _keccak

BytesLike = Union[bytes, bytearray, memoryview]

_READ_CHUNK = 8192


def sha256(data: BytesLike) -> bytes:
    """Return the SHA-256 digest of ``data``."""
    return hashlib.sha256(bytes(data)).digest()


def rmd160(data: BytesLike) -> bytes:
    """Return the RIPEMD-160 digest of ``data``."""
    return RIPEMD160.new(bytes(data)).digest()


def keccak(data: BytesLike) -> bytes:
    """Return the Keccak-256 digest of ``data`` (original Keccak padding, not SHA3-256)."""
    return _keccak.new(digest_bits=256, data=bytes(data)).digest()


def _four_equal(items: tuple[BytesLike, ...]) -> list[bytes]:
    lanes = [bytes(item) for item in items]
    if len({len(item) for item in lanes}) != 1:
        raise ValueError(
            "all four inputs must have the same length, got "
            + ", ".join(str(len(item)) for item in lanes)
        )
    return lanes


def sha256_4(
    data0: BytesLike, data1: BytesLike, data2: BytesLike, data3: BytesLike
) -> list[bytes]:
    """Return the SHA-256 digests of four equally long inputs, in order."""
    return [sha256(item) for item in _four_equal((data0, data1, data2, data3))]


def rmd160_4(
    data0: BytesLike, data1: BytesLike, data2: BytesLike, data3: BytesLike
) -> list[bytes]:
    """Return the RIPEMD-160 digests of four equally long inputs, in order."""
    return [rmd160(item) for item in _four_equal((data0, data1, data2, data3))]


def sha256_file(path: Union[str, os.PathLike]) -> bytes:
    """Return the SHA-256 digest of a file's contents.

    Raises ``OSError`` (for example ``FileNotFoundError``) if the file cannot be read.
    """
    hasher = hashlib.sha256()
    with open(path, "rb") as handle:
        while chunk := handle.read(_READ_CHUNK):
            hasher.update(chunk)
    return hasher.digest()