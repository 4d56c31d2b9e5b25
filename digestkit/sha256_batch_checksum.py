"""Four-lane double SHA-256 checksum over already-padded single blocks."""

from __future__ import annotations

from typing import Sequence, Union

from digestkit.sha256 import BLOCK_SIZE
from digestkit.sha256_fixed import _double_first_word

LANES = 4

BytesLike = Union[bytes, bytearray, memoryview]


def sha256_checksum_batch(blocks: Sequence[BytesLike]) -> list[bytes]:
    """Compute the 4-byte double SHA-256 checksum of four padded 64-byte blocks.

    Each block is hashed once from the initial state, the resulting digest is
    hashed again, and the first four bytes of that second digest are returned.
    Results come back in the order of the inputs.
    """
    lanes = [bytes(block) for block in blocks]
    if len(lanes) != LANES:
        raise ValueError(f"expected {LANES} blocks, got {len(lanes)}")
    for block in lanes:
        if len(block) != BLOCK_SIZE:
            raise ValueError(f"each block must be {BLOCK_SIZE} bytes, got {len(block)}")
    return [_double_first_word(block) for block in lanes]