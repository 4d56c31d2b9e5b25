"""Four-lane single-block SHA-256: one compression of each block from the initial state."""

from __future__ import annotations

from typing import Sequence, Union

from digestkit.sha256 import BLOCK_SIZE, INITIAL_STATE, _state_bytes, compress

LANES = 4

BytesLike = Union[bytes, bytearray, memoryview]


def sha256_block_batch(blocks: Sequence[BytesLike]) -> list[bytes]:
    """Hash four already-padded 64-byte blocks, one compression each.

    Each block is read as sixteen big-endian words. The results come back in
    the order of the inputs, each as a 32-byte big-endian state.
    """
    lanes = [bytes(block) for block in blocks]
    if len(lanes) != LANES:
        raise ValueError(f"expected {LANES} blocks, got {len(lanes)}")
    for block in lanes:
        if len(block) != BLOCK_SIZE:
            raise ValueError(f"each block must be {BLOCK_SIZE} bytes, got {len(block)}")
    return [_state_bytes(compress(INITIAL_STATE, block)) for block in lanes]