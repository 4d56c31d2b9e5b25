"""Four-lane two-block SHA-256: two compressions of each 128-byte padded message."""

from __future__ import annotations

from typing import Sequence, Union

from digestkit.sha256 import BLOCK_SIZE, INITIAL_STATE, _state_bytes, compress

LANES = 4
TWO_BLOCKS = 2 * BLOCK_SIZE

BytesLike = Union[bytes, bytearray, memoryview]


def sha256_two_block_batch(blocks: Sequence[BytesLike]) -> list[bytes]:
    """Hash four already-padded 128-byte messages, two compressions each.

    Each message is read as thirty-two big-endian words. The results come
    back in the order of the inputs, each as a 32-byte big-endian state.
    """
    lanes = [bytes(block) for block in blocks]
    if len(lanes) != LANES:
        raise ValueError(f"expected {LANES} messages, got {len(lanes)}")
    for message in lanes:
        if len(message) != TWO_BLOCKS:
            raise ValueError(f"each message must be {TWO_BLOCKS} bytes, got {len(message)}")

    def run(message: bytes) -> bytes:
        state = compress(INITIAL_STATE, message[:BLOCK_SIZE])
        state = compress(state, message[BLOCK_SIZE:])
        return _state_bytes(state)

    return [run(message) for message in lanes]