"""Four-lane RIPEMD-160 over 32-byte inputs, one compression per lane."""

from __future__ import annotations

from typing import Sequence, Union

from digestkit.ripemd160 import SHORT_INPUT_SIZE, ripemd160_32

LANES = 4

BytesLike = Union[bytes, bytearray, memoryview]


def ripemd160_32_batch(inputs: Sequence[BytesLike]) -> list[bytes]:
    """Return the RIPEMD-160 digests of four 32-byte inputs.

    The digests come back in the order of the inputs. The inputs themselves
    are not modified.
    """
    lanes = [bytes(item) for item in inputs]
    if len(lanes) != LANES:
        raise ValueError(f"expected {LANES} inputs, got {len(lanes)}")
    for item in lanes:
        if len(item) != SHORT_INPUT_SIZE:
            raise ValueError(
                f"each input must be {SHORT_INPUT_SIZE} bytes, got {len(item)}"
            )
    return [ripemd160_32(item) for item in lanes]