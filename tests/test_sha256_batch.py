import hashlib
import struct

import pytest

from digestkit.sha256 import INITIAL_STATE, compress
from digestkit.sha256_batch import sha256_block_batch


def _pad(message):
    return message + b"\x80" + bytes(55 - len(message)) + struct.pack(">Q", len(message) * 8)


def test_padded_messages_match_reference_in_order():
    messages = [
        b"This is a test message to test 01",
        b"This is a test message to test 02",
        b"This is a test message to test 03",
        b"This is a test message to test 04",
    ]
    digests = sha256_block_batch([_pad(m) for m in messages])
    assert digests == [hashlib.sha256(m).digest() for m in messages]


def test_lengths_up_to_single_block_limit():
    messages = [b"", b"a", bytes(33), bytes(range(55))]
    digests = sha256_block_batch([_pad(m) for m in messages])
    assert digests == [hashlib.sha256(m).digest() for m in messages]


def test_lanes_equal_plain_compression():
    blocks = [bytes([lane]) * 64 for lane in range(4)]
    digests = sha256_block_batch(blocks)
    for block, digest in zip(blocks, digests):
        assert digest == struct.pack(">8I", *compress(INITIAL_STATE, block))


def test_identical_lanes_give_identical_results():
    block = _pad(b"same")
    digests = sha256_block_batch([block, bytearray(block), memoryview(block), block])
    assert len(set(digests)) == 1
    assert digests[0] == hashlib.sha256(b"same").digest()


@pytest.mark.parametrize("count", [0, 3, 5])
def test_rejects_wrong_lane_count(count):
    with pytest.raises(ValueError):
        sha256_block_batch([bytes(64)] * count)


def test_rejects_wrong_block_size():
    with pytest.raises(ValueError):
        sha256_block_batch([bytes(64), bytes(64), bytes(32), bytes(64)])