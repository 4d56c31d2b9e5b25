import struct

import pytest
from Crypto.Hash import RIPEMD160

from digestkit.ripemd160 import (
    INITIAL_STATE,
    Ripemd160,
    compress,
    ripemd160,
    ripemd160_32,
    ripemd160_hex,
)


def _reference(data: bytes) -> bytes:
    return RIPEMD160.new(data).digest()


def test_empty_message_vector():
    assert ripemd160(b"").hex() == "9c1185a5c5e9fc54612808977ee8f548b2258d31"


def test_abc_vector():
    assert Ripemd160(b"abc").hexdigest() == "8eb208f7e05d987a9b044a8e98c6b087f15a0bfc"


@pytest.mark.parametrize("length", [0, 1, 31, 32, 55, 56, 63, 64, 65, 119, 120, 128, 300])
def test_matches_reference_across_padding_boundaries(length):
    data = bytes((i * 7 + 3) & 0xFF for i in range(length))
    assert ripemd160(data) == _reference(data)


def test_incremental_updates_match_one_shot():
    data = bytes(range(256)) * 3
    hasher = Ripemd160()
    for start in range(0, len(data), 37):
        hasher.update(data[start:start + 37])
    assert hasher.digest() == ripemd160(data)


def test_digest_does_not_consume_state():
    hasher = Ripemd160(b"first part ")
    early = hasher.digest()
    assert hasher.digest() == early
    hasher.update(b"second part")
    assert hasher.digest() == ripemd160(b"first part second part")


@pytest.mark.parametrize(
    "message",
    [
        b"This is a test message to test01",
        b"This is a test message to test02",
        b"This is a test message to test03",
        b"This is a test message to test04",
    ],
)
def test_ripemd160_32_matches_general_hash(message):
    assert len(message) == 32
    assert ripemd160_32(message) == ripemd160(message)
    assert ripemd160_32(bytearray(message)) == _reference(message)


@pytest.mark.parametrize("length", [0, 31, 33, 64])
def test_ripemd160_32_rejects_other_lengths(length):
    with pytest.raises(ValueError):
        ripemd160_32(bytes(length))


def test_compress_of_padded_block_gives_digest_words():
    block = b"abc" + b"\x80" + bytes(52) + struct.pack("<Q", 24)
    state = compress(INITIAL_STATE, block)
    assert struct.pack("<5I", *state) == ripemd160(b"abc")


def test_compress_leaves_input_state_untouched():
    state = list(INITIAL_STATE)
    compress(state, bytes(64))
    assert tuple(state) == INITIAL_STATE


def test_compress_rejects_bad_sizes():
    with pytest.raises(ValueError):
        compress(INITIAL_STATE, bytes(63))
    with pytest.raises(ValueError):
        compress(INITIAL_STATE[:4], bytes(64))


def test_hex_formatting_round_trip():
    digest = ripemd160(b"hex me")
    text = ripemd160_hex(digest)
    assert len(text) == 40
    assert bytes.fromhex(text) == digest
    assert text == Ripemd160(b"hex me").hexdigest()


def test_hex_rejects_wrong_length():
    with pytest.raises(ValueError):
        ripemd160_hex(bytes(19))