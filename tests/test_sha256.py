import hashlib
import struct

import pytest

from digestkit.sha256 import (
    INITIAL_STATE,
    Sha256,
    compress,
    sha256,
    sha256_file,
    sha256_hex,
)


@pytest.mark.parametrize("length", [0, 1, 31, 33, 55, 56, 63, 64, 65, 119, 120, 127, 128, 1000])
def test_sha256_matches_reference(length):
    data = bytes((i * 7 + 3) % 256 for i in range(length))
    assert sha256(data) == hashlib.sha256(data).digest()


def test_sha256_known_vectors():
    assert sha256(b"abc").hex() == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )
    assert sha256(b"").hex() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_incremental_updates_match_one_shot():
    data = bytes(range(256)) * 3
    hasher = Sha256()
    for size in (1, 5, 63, 64, 65, 100):
        start = sum((1, 5, 63, 64, 65, 100)[: (1, 5, 63, 64, 65, 100).index(size)])
        hasher.update(data[start:start + size])
    consumed = sum((1, 5, 63, 64, 65, 100))
    assert hasher.digest() == hashlib.sha256(data[:consumed]).digest()


def test_digest_does_not_disturb_state():
    hasher = Sha256(b"hello ")
    first = hasher.digest()
    assert hasher.digest() == first
    hasher.update(b"world")
    assert hasher.digest() == hashlib.sha256(b"hello world").digest()


def test_hexdigest_is_hex_of_digest():
    hasher = Sha256(b"some message")
    assert hasher.hexdigest() == hasher.digest().hex()
    assert len(hasher.hexdigest()) == 64


def test_update_accepts_bytearray_and_memoryview():
    hasher = Sha256()
    hasher.update(bytearray(b"ab"))
    hasher.update(memoryview(b"c"))
    assert hasher.digest() == hashlib.sha256(b"abc").digest()


def test_compress_on_padded_empty_message():
    block = b"\x80" + bytes(63)
    state = compress(INITIAL_STATE, block)
    assert struct.pack(">8I", *state) == hashlib.sha256(b"").digest()


def test_compress_leaves_input_state_unchanged():
    state = list(INITIAL_STATE)
    compress(state, bytes(64))
    assert tuple(state) == INITIAL_STATE


def test_compress_rejects_bad_block_length():
    with pytest.raises(ValueError):
        compress(INITIAL_STATE, bytes(63))


def test_compress_rejects_bad_state_length():
    with pytest.raises(ValueError):
        compress(INITIAL_STATE[:7], bytes(64))


def test_sha256_hex_round_trip():
    digest = sha256(b"xyz")
    assert bytes.fromhex(sha256_hex(digest)) == digest


def test_sha256_hex_rejects_wrong_length():
    with pytest.raises(ValueError):
        sha256_hex(b"\x00" * 20)


def test_sha256_file(tmp_path):
    content = bytes(range(256)) * 100
    path = tmp_path / "data.bin"
    path.write_bytes(content)
    assert sha256_file(path) == hashlib.sha256(content).digest()
    assert sha256_file(str(path)) == sha256(content)


def test_sha256_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        sha256_file(tmp_path / "absent.bin")