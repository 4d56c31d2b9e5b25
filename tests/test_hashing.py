import hashlib

import pytest

from digestkit import hashing
from digestkit.ripemd160 import ripemd160 as own_ripemd160
from digestkit.sha256 import sha256 as own_sha256


def test_sha256_known_vector():
    assert hashing.sha256(b"abc").hex() == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_rmd160_empty_vector():
    assert hashing.rmd160(b"").hex() == "9c1185a5c5e9fc54612808977ee8f548b2258d31"


def test_keccak_empty_vector():
    assert hashing.keccak(b"").hex() == (
        "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
    )


def test_keccak_differs_from_sha3():
    data = b"keccak padding"
    assert hashing.keccak(data) != hashlib.sha3_256(data).digest()
    assert len(hashing.keccak(data)) == 32


@pytest.mark.parametrize("data", [b"", b"a", b"x" * 55, b"y" * 64, bytes(range(200))])
def test_sha256_agrees_with_compression_implementation(data):
    assert hashing.sha256(data) == own_sha256(data)


@pytest.mark.parametrize("data", [b"", b"a", b"x" * 55, b"y" * 64, bytes(range(200))])
def test_rmd160_agrees_with_compression_implementation(data):
    assert hashing.rmd160(data) == own_ripemd160(data)


def test_accepts_bytearray_and_memoryview():
    data = b"some bytes"
    assert hashing.sha256(bytearray(data)) == hashing.sha256(data)
    assert hashing.rmd160(memoryview(data)) == hashing.rmd160(data)
    assert hashing.keccak(bytearray(data)) == hashing.keccak(data)


def test_sha256_4_matches_single():
    inputs = [b"aaaa", b"bbbb", b"cccc", b"dddd"]
    assert hashing.sha256_4(*inputs) == [hashing.sha256(d) for d in inputs]


def test_rmd160_4_matches_single():
    inputs = [bytes([i]) * 33 for i in range(4)]
    assert hashing.rmd160_4(*inputs) == [hashing.rmd160(d) for d in inputs]


def test_four_way_keeps_order():
    inputs = [b"1111", b"2222", b"3333", b"4444"]
    forward = hashing.sha256_4(*inputs)
    backward = hashing.sha256_4(*reversed(inputs))
    assert backward == list(reversed(forward))


def test_four_way_rejects_unequal_lengths():
    with pytest.raises(ValueError):
        hashing.sha256_4(b"a", b"bb", b"c", b"d")
    with pytest.raises(ValueError):
        hashing.rmd160_4(b"a", b"b", b"c", b"dddd")


def test_sha256_file_matches_memory(tmp_path):
    content = bytes(range(256)) * 100
    path = tmp_path / "data.bin"
    path.write_bytes(content)
    assert hashing.sha256_file(path) == hashing.sha256(content)
    assert hashing.sha256_file(str(path)) == hashing.sha256(content)


def test_sha256_file_empty(tmp_path):
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    assert hashing.sha256_file(path) == hashing.sha256(b"")


def test_sha256_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        hashing.sha256_file(tmp_path / "missing.bin")