"""SHA-256, SHA-512, RIPEMD-160 and Keccak-256 digests, with HMAC, PBKDF2 and batched helpers."""

__version__ = "0.1.0"

__all__ = [
    "hashing",
    "ripemd160",
    "ripemd160_batch",
    "rmd160",
    "sha256",
    "sha256_batch",
    "sha256_batch2",
    "sha256_batch_checksum",
    "sha256_fixed",
    "sha512",
]