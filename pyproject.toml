[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "digestkit"
version = "0.1.0"
description = "SHA-256, SHA-512, RIPEMD-160 and Keccak-256 digests with HMAC, PBKDF2, fixed-size and batched helpers"
requires-python = ">=3.10"
dependencies = [
    "pycryptodome",
]
keywords = ["sha256", "sha512", "ripemd160", "keccak", "hmac", "pbkdf2", "hash", "digest"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["digestkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
