"""
Module 02 - Hashing Utilities
The single hashing primitive behind claim commitments and fraud proofs.

Owner: Protocol/Crypto Engineer
Module ID: M02

This module provides:
- SHA-256 hashing for raw bytes
- Claim text hashing (UTF-8 encoded leaf hashes)
- Canonical hashing for structured payloads (via dumps_canonical)
- Hex encoding/decoding with 0x prefix

Security/Determinism Notes:
- Every hash in the system goes through sha256()
- Claim text is hashed exactly as given; no whitespace or case folding
- Structured payloads are hashed over their canonical JSON form only
"""
from __future__ import annotations

import hashlib
from typing import Any

from core.schemas.canonical import dumps_canonical


# Length of every digest produced by this module
DIGEST_SIZE: int = 32


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte SHA-256 digest

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def hash_text(text: str) -> bytes:
    """
    Hash a claim text to produce its Merkle leaf.

    Rule: leaf = sha256(text.encode("utf-8"))

    Args:
        text: Claim text, hashed verbatim

    Returns:
        32-byte SHA-256 digest
    """
    return sha256(text.encode("utf-8"))


def hash_canonical(obj: Any) -> bytes:
    """
    Hash an object using canonical JSON serialization.

    The object is first serialized to canonical JSON (sorted keys, no
    whitespace), then the UTF-8 encoded bytes are hashed with SHA-256.
    Identical logical content always yields the identical digest.

    Rule: digest = sha256(dumps_canonical(obj).encode("utf-8"))

    Args:
        obj: Any object that can be canonically serialized
             (Pydantic model, dict, list, primitives)

    Returns:
        32-byte SHA-256 digest of the canonical JSON

    Raises:
        CanonicalizationException: If object cannot be canonically serialized
    """
    canonical_json = dumps_canonical(obj)
    return sha256(canonical_json.encode("utf-8"))


def to_hex(data: bytes) -> str:
    """
    Convert bytes to hexadecimal string with 0x prefix.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        '0xdeadbeef'
    """
    return "0x" + data.hex()


def from_hex(hex_string: str) -> bytes:
    """
    Convert hexadecimal string (with 0x prefix) to bytes.

    Args:
        hex_string: Hex string with 0x prefix

    Returns:
        Decoded bytes

    Raises:
        ValueError: If string doesn't start with 0x, has odd length,
                   or contains invalid hex characters
    """
    if not isinstance(hex_string, str):
        raise ValueError(f"Hex value must be a string, got {type(hex_string).__name__}")

    if not hex_string.startswith("0x"):
        raise ValueError(
            f"Hex string must start with '0x' prefix, got: {hex_string[:10]}..."
        )

    hex_content = hex_string[2:]

    if len(hex_content) % 2 != 0:
        raise ValueError(
            f"Hex string must have even length after 0x prefix, "
            f"got length {len(hex_content)}"
        )

    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise ValueError(f"Invalid hex characters in string: {e}") from e


def hash_concat(left: bytes, right: bytes) -> bytes:
    """
    Hash the concatenation of two byte sequences.

    Used for Merkle parent hashes: parent = sha256(left + right).
    Argument order is significant.
    """
    return sha256(left + right)


__all__ = [
    "DIGEST_SIZE",
    "sha256",
    "hash_text",
    "hash_canonical",
    "to_hex",
    "from_hex",
    "hash_concat",
]
