"""
Core cryptographic utilities.

All hashing in claimproof funnels through the SHA-256 primitive
defined in hashing.py.
"""
from .hashing import (
    DIGEST_SIZE,
    sha256,
    hash_text,
    hash_canonical,
    to_hex,
    from_hex,
    hash_concat,
)

__all__ = [
    "DIGEST_SIZE",
    "sha256",
    "hash_text",
    "hash_canonical",
    "to_hex",
    "from_hex",
    "hash_concat",
]
