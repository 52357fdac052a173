"""
Module 02 - Hashing Unit Tests
Tests for core/crypto/hashing.py

Tests:
- sha256 / hash_text against hashlib
- hash_canonical stability for dict key ordering differences
- to_hex/from_hex round trip and rejection of malformed hex
"""
import hashlib
import pytest

from core.crypto.hashing import (
    DIGEST_SIZE,
    sha256,
    hash_text,
    hash_canonical,
    to_hex,
    from_hex,
    hash_concat,
)
from core.schemas.errors import CanonicalizationException


class TestSha256:
    """Tests for sha256() function."""

    def test_sha256_known_value(self):
        """sha256 matches the well-known digest of "hello"."""
        result = sha256(b"hello")

        assert result.hex() == "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
        assert len(result) == DIGEST_SIZE

    def test_sha256_empty_bytes(self):
        assert sha256(b"") == hashlib.sha256(b"").digest()


class TestHashText:
    """Tests for claim leaf hashing."""

    def test_utf8_encoding(self):
        text = "Ursula K. Le Guin, Hainish Cycle ✓"
        assert hash_text(text) == hashlib.sha256(text.encode("utf-8")).digest()

    def test_text_is_hashed_verbatim(self):
        """No trimming or case folding."""
        assert hash_text("Published in 1969.") != hash_text("published in 1969.")
        assert hash_text("Published in 1969.") != hash_text("Published in 1969. ")


class TestHashCanonical:
    """Tests for hash_canonical()."""

    def test_key_order_does_not_matter(self):
        a = {"claim": "x", "check": "URL Validity", "evidence": []}
        b = {"evidence": [], "check": "URL Validity", "claim": "x"}

        assert hash_canonical(a) == hash_canonical(b)

    def test_matches_compact_sorted_json(self):
        obj = {"b": 1, "a": [1, 2]}
        expected = hashlib.sha256(b'{"a":[1,2],"b":1}').digest()

        assert hash_canonical(obj) == expected

    def test_non_finite_float_rejected(self):
        with pytest.raises(CanonicalizationException):
            hash_canonical({"score": float("nan")})


class TestHexEncoding:
    """Tests for to_hex/from_hex."""

    def test_round_trip(self):
        digest = sha256(b"round trip")
        assert from_hex(to_hex(digest)) == digest

    def test_prefix(self):
        assert to_hex(b"\xde\xad\xbe\xef") == "0xdeadbeef"

    @pytest.mark.parametrize("bad", ["deadbeef", "0xabc", "0xzz", ""])
    def test_malformed_hex_rejected(self, bad):
        with pytest.raises(ValueError):
            from_hex(bad)

    def test_non_string_rejected(self):
        with pytest.raises(ValueError):
            from_hex(b"0xdead")


class TestHashConcat:
    """Tests for hash_concat()."""

    def test_order_matters(self):
        a, b = sha256(b"a"), sha256(b"b")
        assert hash_concat(a, b) != hash_concat(b, a)
        assert hash_concat(a, b) == hashlib.sha256(a + b).digest()
