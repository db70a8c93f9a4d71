"""
test_hasher.py — Digest function gate tests
"""

import hashlib

import pytest
from merkle_sdk.hasher import (
    HASHER_ENV_VAR,
    calculate_hash,
    sha256_hash,
    get_hasher,
    fixed_length,
)
from merkle_sdk.errors import DigestLengthError, UnknownHasherError, MerkleError


# BLAKE2b-512("test_data")
TEST_DATA_DIGEST = bytes([
    249, 124, 220, 236, 144, 165, 213, 107, 109, 161, 237, 2, 189, 209, 247, 92,
    37, 154, 19, 252, 148, 61, 177, 152, 191, 210, 99, 37, 220, 74, 109, 173,
    226, 207, 47, 193, 127, 30, 50, 125, 215, 44, 65, 50, 171, 129, 48, 75,
    122, 77, 104, 172, 67, 6, 244, 15, 43, 221, 31, 185, 131, 100, 229, 140,
])


class TestDefaultHasher:
    """BLAKE2b-512 default and SHA-256 alternative."""

    def test_known_vector(self):
        """BLAKE2b-512("test_data")."""
        assert calculate_hash(b"test_data") == TEST_DATA_DIGEST

    def test_deterministic(self):
        assert calculate_hash(b"abc") == calculate_hash(b"abc")

    def test_fixed_length(self):
        """Output is 64 bytes regardless of input size."""
        assert len(calculate_hash(b"")) == 64
        assert len(calculate_hash(b"x" * 10_000)) == 64

    def test_sha256(self):
        assert sha256_hash(b"abc") == hashlib.sha256(b"abc").digest()
        assert len(sha256_hash(b"abc")) == 32


class TestHasherRegistry:
    """Name and environment lookup."""

    def test_by_name(self):
        assert get_hasher("blake2b") is calculate_hash
        assert get_hasher("SHA256") is sha256_hash

    def test_default_without_env(self, monkeypatch):
        monkeypatch.delenv(HASHER_ENV_VAR, raising=False)
        assert get_hasher() is calculate_hash

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv(HASHER_ENV_VAR, "sha256")
        assert get_hasher() is sha256_hash

    def test_unknown_name(self):
        with pytest.raises(UnknownHasherError) as exc:
            get_hasher("md4")
        assert "md4" in str(exc.value)
        assert isinstance(exc.value, MerkleError)
        assert isinstance(exc.value, KeyError)


class TestFixedLength:
    """Opt-in fixed digest length."""

    def test_passes_through(self):
        h = fixed_length(calculate_hash)
        assert h(b"a") == calculate_hash(b"a")
        assert h(b"bb") == calculate_hash(b"bb")

    def test_rejects_varying_length(self):
        """Identity hasher output tracks input length."""
        h = fixed_length(lambda data: data)
        h(b"ab")
        with pytest.raises(DigestLengthError):
            h(b"abc")

    def test_explicit_size(self):
        h = fixed_length(sha256_hash, size=64)
        with pytest.raises(DigestLengthError):
            h(b"a")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
