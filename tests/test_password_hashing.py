"""Tests for bcrypt password hashing."""

import bcrypt
import pytest

from secondchance.auth.errors import HashingError
from secondchance.auth.hashing import PasswordHasher


class TestPasswordHasher:

    def test_verify_accepts_original_password(self, password_hasher):
        hashed = password_hasher.hash("secret1")
        assert password_hasher.verify("secret1", hashed) is True

    def test_verify_rejects_other_password(self, password_hasher):
        hashed = password_hasher.hash("secret1")
        assert password_hasher.verify("wrong", hashed) is False

    def test_same_password_hashes_differently(self, password_hasher):
        """Each hash gets its own salt."""
        first = password_hasher.hash("secret1")
        second = password_hasher.hash("secret1")
        assert first != second
        assert password_hasher.verify("secret1", first)
        assert password_hasher.verify("secret1", second)

    def test_hash_is_not_plaintext(self, password_hasher):
        hashed = password_hasher.hash("secret1")
        assert "secret1" not in hashed
        # bcrypt hashes start with $2a$ or $2b$
        assert hashed.startswith("$2")

    def test_hash_embeds_configured_cost(self):
        hashed = PasswordHasher(rounds=5).hash("secret1")
        assert hashed.split("$")[2] == "05"

    def test_verify_malformed_hash_returns_false(self, password_hasher):
        assert password_hasher.verify("secret1", "not-a-bcrypt-hash") is False

    def test_hash_non_string_raises_hashing_error(self, password_hasher):
        with pytest.raises(HashingError):
            password_hasher.hash(None)

    def test_invalid_cost_raises_hashing_error(self):
        with pytest.raises(HashingError):
            PasswordHasher(rounds=1).hash("secret1")

    def test_randomness_failure_raises_hashing_error(self, password_hasher, monkeypatch):
        def unavailable(*args, **kwargs):
            raise OSError("urandom unavailable")

        monkeypatch.setattr(bcrypt, "gensalt", unavailable)

        with pytest.raises(HashingError) as exc_info:
            password_hasher.hash("secret1")
        assert isinstance(exc_info.value.__cause__, OSError)
