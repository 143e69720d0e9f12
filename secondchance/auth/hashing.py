"""
Password hashing and verification.

Uses bcrypt: every hash gets a fresh random salt, and the salt plus cost
factor are embedded in the hash string, so verification needs nothing else.
"""

import logging

import bcrypt

from secondchance.auth.errors import HashingError

logger = logging.getLogger(__name__)


class PasswordHasher:
    """Salted one-way hashing of plaintext passwords with bcrypt."""

    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a password with a new salt. Raises HashingError on failure."""
        try:
            salt = bcrypt.gensalt(rounds=self.rounds)
            return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")
        except Exception as e:
            # Salt generation draws on os.urandom; any failure here is fatal
            logger.error("Password hashing failed: %s", type(e).__name__, exc_info=True)
            raise HashingError() from e

    def verify(self, password: str, hashed_password: str) -> bool:
        """Constant-time comparison against a bcrypt hash."""
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                hashed_password.encode("utf-8"),
            )
        except (ValueError, TypeError, AttributeError):
            # Malformed stored hash or non-string input
            logger.warning("Password verification could not be performed")
            return False
