from typing import Optional

from jose import JWTError, jwt

from secondchance.auth.errors import ConfigurationError
from secondchance.config import Settings


class TokenIssuer:
    """Signs bearer tokens carrying a single ``sub`` claim.

    Built once at startup with the process-wide secret. Tokens carry no
    expiry.
    """

    def __init__(self, secret: Optional[str], algorithm: str = "HS256"):
        if not secret:
            raise ConfigurationError("A signing secret is required to issue tokens")
        self._secret = secret
        self.algorithm = algorithm

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenIssuer":
        return cls(settings.JWT_SECRET, settings.JWT_ALGORITHM)

    def issue(self, subject_id: str) -> str:
        """Create a signed token for ``subject_id``."""
        return jwt.encode({"sub": subject_id}, self._secret, algorithm=self.algorithm)

    def decode(self, token: str) -> Optional[str]:
        """Decode and validate a token. Returns the subject id if valid."""
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except JWTError:
            return None
        subject_id = payload.get("sub")
        if not isinstance(subject_id, str):
            return None
        return subject_id
