
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


# Entity field -> MongoDB document key. The collection layout is shared with
# the existing secondChance backend, so keys stay camelCase.
FIELD_TO_DOCUMENT_KEY = {
    "email": "email",
    "first_name": "firstName",
    "last_name": "lastName",
    "password_hash": "password",
    "created_at": "createdAt",
    "updated_at": "updatedAt",
}


@dataclass
class User:
    """User entity for authentication. ``id`` is assigned by the store."""

    email: str
    password_hash: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        email: str,
        password_hash: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> "User":
        """Create a new, not yet persisted user."""
        return cls(
            email=email,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
        )

    def to_dict(self) -> dict:
        """Convert user to dictionary for MongoDB storage (without ``_id``)."""
        return {
            "email": self.email,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "password": self.password_hash,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        """Create user from MongoDB document."""
        return cls(
            id=str(data["_id"]),
            email=data["email"],
            password_hash=data["password"],
            first_name=data.get("firstName"),
            last_name=data.get("lastName"),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )


@dataclass(frozen=True)
class RegisterResult:
    token: str
    email: str


@dataclass(frozen=True)
class LoginResult:
    token: str
    first_name: Optional[str]
    email: str


@dataclass(frozen=True)
class UpdateResult:
    token: str
