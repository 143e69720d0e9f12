"""
SecondChance Auth API - Test Configuration

Shared fixtures for CI-safe testing without MongoDB.
"""

import asyncio
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from secondchance.main import app
from secondchance.auth.dependencies import get_auth_service
from secondchance.auth.errors import EmailConflictError
from secondchance.auth.hashing import PasswordHasher
from secondchance.auth.models import User
from secondchance.auth.repository import UserRepositoryInterface
from secondchance.auth.service import AuthService
from secondchance.auth.tokens import TokenIssuer


TEST_JWT_SECRET = "test-secret-key-that-is-long-enough-0123456789"


class InMemoryUserRepository(UserRepositoryInterface):
    """In-memory user repository for testing.

    Enforces email uniqueness on insert like the unique index does.
    """

    def __init__(self):
        self._users_by_email: Dict[str, User] = {}

    async def get_by_email(self, email: str) -> Optional[User]:
        return self._users_by_email.get(email)

    async def create(self, user: User) -> User:
        if user.email in self._users_by_email:
            raise EmailConflictError()
        user = replace(
            user,
            id=str(ObjectId()),
            created_at=datetime.now(timezone.utc),
            updated_at=None,
        )
        self._users_by_email[user.email] = user
        return user

    async def update_by_email(self, email: str, fields: dict) -> Optional[User]:
        user = self._users_by_email.get(email)
        if user is None:
            return None
        user = replace(user, **fields, updated_at=datetime.now(timezone.utc))
        self._users_by_email[email] = user
        return user

    def get_by_email_sync(self, email: str) -> Optional[User]:
        """Synchronous helper for tests that need direct access."""
        return asyncio.run(self.get_by_email(email))


@pytest.fixture
def password_hasher() -> PasswordHasher:
    # Minimum bcrypt cost keeps the suite fast
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_issuer() -> TokenIssuer:
    return TokenIssuer(TEST_JWT_SECRET)


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def auth_service(user_repository, password_hasher, token_issuer) -> AuthService:
    return AuthService(user_repository, password_hasher, token_issuer)


@pytest.fixture
def client(auth_service):
    """Create test client with the in-memory repository behind the router."""

    async def override_get_auth_service():
        return auth_service

    app.dependency_overrides[get_auth_service] = override_get_auth_service
    yield TestClient(app)
    # Clean up override after test
    app.dependency_overrides.clear()


@pytest.fixture
def registered_user(client):
    """Register a test user and return the request body used."""
    body = {
        "email": "a@x.com",
        "password": "secret1",
        "firstName": "Ann",
        "lastName": "Lee",
    }
    client.post("/api/auth/register", json=body)
    return body
