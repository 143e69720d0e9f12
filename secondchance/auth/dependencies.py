from typing import Annotated

from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorDatabase

from secondchance.config import settings
from secondchance.database import get_database
from secondchance.auth.hashing import PasswordHasher
from secondchance.auth.repository import MongoUserRepository
from secondchance.auth.service import AuthService
from secondchance.auth.tokens import TokenIssuer


def get_token_issuer(request: Request) -> TokenIssuer:
    """The issuer built once during application startup."""
    return request.app.state.token_issuer


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_auth_service(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    token_issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> AuthService:
    """Dependency to get AuthService instance with MongoDB repository."""
    user_repo = MongoUserRepository(db)
    return AuthService(
        user_repo,
        hasher,
        token_issuer,
        password_min_length=settings.PASSWORD_MIN_LENGTH,
    )


# Type alias for cleaner dependency injection
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
