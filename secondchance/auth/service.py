import asyncio
import logging
from typing import Optional

from secondchance.auth.errors import (
    DuplicateEmail,
    EmailConflictError,
    InvalidCredentials,
    MissingIdentifier,
    UserNotFound,
    ValidationError,
)
from secondchance.auth.hashing import PasswordHasher
from secondchance.auth.models import LoginResult, RegisterResult, UpdateResult, User
from secondchance.auth.repository import UserRepositoryInterface
from secondchance.auth.tokens import TokenIssuer

logger = logging.getLogger(__name__)


class AuthService:
    """Registration, login and profile updates over a user repository.

    Every failure surfaces as one of the exceptions in
    ``secondchance.auth.errors``.
    """

    def __init__(
        self,
        repository: UserRepositoryInterface,
        hasher: PasswordHasher,
        token_issuer: TokenIssuer,
        password_min_length: int = 6,
    ):
        self.repository = repository
        self.hasher = hasher
        self.token_issuer = token_issuer
        self.password_min_length = password_min_length

    async def register_user(
        self,
        email: str,
        password: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> RegisterResult:
        """Register a new user and issue a token for it.

        The lookup is only a fast path: the repository's unique email
        constraint decides when two registrations race.
        """
        if await self.repository.get_by_email(email) is not None:
            logger.warning("Registration rejected: email id already exists")
            raise DuplicateEmail()

        password_hash = await asyncio.to_thread(self.hasher.hash, password)
        user = User.create(
            email=email,
            password_hash=password_hash,
            first_name=first_name,
            last_name=last_name,
        )

        try:
            user = await self.repository.create(user)
        except EmailConflictError as e:
            logger.warning("Registration rejected: email id already exists")
            raise DuplicateEmail() from e

        token = self.token_issuer.issue(user.id)
        logger.info("User registered successfully")
        return RegisterResult(token=token, email=user.email)

    async def authenticate_user(self, email: str, password: str) -> LoginResult:
        """Authenticate user by email and password."""
        user = await self.repository.get_by_email(email)
        if user is None:
            logger.warning("Login rejected: user not found")
            raise UserNotFound()

        matches = await asyncio.to_thread(self.hasher.verify, password, user.password_hash)
        if not matches:
            logger.warning("Login rejected: passwords do not match")
            raise InvalidCredentials()

        token = self.token_issuer.issue(user.id)
        logger.info("User logged in successfully")
        return LoginResult(token=token, first_name=user.first_name, email=user.email)

    async def update_profile(
        self,
        email: Optional[str],
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        password: Optional[str] = None,
    ) -> UpdateResult:
        """Apply a partial profile update for the user identified by ``email``.

        ``email`` is trusted as already authenticated by the caller. Fields
        left as None are not touched.
        """
        if not email:
            logger.warning("Profile update rejected: no email identifier supplied")
            raise MissingIdentifier()

        if await self.repository.get_by_email(email) is None:
            logger.warning("Profile update rejected: user not found")
            raise UserNotFound()

        # Policy is checked before anything is written
        if password is not None and len(password) < self.password_min_length:
            logger.warning("Profile update rejected: validation errors")
            raise ValidationError(
                errors=[
                    {
                        "field": "password",
                        "msg": f"Password must be at least {self.password_min_length} characters",
                    }
                ]
            )

        fields: dict = {}
        if first_name is not None:
            fields["first_name"] = first_name
        if last_name is not None:
            fields["last_name"] = last_name
        if password is not None:
            fields["password_hash"] = await asyncio.to_thread(self.hasher.hash, password)

        updated = await self.repository.update_by_email(email, fields)
        if updated is None:
            logger.warning("Profile update rejected: user not found")
            raise UserNotFound()

        token = self.token_issuer.issue(updated.id)
        logger.info("User profile updated successfully")
        return UpdateResult(token=token)
