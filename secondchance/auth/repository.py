import logging
from abc import ABC, abstractmethod
from dataclasses import replace
from datetime import datetime, timezone
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from secondchance.auth.errors import EmailConflictError, StoreError
from secondchance.auth.models import FIELD_TO_DOCUMENT_KEY, User

logger = logging.getLogger(__name__)


class UserRepositoryInterface(ABC):
    """Abstract interface for user repository.

    This interface allows swapping implementations (in-memory -> MongoDB).
    Implementations must enforce email uniqueness themselves and report a
    conflict on insert as EmailConflictError.
    """

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email (exact match)."""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user. Returns it with ``id`` and ``created_at`` set."""
        pass

    @abstractmethod
    async def update_by_email(self, email: str, fields: dict) -> Optional[User]:
        """Merge ``fields`` into the user with ``email`` and stamp ``updated_at``.

        Returns the user as stored after the merge, or None if no user has
        that email.
        """
        pass


class MongoUserRepository(UserRepositoryInterface):
    """MongoDB implementation of the user repository."""

    COLLECTION_NAME = "users"
    EMAIL_INDEX_NAME = "email_unique"

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[self.COLLECTION_NAME]

    async def ensure_indexes(self) -> None:
        """Create the unique email index that backs duplicate detection."""
        try:
            await self.collection.create_index(
                [("email", ASCENDING)],
                unique=True,
                name=self.EMAIL_INDEX_NAME,
            )
        except PyMongoError as e:
            logger.error(f"[MongoUserRepository] Could not create email index: {e}", exc_info=True)
            raise StoreError() from e

    async def get_by_email(self, email: str) -> Optional[User]:
        try:
            doc = await self.collection.find_one({"email": email})
        except PyMongoError as e:
            logger.error(f"[MongoUserRepository] Error looking up user: {e}", exc_info=True)
            raise StoreError() from e
        if doc is None:
            return None
        return User.from_dict(doc)

    async def create(self, user: User) -> User:
        user = replace(user, created_at=datetime.now(timezone.utc), updated_at=None)
        try:
            result = await self.collection.insert_one(user.to_dict())
        except DuplicateKeyError as e:
            # Reported by the service as DuplicateEmail
            raise EmailConflictError() from e
        except PyMongoError as e:
            logger.error(f"[MongoUserRepository] Error creating user in MongoDB: {e}", exc_info=True)
            raise StoreError() from e
        logger.info(f"[MongoUserRepository] User created with _id: {result.inserted_id}")
        return replace(user, id=str(result.inserted_id))

    async def update_by_email(self, email: str, fields: dict) -> Optional[User]:
        updates = {FIELD_TO_DOCUMENT_KEY[key]: value for key, value in fields.items()}
        updates["updatedAt"] = datetime.now(timezone.utc)

        try:
            result = await self.collection.find_one_and_update(
                {"email": email},
                {"$set": updates},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            logger.error(f"[MongoUserRepository] Error updating user in MongoDB: {e}", exc_info=True)
            raise StoreError() from e
        if result is None:
            return None
        return User.from_dict(result)
