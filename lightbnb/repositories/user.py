"""
User repository for account lookups and registration.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.user import User
from lightbnb.schemas.user import UserCreate
from lightbnb.utils.exceptions import DuplicateResourceError
from lightbnb.utils.validators import parse_schema
from typing import Optional, Dict, Any, Union
import logging

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[User]):
    """Repository for users, keyed by id or by the unique email column."""

    def __init__(self, db: AsyncSession):
        super().__init__(User, db)

    async def get_user_with_email(self, email: str) -> Optional[User]:
        """
        Get a single user by exact email match.

        Args:
            email: Email address to search for

        Returns:
            User instance if found, None otherwise

        Raises:
            QueryFailedError: If the query fails
        """
        return await self.get_by_field("email", email)

    async def get_user_with_id(self, user_id: int) -> Optional[User]:
        """
        Get a single user by primary key.

        Raises:
            QueryFailedError: If the query fails
        """
        return await self.get_by_id(user_id)

    async def add_user(self, user: Union[UserCreate, Dict[str, Any]]) -> User:
        """
        Insert a new user.

        Args:
            user: name, email and password, as a UserCreate or a mapping

        Returns:
            The persisted user including its generated id

        Raises:
            ValidationError: If the user data is invalid
            DuplicateResourceError: If the email is already registered
            QueryFailedError: If any other database error occurs
        """
        user_in = parse_schema(UserCreate, user)

        try:
            created_user = await self.create(user_in.model_dump())
        except IntegrityError as e:
            logger.error(f"User registration rejected for {user_in.email}: {e}")
            raise DuplicateResourceError("User", user_in.email) from e

        logger.info(f"Created user: {created_user.email} (ID: {created_user.id})")
        return created_user
