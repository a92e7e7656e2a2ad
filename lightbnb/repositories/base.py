"""
Base repository class with common operations using async SQLAlchemy.
Provides generic inserts and single-row lookups that specific repositories extend.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy import select
from lightbnb.database import Base
from lightbnb.utils.exceptions import QueryFailedError
from lightbnb.utils.validators import validate_limit
from typing import TypeVar, Generic, Optional, Dict, Any, Type
import logging

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository class providing common operations.

    Lookups return None when no row matches. Database failures are logged and
    raised as QueryFailedError so callers can tell them apart from "not found".
    """

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        """
        Initialize repository with model class and database session.

        Args:
            model: SQLAlchemy model class
            db: Async database session
        """
        self.model = model
        self.db = db

    async def create(self, obj_in: Dict[str, Any]) -> ModelType:
        """
        Insert a new record and return it with its generated id.

        Args:
            obj_in: Dictionary of field values for the new record

        Returns:
            Created model instance

        Raises:
            IntegrityError: If a constraint rejects the row
            QueryFailedError: If any other database error occurs
        """
        try:
            db_obj = self.model(**obj_in)
            self.db.add(db_obj)
            await self.db.commit()
            await self.db.refresh(db_obj)
            logger.debug(f"Created {self.model.__name__} with id: {db_obj.id}")
            return db_obj
        except IntegrityError as e:
            await self.db.rollback()
            logger.error(f"Constraint violation creating {self.model.__name__}: {e}")
            raise
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Failed to create {self.model.__name__}: {e}")
            raise QueryFailedError(f"create {self.model.__name__}", e) from e

    async def get_by_id(self, id: int) -> Optional[ModelType]:
        """
        Get a record by its ID.

        Args:
            id: Primary key of the record to retrieve

        Returns:
            Model instance if found, None otherwise
        """
        return await self.get_by_field("id", id)

    async def get_by_field(self, field: str, value: Any) -> Optional[ModelType]:
        """
        Get a record by an exact match on a single column.

        Args:
            field: Field name to search by
            value: Value to search for

        Returns:
            Model instance if found, None otherwise

        Raises:
            ValueError: If the model has no such field
            QueryFailedError: If the query fails
        """
        if not hasattr(self.model, field):
            raise ValueError(f"Field '{field}' does not exist on {self.model.__name__}")

        try:
            query = select(self.model).where(getattr(self.model, field) == value)
            result = await self.db.execute(query)
            obj = result.scalars().first()
        except SQLAlchemyError as e:
            logger.error(f"Failed to get {self.model.__name__} by {field}={value}: {e}")
            raise QueryFailedError(f"get {self.model.__name__} by {field}", e) from e

        if obj:
            logger.debug(f"Retrieved {self.model.__name__} by {field}: {value}")
        else:
            logger.debug(f"{self.model.__name__} with {field}={value} not found")

        return obj

    @staticmethod
    def check_limit(limit: int) -> int:
        """Validate a caller-supplied row limit."""
        return validate_limit(limit)
