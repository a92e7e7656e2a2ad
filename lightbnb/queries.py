"""
Module-level data access functions.

Each function opens its own session from the environment's session factory,
runs a single repository operation and returns the result. Use the
repositories directly when a caller already holds a session.
"""

from lightbnb.database import get_session_factory
from lightbnb.models.property import Property
from lightbnb.models.user import User
from lightbnb.repositories.property import PropertyRepository, SearchOptions
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.user import UserRepository
from lightbnb.schemas.property import PropertyCreate, PropertyListing
from lightbnb.schemas.reservation import ReservationListing
from lightbnb.schemas.user import UserCreate
from typing import Any, Dict, List, Optional, Union


# Users

async def get_user_with_email(email: str) -> Optional[User]:
    """Get a single user by email, or None if no user has that email."""
    async with get_session_factory()() as session:
        return await UserRepository(session).get_user_with_email(email)


async def get_user_with_id(user_id: int) -> Optional[User]:
    """Get a single user by id, or None if there is no such user."""
    async with get_session_factory()() as session:
        return await UserRepository(session).get_user_with_id(user_id)


async def add_user(user: Union[UserCreate, Dict[str, Any]]) -> User:
    """Add a new user and return it with its generated id."""
    async with get_session_factory()() as session:
        return await UserRepository(session).add_user(user)


# Reservations

async def get_all_reservations(guest_id: int, limit: int = 10) -> List[ReservationListing]:
    """Get a guest's past reservations, earliest first."""
    async with get_session_factory()() as session:
        return await ReservationRepository(session).get_all_reservations(guest_id, limit)


# Properties

async def get_all_properties(options: SearchOptions = None, limit: int = 10) -> List[PropertyListing]:
    """Get properties matching ``options``, cheapest first."""
    async with get_session_factory()() as session:
        return await PropertyRepository(session).get_all_properties(options, limit)


async def add_property(property_data: Union[PropertyCreate, Dict[str, Any]]) -> Property:
    """Add a property and return it with its generated id."""
    async with get_session_factory()() as session:
        return await PropertyRepository(session).add_property(property_data)
