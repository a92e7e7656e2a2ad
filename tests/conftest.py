"""
Test configuration and fixtures for the LightBnB data layer.
Provides database fixtures, test data factories, and common test utilities.
"""

import pytest
import uuid
from datetime import date, timedelta
from decimal import Decimal
from typing import AsyncGenerator
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
import os

from lightbnb.database import Base, build_engine
from lightbnb.models import User, Property, Reservation, PropertyReview
from lightbnb.repositories.user import UserRepository
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository


# Test database configuration
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


@pytest.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh schema for each test."""
    engine = build_engine(TEST_DATABASE_URL, "lightbnb_test")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine: AsyncEngine) -> async_sessionmaker:
    """Session factory bound to the test engine."""
    return async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False
    )


@pytest.fixture
async def db_session(session_factory: async_sessionmaker) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()
            await session.close()


# Repository fixtures
@pytest.fixture
def user_repository(db_session: AsyncSession) -> UserRepository:
    """Create a user repository instance."""
    return UserRepository(db_session)


@pytest.fixture
def property_repository(db_session: AsyncSession) -> PropertyRepository:
    """Create a property repository instance."""
    return PropertyRepository(db_session)


@pytest.fixture
def reservation_repository(db_session: AsyncSession) -> ReservationRepository:
    """Create a reservation repository instance."""
    return ReservationRepository(db_session)


async def database_today(db: AsyncSession) -> date:
    """Today's date by the database clock, the one CURRENT_DATE reads."""
    return await db.scalar(select(func.current_date()))


# Test data factories
class UserFactory:
    """Factory for creating test users."""

    @staticmethod
    def create_user_data(
        name: str = "Test User",
        email: str = None,
        password: str = "password"
    ) -> dict:
        """Create user data dictionary."""
        return {
            "name": name,
            "email": email or f"test{uuid.uuid4().hex[:8]}@example.com",
            "password": password
        }

    @staticmethod
    async def create_user(user_repo: UserRepository, **kwargs) -> User:
        """Create a test user in the database."""
        return await user_repo.add_user(UserFactory.create_user_data(**kwargs))


class PropertyFactory:
    """Factory for creating test properties."""

    @staticmethod
    def create_property_data(
        owner_id: int,
        title: str = "Test Property",
        cost_per_night: Decimal = Decimal("100.00"),
        city: str = "Vancouver",
        **overrides
    ) -> dict:
        """Create property data dictionary; cost_per_night is in dollars."""
        data = {
            "owner_id": owner_id,
            "title": title,
            "description": "A test property",
            "thumbnail_photo_url": "https://example.com/thumb.jpg",
            "cover_photo_url": "https://example.com/cover.jpg",
            "cost_per_night": cost_per_night,
            "street": "123 Test Street",
            "city": city,
            "province": "British Columbia",
            "post_code": "V5K 0A1",
            "country": "Canada",
            "parking_spaces": 1,
            "number_of_bathrooms": 2,
            "number_of_bedrooms": 3
        }
        data.update(overrides)
        return data

    @staticmethod
    async def create_property(property_repo: PropertyRepository, owner_id: int, **kwargs) -> Property:
        """Create a test property in the database."""
        return await property_repo.add_property(
            PropertyFactory.create_property_data(owner_id, **kwargs)
        )


class ReservationFactory:
    """Factory for creating reservations relative to the database's today."""

    @staticmethod
    async def create_reservation(
        db: AsyncSession,
        guest_id: int,
        property_id: int,
        start_offset_days: int,
        nights: int = 3
    ) -> Reservation:
        """Create a reservation starting ``start_offset_days`` from today."""
        start = await database_today(db) + timedelta(days=start_offset_days)
        reservation = Reservation(
            guest_id=guest_id,
            property_id=property_id,
            start_date=start,
            end_date=start + timedelta(days=nights)
        )
        db.add(reservation)
        await db.commit()
        await db.refresh(reservation)
        return reservation


class ReviewFactory:
    """Factory for creating property reviews."""

    @staticmethod
    async def create_review(
        db: AsyncSession,
        guest_id: int,
        property_id: int,
        rating: int,
        reservation_id: int = None
    ) -> PropertyReview:
        """Create a review with the given rating."""
        review = PropertyReview(
            guest_id=guest_id,
            property_id=property_id,
            reservation_id=reservation_id,
            rating=rating,
            message="Test review"
        )
        db.add(review)
        await db.commit()
        await db.refresh(review)
        return review


# Common test fixtures
@pytest.fixture
async def test_owner(user_repository: UserRepository) -> User:
    """Create a property owner."""
    return await UserFactory.create_user(
        user_repository,
        name="Test Owner",
        email="owner@test.com"
    )


@pytest.fixture
async def test_guest(user_repository: UserRepository) -> User:
    """Create a guest."""
    return await UserFactory.create_user(
        user_repository,
        name="Test Guest",
        email="guest@test.com"
    )


@pytest.fixture
async def test_property(property_repository: PropertyRepository, test_owner: User) -> Property:
    """Create a test property."""
    return await PropertyFactory.create_property(
        property_repository,
        owner_id=test_owner.id,
        title="Test Property",
        cost_per_night=Decimal("150.00")
    )
