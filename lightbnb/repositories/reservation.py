"""
Reservation repository for a guest's booking history.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import select, func
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.property import Property
from lightbnb.models.reservation import Reservation
from lightbnb.models.review import PropertyReview
from lightbnb.schemas.property import PropertyResponse
from lightbnb.schemas.reservation import ReservationListing, ReservationResponse
from lightbnb.utils.exceptions import QueryFailedError
from typing import List
import logging

logger = logging.getLogger(__name__)


def average_ratings_subquery():
    """Average review rating per property."""
    return (
        select(
            PropertyReview.property_id.label("property_id"),
            func.avg(PropertyReview.rating).label("average_rating"),
        )
        .group_by(PropertyReview.property_id)
        .subquery("ratings")
    )


class ReservationRepository(BaseRepository[Reservation]):
    """Repository for reservations."""

    def __init__(self, db: AsyncSession):
        super().__init__(Reservation, db)

    async def get_all_reservations(self, guest_id: int, limit: int = 10) -> List[ReservationListing]:
        """
        Get a guest's past reservations, earliest first.

        A reservation is past when its end date is before the database's
        current date at the time the query runs.

        Args:
            guest_id: ID of the guest
            limit: Maximum number of rows to return

        Returns:
            Reservations joined with their property and its average rating

        Raises:
            ValidationError: If limit is invalid
            QueryFailedError: If the query fails
        """
        limit = self.check_limit(limit)
        ratings = average_ratings_subquery()

        query = (
            select(Reservation, Property, ratings.c.average_rating)
            .join(Property, Reservation.property_id == Property.id)
            .outerjoin(ratings, ratings.c.property_id == Property.id)
            .where(
                Reservation.guest_id == guest_id,
                Reservation.end_date < func.current_date(),
            )
            .order_by(Reservation.start_date, Reservation.id)
            .limit(limit)
        )

        try:
            result = await self.db.execute(query)
            rows = result.all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to get reservations for guest {guest_id}: {e}")
            raise QueryFailedError("get reservations", e) from e

        reservations = [
            ReservationListing(
                **ReservationResponse.model_validate(reservation).model_dump(),
                property=PropertyResponse.model_validate(property_obj),
                average_rating=average_rating,
            )
            for reservation, property_obj, average_rating in rows
        ]

        logger.debug(f"Retrieved {len(reservations)} reservations for guest {guest_id}")
        return reservations
