"""
Pydantic schemas for reservation history rows.
"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import date
from lightbnb.schemas.property import PropertyResponse


class ReservationResponse(BaseModel):
    """Schema for a persisted reservation row."""

    id: int
    guest_id: int
    property_id: int
    start_date: date
    end_date: date

    model_config = {"from_attributes": True}


class ReservationListing(ReservationResponse):
    """A past reservation with the reserved property and its average rating."""

    property: PropertyResponse = Field(..., description="The reserved property")

    average_rating: Optional[float] = Field(
        None,
        description="Average review rating of the property"
    )
