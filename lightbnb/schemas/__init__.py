"""
Pydantic schemas for input validation and result rows.
"""

# User schemas
from .user import (
    UserBase,
    UserCreate
)

# Property schemas
from .property import (
    PropertyBase,
    PropertyCreate,
    PropertyResponse,
    PropertyListing,
    PropertySearchFilters
)

# Reservation schemas
from .reservation import (
    ReservationResponse,
    ReservationListing
)

__all__ = [
    # User schemas
    "UserBase",
    "UserCreate",

    # Property schemas
    "PropertyBase",
    "PropertyCreate",
    "PropertyResponse",
    "PropertyListing",
    "PropertySearchFilters",

    # Reservation schemas
    "ReservationResponse",
    "ReservationListing",
]
