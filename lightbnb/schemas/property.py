"""
Pydantic schemas for property requests and responses.
Handles property creation, search filters, and listing rows with ratings.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional
from decimal import Decimal


class PropertyBase(BaseModel):
    """Base property schema with common fields."""

    owner_id: int = Field(..., description="ID of the user who owns this property")

    title: str = Field(..., min_length=1, max_length=255, description="Property listing title")

    description: str = Field("", max_length=5000, description="Detailed property description")

    thumbnail_photo_url: str = Field(..., max_length=255)

    cover_photo_url: str = Field(..., max_length=255)

    # Address
    street: str = Field(..., max_length=255)
    city: str = Field(..., min_length=1, max_length=255)
    province: str = Field(..., max_length=255)
    post_code: str = Field(..., max_length=255)
    country: str = Field(..., max_length=255)

    # Amenities
    parking_spaces: int = Field(0, ge=0)
    number_of_bathrooms: int = Field(0, ge=0)
    number_of_bedrooms: int = Field(0, ge=0)

    @field_validator("title", "city")
    @classmethod
    def validate_required_text(cls, v):
        """Required text fields cannot be blank."""
        if not v.strip():
            raise ValueError("Field cannot be empty")
        return v.strip()


class PropertyCreate(PropertyBase):
    """
    Schema for creating a new property.
    ``cost_per_night`` is given in dollars and stored in cents.
    """

    cost_per_night: Decimal = Field(
        ...,
        ge=0,
        description="Nightly price in dollars, rounded to the nearest cent on insert"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "owner_id": 1,
                "title": "Speed lamp",
                "description": "description",
                "thumbnail_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg",
                "cover_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg",
                "cost_per_night": 930.61,
                "street": "536 Namsub Highway",
                "city": "Sotboske",
                "province": "Quebec",
                "post_code": "28142",
                "country": "Canada",
                "parking_spaces": 6,
                "number_of_bathrooms": 4,
                "number_of_bedrooms": 8,
            }
        }
    }


class PropertyResponse(BaseModel):
    """
    Schema for a persisted property row.
    Fields mirror the table columns as stored; input limits do not apply.
    """

    id: int = Field(..., description="Property unique identifier")
    owner_id: int
    title: str
    description: str
    thumbnail_photo_url: str
    cover_photo_url: str
    cost_per_night: int = Field(..., description="Nightly price in cents")

    street: str
    city: str
    province: str
    post_code: str
    country: str

    parking_spaces: int
    number_of_bathrooms: int
    number_of_bedrooms: int

    model_config = {"from_attributes": True}


class PropertyListing(PropertyResponse):
    """A property row as returned by search, with its average review rating."""

    average_rating: Optional[float] = Field(
        None,
        description="Average review rating; None when the property has no reviews"
    )


class PropertySearchFilters(BaseModel):
    """
    Optional property search filters.

    Each field that is not None adds one predicate to the search query.
    Unknown keys are rejected.
    """

    city: Optional[str] = Field(
        None,
        max_length=255,
        description="Substring of the city name"
    )

    owner_id: Optional[int] = Field(
        None,
        description="Only properties owned by this user"
    )

    minimum_price_per_night: Optional[Decimal] = Field(
        None,
        ge=0,
        description="Lowest nightly price in dollars"
    )

    maximum_price_per_night: Optional[Decimal] = Field(
        None,
        ge=0,
        description="Highest nightly price in dollars"
    )

    minimum_rating: Optional[Decimal] = Field(
        None,
        ge=0,
        le=5,
        description="Lowest acceptable average rating"
    )

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """Form submissions send unused filters as empty strings."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    model_config = {
        "extra": "forbid",
        "json_schema_extra": {
            "example": {
                "city": "Vancouver",
                "minimum_price_per_night": 100,
                "maximum_price_per_night": 500,
                "minimum_rating": 4,
            }
        },
    }
