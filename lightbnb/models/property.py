"""
Property model for rental listings.
Handles listing details, address data and nightly pricing stored in cents.
"""

from sqlalchemy import String, Text, Integer, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column
from lightbnb.database import Base
from lightbnb.utils.validators import cents_to_dollars
from decimal import Decimal


class Property(Base):
    """
    A rentable property owned by a user.
    ``cost_per_night`` is always whole cents; use ``price_per_night`` for dollars.
    """

    __tablename__ = "properties"

    # Foreign key to user (owner)
    owner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="ID of the user who owns this property"
    )

    # Listing information
    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Property listing title"
    )

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        comment="Detailed property description"
    )

    thumbnail_photo_url: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Small listing photo"
    )

    cover_photo_url: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Large listing photo"
    )

    # Pricing information
    cost_per_night: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        index=True,
        comment="Nightly price in cents"
    )

    # Amenities
    parking_spaces: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    number_of_bathrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    number_of_bedrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Address
    country: Mapped[str] = mapped_column(String(255), nullable=False)
    street: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    province: Mapped[str] = mapped_column(String(255), nullable=False)
    post_code: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Property(id={self.id}, title={self.title[:30]}, cost_per_night={self.cost_per_night})>"

    @property
    def price_per_night(self) -> Decimal:
        """Nightly price in dollars."""
        return cents_to_dollars(self.cost_per_night)


# Search ordering and price filtering both go through cost_per_night
city_cost_index = Index(
    "idx_properties_city_cost",
    Property.city,
    Property.cost_per_night
)
