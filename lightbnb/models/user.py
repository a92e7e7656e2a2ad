"""
User model for guests and property owners.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column
from lightbnb.database import Base


class User(Base):
    """
    A LightBnB account. The same user can own properties and book them.
    Passwords are stored exactly as supplied by the caller.
    """

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="User's display name"
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="User email address - unique lookup key"
    )

    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Password as provided by the caller"
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
