"""
Pydantic schemas for user requests and responses.
"""

from pydantic import BaseModel, EmailStr, Field, field_validator


class UserBase(BaseModel):
    """Base user schema with common fields."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="User's display name"
    )

    email: EmailStr = Field(
        ...,
        description="User's email address"
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        """Reject blank names and trim surrounding whitespace."""
        if not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()


class UserCreate(UserBase):
    """Schema for creating a new user."""

    password: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="User's password, stored as given"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Devin Sanders",
                "email": "tristanjacobs@gmail.com",
                "password": "$2a$10$FB/BOAVhpuLvpOREQVmvmezD4ED/.JBIDRh70tGevYzYzQgFId2u.",
            }
        }
    }
