"""
Input validation helpers shared by schemas and repositories.
Handles decimal parsing and the dollars/cents conversion for nightly prices.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from pydantic import BaseModel, ValidationError as PydanticValidationError
from typing import Any, Optional, Type, TypeVar
from lightbnb.utils.exceptions import ValidationError

CENTS_PER_DOLLAR = 100

SchemaType = TypeVar("SchemaType", bound=BaseModel)


class ValidationUtils:
    """Utility class for common validation operations."""

    @staticmethod
    def validate_decimal(
        value: Any,
        field_name: str,
        min_value: Optional[Decimal] = None,
        max_value: Optional[Decimal] = None
    ) -> Decimal:
        """
        Validate decimal value.

        Args:
            value: Value to validate
            field_name: Name of the field for error messages
            min_value: Minimum allowed value
            max_value: Maximum allowed value

        Returns:
            Valid Decimal

        Raises:
            ValidationError: If decimal is invalid
        """
        if value is None:
            raise ValidationError(f"{field_name} is required")

        if isinstance(value, bool):
            raise ValidationError(f"{field_name} must be a valid decimal number")

        try:
            decimal_value = Decimal(str(value))
        except (InvalidOperation, ValueError, TypeError):
            raise ValidationError(f"{field_name} must be a valid decimal number")

        if not decimal_value.is_finite():
            raise ValidationError(f"{field_name} must be a finite number")

        if min_value is not None and decimal_value < min_value:
            raise ValidationError(f"{field_name} must be at least {min_value}")

        if max_value is not None and decimal_value > max_value:
            raise ValidationError(f"{field_name} cannot exceed {max_value}")

        return decimal_value


def dollars_to_cents(dollars: Any) -> int:
    """
    Convert a dollar amount to whole cents, rounding half-up.

    ``dollars_to_cents(Decimal("99.99"))`` is ``9999``.
    """
    amount = ValidationUtils.validate_decimal(dollars, "price")
    cents = (amount * CENTS_PER_DOLLAR).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return int(cents)


def cents_to_dollars(cents: int) -> Decimal:
    """Convert a stored cent count back to dollars."""
    return (Decimal(cents) / CENTS_PER_DOLLAR).quantize(Decimal("0.01"))


def validate_limit(limit: Any) -> int:
    """
    Validate a row limit.

    Raises:
        ValidationError: If limit is not a positive integer
    """
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise ValidationError("limit must be an integer")

    if limit < 1:
        raise ValidationError("limit must be at least 1")

    return limit


def handle_pydantic_validation_error(exc: PydanticValidationError) -> ValidationError:
    """
    Convert Pydantic validation error to custom ValidationError.

    Args:
        exc: Pydantic validation error

    Returns:
        Custom ValidationError instance
    """
    field_errors = []

    for error in exc.errors():
        field_path = " -> ".join(str(loc) for loc in error["loc"])
        field_errors.append({
            "field": field_path,
            "message": error["msg"],
            "type": error["type"],
            "input": error.get("input")
        })

    return ValidationError(
        detail="Request validation failed",
        field_errors=field_errors
    )


def parse_schema(schema_class: Type[SchemaType], data: Any) -> SchemaType:
    """
    Validate ``data`` into ``schema_class``.

    Instances of the schema pass through unchanged and None becomes an empty
    schema, so callers can accept a model, a mapping or nothing.

    Raises:
        ValidationError: If the data does not match the schema
    """
    if isinstance(data, schema_class):
        return data

    try:
        return schema_class.model_validate(data if data is not None else {})
    except PydanticValidationError as e:
        raise handle_pydantic_validation_error(e)
