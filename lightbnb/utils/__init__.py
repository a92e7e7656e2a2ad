"""
Utility modules for the LightBnB data layer.
"""

from .exceptions import (
    APIException,
    ValidationError,
    ConflictError,
    DuplicateResourceError,
    QueryFailedError
)

# The query builder is imported directly where needed to avoid circular imports

__all__ = [
    "APIException",
    "ValidationError",
    "ConflictError",
    "DuplicateResourceError",
    "QueryFailedError",
]
