"""
Property repository for listing search and property creation.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.property import Property
from lightbnb.schemas.property import PropertyCreate, PropertyListing, PropertySearchFilters
from lightbnb.utils.exceptions import QueryFailedError
from lightbnb.utils.query_builder import build_property_search
from lightbnb.utils.validators import dollars_to_cents, parse_schema
from typing import List, Dict, Any, Union
import logging

logger = logging.getLogger(__name__)

SearchOptions = Union[PropertySearchFilters, Dict[str, Any], None]


class PropertyRepository(BaseRepository[Property]):
    """
    Repository for properties.
    Search runs as one parameterized statement built from the requested filters.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(Property, db)

    async def get_all_properties(
        self,
        options: SearchOptions = None,
        limit: int = 10
    ) -> List[PropertyListing]:
        """
        Search properties, cheapest first.

        Args:
            options: Optional filters: city, owner_id, minimum_price_per_night,
                     maximum_price_per_night (both in dollars), minimum_rating
            limit: Maximum number of rows to return

        Returns:
            Matching properties with their average rating

        Raises:
            ValidationError: If options contain unknown keys or invalid values
            QueryFailedError: If the query fails
        """
        filters = parse_schema(PropertySearchFilters, options)
        limit = self.check_limit(limit)
        query = build_property_search(filters, limit)

        try:
            result = await self.db.execute(query.statement)
            rows = result.mappings().all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to search properties: {e}")
            raise QueryFailedError("search properties", e) from e

        properties = [PropertyListing.model_validate(dict(row)) for row in rows]
        logger.debug(f"Property search returned {len(properties)} results")
        return properties

    async def add_property(self, property_data: Union[PropertyCreate, Dict[str, Any]]) -> Property:
        """
        Insert a new property.

        Args:
            property_data: All property fields; cost_per_night in dollars

        Returns:
            The persisted property including its generated id,
            with cost_per_night stored in cents

        Raises:
            ValidationError: If the property data is invalid
            QueryFailedError: If the insert fails, including constraint violations
        """
        property_in = parse_schema(PropertyCreate, property_data)
        create_data = property_in.model_dump()
        create_data["cost_per_night"] = dollars_to_cents(property_in.cost_per_night)

        try:
            created_property = await self.create(create_data)
        except IntegrityError as e:
            raise QueryFailedError("create Property", e) from e

        logger.info(f"Created property: {created_property.title} (ID: {created_property.id})")
        return created_property
