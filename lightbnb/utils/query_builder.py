"""
Parameterized SQL assembly for the property search.

Search options become an ordered list of predicates, each a
``(column, operator, bound value)`` triple. Rendering walks that list once:
the first predicate opens the ``WHERE`` clause and every later one is joined
with ``AND``. Bind parameters are named ``param_1 .. param_n`` in the order
their predicates were added, and the row limit is always bound last.
"""

from sqlalchemy import Integer, Numeric, String, bindparam, text
from sqlalchemy.sql.elements import BindParameter, TextClause
from sqlalchemy.types import TypeEngine
from lightbnb.schemas.property import PropertySearchFilters
from lightbnb.utils.validators import dollars_to_cents
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Predicate:
    """One ``column operator :param`` condition and the value bound to it."""
    column: str
    operator: str
    value: Any
    type_: TypeEngine = field(default_factory=String)


@dataclass(frozen=True)
class FilterRule:
    """How one search option turns into a predicate."""
    option: str
    column: str
    operator: str
    transform: Callable[[Any], Any]
    type_: TypeEngine


def _contains(value: Any) -> str:
    return f"%{value}%"


def _identity(value: Any) -> Any:
    return value


# Evaluation order is fixed: it decides which present filter opens the WHERE clause
PROPERTY_FILTER_RULES: Tuple[FilterRule, ...] = (
    FilterRule("city", "properties.city", "LIKE", _contains, String()),
    FilterRule("owner_id", "properties.owner_id", "=", _identity, Integer()),
    FilterRule("minimum_price_per_night", "properties.cost_per_night", ">=", dollars_to_cents, Integer()),
    FilterRule("maximum_price_per_night", "properties.cost_per_night", "<=", dollars_to_cents, Integer()),
    FilterRule("minimum_rating", "ratings.average_rating", ">=", _identity, Numeric()),
)

PROPERTY_SEARCH_SELECT = """
SELECT properties.*, ratings.average_rating
FROM properties
LEFT JOIN (
    SELECT property_id, avg(rating) AS average_rating
    FROM property_reviews
    GROUP BY property_id
) AS ratings ON ratings.property_id = properties.id
""".strip()


def build_property_predicates(filters: PropertySearchFilters) -> List[Predicate]:
    """
    Turn search filters into predicates, skipping options that are None.

    Zero is a real bound: ``minimum_price_per_night=0`` still yields a predicate.
    """
    predicates = []
    for rule in PROPERTY_FILTER_RULES:
        value = getattr(filters, rule.option)
        if value is None:
            continue
        predicates.append(
            Predicate(rule.column, rule.operator, rule.transform(value), rule.type_)
        )
    return predicates


def render_conditions(predicates: List[Predicate]) -> Tuple[str, List[BindParameter]]:
    """
    Render predicates as a ``WHERE ... AND ...`` clause.

    Returns:
        Tuple of (clause text, bind parameters in placeholder order).
        The clause is empty when there are no predicates.
    """
    clauses = []
    binds = []

    for predicate in predicates:
        name = f"param_{len(binds) + 1}"
        binds.append(bindparam(name, predicate.value, type_=predicate.type_))
        keyword = "WHERE" if not clauses else "AND"
        clauses.append(f"{keyword} {predicate.column} {predicate.operator} :{name}")

    return "\n".join(clauses), binds


@dataclass
class CompiledQuery:
    """SQL text plus its bound parameters, ready for ``AsyncSession.execute``."""
    sql: str
    binds: List[BindParameter]

    @property
    def params(self) -> Dict[str, Any]:
        """Bound values by placeholder name, in binding order."""
        return {bind.key: bind.value for bind in self.binds}

    @property
    def statement(self) -> TextClause:
        return text(self.sql).bindparams(*self.binds)


def build_property_search(
    filters: Optional[PropertySearchFilters],
    limit: int
) -> CompiledQuery:
    """
    Build the property search query.

    Args:
        filters: Search filters; None means no filtering
        limit: Maximum number of rows to return

    Returns:
        CompiledQuery ordered by nightly cost, cheapest first
    """
    predicates = build_property_predicates(filters or PropertySearchFilters())
    where_clause, binds = render_conditions(predicates)

    limit_name = f"param_{len(binds) + 1}"
    binds.append(bindparam(limit_name, limit, type_=Integer()))

    parts = [PROPERTY_SEARCH_SELECT]
    if where_clause:
        parts.append(where_clause)
    parts.append("ORDER BY properties.cost_per_night")
    parts.append(f"LIMIT :{limit_name}")

    query = CompiledQuery(sql="\n".join(parts), binds=binds)
    logger.debug(f"Property search SQL: {query.sql} params={query.params}")
    return query
