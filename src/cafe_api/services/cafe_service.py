"""Café service for core business logic.

Resolves a validated CafeQuery against the dataset: city lookup,
substring search, then truncation to the requested count.
"""

import logging

from cafe_api.config import settings
from cafe_api.entities import CafeQuery
from cafe_api.exceptions import UnknownCityError
from cafe_api.protocols import CafeStore

logger = logging.getLogger(__name__)


class CafeService:
    """Café lookup service.

    Depends on the CafeStore protocol, not a concrete repository.

    Example:
        ```python
        from cafe_api.repositories import InMemoryCafeRepository
        from cafe_api.services import CafeService

        service = CafeService.create(repository=InMemoryCafeRepository.create())
        service.find(CafeQuery(city="moscow", count=2))
        ```
    """

    def __init__(self, repository: CafeStore, case_sensitive: bool = True) -> None:
        """Initialize the café service.

        Args:
            repository: Café dataset backend (required).
            case_sensitive: Whether search matching respects letter case.
        """
        self._repository = repository
        self._case_sensitive = case_sensitive

    @classmethod
    def create(
        cls,
        repository: CafeStore,
        case_sensitive: bool | None = None,
    ) -> "CafeService":
        """Factory method to create CafeService with settings defaults.

        Args:
            repository: Café dataset backend (required).
            case_sensitive: Search matching mode. If None, uses settings.

        Returns:
            Configured CafeService instance
        """
        if case_sensitive is None:
            case_sensitive = settings.cafe_search_case_sensitive
        return cls(repository=repository, case_sensitive=case_sensitive)

    def find(self, query: CafeQuery) -> list[str]:
        """Return café names matching the query, in dataset order.

        Args:
            query: The validated query

        Returns:
            List of café names, possibly empty

        Raises:
            UnknownCityError: If the city is not in the dataset
        """
        return self.select(self.lookup(query.city), query)

    def lookup(self, city: str | None) -> tuple[str, ...]:
        """Resolve the ordered café names of a city.

        Raises:
            UnknownCityError: If the city is absent, empty or not in the dataset
        """
        cafes = self._repository.get(city) if city else None
        if cafes is None:
            raise UnknownCityError(city)
        return cafes

    def select(self, cafes: tuple[str, ...], query: CafeQuery) -> list[str]:
        """Apply the query's search filter and count limit to a city's cafés.

        Business logic:
        1. Keep names containing the search substring (if any)
        2. Truncate to count (if given)
        """
        result = list(cafes)

        if query.search:
            result = [name for name in result if self._matches(name, query.search)]

        if query.count is not None:
            result = result[: query.count]

        logger.debug(
            "city=%s count=%s search=%r -> %d cafés",
            query.city,
            query.count,
            query.search,
            len(result),
        )
        return result

    def _matches(self, name: str, search: str) -> bool:
        if self._case_sensitive:
            return search in name
        return search.casefold() in name.casefold()

    def cities(self) -> list[str]:
        """Return known city keys, sorted."""
        return self._repository.cities()

    def total_cafes(self) -> int:
        """Return the number of cafés across all cities."""
        return self._repository.count_all()

    def is_healthy(self) -> bool:
        """Check if the underlying repository is healthy."""
        return self._repository.health_check()

    @property
    def case_sensitive(self) -> bool:
        """Get current search matching mode."""
        return self._case_sensitive
