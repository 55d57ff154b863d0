"""Request DTOs for API endpoints."""

from fastapi.datastructures import QueryParams
from pydantic import BaseModel, Field

from cafe_api.entities import CafeQuery
from cafe_api.exceptions import InvalidCountError, UnknownCityError


class CafeListRequest(BaseModel):
    """Raw query parameters of GET /cafe.

    Values are kept as strings so that malformed input reaches the
    handler and is rejected with the fixed plain-text messages instead
    of a validation error body.
    """

    city: str | None = Field(None, description="City key, e.g. 'moscow'")
    count: str | None = Field(None, description="Maximum number of cafés to return")
    search: str | None = Field(None, description="Substring the café name must contain")

    @classmethod
    def from_query_params(cls, params: QueryParams) -> "CafeListRequest":
        """Build the request from a URL query string.

        A repeated parameter resolves to its first value.
        """

        def first(name: str) -> str | None:
            values = params.getlist(name)
            return values[0] if values else None

        return cls(city=first("city"), count=first("count"), search=first("search"))

    def parse_count(self) -> int | None:
        """Parse count as a non-negative integer.

        Returns:
            The count, or None when absent or empty (no limit)

        Raises:
            InvalidCountError: If count is present but not ASCII digits
        """
        if not self.count:
            return None
        if not (self.count.isascii() and self.count.isdigit()):
            raise InvalidCountError(self.count)
        return int(self.count)

    def to_query(self) -> CafeQuery:
        """Convert to a CafeQuery entity.

        Raises:
            UnknownCityError: If city is absent or empty
            InvalidCountError: If count is malformed
        """
        if not self.city:
            raise UnknownCityError(self.city)
        return CafeQuery(
            city=self.city,
            count=self.parse_count(),
            search=self.search or "",
        )
