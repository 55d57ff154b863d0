"""HTTP handlers for café lookups.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes and response bodies.
"""

import logging

from fastapi import status
from fastapi.responses import PlainTextResponse

from cafe_api.dto import CafeListRequest, HealthCheckResponse
from cafe_api.services import CafeService

logger = logging.getLogger(__name__)

SEPARATOR = ","


class CafeHandler:
    """HTTP handlers for café lookups.

    Validation errors are raised as CafeQueryError subclasses; the app
    turns them into plain-text 400 responses.

    Example:
        ```python
        handler = CafeHandler(cafe_service=CafeService.create(repository))

        @app.get("/cafe", response_class=PlainTextResponse)
        async def list_cafes(city: str | None = None, ...):
            return handler.list_cafes(CafeListRequest(city=city, ...))
        ```
    """

    def __init__(self, cafe_service: CafeService) -> None:
        """Initialize the café handler.

        Args:
            cafe_service: The café service for business logic (required).
        """
        self._cafes = cafe_service

    def list_cafes(self, request: CafeListRequest) -> PlainTextResponse:
        """Handle GET /cafe requests.

        The city is checked before count, so a request with both an
        unknown city and a bad count reports the city.

        Args:
            request: The raw query parameters

        Returns:
            200 response with comma-separated café names (possibly empty)

        Raises:
            UnknownCityError: If city is absent or unknown
            InvalidCountError: If count is not a non-negative integer
        """
        cafes = self._cafes.lookup(request.city)
        names = self._cafes.select(cafes, request.to_query())

        return PlainTextResponse(SEPARATOR.join(names), status_code=status.HTTP_200_OK)

    def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        is_healthy = self._cafes.is_healthy()

        return HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            cities=len(self._cafes.cities()),
            cafes=self._cafes.total_cafes(),
        )
