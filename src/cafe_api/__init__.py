"""Café API - list a city's cafés with count limit and substring search.

Layers:
    - protocols: Interface contracts (CafeStore)
    - repositories: Data access implementations
    - services: Business logic
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from cafe_api.repositories import InMemoryCafeRepository
    from cafe_api.services import CafeService

    service = CafeService.create(repository=InMemoryCafeRepository.create())
    ```

For HTTP API:
    ```python
    from cafe_api.api.app import app
    ```
"""

from cafe_api.config import settings
from cafe_api.dto import CafeListRequest
from cafe_api.entities import CafeQuery
from cafe_api.exceptions import CafeQueryError, InvalidCountError, UnknownCityError
from cafe_api.handlers import CafeHandler
from cafe_api.protocols import CafeStore
from cafe_api.repositories import InMemoryCafeRepository
from cafe_api.services import CafeService

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "settings",
    # Protocols (interfaces)
    "CafeStore",
    # Services (business logic)
    "CafeService",
    # Handlers (HTTP)
    "CafeHandler",
    # Repositories (data access)
    "InMemoryCafeRepository",
    # Entities (domain models)
    "CafeQuery",
    # DTOs (API contracts)
    "CafeListRequest",
    # Errors
    "CafeQueryError",
    "UnknownCityError",
    "InvalidCountError",
]
