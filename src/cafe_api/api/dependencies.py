"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from cafe_api.config import settings
from cafe_api.handlers import CafeHandler
from cafe_api.logging_config import setup_logging
from cafe_api.protocols import CafeStore
from cafe_api.repositories import InMemoryCafeRepository
from cafe_api.services import CafeService

logger = logging.getLogger(__name__)


def get_cafe_service(request: Request) -> CafeService:
    """Dependency injection for CafeService from app.state.

    Raises:
        RuntimeError: If service is not initialized
    """
    service = getattr(request.app.state, "cafe_service", None)
    if service is None:
        raise RuntimeError("CafeService not initialized. Check lifespan setup.")
    return service


def get_handler(request: Request) -> CafeHandler:
    """Dependency injection for CafeHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "cafe_handler", None)
    if handler is None:
        raise RuntimeError("CafeHandler not initialized. Check lifespan setup.")
    return handler


def build_repository() -> InMemoryCafeRepository:
    """Create the café repository from settings.

    Loads CAFE_DATASET_PATH when set, otherwise the built-in dataset.
    """
    if settings.cafe_dataset_path:
        return InMemoryCafeRepository.from_json(settings.cafe_dataset_path)
    return InMemoryCafeRepository.create()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores them in app.state:
    1. Repository (data access) - app.state.repository, taken from
       app.state.injected_repository when create_app was given one
    2. Service (business logic) - app.state.cafe_service
    3. Handler (HTTP endpoints) - app.state.cafe_handler

    app.state.injected_repository is never removed, so the same app can be
    started again with the same dataset.

    Args:
        app: The FastAPI application instance

    Yields:
        None
    """
    setup_logging(settings.log_level, settings.log_file)

    repository: CafeStore | None = getattr(app.state, "injected_repository", None)
    if repository is None:
        repository = build_repository()

    cafe_service = CafeService.create(repository=repository)
    cafe_handler = CafeHandler(cafe_service=cafe_service)

    app.state.repository = repository
    app.state.cafe_service = cafe_service
    app.state.cafe_handler = cafe_handler

    logger.info(
        "Café service initialized: %d cities, %d cafés, case_sensitive=%s",
        len(cafe_service.cities()),
        cafe_service.total_cafes(),
        cafe_service.case_sensitive,
    )

    yield

    del app.state.cafe_handler
    del app.state.cafe_service
    del app.state.repository
    logger.info("Café service shut down")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[CafeHandler, Depends(get_handler)]
ServiceDep = Annotated[CafeService, Depends(get_cafe_service)]
