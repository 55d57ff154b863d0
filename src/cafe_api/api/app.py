import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from cafe_api import __version__
from cafe_api.api.dependencies import HandlerDep, ServiceDep, lifespan
from cafe_api.config import settings
from cafe_api.dto import CafeListRequest, HealthCheckResponse
from cafe_api.exceptions import CafeQueryError
from cafe_api.protocols import CafeStore

logger = logging.getLogger(__name__)


async def cafe_query_error_handler(request: Request, exc: CafeQueryError) -> PlainTextResponse:
    """Render a rejected café query as a plain-text 400."""
    logger.info("Rejected %s: %s (value=%r)", request.url.path, exc.message, exc.value)
    return PlainTextResponse(exc.message, status_code=status.HTTP_400_BAD_REQUEST)


def create_app(repository: CafeStore | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        repository: Optional dataset backend. If None, the lifespan builds
            one from settings.

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Café API",
        description="Lists cafés of a city with optional count limit and search",
        version=__version__,
        lifespan=lifespan,
    )
    if repository is not None:
        app.state.injected_repository = repository

    app.add_exception_handler(CafeQueryError, cafe_query_error_handler)

    @app.get("/")
    async def root(service: ServiceDep) -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": "Café API",
            "version": __version__,
            "cities": service.cities(),
            "endpoints": {
                "cafe": "/cafe",
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(handler: HandlerDep) -> HealthCheckResponse:
        """Health check endpoint."""
        return handler.health_check()

    @app.get("/cafe", response_class=PlainTextResponse)
    async def list_cafes(request: Request, handler: HandlerDep) -> PlainTextResponse:
        """
        List cafés of a city as comma-separated plain text.

        Query parameters (first value wins when repeated):
            city: City key (required, otherwise 400 "unknown city").
            count: Non-negative limit (otherwise 400 "incorrect count").
            search: Optional substring filter.
        """
        return handler.list_cafes(CafeListRequest.from_query_params(request.query_params))

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "cafe_api.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
