"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cities: int = Field(..., description="Number of known cities", ge=0)
    cafes: int = Field(..., description="Number of cafés across all cities", ge=0)
