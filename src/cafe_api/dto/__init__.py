"""Data Transfer Objects for API contracts.

Internal domain logic should use entities from the entities package.
"""

from .requests import CafeListRequest
from .responses import HealthCheckResponse

__all__ = [
    "CafeListRequest",
    "HealthCheckResponse",
]
