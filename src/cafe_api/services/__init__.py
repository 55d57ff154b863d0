"""Service layer for business logic.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .cafe_service import CafeService

__all__ = [
    "CafeService",
]
