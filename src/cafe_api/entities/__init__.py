"""Domain entities for internal representation.

Pure frozen dataclasses used by services. API contracts live in the
dto package.
"""

from .cafe_query import CafeQuery

__all__ = ["CafeQuery"]
