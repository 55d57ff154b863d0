"""Repository layer for data access.

Repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the CafeStore methods satisfies the protocol.
"""

from cafe_api.protocols import CafeStore

from .memory_repository import DEFAULT_CAFES, InMemoryCafeRepository

__all__ = [
    "CafeStore",
    "DEFAULT_CAFES",
    "InMemoryCafeRepository",
]
