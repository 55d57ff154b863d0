"""Protocol interfaces for swappable implementations.

Usage:
    ```python
    from cafe_api.protocols import CafeStore

    store: CafeStore = InMemoryCafeRepository.create()
    ```
"""

from .cafe_store import CafeStore

__all__ = [
    "CafeStore",
]
