"""Café storage protocol.

Defines the read-only interface over the city → café names dataset.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CafeStore(Protocol):
    """Protocol for café dataset backends.

    Any type implementing these methods satisfies the protocol,
    no explicit inheritance needed.
    """

    def get(self, city: str) -> tuple[str, ...] | None:
        """Return the ordered café names for a city.

        Args:
            city: The city key (case-sensitive)

        Returns:
            Tuple of café names, or None if the city is unknown
        """
        ...

    def cities(self) -> list[str]:
        """Return all known city keys, sorted."""
        ...

    def count_all(self) -> int:
        """Count cafés across all cities."""
        ...

    def health_check(self) -> bool:
        """Check if the store is usable.

        Returns:
            True if healthy, False otherwise
        """
        ...
