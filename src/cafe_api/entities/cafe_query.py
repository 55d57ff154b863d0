"""Café query domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CafeQuery:
    """Validated filter parameters for a single café lookup.

    Attributes:
        city: City key in the dataset (case-sensitive)
        count: Maximum number of cafés to return, None for no limit
        search: Substring the café name must contain, empty for no filtering
    """

    city: str
    count: int | None = None
    search: str = ""
