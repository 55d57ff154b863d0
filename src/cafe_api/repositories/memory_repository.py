"""In-memory implementation of CafeStore.

The dataset is copied into a read-only mapping of tuples when the
repository is built and never changes afterwards, so concurrent
requests can read it without locking.
"""

import json
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from types import MappingProxyType

logger = logging.getLogger(__name__)

DEFAULT_CAFES: Mapping[str, Sequence[str]] = {
    "moscow": (
        "Мир кофе",
        "Сладкоежка",
        "Кофе и завтраки",
        "Сытый студент",
        "Ложка и вилка",
        "Чашка кофе",
    ),
    "tula": (
        "Кофе с собой",
        "Дом завтрака",
    ),
}


class InMemoryCafeRepository:
    """Immutable city → café names store.

    This class satisfies the CafeStore protocol through structural
    typing. City keys are matched exactly; order of café names is
    preserved as given.
    """

    def __init__(self, dataset: Mapping[str, Sequence[str]]) -> None:
        """Initialize the repository.

        Args:
            dataset: Mapping of city name to ordered café names.

        Raises:
            ValueError: If a city key or café name is not a string.
        """
        frozen: dict[str, tuple[str, ...]] = {}
        for city, names in dataset.items():
            if not isinstance(city, str):
                raise ValueError(f"City key must be a string, got {city!r}")
            if isinstance(names, str) or not all(isinstance(name, str) for name in names):
                raise ValueError(f"Cafés for {city!r} must be a list of strings")
            frozen[city] = tuple(names)

        self._cafes = MappingProxyType(frozen)

    @classmethod
    def create(
        cls,
        dataset: Mapping[str, Sequence[str]] | None = None,
    ) -> "InMemoryCafeRepository":
        """Factory method to create the repository with the default dataset.

        Args:
            dataset: Optional mapping to use instead of DEFAULT_CAFES.

        Returns:
            Configured InMemoryCafeRepository
        """
        return cls(dataset if dataset is not None else DEFAULT_CAFES)

    @classmethod
    def from_json(cls, path: str | Path) -> "InMemoryCafeRepository":
        """Load the dataset from a JSON file shaped {"city": ["name", ...]}.

        Args:
            path: Path to the JSON file

        Returns:
            Configured InMemoryCafeRepository

        Raises:
            ValueError: If the file is not valid JSON or has the wrong shape.
            OSError: If the file cannot be read.
        """
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid café dataset JSON in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Café dataset in {path} must be a JSON object")

        repository = cls(data)
        logger.info("Loaded %d cities from %s", len(data), path)
        return repository

    def get(self, city: str) -> tuple[str, ...] | None:
        return self._cafes.get(city)

    def cities(self) -> list[str]:
        return sorted(self._cafes)

    def count_all(self) -> int:
        return sum(len(names) for names in self._cafes.values())

    def health_check(self) -> bool:
        return bool(self._cafes)

    @property
    def dataset(self) -> Mapping[str, tuple[str, ...]]:
        """Read-only view of the dataset."""
        return self._cafes
