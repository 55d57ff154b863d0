import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "true").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str | None = os.getenv("LOG_FILE")

    # Dataset
    cafe_dataset_path: str | None = os.getenv("CAFE_DATASET_PATH")

    # Search
    cafe_search_case_sensitive: bool = (
        os.getenv("CAFE_SEARCH_CASE_SENSITIVE", "true").lower() == "true"
    )

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not 0 < self.api_port < 65536:
            raise ValueError(f"API_PORT must be between 1 and 65535, got {self.api_port}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
