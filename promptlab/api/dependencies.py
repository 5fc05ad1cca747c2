"""Dependency injection for FastAPI.

Provides singleton instances shared across requests.
"""

from functools import lru_cache

from promptlab.shared.config import Settings


@lru_cache
def get_settings() -> Settings:
    """Get application settings (singleton).

    Cached because settings are expensive to load and should be reused.

    Returns:
        Application settings
    """
    return Settings()
