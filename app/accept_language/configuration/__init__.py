"""Configuration module - public API.

Centralized configuration using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance (main configuration object)
    get_settings: Cached accessor for the singleton
    Settings: Main settings class (for testing/overrides)
    NegotiationSettings: Negotiation settings class (for testing)
"""

from functools import lru_cache

from accept_language.configuration.negotiation import NegotiationSettings
from accept_language.configuration.settings import Settings, settings


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings singleton.

    Returns:
        Settings: The instance created when the settings module was imported.
    """
    return settings


__all__ = ["Settings", "NegotiationSettings", "settings", "get_settings"]
