"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
Every collaborator has its own settings class bound to an env prefix.
"""

from source_service.configs.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
