"""Configuration management for apiguide"""

from .settings import Settings, get_settings, validate_environment

__all__ = ["Settings", "get_settings", "validate_environment"]
