"""
Configuration package.

This package contains the service manager settings.
"""

from service_objects.core.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
