"""
Core exceptions package.

This package contains all exceptions raised by the service manager.
"""

from service_objects.core.exceptions.base_exceptions import (
    ConfigurationError,
    ExhaustivenessError,
    ServiceManagerError,
)
from service_objects.core.exceptions.container_exceptions import (
    CircularResolutionError,
    ConfigurationLockedError,
    DuplicateNameError,
    UnknownServiceError,
)

__all__ = [
    "CircularResolutionError",
    "ConfigurationError",
    "ConfigurationLockedError",
    "DuplicateNameError",
    "ExhaustivenessError",
    "ServiceManagerError",
    "UnknownServiceError",
]
