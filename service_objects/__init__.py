"""
Service objects.

Data objects, service objects and the service manager that wires them
together.
"""

from service_objects.application.services import ServiceObject
from service_objects.core.exceptions import (
    CircularResolutionError,
    ConfigurationError,
    ConfigurationLockedError,
    DuplicateNameError,
    ServiceManagerError,
    UnknownServiceError,
)
from service_objects.domain import DataObject, match_variant, transition, variant
from service_objects.infrastructure.config import EnvironmentSource, FileSource, MappingSource
from service_objects.infrastructure.di import (
    ServiceLocator,
    ServiceManager,
    constructor,
    get_container,
    get_service,
    reset_container,
    service_function,
)

__version__ = "0.1.0"

__all__ = [
    "CircularResolutionError",
    "ConfigurationError",
    "ConfigurationLockedError",
    "DataObject",
    "DuplicateNameError",
    "EnvironmentSource",
    "FileSource",
    "MappingSource",
    "ServiceLocator",
    "ServiceManager",
    "ServiceManagerError",
    "ServiceObject",
    "UnknownServiceError",
    "constructor",
    "get_container",
    "get_service",
    "match_variant",
    "reset_container",
    "service_function",
    "transition",
    "variant",
]
