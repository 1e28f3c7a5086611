"""
Dependency injection package.
"""

from service_objects.infrastructure.di.container import (
    ServiceLocator,
    ServiceManager,
    build_container,
    get_container,
    get_service,
    reset_container,
)
from service_objects.infrastructure.di.definitions import (
    config_section,
    constructor,
    service_function,
)

__all__ = [
    "ServiceLocator",
    "ServiceManager",
    "build_container",
    "config_section",
    "constructor",
    "get_container",
    "get_service",
    "reset_container",
    "service_function",
]
