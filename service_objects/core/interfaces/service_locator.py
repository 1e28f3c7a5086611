"""
Service lookup interface.

Service definitions receive an object satisfying ``ServiceLookup`` rather
than the manager itself, so they can resolve their dependencies without
being able to register services or change configuration.
"""

from collections.abc import Callable, Mapping
from typing import Any, Protocol, TypeAlias, runtime_checkable


@runtime_checkable
class ServiceLookup(Protocol):
    """Minimal protocol exposing ``get`` and ``has`` of the service manager."""

    def get(self, name: str) -> Any: ...

    def has(self, name: str) -> bool: ...


# (configuration, lookup) -> service instance
ServiceDefinition: TypeAlias = Callable[[Mapping[str, Any], ServiceLookup], Any]
