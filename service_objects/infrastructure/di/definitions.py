"""
Service definition helpers.

Build the ``(config, lookup)`` callables the service manager expects from
ordinary classes and functions, resolving named dependencies through the
lookup and passing configuration sections as keyword arguments.
"""

from collections.abc import Callable, Mapping
from functools import partial
from typing import Any

from service_objects.core.exceptions import ConfigurationError
from service_objects.core.interfaces.service_locator import ServiceDefinition, ServiceLookup


def config_section(config: Mapping[str, Any], key: str | None) -> dict[str, Any]:
    """
    Return the configuration section stored under ``key``.

    A missing section is empty; a section that is not a mapping is an error.
    """
    if key is None:
        return {}
    section = config.get(key, {})
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigurationError(
            f"Configuration section '{key}' must be a mapping",
            detail=f"got {type(section).__name__}",
        )
    return dict(section)


def constructor(
    implementation_type: Callable[..., Any],
    *dependencies: str,
    config_key: str | None = None,
) -> ServiceDefinition:
    """
    Definition that calls ``implementation_type(*deps, **section)``.

    Args:
        implementation_type: Class (or factory) producing the service
        dependencies: Names of services passed positionally, in order
        config_key: Configuration section passed as keyword arguments

    Returns:
        A service definition
    """

    def definition(config: Mapping[str, Any], lookup: ServiceLookup) -> Any:
        resolved = [lookup.get(dependency) for dependency in dependencies]
        return implementation_type(*resolved, **config_section(config, config_key))

    definition.__qualname__ = f"constructor({getattr(implementation_type, '__name__', implementation_type)!s})"
    return definition


def service_function(
    func: Callable[..., Any],
    *dependencies: str,
    config_key: str | None = None,
) -> ServiceDefinition:
    """
    Definition for a stateless service written as a plain function.

    The service is ``func`` with its leading arguments bound to the resolved
    dependencies and, when ``config_key`` is given, its keyword arguments
    bound to that configuration section. Callers supply the rest.

    Example:
        def greet(formatter, name, *, greeting="Hello"):
            return formatter(f"{greeting}, {name}")

        manager.register("greet", service_function(greet, "formatter", config_key="greet"))
        manager.get("greet")("Ada")
    """

    def definition(config: Mapping[str, Any], lookup: ServiceLookup) -> partial:
        resolved = [lookup.get(dependency) for dependency in dependencies]
        return partial(func, *resolved, **config_section(config, config_key))

    definition.__qualname__ = f"service_function({getattr(func, '__name__', func)!s})"
    return definition
