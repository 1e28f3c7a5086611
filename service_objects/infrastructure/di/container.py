"""
Service Manager.

This module implements the service manager: a name-indexed registry of
service definitions, a lazy write-once instance cache and the
configuration every definition is built from. Definitions receive the
assembled configuration and a ``ServiceLocator`` for resolving the
services they depend on.
"""

import logging
import threading
import weakref
from collections.abc import Iterable
from types import MappingProxyType
from typing import Any

from service_objects.core.config.settings import Settings, get_settings
from service_objects.core.exceptions import (
    CircularResolutionError,
    ConfigurationLockedError,
    DuplicateNameError,
    UnknownServiceError,
)
from service_objects.core.interfaces.service_locator import ServiceDefinition
from service_objects.core.logging_config import setup_logging
from service_objects.infrastructure.config.sources import EnvironmentSource, merge_sources
from service_objects.infrastructure.di.definitions import constructor

logger = logging.getLogger(__name__)

# Global container instance
_container: "ServiceManager | None" = None
_container_lock = threading.Lock()


class ServiceLocator:
    """
    Lookup capability handed to service definitions.

    Holds only a weak reference to its manager, so services that keep the
    locator around do not keep the manager alive.
    """

    __slots__ = ("_manager_ref",)

    def __init__(self, manager: "ServiceManager") -> None:
        self._manager_ref = weakref.ref(manager)

    def _manager(self) -> "ServiceManager":
        manager = self._manager_ref()
        if manager is None:
            raise ReferenceError("The service manager behind this locator no longer exists")
        return manager

    def get(self, name: str) -> Any:
        return self._manager().get(name)

    def has(self, name: str) -> bool:
        return self._manager().has(name)

    def __repr__(self) -> str:
        return f"ServiceLocator({self._manager_ref()!r})"


class ServiceManager:
    """
    Registry, lazy singleton cache and configuration provider.

    Each name maps to at most one definition and at most one cached
    instance. Duplicate registration is an error. Once any definition has
    been invoked, the configuration can no longer change.
    """

    def __init__(self, name: str = "default") -> None:
        """
        Initialize an empty service manager.

        Args:
            name: Label used in logs and ``repr``
        """
        self.name = name
        self._definitions: dict[str, ServiceDefinition] = {}
        self._instances: dict[str, Any] = {}
        self._config: dict[str, Any] = {}
        self._config_view = MappingProxyType(self._config)
        self._config_locked = False
        self._lock = threading.RLock()
        self._local = threading.local()
        self._locator = ServiceLocator(self)
        logger.debug("Initialized service manager %r", name)

    def __repr__(self) -> str:
        return f"ServiceManager({self.name!r})"

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    @property
    def config(self) -> MappingProxyType:
        """Read-only view of the assembled configuration."""
        return self._config_view

    @property
    def locator(self) -> ServiceLocator:
        """The lookup capability passed to definitions."""
        return self._locator

    def register(self, name: str, definition: ServiceDefinition) -> None:
        """
        Register a definition under ``name``.

        Args:
            name: Service name
            definition: Callable taking ``(config, locator)`` and returning the service

        Raises:
            DuplicateNameError: If ``name`` is already registered
            TypeError: If ``definition`` is not callable
        """
        if not callable(definition):
            raise TypeError(f"Definition for '{name}' must be callable")

        with self._lock:
            if name in self._definitions:
                raise DuplicateNameError(name)
            self._definitions[name] = definition
        logger.debug("Registered service '%s' in manager '%s'", name, self.name)

    def register_instance(self, name: str, instance: Any) -> None:
        """
        Register an already-built instance under ``name``.

        Raises:
            DuplicateNameError: If ``name`` is already registered
        """
        with self._lock:
            if name in self._definitions:
                raise DuplicateNameError(name)
            self._definitions[name] = lambda config, lookup: instance
            self._instances[name] = instance
        logger.debug("Registered instance for service '%s' in manager '%s'", name, self.name)

    def register_singleton(
        self,
        name: str,
        implementation_type: type,
        *dependencies: str,
        config_key: str | None = None,
    ) -> None:
        """
        Register a class constructed once, on first access.

        The class is called with the named dependencies as positional
        arguments and, when ``config_key`` is given, that configuration
        section as keyword arguments.
        """
        self.register(
            name, constructor(implementation_type, *dependencies, config_key=config_key)
        )

    def has(self, name: str) -> bool:
        """Return whether a definition is registered under ``name``."""
        return name in self._definitions

    def is_instantiated(self, name: str) -> bool:
        """Return whether an instance for ``name`` is cached."""
        return name in self._instances

    def names(self) -> list[str]:
        """Return the registered service names, sorted."""
        with self._lock:
            return sorted(self._definitions)

    def configure(self, sources: Iterable[Any], reset: bool = False) -> MappingProxyType:
        """
        Merge configuration sources into the configuration.

        Sources are applied in order; later sources replace earlier values
        for the same top-level key. Every source is loaded before anything
        is merged, so a failing source leaves the configuration unchanged.

        Args:
            sources: Mappings, file paths or ``ConfigurationSource`` objects
            reset: Clear the existing configuration before merging

        Returns:
            Read-only view of the resulting configuration

        Raises:
            ConfigurationError: If a source cannot be loaded
            ConfigurationLockedError: If a service has already been constructed
        """
        if self._config_locked:
            raise ConfigurationLockedError(detail=repr(self))

        merged = merge_sources(sources)

        with self._lock:
            if self._config_locked:
                raise ConfigurationLockedError(detail=repr(self))
            if reset:
                self._config.clear()
            self._config.update(merged)
        logger.debug("Configured manager '%s' with %d key(s)", self.name, len(merged))
        return self._config_view

    def get(self, name: str) -> Any:
        """
        Resolve the service registered under ``name``.

        Args:
            name: Service name

        Returns:
            The cached instance, constructing it on first access

        Raises:
            UnknownServiceError: If ``name`` is not registered
            CircularResolutionError: If constructing ``name`` needs ``name``
        """
        try:
            return self._instances[name]
        except KeyError:
            pass

        with self._lock:
            # Another thread may have finished construction while we waited
            if name in self._instances:
                return self._instances[name]

            definition = self._definitions.get(name)
            if definition is None:
                raise UnknownServiceError(name)

            chain = self._resolution_chain()
            if name in chain:
                cycle = chain[chain.index(name):] + [name]
                logger.warning("Circular dependency detected: %s", " -> ".join(cycle))
                raise CircularResolutionError(cycle)

            self._config_locked = True
            chain.append(name)
            try:
                instance = definition(self._config_view, self._locator)
            except CircularResolutionError:
                raise
            except Exception as e:
                logger.error("Failed to construct service '%s': %s", name, e)
                raise
            finally:
                chain.pop()

            self._instances[name] = instance
        logger.debug("Constructed service '%s' (%s)", name, type(instance).__name__)
        return instance

    def _resolution_chain(self) -> list[str]:
        """Names currently being resolved on this thread, outermost first."""
        chain = getattr(self._local, "chain", None)
        if chain is None:
            chain = self._local.chain = []
        return chain


def build_container(settings: Settings | None = None) -> ServiceManager:
    """
    Create a service manager configured from settings.

    Logging is configured at ``LOG_LEVEL`` first. ``CONFIG_FILES`` are
    merged in order, followed by the environment variables carrying
    ``ENV_PREFIX`` when one is set.
    """
    settings = settings or get_settings()
    setup_logging(level=settings.LOG_LEVEL)
    manager = ServiceManager()

    sources: list[Any] = list(settings.CONFIG_FILES)
    if settings.ENV_PREFIX:
        sources.append(EnvironmentSource(settings.ENV_PREFIX))
    manager.configure(sources)

    logger.info(
        "Service manager initialized for %s environment from %d source(s)",
        settings.ENVIRONMENT,
        len(sources),
    )
    return manager


def get_container() -> ServiceManager:
    """
    Get the process-wide service manager.

    The manager is created and configured on first call and reused for
    the lifetime of the process.

    Returns:
        The global service manager
    """
    global _container

    if _container is None:
        with _container_lock:
            if _container is None:
                _container = build_container()
    return _container


def reset_container() -> None:
    """
    Reset the process-wide service manager.

    This function is useful for testing when we need to reset
    the container between tests.
    """
    global _container
    with _container_lock:
        _container = None


def get_service(name: str) -> Any:
    """Resolve ``name`` from the process-wide service manager."""
    return get_container().get(name)
