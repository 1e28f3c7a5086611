"""
Service container exceptions.

Errors raised by the service manager while registering, configuring
or resolving services.
"""

from typing import Any

from service_objects.core.exceptions.base_exceptions import (
    ConfigurationError,
    ServiceManagerError,
)


class UnknownServiceError(ServiceManagerError):
    """Raised when a service name has no registered definition."""

    def __init__(
        self,
        name: str,
        detail: str | list[str] | dict[str, Any] | None = None,
        code: str = "NOT_FOUND",
    ) -> None:
        self.name = name
        super().__init__(
            message=f"No service registered under '{name}'", detail=detail, code=code
        )


class DuplicateNameError(ServiceManagerError):
    """Raised when a service name is registered a second time."""

    def __init__(
        self,
        name: str,
        detail: str | list[str] | dict[str, Any] | None = None,
        code: str = "ALREADY_EXISTS",
    ) -> None:
        self.name = name
        super().__init__(
            message=f"Service '{name}' is already registered", detail=detail, code=code
        )


class CircularResolutionError(ServiceManagerError):
    """
    Raised when resolving a service re-enters its own resolution.

    Attributes:
        chain: Names being resolved, in order, ending with the repeated name
    """

    def __init__(
        self,
        chain: list[str],
        code: str = "CIRCULAR_DEPENDENCY",
    ) -> None:
        self.chain = list(chain)
        super().__init__(
            message=f"Circular dependency while resolving '{self.chain[-1]}'",
            detail=" -> ".join(self.chain),
            code=code,
        )


class ConfigurationLockedError(ConfigurationError):
    """Raised when configuration changes after services have been constructed."""

    def __init__(
        self,
        message: str = "Configuration cannot change once services have been constructed",
        detail: str | list[str] | dict[str, Any] | None = None,
        code: str = "OPERATION_NOT_ALLOWED",
    ) -> None:
        super().__init__(message=message, detail=detail, code=code)
