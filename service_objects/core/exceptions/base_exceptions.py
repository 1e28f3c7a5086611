"""
Base exceptions for the service manager.

This module defines the foundational exception class that every error
raised by the package derives from.
"""

from typing import Any


class ServiceManagerError(Exception):
    """
    Base exception for all service manager errors.

    Attributes:
        message: A human-readable error message
        detail: Additional information about the error
        code: An error code for machine processing
    """

    def __init__(
        self,
        message: str,
        detail: str | list[str] | dict[str, Any] | None = None,
        code: str | None = None,
    ) -> None:
        self.message = message
        self.detail = detail
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} - {self.detail}"
        return self.message


class ConfigurationError(ServiceManagerError):
    """Exception raised when a configuration source cannot be loaded."""

    def __init__(
        self,
        message: str = "Invalid configuration",
        detail: str | list[str] | dict[str, Any] | None = None,
        code: str = "CONFIGURATION_ERROR",
    ) -> None:
        super().__init__(message=message, detail=detail, code=code)


class ExhaustivenessError(ServiceManagerError):
    """Exception raised when a variant dispatch does not cover every variant."""

    def __init__(
        self,
        message: str = "Not every variant is handled",
        detail: str | list[str] | dict[str, Any] | None = None,
        code: str = "VALIDATION_ERROR",
    ) -> None:
        super().__init__(message=message, detail=detail, code=code)
