"""
Service dependencies for FastAPI endpoints.

This module turns service manager lookups into FastAPI dependency
functions, so endpoints declare the services they use by name.
"""

# Standard libs
import logging
from collections.abc import Callable
from typing import Annotated, Any

# Third-party
from fastapi import Depends

# Project
from service_objects.core.interfaces.service_locator import ServiceLookup
from service_objects.infrastructure.di.container import get_container

logger = logging.getLogger(__name__)


def service_dependency(name: str, lookup: ServiceLookup | None = None) -> Callable[[], Any]:
    """
    Build a dependency function resolving ``name``.

    Args:
        name: Service name
        lookup: Manager or locator to resolve from; defaults to the
            process-wide manager at request time

    Returns:
        A zero-argument callable suitable for ``Depends``
    """

    def resolve_service() -> Any:
        source = lookup if lookup is not None else get_container()
        return source.get(name)

    resolve_service.__name__ = f"get_{name.replace('.', '_')}_service"
    return resolve_service


def ServiceDep(name: str, lookup: ServiceLookup | None = None) -> Any:
    """
    Annotated type for an endpoint parameter resolved from the service manager.

    Declare it once per service as a module-level alias:

        MailerServiceDep = ServiceDep("mailer")

        @router.post("/invites")
        def invite(mailer: MailerServiceDep): ...
    """
    return Annotated[Any, Depends(service_dependency(name, lookup))]
