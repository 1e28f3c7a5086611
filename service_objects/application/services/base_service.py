"""
Service object base class.

A service object is a stateless, shared operation. Its collaborators are
required constructor arguments; its single public entry point is
``execute``.
"""

from abc import ABC, abstractmethod
from typing import Any


class ServiceObject(ABC):
    """
    Base class for stateless service objects.

    Subclasses receive their dependencies in ``__init__``, keep them as
    read-only attributes and implement ``execute``. Instances are shared by
    every consumer of the service manager, so ``execute`` must not store
    per-call state on ``self``.
    """

    @abstractmethod
    def execute(self, *args: Any, **kwargs: Any) -> Any:
        """Perform the service's operation."""

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.execute(*args, **kwargs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
