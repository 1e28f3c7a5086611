"""Data object base for immutable domain value holders."""

from dataclasses import MISSING, fields, is_dataclass, replace
from typing import Any, Self


class DataObject:
    """
    Base for immutable value holders declared with ``@dataclass(frozen=True)``.

    Fields without a default are required and must be passed to the
    constructor. Fields with a default (usually ``None``) are optional and
    are supplied later through ``with_values``, which returns a new object
    instead of mutating this one.
    """

    @classmethod
    def required_fields(cls) -> tuple[str, ...]:
        """Names of fields the constructor must receive."""
        return tuple(
            f.name
            for f in fields(cls)
            if f.init and f.default is MISSING and f.default_factory is MISSING
        )

    @classmethod
    def optional_fields(cls) -> tuple[str, ...]:
        """Names of fields that may be left at their default."""
        required = set(cls.required_fields())
        return tuple(f.name for f in fields(cls) if f.init and f.name not in required)

    def with_values(self, **changes: Any) -> Self:
        """
        Return a copy with the given fields replaced.

        Raises:
            TypeError: If a name is not a field of this object
        """
        if not is_dataclass(self):
            raise TypeError(f"{type(self).__name__} must be declared as a dataclass")
        known = {f.name for f in fields(self) if f.init}
        unknown = sorted(set(changes) - known)
        if unknown:
            raise TypeError(f"{type(self).__name__} has no field(s): {', '.join(unknown)}")
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a shallow dictionary of field values."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
