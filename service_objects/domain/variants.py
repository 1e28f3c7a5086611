"""
Tagged variants for data object lifecycles.

A lifecycle is modelled as a closed union of frozen dataclasses, one per
stage, instead of a class hierarchy with mutating methods. Moving to the
next stage builds a new variant; call sites dispatch over every stage
with ``match_variant``.

Example:
    @variant("draft")
    class Draft(DataObject):
        title: str

    @variant("published")
    class Published(DataObject):
        title: str
        published_at: datetime

    Article = Draft | Published

    published = transition(draft, Published, published_at=now)
    label = match_variant(published, {Draft: lambda d: "draft", Published: lambda p: "live"}, Article)
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields
from typing import Any, TypeVar, get_args

from service_objects.core.exceptions import ExhaustivenessError

T = TypeVar("T")
R = TypeVar("R")

TAG_ATTRIBUTE = "__variant_tag__"


def variant(tag: str) -> Callable[[type[T]], type[T]]:
    """
    Declare a class as a frozen, tagged variant.

    Args:
        tag: Stage name, unique within its union

    Returns:
        A class decorator applying ``@dataclass(frozen=True)``
    """
    if not tag:
        raise ValueError("Variant tag cannot be empty")

    def decorator(cls: type[T]) -> type[T]:
        cls = dataclass(frozen=True)(cls)
        setattr(cls, TAG_ATTRIBUTE, tag)
        return cls

    return decorator


def variant_tag(value: Any) -> str:
    """Return the tag of a variant instance or class."""
    try:
        return getattr(value, TAG_ATTRIBUTE)
    except AttributeError:
        raise TypeError(f"{type(value).__name__} is not a tagged variant") from None


def variant_members(union: Any) -> tuple[type, ...]:
    """
    Return the variant classes making up ``union``.

    Raises:
        TypeError: If a member is not a tagged variant or two share a tag
    """
    members = get_args(union) or (union,)
    seen: dict[str, type] = {}
    for member in members:
        tag = variant_tag(member)
        if tag in seen:
            raise TypeError(
                f"Variants {seen[tag].__name__} and {member.__name__} share tag '{tag}'"
            )
        seen[tag] = member
    return tuple(members)


def match_variant(value: Any, handlers: Mapping[type, Callable[[Any], R]], union: Any) -> R:
    """
    Dispatch ``value`` to the handler for its variant.

    The handler table is checked against the whole union before dispatch,
    so a missing stage fails on every call rather than only when that
    stage shows up.

    Raises:
        ExhaustivenessError: If ``handlers`` does not match the union exactly
        TypeError: If ``value`` is not a member of the union
    """
    members = variant_members(union)

    missing = [m.__name__ for m in members if m not in handlers]
    extra = [h.__name__ for h in handlers if h not in members]
    if missing or extra:
        detail: dict[str, Any] = {}
        if missing:
            detail["missing"] = missing
        if extra:
            detail["unexpected"] = extra
        raise ExhaustivenessError(detail=detail)

    handler = handlers.get(type(value))
    if handler is None:
        raise TypeError(
            f"{type(value).__name__} is not one of: {', '.join(m.__name__ for m in members)}"
        )
    return handler(value)


def transition(value: Any, target: type[T], **values: Any) -> T:
    """
    Build a ``target`` variant from ``value``.

    Fields the two variants share are carried over; ``values`` supplies
    the rest and may override carried fields.
    """
    target_fields = {f.name for f in fields(target) if f.init}
    carried = {
        f.name: getattr(value, f.name) for f in fields(value) if f.name in target_fields
    }
    carried.update(values)
    return target(**carried)
