from service_objects.domain.data_object import DataObject
from service_objects.domain.variants import (
    match_variant,
    transition,
    variant,
    variant_members,
    variant_tag,
)

__all__ = [
    "DataObject",
    "match_variant",
    "transition",
    "variant",
    "variant_members",
    "variant_tag",
]
