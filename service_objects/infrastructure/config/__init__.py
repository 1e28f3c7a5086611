"""
Configuration sources package.
"""

from service_objects.infrastructure.config.sources import (
    ConfigurationSource,
    EnvironmentSource,
    FileSource,
    MappingSource,
    as_source,
    merge_sources,
)

__all__ = [
    "ConfigurationSource",
    "EnvironmentSource",
    "FileSource",
    "MappingSource",
    "as_source",
    "merge_sources",
]
