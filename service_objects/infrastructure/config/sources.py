"""
Configuration sources.

This module provides the sources a service manager assembles its
configuration from: in-memory mappings, YAML or JSON files, and the
process environment.
"""

# Standard Library Imports
import copy
import json
import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

# Third-Party Imports
import yaml

# Core Imports
from service_objects.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)


class ConfigurationSource(ABC):
    """A named source of top-level configuration keys."""

    name: str = "source"

    @abstractmethod
    def load(self) -> dict[str, Any]:
        """
        Read the source.

        Returns:
            A fresh dict of configuration keys

        Raises:
            ConfigurationError: If the source cannot be read or is malformed
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class MappingSource(ConfigurationSource):
    """Configuration held in memory."""

    def __init__(self, values: Mapping[str, Any], name: str = "mapping") -> None:
        self.values = values
        self.name = name

    def load(self) -> dict[str, Any]:
        return copy.deepcopy(dict(self.values))


class FileSource(ConfigurationSource):
    """
    Configuration read from a YAML or JSON file.

    The file's top level must be a mapping. An empty YAML file yields an
    empty configuration.
    """

    def __init__(self, path: str | os.PathLike[str], optional: bool = False) -> None:
        self.path = Path(path)
        self.optional = optional
        self.name = str(self.path)

    def load(self) -> dict[str, Any]:
        if not self.path.is_file():
            if self.optional:
                logger.info("Optional configuration file not found: %s", self.path)
                return {}
            raise ConfigurationError(
                "Configuration file not found", detail=str(self.path)
            )

        suffix = self.path.suffix.lower()
        try:
            with self.path.open("r", encoding="utf-8") as f:
                if suffix in YAML_SUFFIXES:
                    data = yaml.safe_load(f)
                elif suffix in JSON_SUFFIXES:
                    data = json.load(f)
                else:
                    raise ConfigurationError(
                        "Unsupported configuration file type",
                        detail=f"{self.path} (expected one of {YAML_SUFFIXES + JSON_SUFFIXES})",
                    )
        except (yaml.YAMLError, json.JSONDecodeError, OSError) as e:
            raise ConfigurationError(
                "Could not parse configuration file", detail=f"{self.path}: {e}"
            ) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                "Configuration file must contain a mapping at the top level",
                detail=f"{self.path}: got {type(data).__name__}",
            )
        logger.debug("Loaded %d key(s) from %s", len(data), self.path)
        return data


class EnvironmentSource(ConfigurationSource):
    """
    Configuration read from environment variables sharing a prefix.

    ``APP_DATABASE_URL`` with prefix ``APP_`` becomes key ``database_url``.
    Values stay strings.
    """

    def __init__(self, prefix: str, environ: Mapping[str, str] | None = None) -> None:
        if not prefix:
            raise ConfigurationError("Environment source requires a non-empty prefix")
        self.prefix = prefix
        self.environ = environ
        self.name = f"env:{prefix}"

    def load(self) -> dict[str, Any]:
        environ = os.environ if self.environ is None else self.environ
        return {
            key[len(self.prefix):].lower(): value
            for key, value in sorted(environ.items())
            if key.startswith(self.prefix) and len(key) > len(self.prefix)
        }


def as_source(source: Any) -> ConfigurationSource:
    """
    Coerce a mapping, path or source object into a ``ConfigurationSource``.

    Raises:
        ConfigurationError: If the object is not a recognised source
    """
    if isinstance(source, ConfigurationSource):
        return source
    if isinstance(source, Mapping):
        return MappingSource(source)
    if isinstance(source, (str, os.PathLike)):
        return FileSource(source)
    raise ConfigurationError(
        "Unsupported configuration source", detail=type(source).__name__
    )


def merge_sources(sources: Iterable[Any]) -> dict[str, Any]:
    """
    Load every source, then merge them in order.

    Later sources replace earlier values for the same top-level key. Nothing
    is merged unless every source loads.

    Raises:
        ConfigurationError: If ``sources`` is a single source rather than a
            sequence of them, or if any source cannot be loaded
    """
    if isinstance(sources, (Mapping, str, bytes, os.PathLike, ConfigurationSource)):
        raise ConfigurationError(
            "Expected a sequence of configuration sources",
            detail=f"got a single {type(sources).__name__}; wrap it in a list",
        )

    loaded = [(src, src.load()) for src in (as_source(s) for s in sources)]

    merged: dict[str, Any] = {}
    for src, values in loaded:
        overridden = merged.keys() & values.keys()
        if overridden:
            logger.debug("%r overrides key(s): %s", src, ", ".join(sorted(overridden)))
        merged.update(values)
    return merged
