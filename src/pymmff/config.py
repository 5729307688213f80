"""
YAML configuration for pymmff.

Example file::

    parameters_file: data/mmff94.prm
    format: mmff
    log_level: INFO
    cache:
      enabled: true
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from pymmff.core import ConfigurationError
from pymmff.forcefield import formats
from pymmff.parameters import MmffParameters, ParametersCache, default_cache

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class CacheConfig(BaseModel):
    """Parameter cache settings."""

    enabled: bool = Field(True, description="Share parsed tables between force fields")


class MmffConfig(BaseModel):
    """Validated pymmff settings."""

    parameters_file: Path = Field(..., description="MMFF parameter file to load")
    format: str = Field("mmff", description="Parameter file format name")
    log_level: str = Field("WARNING", description="Logging level name")
    cache: CacheConfig = Field(default_factory=CacheConfig)

    @field_validator("log_level")
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in _LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LEVELS)}")
        return v_upper

    @field_validator("format")
    @classmethod
    def format_lowercase(cls, v: str) -> str:
        return v.lower()

    @classmethod
    def from_dict(cls, d: Dict[str, Any], base_dir: Optional[Path] = None) -> "MmffConfig":
        """
        Build a config from a plain mapping.

        Relative ``parameters_file`` paths are resolved against ``base_dir``.

        Raises:
            ConfigurationError: If validation fails.
        """
        try:
            config = cls(**d)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
        if base_dir is not None and not config.parameters_file.is_absolute():
            config = config.model_copy(update={"parameters_file": base_dir / config.parameters_file})
        return config

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)

    def create_parameters(self, cache: Optional[ParametersCache] = None) -> MmffParameters:
        """
        Build an :class:`MmffParameters` and read the configured file.

        The loader comes from the ``formats`` registry entry named by
        :attr:`format`. With caching disabled a private cache is used, so
        the table is not shared with other instances.

        Raises:
            ConfigurationError: If the format is unknown or the file
                cannot be read.
        """
        if not self.cache.enabled:
            cache = ParametersCache()
        elif cache is None:
            cache = default_cache()

        loader = formats.create(self.format, cache=cache)
        if not loader.ok:
            raise ConfigurationError(loader.error)

        parameters = MmffParameters(cache, loader=loader.value)
        if not parameters.read(self.parameters_file):
            raise ConfigurationError(parameters.error_string)
        return parameters


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML mapping from ``path``.

    Raises:
        ConfigurationError: If the file cannot be read or is not a mapping.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as handle:
            content = yaml.safe_load(handle)
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Malformed YAML in {path}: {e}") from e

    if not isinstance(content, dict):
        raise ConfigurationError(f"YAML file {path} must contain a mapping at the root.")
    return content


def load_config(path: Union[str, Path]) -> MmffConfig:
    """Load and validate a YAML configuration file."""
    path = Path(path)
    return MmffConfig.from_dict(load_yaml(path), base_dir=path.parent)
