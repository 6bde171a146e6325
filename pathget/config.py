"""
Configuration for the pathget command line.
"""
from pathlib import Path
import logging
from typing import Any
import yaml
from pydantic import BaseModel, Field, field_validator

from pathget.core.errors import DocumentLoadError
from pathget.utils.parse import as_bool


class GetConfig(BaseModel):
    """
    Defaults applied to every lookup made from the command line. Any of
    them can be overridden per command.
    """
    default: Any = Field(None, description="Value printed when a path does not resolve")
    attribute_access: bool = Field(True, description="Whether keys may resolve to object attributes")
    verbose: bool = Field(False, description="Debug logging")

    @field_validator('attribute_access', 'verbose', mode='before')
    @classmethod
    def coerce_bool(cls, value) -> bool:
        """Accept 'yes'/'no', 'on'/'off', 1/0 and friends in the config file."""
        result = as_bool(value)
        if result is None:
            raise ValueError("Expected a boolean, got null")
        return result

    model_config = {'extra': 'forbid'}


def load_config(config_path: Path | str = "pathget.yaml") -> dict:
    """Load configuration from a YAML file."""
    logging.info("Loading config object from %s...", config_path)
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise DocumentLoadError(f"Could not read config {config_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise DocumentLoadError(f"Invalid YAML in config {config_path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DocumentLoadError(f"Config {config_path} must be a mapping, got {type(data).__name__}")
    return data


def get_config(config_path: Path | str | None = None) -> GetConfig:
    """Build a GetConfig from a YAML file, or the defaults when no file is given."""
    if config_path is None:
        return GetConfig()
    return GetConfig(**load_config(config_path))
