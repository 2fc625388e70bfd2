"""Shared configuration helpers and dataclasses."""

from .errors import ConfigurationError
from .runtime import env_bool, env_str
from .tracker_config import CONFIG_PATH_ENV, TrackerConfig

__all__ = [
    "CONFIG_PATH_ENV",
    "ConfigurationError",
    "TrackerConfig",
    "env_bool",
    "env_str",
]
