"""Plan and metric configuration for a progress tracker."""

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Hashable, Mapping, Optional, Union

import orjson

from .errors import ConfigurationError
from .runtime import env_str

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "PROGRESS_MONITOR_CONFIG"

Number = Union[int, float]


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _validate_plan(plan: Mapping[Hashable, Any]) -> Dict[Hashable, Number]:
    validated: Dict[Hashable, Number] = {}
    for stage, steps in plan.items():
        if not _is_number(steps):
            raise ConfigurationError.invalid_value(f"plan[{stage!r}]", steps, "Planned steps must be a number")
        if steps < 0:
            raise ConfigurationError.invalid_value(f"plan[{stage!r}]", steps, "Planned steps must be non-negative")
        validated[stage] = steps
    return validated


def _validate_metrics(metrics: Mapping[Hashable, Any]) -> Dict[Hashable, Number]:
    validated: Dict[Hashable, Number] = {}
    for stage, weight in metrics.items():
        if not _is_number(weight):
            raise ConfigurationError.invalid_value(f"metrics[{stage!r}]", weight, "Metric must be a number")
        if weight <= 0:
            raise ConfigurationError.invalid_value(f"metrics[{stage!r}]", weight, "Metric must be positive")
        validated[stage] = weight
    return validated


def _section(payload: Mapping[str, Any], name: str) -> Mapping[Hashable, Any]:
    value = payload.get(name)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError.invalid_format(name, repr(value), "a mapping of stage to number")
    return value


@dataclass(frozen=True)
class TrackerConfig:
    """Planned step counts and relative per-step weights, keyed by stage."""

    plan: Dict[Hashable, Number] = field(default_factory=dict)
    metrics: Dict[Hashable, Number] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, payload: Optional[Mapping[str, Any]]) -> "TrackerConfig":
        """Build a validated config from ``{"plan": {...}, "metrics": {...}}``."""
        if payload is None:
            return cls()
        if not isinstance(payload, Mapping):
            raise ConfigurationError.invalid_format("tracker config", repr(payload), "a mapping")
        return cls(
            plan=_validate_plan(_section(payload, "plan")),
            metrics=_validate_metrics(_section(payload, "metrics")),
        )

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "TrackerConfig":
        """Load a config from a JSON file whose top level is an object."""
        config_path = Path(path).expanduser()
        if not config_path.exists():
            raise ConfigurationError(f"Configuration file {config_path} does not exist")
        try:
            data = orjson.loads(config_path.read_bytes())
        except orjson.JSONDecodeError as exc:
            raise ConfigurationError(f"Failed to parse JSON config {config_path}") from exc
        except OSError as exc:
            raise ConfigurationError.load_failed("tracker config", str(config_path)) from exc

        if not isinstance(data, dict):
            raise ConfigurationError(f"JSON config {config_path} must contain an object at the top level")

        logger.debug("Loaded tracker config from %s", config_path)
        return cls.from_mapping(data)

    @classmethod
    def from_env(cls) -> "TrackerConfig":
        """Load the file named by ``PROGRESS_MONITOR_CONFIG``, or an empty config when unset."""
        config_path = env_str(CONFIG_PATH_ENV)
        if config_path is None:
            return cls()
        return cls.from_json_file(config_path)


__all__ = ["CONFIG_PATH_ENV", "TrackerConfig"]
