"""Stage-weighted progress and ETA tracking for long-running tasks."""

from progress_monitor.config import ConfigurationError, TrackerConfig
from progress_monitor.exceptions import ApplicationError, IllegalStateError
from progress_monitor.progress_tracker import ProgressTracker
from progress_monitor.progress_tracker_helpers.models import (
    ALL,
    StageStats,
    TaskScope,
    TrackerState,
    stats_to_json,
)

__version__ = "1.0.2"

__all__ = [
    "ALL",
    "ApplicationError",
    "ConfigurationError",
    "IllegalStateError",
    "ProgressTracker",
    "StageStats",
    "TaskScope",
    "TrackerConfig",
    "TrackerState",
    "__version__",
    "stats_to_json",
]
