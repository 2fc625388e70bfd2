"""Helpers backing ProgressTracker."""

from .models import ALL, StageState, StageStats, TaskScope, TrackerState, stats_to_json
from .progress_math import compute_progress, effective_metric, estimate_remaining, metric_for, plan_for

__all__ = [
    "ALL",
    "StageState",
    "StageStats",
    "TaskScope",
    "TrackerState",
    "compute_progress",
    "effective_metric",
    "estimate_remaining",
    "metric_for",
    "plan_for",
    "stats_to_json",
]
