"""Data models for progress tracking."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Hashable, Mapping, Optional, Union

import orjson

Number = Union[int, float]


class TaskScope(Enum):
    """Sentinel naming the whole task rather than a single stage."""

    ALL = "all"


ALL = TaskScope.ALL


class TrackerState(Enum):
    """Lifecycle of a tracked task."""

    IDLE = "idle"
    WORKING = "working"
    FINISHED = "finished"


@dataclass
class StageState:
    """Live bookkeeping for one stage of the current run."""

    steps_done: Number = 0
    time_started: Optional[float] = None
    time_finished: Optional[float] = None
    time_elapsed: float = 0.0


@dataclass(frozen=True)
class StageStats:
    """Per-stage report produced by ``ProgressTracker.stats()``."""

    steps_planned: Number
    steps_done: Number
    time_started: Optional[float]
    time_finished: Optional[float]
    time_elapsed: float
    effective_metric: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def stats_to_json(stats: Mapping[Hashable, StageStats]) -> str:
    """Serialize a stats mapping to JSON, rendering stage keys with ``str()``."""
    payload = {str(stage): stage_stats.to_dict() for stage, stage_stats in stats.items()}
    return orjson.dumps(payload).decode()


__all__ = ["ALL", "StageState", "StageStats", "TaskScope", "TrackerState", "stats_to_json"]
