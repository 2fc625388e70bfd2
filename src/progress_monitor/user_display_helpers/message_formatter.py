"""
Message Formatter Module

Handles emoji-enhanced message formatting for user-facing output.
"""

from typing import Hashable, Optional

_UNKNOWN = "N/A"


def format_duration(seconds: Optional[float]) -> str:
    """Format a duration in seconds as HH:MM:SS."""
    if seconds is None:
        return _UNKNOWN
    total = int(max(seconds, 0))
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def format_progress_line(
    progress: float,
    stage: Optional[Hashable],
    elapsed: Optional[float],
    remaining: Optional[float],
) -> str:
    """Format a one-line progress status."""
    stage_label = "-" if stage is None else str(stage)
    return (
        f"📊 {progress:.1f}% | stage: {stage_label} | "
        f"elapsed {format_duration(elapsed)} | remaining {format_duration(remaining)}"
    )


def format_task_complete(elapsed: Optional[float]) -> str:
    """Format task completion message."""
    return f"✅ Task complete in {format_duration(elapsed)}"
