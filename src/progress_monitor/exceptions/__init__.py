"""Exception classes for progress tracking.

All custom exceptions inherit from ApplicationError to keep a consistent
hierarchy across the package.

Exception classes support two patterns:
1. No-argument raise: raise IllegalStateError()
2. Contextual attributes: err = IllegalStateError(stage="load"); raise err
"""

from typing import Any, Hashable, Optional


class ApplicationError(Exception):
    """Base exception for all application errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Application error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class IllegalStateError(ApplicationError):
    """Operation is not allowed in the tracker's current state."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Operation is not allowed in the current state"
        super().__init__(message, **kwargs)

    @classmethod
    def stage_in_progress(cls, requested: Hashable, current: Hashable) -> "IllegalStateError":
        """Create error for starting a stage while another one is open."""
        return cls(
            f"Failed to start new stage {requested!r} while current stage {current!r} is not finished",
            stage=requested,
            current_stage=current,
        )

    @classmethod
    def stage_not_started(cls, requested: Hashable, current: Optional[Hashable]) -> "IllegalStateError":
        """Create error for finishing a stage that is not the open one."""
        msg = f"Failed to finish stage {requested!r} because it's not started"
        if current is not None:
            msg += f" (current stage is {current!r})"
        return cls(msg, stage=requested, current_stage=current)

    @classmethod
    def task_not_started(cls) -> "IllegalStateError":
        """Create error for finishing a task that was never started."""
        return cls("Failed to finish task because it was never started", stage=None, current_stage=None)


__all__ = ["ApplicationError", "IllegalStateError"]
