"""Tests for progress_monitor exception classes."""

from __future__ import annotations

import pytest

from progress_monitor.exceptions import ApplicationError, IllegalStateError


class TestApplicationError:
    """Tests for the base exception."""

    def test_default_message_uses_docstring(self) -> None:
        """ApplicationError falls back to its docstring."""
        assert "Base exception" in str(ApplicationError())

    def test_kwargs_become_attributes(self) -> None:
        """Keyword context is stored on the instance."""
        err = ApplicationError("boom", stage="load")
        assert str(err) == "boom"
        assert err.stage == "load"


class TestIllegalStateError:
    """Tests for IllegalStateError and its factories."""

    def test_inherits_from_application_error(self) -> None:
        """IllegalStateError inherits from ApplicationError."""
        assert issubclass(IllegalStateError, ApplicationError)

    def test_default_message(self) -> None:
        """IllegalStateError has a default message."""
        with pytest.raises(IllegalStateError, match="not allowed"):
            raise IllegalStateError()

    def test_stage_in_progress(self) -> None:
        """stage_in_progress names both stages."""
        err = IllegalStateError.stage_in_progress("b", "a")
        assert str(err) == "Failed to start new stage 'b' while current stage 'a' is not finished"
        assert err.stage == "b"
        assert err.current_stage == "a"

    @pytest.mark.parametrize(
        ("current", "expected"),
        [
            (None, "Failed to finish stage 'b' because it's not started"),
            ("a", "Failed to finish stage 'b' because it's not started (current stage is 'a')"),
        ],
    )
    def test_stage_not_started(self, current, expected) -> None:
        """stage_not_started mentions the open stage when there is one."""
        err = IllegalStateError.stage_not_started("b", current)
        assert str(err) == expected
        assert err.current_stage == current

    def test_task_not_started(self) -> None:
        """task_not_started carries empty stage context."""
        err = IllegalStateError.task_not_started()
        assert "never started" in str(err)
        assert err.stage is None
