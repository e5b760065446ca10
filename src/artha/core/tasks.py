"""Utilities for safe background task management.

Background jobs scheduled with FastAPI's ``BackgroundTasks`` run after the
response has been sent, so nobody is left to receive their exceptions. The
wrapper here makes sure such failures are:
- Logged with full context rather than silently swallowed
- Counted, so /health can report how many jobs were dropped
- Never propagated back into the ASGI server
"""

from collections.abc import Callable
from dataclasses import dataclass
import threading
from typing import Any, TypeVar

from artha.core.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass
class TaskStats:
    """Process-wide counters for background jobs."""

    completed: int = 0
    failed: int = 0

    def __post_init__(self) -> None:
        self._lock = threading.Lock()

    def record(self, *, success: bool) -> None:
        with self._lock:
            if success:
                self.completed += 1
            else:
                self.failed += 1

    def snapshot(self) -> dict[str, int]:
        with self._lock:
            return {"completed": self.completed, "failed": self.failed}

    def reset(self) -> None:
        with self._lock:
            self.completed = 0
            self.failed = 0


task_stats = TaskStats()


def run_safe_task(
    func: Callable[..., T],
    task_name: str,
    *args: Any,
    on_error: Callable[[Exception], None] | None = None,
    **kwargs: Any,
) -> T | None:
    """Run a background job, logging instead of raising on failure.

    Args:
        func: The job to run
        task_name: Descriptive name for logging
        *args: Positional arguments for ``func``
        on_error: Optional callback with the exception on failure
        **kwargs: Keyword arguments for ``func``

    Returns:
        The job's result, or None if it failed

    Example:
        background_tasks.add_task(
            run_safe_task,
            save_translation,
            "history_save",
            user_id,
            record,
        )
    """
    try:
        result = func(*args, **kwargs)
    except Exception as e:
        task_stats.record(success=False)
        logger.exception(
            "background_task_failed",
            task=task_name,
            error=str(e),
            error_type=type(e).__name__,
        )
        if on_error:
            try:
                on_error(e)
            except Exception as callback_error:
                logger.warning(
                    "background_task_error_callback_failed",
                    task=task_name,
                    original_error=str(e),
                    callback_error=str(callback_error),
                )
        return None

    task_stats.record(success=True)
    logger.debug("background_task_completed", task=task_name)
    return result
