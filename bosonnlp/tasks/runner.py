import threading
from collections.abc import Iterable
from typing import TypeVar

from bosonnlp.exceptions import BosonNLPError
from bosonnlp.logging.logger import Log
from bosonnlp.tasks.base import DEFAULT_ALPHA, DEFAULT_BETA, BaseTask

ItemT = TypeVar("ItemT")


class TaskRunner:
    """Drive one task through push -> analysis -> wait -> result -> clear.

    The first failure propagates and the remaining steps, clear included,
    are skipped.
    """

    def __init__(
        self,
        *,
        alpha: float = DEFAULT_ALPHA,
        beta: float = DEFAULT_BETA,
        timeout: float | None = None,
    ) -> None:
        self._alpha = alpha
        self._beta = beta
        self._timeout = timeout

    def run(
        self,
        task: BaseTask[list[ItemT]],
        contents: Iterable[object] | None,
        cancel: threading.Event | None = None,
    ) -> list[ItemT]:
        """Execute the full task lifecycle and return its result.

        Returns an empty list without any further call when there is nothing
        to push.
        """
        Log.info(f"Running {task.label} task {task.task_id}")
        try:
            if not task.push(contents):
                Log.info(f"Nothing to push for {task.label} task {task.task_id}")
                return []
            task.analysis(self._alpha, self._beta)
            task.wait(self._timeout, cancel=cancel)
            result = task.result()
            task.clear()
        except BosonNLPError as exc:
            Log.error(f"{task.label.capitalize()} task {task.task_id} failed: {exc}")
            raise
        Log.info(f"{task.label.capitalize()} task {task.task_id} completed successfully")
        return result
