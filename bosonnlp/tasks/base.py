"""Lifecycle shared by the asynchronous cluster and comments tasks.

A task is driven through push -> analysis -> wait -> result -> clear. Every
step except ``wait`` is a single API call under ``/<namespace>/<step>/<task_id>``.
"""

import threading
import time
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, ClassVar, Generic, TypeVar

from bosonnlp.decoders import decode_push_response, decode_status_response
from bosonnlp.exceptions import (
    DecodeError,
    TaskCancelledError,
    TaskError,
    TaskStateError,
    TaskTimeoutError,
)
from bosonnlp.logging.logger import Log
from bosonnlp.tasks.models import Document, TaskStatus, generate_id
from bosonnlp.transport.base import BaseTransport

CHUNK_SIZE = 100
DEFAULT_ALPHA = 0.8
DEFAULT_BETA = 0.45
DEFAULT_POLL_INTERVAL_SECONDS = 1.0
MAX_POLL_INTERVAL_SECONDS = 64.0

OutputT = TypeVar("OutputT")


class BaseTask(ABC, Generic[OutputT]):
    """Contract and shared implementation of an asynchronous analysis task.

    Subclasses only choose the endpoint namespace, a label for log messages
    and how the final result is decoded.
    """

    namespace: ClassVar[str]
    label: ClassVar[str]

    def __init__(
        self,
        transport: BaseTransport,
        task_id: str | None = None,
        *,
        poll_interval: float = DEFAULT_POLL_INTERVAL_SECONDS,
        max_poll_interval: float = MAX_POLL_INTERVAL_SECONDS,
    ) -> None:
        self._transport = transport
        self._task_id = task_id or generate_id()
        self._documents: list[Document] = []
        self._analysis_started = False
        self._poll_interval = poll_interval
        self._max_poll_interval = max_poll_interval

    def __repr__(self) -> str:
        return f"{type(self).__name__}(task_id={self._task_id!r})"

    def __enter__(self) -> "BaseTask[OutputT]":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.clear()

    @property
    def task_id(self) -> str:
        return self._task_id

    @property
    def documents(self) -> tuple[Document, ...]:
        """Documents pushed so far, in push order."""
        return tuple(self._documents)

    def push(self, contents: Iterable[object] | None) -> bool:
        """Upload documents in chunks of CHUNK_SIZE.

        Returns:
            False when there is nothing to push (no call is made), True once
            every chunk has been accepted.

        Raises:
            BosonNLPError: from the first chunk that fails; later chunks are
                not sent.
        """
        documents = Document.coerce_many(contents)
        if not documents:
            return False
        endpoint = self._endpoint("push")
        total = len(documents)
        for start in range(0, total, CHUNK_SIZE):
            chunk = documents[start:start + CHUNK_SIZE]
            decode_push_response(
                self._transport.post(endpoint, data=[doc.to_payload() for doc in chunk])
            )
            Log.info(
                f"Pushed {start + len(chunk)} of {total} documents "
                f"for {self.label} task {self._task_id}"
            )
        self._documents.extend(documents)
        return True

    def analysis(self, alpha: float = DEFAULT_ALPHA, beta: float = DEFAULT_BETA) -> None:
        """Start the server-side analysis.

        Args:
            alpha: Maximum cluster size, as a fraction.
            beta: Average cluster size, as a fraction.
        """
        if not self._documents:
            raise TaskStateError(
                self._task_id, f"task {self._task_id} has no pushed documents"
            )
        if self._analysis_started:
            raise TaskStateError(
                self._task_id, f"task {self._task_id} analysis already started"
            )
        self._transport.get(
            self._endpoint("analysis"), params={"alpha": alpha, "beta": beta}
        )
        self._analysis_started = True
        Log.info(f"{self.label.capitalize()} task {self._task_id} analysis started")

    def status(self) -> TaskStatus:
        """Query the server-side state of the task."""
        resp = decode_status_response(self._transport.get(self._endpoint("status")))
        status = TaskStatus.parse(resp.status, self._task_id)
        Log.info(f"{self.label.capitalize()} task {self._task_id} status: {status.value}")
        return status

    def result(self) -> OutputT:
        """Fetch the final result. Only meaningful once status() is DONE."""
        return self._decode_result(self._transport.get(self._endpoint("result")))

    def clear(self) -> None:
        """Purge the documents and results held by the server for this task.

        An unparseable response body is ignored; network and API errors
        propagate.
        """
        try:
            self._transport.get(self._endpoint("clear"))
        except DecodeError as exc:
            Log.debug(f"Ignoring clear response for task {self._task_id}: {exc}")
        Log.info(f"{self.label.capitalize()} task {self._task_id} cleared")

    def wait(
        self,
        timeout: float | None = None,
        *,
        cancel: threading.Event | None = None,
        fail_on_error: bool = False,
    ) -> None:
        """Poll status() until the task is DONE.

        The first check is immediate. Later checks start poll_interval
        seconds apart (capped by timeout) and the interval doubles every
        third check, up to max_poll_interval. A server-reported ERROR keeps
        the loop polling unless fail_on_error is set.

        Args:
            timeout: Seconds of accumulated sleep after which to give up.
                None waits indefinitely.
            cancel: Event that aborts the wait when set.
            fail_on_error: Raise TaskError as soon as ERROR is reported.

        Raises:
            TaskTimeoutError: when timeout elapsed at a check boundary.
            TaskNotFoundError: when the server does not know the task.
            TaskCancelledError: when cancel was set.
            TaskError: on ERROR status with fail_on_error.
        """
        first_interval = self._poll_interval
        if timeout is not None:
            first_interval = min(first_interval, timeout)
        elapsed = 0.0
        sleep_interval = 0.0
        i = 0
        while True:
            self._sleep(sleep_interval, cancel)
            status = self.status()
            if status is TaskStatus.DONE:
                return
            if status is TaskStatus.ERROR:
                if fail_on_error:
                    raise TaskError(self._task_id)
                Log.warning(
                    f"{self.label.capitalize()} task {self._task_id} reported error, "
                    "still polling"
                )
            elapsed += sleep_interval
            if timeout is not None and elapsed >= timeout:
                raise TaskTimeoutError(self._task_id)
            i += 1
            if i == 1:
                sleep_interval = first_interval
            elif i % 3 == 0 and sleep_interval < self._max_poll_interval:
                sleep_interval = min(sleep_interval * 2, self._max_poll_interval)
                Log.debug(f"Task {self._task_id} poll interval now {sleep_interval}s")

    def _sleep(self, seconds: float, cancel: threading.Event | None) -> None:
        if cancel is None:
            time.sleep(seconds)
            return
        if cancel.wait(seconds):
            raise TaskCancelledError(self._task_id)

    def _endpoint(self, step: str) -> str:
        return f"/{self.namespace}/{step}/{self._task_id}"

    @abstractmethod
    def _decode_result(self, data: Any) -> OutputT:
        """Build the typed result from the decoded response body."""
