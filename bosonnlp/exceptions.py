class BosonNLPError(Exception):
    """Base exception for all client errors."""


class TransportError(BosonNLPError):
    """Raised when the request fails due to network or IO issues."""


class APIError(BosonNLPError):
    """Raised when the API answers with a non-success HTTP status."""

    def __init__(self, status_code: int, reason: str) -> None:
        super().__init__(f"API error, code {status_code}, reason {reason}")
        self.status_code = status_code
        self.reason = reason


class DecodeError(BosonNLPError):
    """Raised when a response body does not match the expected shape."""


class TaskError(BosonNLPError):
    """Raised when the server reports that an asynchronous task failed."""

    def __init__(self, task_id: str, message: str | None = None) -> None:
        super().__init__(message or f"task {task_id} error")
        self.task_id = task_id


class TaskNotFoundError(TaskError):
    """Raised when the server does not know the task identifier."""

    def __init__(self, task_id: str) -> None:
        super().__init__(task_id, f"task {task_id} not found")


class TaskTimeoutError(TaskError):
    """Raised when a task did not finish within the allowed time."""

    def __init__(self, task_id: str) -> None:
        super().__init__(task_id, f"task {task_id} timed out")


class TaskCancelledError(TaskError):
    """Raised when waiting for a task was cancelled by the caller."""

    def __init__(self, task_id: str) -> None:
        super().__init__(task_id, f"task {task_id} cancelled")


class TaskStateError(TaskError):
    """Raised when a task step is invoked out of lifecycle order."""


class UnknownTaskStatusError(TaskError):
    """Raised when the server reports a status outside the known set."""

    def __init__(self, task_id: str, status: str) -> None:
        super().__init__(task_id, f"task {task_id} reported unknown status {status!r}")
        self.status = status
