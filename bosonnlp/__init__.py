"""Client library for the BosonNLP natural language processing HTTP API."""

__version__ = "0.1.0"

from bosonnlp.client import BosonNLP  # noqa: E402
from bosonnlp.exceptions import (  # noqa: E402
    APIError,
    BosonNLPError,
    DecodeError,
    TaskCancelledError,
    TaskError,
    TaskNotFoundError,
    TaskStateError,
    TaskTimeoutError,
    TransportError,
    UnknownTaskStatusError,
)
from bosonnlp.tasks import (  # noqa: E402
    ClusterTask,
    CommentsCluster,
    CommentsTask,
    Document,
    TaskStatus,
    TextCluster,
)

__all__ = [
    "APIError",
    "BosonNLP",
    "BosonNLPError",
    "ClusterTask",
    "CommentsCluster",
    "CommentsTask",
    "DecodeError",
    "Document",
    "TaskCancelledError",
    "TaskError",
    "TaskNotFoundError",
    "TaskStateError",
    "TaskStatus",
    "TaskTimeoutError",
    "TextCluster",
    "TransportError",
    "UnknownTaskStatusError",
    "__version__",
]
