from typing import Any, ClassVar

from bosonnlp.config.settings import Settings
from bosonnlp.tasks.base import BaseTask
from bosonnlp.tasks.cluster import ClusterTask
from bosonnlp.tasks.comments import CommentsTask
from bosonnlp.tasks.models import generate_id
from bosonnlp.transport.base import BaseTransport


class TaskFactory:
    """Creates asynchronous tasks bound to a transport."""

    TASK_TYPES: ClassVar[dict[str, type[BaseTask[Any]]]] = {
        "cluster": ClusterTask,
        "comments": CommentsTask,
    }

    @classmethod
    def create(
        cls,
        kind: str,
        transport: BaseTransport,
        task_id: str | None = None,
        settings: Settings | None = None,
    ) -> BaseTask[Any]:
        """Create a task of the given kind with a resolved task id."""
        task_type = cls.TASK_TYPES.get(kind.lower())
        if task_type is None:
            raise ValueError(
                f"Unknown task kind '{kind}'. Choose from: {sorted(cls.TASK_TYPES)}"
            )
        settings = settings or Settings()
        return task_type(
            transport,
            task_id or generate_id(),
            poll_interval=settings.task_poll_interval_seconds,
            max_poll_interval=settings.task_max_poll_interval_seconds,
        )
