from typing import Any, ClassVar

from bosonnlp.decoders import decode_comments_clusters
from bosonnlp.models import CommentsCluster
from bosonnlp.tasks.base import BaseTask


class CommentsTask(BaseTask[list[CommentsCluster]]):
    """Representative opinion task: extracts typical comments and their groups."""

    namespace: ClassVar[str] = "comments"
    label: ClassVar[str] = "comments"

    def _decode_result(self, data: Any) -> list[CommentsCluster]:
        return decode_comments_clusters(data)
