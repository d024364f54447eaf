from typing import Any, ClassVar

from bosonnlp.decoders import decode_text_clusters
from bosonnlp.models import TextCluster
from bosonnlp.tasks.base import BaseTask


class ClusterTask(BaseTask[list[TextCluster]]):
    """Text clustering task: groups similar documents together."""

    namespace: ClassVar[str] = "cluster"
    label: ClassVar[str] = "cluster"

    def _decode_result(self, data: Any) -> list[TextCluster]:
        return decode_text_clusters(data)
