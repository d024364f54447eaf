from bosonnlp.models import CommentsCluster, TextCluster
from bosonnlp.tasks.models import Document, TaskStatus
from bosonnlp.tasks.base import BaseTask
from bosonnlp.tasks.cluster import ClusterTask
from bosonnlp.tasks.comments import CommentsTask
from bosonnlp.tasks.factory import TaskFactory
from bosonnlp.tasks.runner import TaskRunner

__all__ = [
    "BaseTask",
    "ClusterTask",
    "CommentsCluster",
    "CommentsTask",
    "Document",
    "TaskFactory",
    "TaskRunner",
    "TaskStatus",
    "TextCluster",
]
