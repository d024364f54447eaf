"""Public entry point of the BosonNLP REST API client."""

import datetime
import threading
import time
from collections.abc import Iterable, Sequence
from typing import Any, cast

from bosonnlp.config.settings import Settings
from bosonnlp.decoders import (
    decode_classes,
    decode_dependencies,
    decode_named_entities,
    decode_sentiments,
    decode_summary,
    decode_tags,
    decode_time,
    decode_weighted_words,
)
from bosonnlp.logging.logger import Log
from bosonnlp.models import (
    CommentsCluster,
    Dependency,
    NamedEntity,
    Tag,
    TextCluster,
)
from bosonnlp.tasks.cluster import ClusterTask
from bosonnlp.tasks.comments import CommentsTask
from bosonnlp.tasks.factory import TaskFactory
from bosonnlp.tasks.models import Document
from bosonnlp.tasks.runner import TaskRunner
from bosonnlp.transport.base import BaseTransport
from bosonnlp.transport.http_transport import HttpTransport

_UNSET: Any = object()


class BosonNLP:
    """Typed access to the BosonNLP HTTP API.

    Each method maps onto one API endpoint, except cluster() and comments()
    which run a whole asynchronous task and return its result.
    """

    def __init__(
        self,
        token: str = "",
        *,
        transport: BaseTransport | None = None,
        settings: Settings | None = None,
    ) -> None:
        if settings is None:
            settings = Settings(api_token=token) if token else Settings()
        self._settings = settings
        self._transport = transport or HttpTransport(
            token=token or self._settings.api_token,
            base_url=self._settings.base_url,
            compress=self._settings.compress,
            timeout_seconds=self._settings.request_timeout_seconds,
        )

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None, *, configure_logging: bool = False
    ) -> "BosonNLP":
        """Build a client from BOSONNLP_* environment configuration.

        With configure_logging, library logs go to stdout at settings.log_level.
        """
        settings = settings or Settings()
        if configure_logging:
            Log.configure(settings.log_level)
        return cls(settings.api_token, settings=settings)

    def __enter__(self) -> "BosonNLP":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._transport.close()

    def sentiment(
        self, contents: str | Sequence[str], model: str = "general"
    ) -> list[tuple[float, float]]:
        """Sentiment analysis; returns (positive, negative) probabilities per text."""
        data = self._transport.post(f"/sentiment/analysis?{model}", data=_as_list(contents))
        return decode_sentiments(data)

    def classify(self, contents: str | Sequence[str]) -> list[int]:
        """News classification; returns one category index per text."""
        return decode_classes(
            self._transport.post("/classify/analysis", data=_as_list(contents))
        )

    def suggest(self, word: str, top_k: int | None = None) -> list[tuple[float, str]]:
        """Semantic suggestion; returns (similarity, word) pairs."""
        params = {} if top_k is None else {"top_k": top_k}
        return decode_weighted_words(
            self._transport.post("/suggest/analysis", params=params, data=word)
        )

    def extract_keywords(
        self, text: str, top_k: int | None = None, segmented: bool = False
    ) -> list[tuple[float, str]]:
        """Keyword extraction; returns (weight, keyword) pairs.

        If segmented is True the text is taken as already split into words.
        """
        params: dict[str, object] = {}
        if top_k is not None:
            params["top_k"] = top_k
        if segmented:
            params["segmented"] = 1
        return decode_weighted_words(
            self._transport.post("/keywords/analysis", params=params, data=text)
        )

    def depparser(self, contents: str | Sequence[str]) -> list[Dependency]:
        return decode_dependencies(
            self._transport.post("/depparser/analysis", data=_as_list(contents))
        )

    def ner(
        self,
        contents: str | Sequence[str],
        sensitivity: int | None = None,
        segmented: bool = False,
        space_mode: int = 3,
    ) -> list[NamedEntity]:
        """Named entity recognition.

        Args:
            sensitivity: 1 finds more entities, 5 favours precision.
            segmented: Whether the input is already split into words.
            space_mode: Whitespace handling, 0-3.
        """
        params: dict[str, object] = {"space_mode": space_mode}
        if sensitivity is not None:
            params["sensitivity"] = sensitivity
        if segmented:
            params["segmented"] = 1
        return decode_named_entities(
            self._transport.post("/ner/analysis", params=params, data=_as_list(contents))
        )

    def tag(
        self,
        contents: str | Sequence[str],
        space_mode: int = 0,
        oov_level: int = 3,
        t2s: bool = False,
        special_char_conv: bool = False,
    ) -> list[Tag]:
        """Word segmentation and part-of-speech tagging."""
        params = {
            "space_mode": space_mode,
            "oov_level": oov_level,
            "t2s": int(t2s),
            "special_char_conv": int(special_char_conv),
        }
        return decode_tags(
            self._transport.post("/tag/analysis", params=params, data=_as_list(contents))
        )

    def summary(
        self,
        title: str,
        content: str,
        word_limit: float = 0.3,
        not_exceed: bool = False,
    ) -> str:
        """News summary.

        A float word_limit is a fraction of the original length, an int is a
        word count. not_exceed makes the limit strict.
        """
        data = {
            "title": title,
            "content": content,
            "percentage": word_limit,
            "not_exceed": int(not_exceed),
        }
        return decode_summary(self._transport.post("/summary/analysis", data=data))

    def convert_time(
        self, content: str, basetime: int | datetime.datetime | None = None
    ) -> dict[str, Any]:
        """Normalize a Chinese time expression, relative to basetime if given."""
        params: dict[str, object] = {"pattern": content}
        if basetime is not None:
            if isinstance(basetime, datetime.datetime):
                basetime = int(time.mktime(basetime.timetuple()))
            params["basetime"] = basetime
        return decode_time(self._transport.post("/time/analysis", params=params))

    def create_cluster_task(self, task_id: str | None = None) -> ClusterTask:
        return cast(
            ClusterTask,
            TaskFactory.create("cluster", self._transport, task_id, self._settings),
        )

    def create_comments_task(self, task_id: str | None = None) -> CommentsTask:
        return cast(
            CommentsTask,
            TaskFactory.create("comments", self._transport, task_id, self._settings),
        )

    def cluster(
        self,
        contents: str | Iterable[str],
        task_id: str | None = None,
        alpha: float | None = None,
        beta: float | None = None,
        timeout: float | None = _UNSET,
        cancel: threading.Event | None = None,
    ) -> list[TextCluster]:
        """Cluster texts and return the groups.

        Cluster members are the positions of the texts in contents, as strings.
        A timeout of None waits indefinitely; when omitted the configured
        task timeout applies.

        Raises:
            TaskTimeoutError: if the task did not finish within timeout.
            TaskNotFoundError: if the server lost the task.
            BosonNLPError: on any API failure; the task is then not cleared.
        """
        task = self.create_cluster_task(task_id)
        return self._runner(alpha, beta, timeout).run(
            task, Document.from_texts(_as_list(contents)), cancel
        )

    def comments(
        self,
        contents: str | Iterable[str],
        task_id: str | None = None,
        alpha: float | None = None,
        beta: float | None = None,
        timeout: float | None = _UNSET,
        cancel: threading.Event | None = None,
    ) -> list[CommentsCluster]:
        """Extract representative opinions from comments.

        Same contract as cluster().
        """
        task = self.create_comments_task(task_id)
        return self._runner(alpha, beta, timeout).run(
            task, Document.from_texts(_as_list(contents)), cancel
        )

    def _runner(
        self, alpha: float | None, beta: float | None, timeout: float | None
    ) -> TaskRunner:
        return TaskRunner(
            alpha=self._settings.cluster_alpha if alpha is None else alpha,
            beta=self._settings.cluster_beta if beta is None else beta,
            timeout=self._settings.task_timeout_seconds if timeout is _UNSET else timeout,
        )


def _as_list(contents: str | Iterable[str]) -> list[str]:
    if isinstance(contents, str):
        return [contents]
    return list(contents)
