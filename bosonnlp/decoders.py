"""Builds typed records from decoded JSON response bodies."""

from typing import Any

from bosonnlp.exceptions import DecodeError
from bosonnlp.models import (
    CommentsCluster,
    Dependency,
    NamedEntity,
    PushResponse,
    StatusResponse,
    Tag,
    TextCluster,
)


def decode_push_response(data: Any) -> PushResponse:
    obj = _require_object(data, "push response")
    return PushResponse(
        task_id=_require_str(obj.get("task_id"), "push response 'task_id'"),
        count=_require_int(obj.get("count"), "push response 'count'"),
    )


def decode_status_response(data: Any) -> StatusResponse:
    obj = _require_object(data, "status response")
    count = obj.get("count", 0)
    return StatusResponse(
        id=str(obj.get("_id", "")),
        status=_require_str(obj.get("status"), "status response 'status'"),
        count=_require_int(count, "status response 'count'") if count is not None else 0,
    )


def decode_text_clusters(data: Any) -> list[TextCluster]:
    """Decode the result of a cluster task.

    Raises:
        DecodeError: when the body is not a list of {_id, list, num} objects.
    """
    clusters: list[TextCluster] = []
    for i, item in enumerate(_require_list(data, "cluster result")):
        where = f"Cluster at index {i}"
        obj = _require_object(item, where)
        members = [
            _require_id(member, f"{where}: 'list' item")
            for member in _require_list(obj.get("list"), f"{where}: 'list'")
        ]
        clusters.append(
            TextCluster(
                id=_require_int(obj.get("_id"), f"{where}: '_id'"),
                members=members,
                num=_require_int(obj.get("num"), f"{where}: 'num'"),
            )
        )
    return clusters


def decode_comments_clusters(data: Any) -> list[CommentsCluster]:
    """Decode the result of a comments task.

    Raises:
        DecodeError: when the body is not a list of {_id, list, num, opinion} objects.
    """
    clusters: list[CommentsCluster] = []
    for i, item in enumerate(_require_list(data, "comments result")):
        where = f"Comments cluster at index {i}"
        obj = _require_object(item, where)
        members: list[tuple[str, str]] = []
        for pair in _require_list(obj.get("list"), f"{where}: 'list'"):
            text, doc_id = _require_pair(pair, f"{where}: 'list' item")
            members.append(
                (
                    _require_str(text, f"{where}: comment text"),
                    _require_id(doc_id, f"{where}: comment id"),
                )
            )
        clusters.append(
            CommentsCluster(
                id=_require_int(obj.get("_id"), f"{where}: '_id'"),
                opinion=_require_str(obj.get("opinion"), f"{where}: 'opinion'"),
                members=members,
                num=_require_int(obj.get("num"), f"{where}: 'num'"),
            )
        )
    return clusters


def decode_sentiments(data: Any) -> list[tuple[float, float]]:
    result: list[tuple[float, float]] = []
    for i, item in enumerate(_require_list(data, "sentiment result")):
        positive, negative = _require_pair(item, f"Sentiment at index {i}")
        result.append(
            (
                _require_number(positive, f"Sentiment at index {i}: positive"),
                _require_number(negative, f"Sentiment at index {i}: negative"),
            )
        )
    return result


def decode_classes(data: Any) -> list[int]:
    return [
        _require_int(item, f"Class at index {i}")
        for i, item in enumerate(_require_list(data, "classify result"))
    ]


def decode_weighted_words(data: Any) -> list[tuple[float, str]]:
    """Decode [[weight, word], ...] as returned by suggest and keywords."""
    result: list[tuple[float, str]] = []
    for i, item in enumerate(_require_list(data, "weighted word list")):
        weight, word = _require_pair(item, f"Word at index {i}")
        result.append(
            (
                _require_number(weight, f"Word at index {i}: weight"),
                _require_str(word, f"Word at index {i}: word"),
            )
        )
    return result


def decode_dependencies(data: Any) -> list[Dependency]:
    result: list[Dependency] = []
    for i, item in enumerate(_require_list(data, "depparser result")):
        where = f"Dependency at index {i}"
        obj = _require_object(item, where)
        result.append(
            Dependency(
                head=[
                    _require_int(h, f"{where}: 'head' item")
                    for h in _require_list(obj.get("head"), f"{where}: 'head'")
                ],
                role=_require_str_list(obj.get("role"), f"{where}: 'role'"),
                tag=_require_str_list(obj.get("tag"), f"{where}: 'tag'"),
                word=_require_str_list(obj.get("word"), f"{where}: 'word'"),
            )
        )
    return result


def decode_named_entities(data: Any) -> list[NamedEntity]:
    result: list[NamedEntity] = []
    for i, item in enumerate(_require_list(data, "ner result")):
        where = f"Entity set at index {i}"
        obj = _require_object(item, where)
        entities: list[tuple[int, int, str]] = []
        for raw in _require_list(obj.get("entity"), f"{where}: 'entity'"):
            if not isinstance(raw, list) or len(raw) != 3:
                raise DecodeError(f"{where}: 'entity' item must be [start, end, type]")
            start, end, kind = raw
            entities.append(
                (
                    _require_int(start, f"{where}: entity start"),
                    _require_int(end, f"{where}: entity end"),
                    _require_str(kind, f"{where}: entity type"),
                )
            )
        result.append(
            NamedEntity(
                entity=entities,
                tag=_require_str_list(obj.get("tag"), f"{where}: 'tag'"),
                word=_require_str_list(obj.get("word"), f"{where}: 'word'"),
            )
        )
    return result


def decode_tags(data: Any) -> list[Tag]:
    result: list[Tag] = []
    for i, item in enumerate(_require_list(data, "tag result")):
        where = f"Tag result at index {i}"
        obj = _require_object(item, where)
        result.append(
            Tag(
                tag=_require_str_list(obj.get("tag"), f"{where}: 'tag'"),
                word=_require_str_list(obj.get("word"), f"{where}: 'word'"),
            )
        )
    return result


def decode_summary(data: Any) -> str:
    return _require_str(data, "summary result")


def decode_time(data: Any) -> dict[str, Any]:
    return _require_object(data, "time result")


def _require_object(raw: Any, where: str) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise DecodeError(f"{where} must be an object")
    return raw


def _require_list(raw: Any, where: str) -> list[Any]:
    if not isinstance(raw, list):
        raise DecodeError(f"{where} must be a list")
    return raw


def _require_pair(raw: Any, where: str) -> tuple[Any, Any]:
    if not isinstance(raw, list) or len(raw) != 2:
        raise DecodeError(f"{where} must be a two-item list")
    return raw[0], raw[1]


def _require_str(raw: Any, where: str) -> str:
    if not isinstance(raw, str):
        raise DecodeError(f"{where} must be a string")
    return raw


def _require_str_list(raw: Any, where: str) -> list[str]:
    return [_require_str(item, f"{where} item") for item in _require_list(raw, where)]


def _require_int(raw: Any, where: str) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise DecodeError(f"{where} must be an integer")
    return raw


def _require_number(raw: Any, where: str) -> float:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise DecodeError(f"{where} must be a number")
    return float(raw)


def _require_id(raw: Any, where: str) -> str:
    if isinstance(raw, bool) or not isinstance(raw, (int, str)):
        raise DecodeError(f"{where} must be a string or integer id")
    return str(raw)
