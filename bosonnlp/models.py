from dataclasses import dataclass, field


@dataclass(frozen=True)
class Dependency:
    """Dependency parse of one sentence."""

    head: list[int] = field(default_factory=list)
    role: list[str] = field(default_factory=list)
    tag: list[str] = field(default_factory=list)
    word: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class NamedEntity:
    """Named entities found in one text, as (start, end, type) word spans."""

    entity: list[tuple[int, int, str]] = field(default_factory=list)
    tag: list[str] = field(default_factory=list)
    word: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Tag:
    """Word segmentation with part-of-speech tags."""

    tag: list[str] = field(default_factory=list)
    word: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class TextCluster:
    """A group of similar documents, referenced by document id."""

    id: int
    members: list[str] = field(default_factory=list)
    num: int = 0


@dataclass(frozen=True)
class CommentsCluster:
    """A representative opinion and the (text, document id) pairs it covers."""

    id: int
    opinion: str
    members: list[tuple[str, str]] = field(default_factory=list)
    num: int = 0


@dataclass(frozen=True)
class PushResponse:
    """Server acknowledgement of one pushed chunk."""

    task_id: str
    count: int


@dataclass(frozen=True)
class StatusResponse:
    """Server report of a task's state."""

    id: str
    status: str
    count: int = 0
