import uuid
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum

from bosonnlp.exceptions import TaskNotFoundError, UnknownTaskStatusError

NOT_FOUND_STATUS = "not found"


def generate_id() -> str:
    """Return a fresh random identifier for tasks and documents."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Document:
    """A text pushed to an asynchronous task."""

    text: str
    id: str = field(default_factory=generate_id)

    def to_payload(self) -> dict[str, str]:
        return {"_id": self.id, "text": self.text}

    @classmethod
    def from_texts(cls, texts: Iterable[str]) -> list["Document"]:
        """Wrap plain texts using their position as the identifier."""
        return [cls(text=text, id=str(index)) for index, text in enumerate(texts)]

    @classmethod
    def coerce_many(cls, contents: Iterable[object] | None) -> list["Document"]:
        """Build documents from texts, (id, text) pairs, payload dicts or documents.

        Plain texts get a fresh random identifier.
        """
        if not contents:
            return []
        return [cls._coerce(item) for item in contents]

    @classmethod
    def _coerce(cls, item: object) -> "Document":
        if isinstance(item, Document):
            return item
        if isinstance(item, str):
            return cls(text=item)
        if isinstance(item, tuple) and len(item) == 2:
            doc_id, text = item
            return cls(text=str(text), id=str(doc_id))
        if isinstance(item, Mapping) and "text" in item:
            doc_id = item.get("_id")
            if doc_id is None:
                return cls(text=str(item["text"]))
            return cls(text=str(item["text"]), id=str(doc_id))
        raise TypeError(f"Cannot build a document from {type(item).__name__}")


class TaskStatus(str, Enum):
    """Server-side state of an asynchronous task."""

    RECEIVED = "received"
    RUNNING = "running"
    DONE = "done"
    ERROR = "error"

    @classmethod
    def parse(cls, raw: str, task_id: str) -> "TaskStatus":
        """Map a status string from the server to a TaskStatus.

        The "not found" sentinel is matched exactly; the four real statuses
        are matched case-insensitively.

        Raises:
            TaskNotFoundError: when the server does not know the task.
            UnknownTaskStatusError: for any other unrecognized value.
        """
        if raw == NOT_FOUND_STATUS:
            raise TaskNotFoundError(task_id)
        try:
            return cls(raw.lower())
        except ValueError:
            raise UnknownTaskStatusError(task_id, raw) from None
