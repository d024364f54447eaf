import json
from collections.abc import Generator
from dataclasses import dataclass, field

import httpx
import pytest

from bosonnlp.client import BosonNLP
from bosonnlp.config.settings import Settings
from bosonnlp.transport.http_transport import HttpTransport


@dataclass
class FakeTaskServer:
    """In-memory stand-in for the cluster/comments task endpoints.

    statuses are reported in order by successive status calls; the last one
    repeats once the list is exhausted.
    """

    statuses: list[str] = field(default_factory=lambda: ["received", "running", "done"])
    result: object = field(default_factory=list)
    clear_body: str = "{}"
    fail_push_chunk: int | None = None
    requests: list[httpx.Request] = field(default_factory=list)
    pushed: dict[str, list[dict[str, str]]] = field(default_factory=dict)

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        parts = request.url.path.strip("/").split("/")
        if len(parts) != 3:
            return httpx.Response(404, json={"message": "no such endpoint"})
        _namespace, step, task_id = parts
        if step == "push":
            return self._push(request, task_id)
        if step == "analysis":
            return httpx.Response(200, json={"_id": task_id, "status": "received", "count": 0})
        if step == "status":
            status = self.statuses.pop(0) if len(self.statuses) > 1 else self.statuses[0]
            count = len(self.pushed.get(task_id, []))
            return httpx.Response(200, json={"_id": task_id, "status": status, "count": count})
        if step == "result":
            return httpx.Response(200, json=self.result)
        if step == "clear":
            return httpx.Response(200, text=self.clear_body)
        return httpx.Response(404, json={"message": f"unknown step {step}"})

    def _push(self, request: httpx.Request, task_id: str) -> httpx.Response:
        chunk_index = sum(1 for r in self.requests if r.url.path.endswith(f"/push/{task_id}"))
        if self.fail_push_chunk is not None and chunk_index == self.fail_push_chunk:
            return httpx.Response(500, json={"message": "storage unavailable"})
        docs = json.loads(request.content)
        self.pushed.setdefault(task_id, []).extend(docs)
        return httpx.Response(200, json={"task_id": task_id, "count": len(docs)})


@pytest.fixture()
def fake_server() -> FakeTaskServer:
    return FakeTaskServer()


@pytest.fixture()
def nlp(fake_server: FakeTaskServer) -> Generator[BosonNLP, None, None]:
    settings = Settings(api_token="integration-token", base_url="http://nlp.test")
    transport = HttpTransport(
        token=settings.api_token,
        base_url=settings.base_url,
        client=httpx.Client(transport=httpx.MockTransport(fake_server.handle)),
    )
    with BosonNLP(settings.api_token, transport=transport, settings=settings) as client:
        yield client

