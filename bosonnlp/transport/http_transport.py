"""HTTP transport built on httpx."""

import gzip
import json
from collections.abc import Mapping
from typing import Any

import httpx

from bosonnlp import __version__
from bosonnlp.exceptions import APIError, DecodeError, TransportError
from bosonnlp.logging.logger import Log
from bosonnlp.transport.base import BaseTransport

DEFAULT_BOSONNLP_URL = "http://api.bosonnlp.com"
_COMPRESS_THRESHOLD_BYTES = 10 * 1024


class HttpTransport(BaseTransport):
    """Sends API calls with the token header, JSON bodies and optional gzip."""

    def __init__(
        self,
        *,
        token: str,
        base_url: str = DEFAULT_BOSONNLP_URL,
        compress: bool = True,
        timeout_seconds: float = 60.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._compress = compress
        self._client = client or httpx.Client(timeout=timeout_seconds)
        self._headers = {
            "X-Token": token,
            "Accept": "application/json",
            "User-Agent": f"bosonnlp-py/{__version__} python-httpx/{httpx.__version__}",
        }

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Mapping[str, object] | None = None,
        data: object | None = None,
    ) -> Any:
        url = self._base_url + endpoint
        headers = dict(self._headers)
        content: bytes | None = None
        if method == "POST" and data is not None:
            content, extra_headers = self._encode_body(data)
            headers.update(extra_headers)

        try:
            response = self._client.request(
                method,
                url,
                params=_stringify_params(params),
                headers=headers,
                content=content,
            )
        except httpx.RequestError as exc:
            raise TransportError(f"{method} {endpoint} failed: {exc}") from exc

        Log.debug(f"Received {response.status_code} for {method} {endpoint}: {response.text}")
        if not response.is_success:
            raise APIError(response.status_code, _extract_reason(response))

        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError(f"Invalid JSON response from {endpoint}: {exc}") from exc

    def _encode_body(self, data: object) -> tuple[bytes, dict[str, str]]:
        body = json.dumps(data, ensure_ascii=False, sort_keys=True).encode("utf-8")
        headers = {"Content-Type": "application/json"}
        if self._compress and len(body) > _COMPRESS_THRESHOLD_BYTES:
            headers["Content-Encoding"] = "gzip"
            body = gzip.compress(body, compresslevel=9)
        return body, headers


def _stringify_params(params: Mapping[str, object] | None) -> dict[str, str] | None:
    if not params:
        return None
    return {key: str(value) for key, value in params.items()}


def _extract_reason(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict) and "message" in body:
        return str(body["message"] or "")
    return response.text
