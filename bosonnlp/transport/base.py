from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class BaseTransport(ABC):
    """Contract for the HTTP layer the API operations are built on."""

    @abstractmethod
    def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Mapping[str, object] | None = None,
        data: object | None = None,
    ) -> Any:
        """Perform one API call and return the decoded JSON body.

        Args:
            method: HTTP method, "GET" or "POST".
            endpoint: Path below the API root, e.g. "/cluster/status/abc".
            params: Query parameters; values are sent as text.
            data: JSON-serializable request body (POST only).

        Raises:
            TransportError: on network or IO failure.
            APIError: on a non-success HTTP status.
            DecodeError: when the body is not valid JSON.
        """

    def get(self, endpoint: str, params: Mapping[str, object] | None = None) -> Any:
        return self.request("GET", endpoint, params=params)

    def post(
        self,
        endpoint: str,
        params: Mapping[str, object] | None = None,
        data: object | None = None,
    ) -> Any:
        return self.request("POST", endpoint, params=params, data=data)

    def close(self) -> None:
        """Release underlying resources. No-op by default."""
