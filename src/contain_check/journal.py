"""RequestJournal: thread-safe record of handled requests for later assertions.

A test server registers every handled request from its worker threads while
the test thread reads point-in-time snapshots and runs containment checks
against them::

    journal = RequestJournal("users-api")
    journal.register_call(HandledRequest("POST", "/users", 201, request_body={"id": 1}))

    assert contains(journal.POST, {"url": "/users", "request_body": {"id": 1}})

Entries are append-only; every read returns a new list, so a snapshot never
changes underneath a running check.
"""

from __future__ import annotations

import threading
import time
from dataclasses import asdict, dataclass, field
from typing import Any

__all__ = ["HandledRequest", "RequestJournal"]


@dataclass(frozen=True, slots=True)
class HandledRequest:
    """One request handled by a server.

    Attributes:
        method:        HTTP method, upper-case.
        url:           Request URL or path.
        status_code:   Response status code.
        request_body:  Parsed request body, if any.
        response_body: Parsed response body, if any.
        captured_at:   Epoch seconds when the request was registered.
    """

    method: str
    url: str
    status_code: int = 200
    request_body: Any = None
    response_body: Any = None
    captured_at: float = field(default_factory=time.time)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class RequestJournal:
    """Append-only, lock-guarded list of handled requests."""

    def __init__(self, server_id: str) -> None:
        self._server_id = server_id
        self._lock = threading.Lock()
        self._handled: list[HandledRequest] = []

    @property
    def server_id(self) -> str:
        return self._server_id

    def register_call(self, handled_request: HandledRequest) -> None:
        with self._lock:
            self._handled.append(handled_request)

    @property
    def last_handled_request(self) -> HandledRequest | None:
        with self._lock:
            return self._handled[-1] if self._handled else None

    def handled_requests(self, method: str | None = None) -> list[HandledRequest]:
        """Snapshot of handled requests, optionally filtered by method."""
        with self._lock:
            snapshot = list(self._handled)
        if method is None:
            return snapshot
        return [request for request in snapshot if request.method == method.upper()]

    def _by_method(self, method: str) -> list[dict[str, Any]]:
        return [request.to_dict() for request in self.handled_requests(method)]

    @property
    def GET(self) -> list[dict[str, Any]]:  # noqa: N802
        return self._by_method("GET")

    @property
    def POST(self) -> list[dict[str, Any]]:  # noqa: N802
        return self._by_method("POST")

    @property
    def PUT(self) -> list[dict[str, Any]]:  # noqa: N802
        return self._by_method("PUT")

    @property
    def DELETE(self) -> list[dict[str, Any]]:  # noqa: N802
        return self._by_method("DELETE")

    @property
    def PATCH(self) -> list[dict[str, Any]]:  # noqa: N802
        return self._by_method("PATCH")

    def __len__(self) -> int:
        with self._lock:
            return len(self._handled)
