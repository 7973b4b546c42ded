"""Response objects the catalog pages write to.

Page handlers only need ``status(code)`` (chainable) and ``send(body)``.
``ResponseWriter`` records what was written so a host (the FastAPI app, the
MCP resources) can turn it into its own response type afterwards.
"""

from typing import Any, Protocol


class Response(Protocol):
    """What a page handler may call on the response it is given."""

    def status(self, code: int) -> "Response": ...

    def send(self, body: Any) -> Any: ...


class ResponseAlreadySentError(RuntimeError):
    """Raised when a handler sends twice on the same response."""


class ResponseWriter:
    """In-process response: remembers the status code and the body sent."""

    def __init__(self) -> None:
        self.status_code = 200
        self.body: Any = None
        self.sent = False

    def status(self, code: int) -> "ResponseWriter":
        self.status_code = code
        return self

    def send(self, body: Any) -> "ResponseWriter":
        if self.sent:
            raise ResponseAlreadySentError("Response body has already been sent")
        self.body = body
        self.sent = True
        return self

    @property
    def is_error(self) -> bool:
        return self.status_code >= 400

    def __repr__(self) -> str:
        return f"ResponseWriter(status_code={self.status_code}, sent={self.sent})"
