from typing import override


class OSMClientError(Exception):
    """Base class for every error raised by osmclient."""


class InvalidArgumentError(OSMClientError, ValueError):
    """A client-side precondition failed; nothing was sent over the wire."""


class APIError(OSMClientError):
    """The server answered with a non-2xx status."""

    __slots__ = ('body', 'error', 'reason', 'request_uri', 'status_code')

    def __init__(
        self,
        request_uri: str,
        status_code: int,
        reason: str,
        body: str,
        *,
        error: str | None = None,
    ) -> None:
        self.request_uri = request_uri
        self.status_code = status_code
        self.reason = reason
        self.body = body
        self.error = error
        super().__init__(request_uri, status_code, reason, body)

    @override
    def __str__(self) -> str:
        detail = self.body or self.error or ''
        return f'Request {self.request_uri} failed: {self.status_code} {self.reason} {detail}'.rstrip()


class TransportError(OSMClientError):
    """The request never received a response."""

    __slots__ = ('request_uri',)

    def __init__(self, request_uri: str, message: str) -> None:
        self.request_uri = request_uri
        super().__init__(f'Request {request_uri} failed: {message}')


class DataIntegrityError(OSMClientError):
    """The server answered 2xx with a structurally unusable body."""
