from collections.abc import Callable
from urllib.parse import unquote

import httpx

API_URL = 'https://osm.test/api'

type Responder = Callable[[httpx.Request], httpx.Response]


class FakeServer:
    """
    In-memory API server recording every request it receives.

    Routes are keyed by method and path relative to the API root, e.g. ('GET', '0.6/node/1').
    Unknown routes answer 404.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], Responder] = {}

    def add(
        self,
        method: str,
        path: str,
        content: bytes | str | Responder = b'',
        *,
        status_code: int = 200,
        headers: dict[str, str] | None = None,
    ) -> None:
        if callable(content):
            self._routes[method, path] = content
            return
        body = content.encode() if isinstance(content, str) else content
        self._routes[method, path] = lambda _: httpx.Response(status_code, content=body, headers=headers)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = unquote(request.url.path).removeprefix('/api/')
        responder = self._routes.get((request.method, path))
        if responder is None:
            return httpx.Response(404, text=f'No route for {request.method} {path}')
        return responder(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def osm_xml(body: str) -> bytes:
    """Wrap elements into an API response document."""
    return f'<?xml version="1.0" encoding="UTF-8"?>\n<osm version="0.6" generator="test">{body}</osm>'.encode()
