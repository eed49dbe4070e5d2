import asyncio
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from osmclient.config import HTTP_TIMEOUT, USER_AGENT
from osmclient.lib.auth_strategy import AuthStrategy
from osmclient.lib.exceptions_context import raise_for
from osmclient.lib.timeout_context import context_deadline


def create_http_client() -> httpx.AsyncClient:
    """Create the connection-pooled client shared by every request of a transport."""
    return httpx.AsyncClient(
        headers={'User-Agent': USER_AGENT},
        timeout=HTTP_TIMEOUT.total_seconds(),
        follow_redirects=True,
    )


class Transport:
    """
    Single point through which every API request is sent.

    Non-2xx responses raise APIError, requests without a response raise TransportError.
    """

    __slots__ = ('_http', '_owns_http', 'base_url')

    def __init__(self, base_url: str, *, http_client: httpx.AsyncClient | None = None) -> None:
        self.base_url = base_url.rstrip('/')
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else create_http_client()

    async def send(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        content: bytes | None = None,
        data: Mapping[str, Any] | None = None,
        files: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        auth: AuthStrategy | None = None,
        timeout: float | None = None,
    ) -> httpx.Response:
        """
        Send a request to a path relative to the base url.

        The request is limited by the explicit timeout and the ambient timeout_context, whichever ends first.
        """
        request = self._http.build_request(
            method,
            f'{self.base_url}/{path}' if path else self.base_url,
            params=params,
            content=content,
            data=data,
            files=files,
            headers=headers,
        )
        uri = str(request.url)

        started = asyncio.get_running_loop().time()
        deadline = context_deadline()
        if timeout is not None:
            explicit = started + timeout
            deadline = explicit if deadline is None else min(deadline, explicit)

        try:
            async with asyncio.timeout_at(deadline):
                response = await self._http.send(request, auth=auth)
        except TimeoutError:
            logging.info('%s %s timed out', method, uri)
            raise_for.request_timeout(uri, deadline - started if deadline is not None else 0)
        except httpx.TransportError as e:
            logging.info('%s %s failed: %s', method, uri, e)
            raise_for.transport_failed(uri, str(e) or type(e).__name__)

        if response.is_success:
            logging.debug('%s %s succeeded: %d', method, uri, response.status_code)
            return response

        logging.info('%s %s failed: %d %s', method, uri, response.status_code, response.reason_phrase)
        raise_for.http_error(response)

    async def aclose(self) -> None:
        """Close the http client, unless it was provided by the caller."""
        if self._owns_http:
            await self._http.aclose()
