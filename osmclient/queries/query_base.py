from collections.abc import Callable, Mapping
from typing import Any

from osmclient.lib.auth_strategy import AuthStrategy
from osmclient.lib.exceptions_context import raise_for
from osmclient.lib.transport import Transport

XML_HEADERS = {'Content-Type': 'text/xml; charset=utf-8'}
TEXT_HEADERS = {'Content-Type': 'text/plain; charset=utf-8'}


class QueryBase:
    """Shared state and request helpers of the endpoint mixins."""

    __slots__ = ()

    _transport: Transport
    _auth: AuthStrategy | None
    _chunk_size: int

    def _require_auth(self, operation: str) -> AuthStrategy:
        auth = self._auth
        if auth is None:
            raise_for.auth_required(operation)
        return auth

    async def _get(
        self,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        auth: AuthStrategy | None = None,
    ) -> bytes:
        """Send a GET request and return the response body, authenticated when credentials are configured."""
        r = await self._transport.send('GET', path, params=params, auth=auth or self._auth)
        return r.content

    @staticmethod
    def _decode[T](name: str, decoder: Callable[[bytes], T], content: bytes) -> T:
        """Decode a response body, reporting structurally unusable documents as DataIntegrityError."""
        try:
            return decoder(content)
        except (KeyError, TypeError, ValueError) as e:
            raise_for.bad_xml(name, repr(e), content)

    @staticmethod
    def _decode_int(name: str, content: bytes) -> int:
        """
        Decode a plain-text integer response body.

        >>> QueryBase._decode_int('node id', b'1234\\n')
        1234
        """
        try:
            return int(content.strip())
        except ValueError:
            raise_for.bad_response(name, content)
