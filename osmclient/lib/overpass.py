import logging
from collections.abc import Sequence
from datetime import timedelta
from typing import Any, Self

import httpx
import orjson

from osmclient.config import OVERPASS_INTERPRETER_URLS, OVERPASS_TIMEOUT
from osmclient.exceptions import APIError, TransportError
from osmclient.lib.exceptions_context import raise_for
from osmclient.lib.geo_utils import format_decimal
from osmclient.lib.transport import Transport, create_http_client
from osmclient.models.bounds import Bounds
from osmclient.models.element import ElementType
from osmclient.validators.bounds import validate_bounds


class OverpassQuery:
    """
    Builder of an Overpass QL query selecting elements by tags within bounds.

    >>> OverpassQuery.for_nodes(Bounds(11.9, 57.69, 11.92, 57.71), timeout=2).add('name').build()
    '[out:json][timeout:2];(node["name"](57.69,11.9,57.71,11.92);<;);out meta;'
    """

    __slots__ = ('_bounds', '_filters', '_timeout', '_type')

    def __init__(
        self,
        type: ElementType,
        bounds: Bounds,
        *,
        timeout: timedelta | int = OVERPASS_TIMEOUT,
    ) -> None:
        self._type: ElementType = type
        self._bounds = validate_bounds(bounds)
        self._timeout = int(timeout.total_seconds()) if isinstance(timeout, timedelta) else timeout
        self._filters: list[tuple[str, str | None]] = []

    @classmethod
    def for_nodes(cls, bounds: Bounds, *, timeout: timedelta | int = OVERPASS_TIMEOUT) -> Self:
        return cls('node', bounds, timeout=timeout)

    @classmethod
    def for_ways(cls, bounds: Bounds, *, timeout: timedelta | int = OVERPASS_TIMEOUT) -> Self:
        return cls('way', bounds, timeout=timeout)

    @classmethod
    def for_relations(cls, bounds: Bounds, *, timeout: timedelta | int = OVERPASS_TIMEOUT) -> Self:
        return cls('relation', bounds, timeout=timeout)

    def add(self, key: str, value: str | None = None) -> Self:
        """Require the tag key to be present, and to equal the value when given."""
        self._filters.append((key, value or None))
        return self

    def build(self) -> str:
        bounds = self._bounds
        bbox = ','.join(
            format_decimal(v)  # type: ignore[arg-type]
            for v in (bounds.min_lat, bounds.min_lon, bounds.max_lat, bounds.max_lon)
        )
        filters = ''.join(
            f'[{_quote(key)}]' if value is None else f'[{_quote(key)}={_quote(value)}]'
            for key, value in self._filters
        )
        return f'[out:json][timeout:{self._timeout}];({self._type}{filters}({bbox});<;);out meta;'


class Overpass:
    """
    Overpass API client, trying each interpreter url in order.

    Transport errors, 429 and 5xx responses move on to the next url; other errors raise immediately.
    """

    __slots__ = ('_http', '_owns_http', '_transports')

    def __init__(
        self,
        urls: Sequence[str] = OVERPASS_INTERPRETER_URLS,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        if not urls:
            raise ValueError('At least one Overpass interpreter url is required')
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else create_http_client()
        self._transports = tuple(Transport(url, http_client=self._http) for url in urls)

    async def query(self, query: OverpassQuery | str) -> dict[str, Any]:
        ql = query.build() if isinstance(query, OverpassQuery) else query
        error: APIError | TransportError | None = None

        for transport in self._transports:
            try:
                r = await transport.send('GET', '', params={'data': ql})
            except TransportError as e:
                error = e
            except APIError as e:
                if e.status_code != 429 and e.status_code < 500:
                    raise
                error = e
            else:
                try:
                    return orjson.loads(r.content)
                except orjson.JSONDecodeError:
                    raise_for.bad_response('Overpass JSON', r.content)

            logging.warning('Overpass query on %r failed, trying next url: %s', transport.base_url, error)

        assert error is not None
        raise error

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()


def _quote(value: str) -> str:
    """
    Quote a tag key or value for use in an Overpass QL filter.

    >>> _quote('name:en')
    '"name:en"'
    """
    return '"' + value.replace('\\', '\\\\').replace('"', '\\"') + '"'
