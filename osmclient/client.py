from types import TracebackType
from typing import Self

import httpx

from osmclient.config import API_URL, MULTI_FETCH_CHUNK_SIZE
from osmclient.lib.auth_strategy import AuthStrategy
from osmclient.lib.transport import Transport
from osmclient.queries.changeset_query import ChangesetQueryMixin
from osmclient.queries.element_query import ElementQueryMixin
from osmclient.queries.misc_query import MiscQueryMixin
from osmclient.queries.note_query import NoteQueryMixin
from osmclient.queries.trace_query import TraceQueryMixin
from osmclient.queries.user_query import UserQueryMixin
from osmclient.services.changeset_service import ChangesetServiceMixin
from osmclient.services.element_service import ElementServiceMixin
from osmclient.services.note_service import NoteServiceMixin
from osmclient.services.trace_service import TraceServiceMixin
from osmclient.services.user_pref_service import UserPrefServiceMixin


class OSMClient(
    ChangesetQueryMixin,
    ElementQueryMixin,
    MiscQueryMixin,
    NoteQueryMixin,
    TraceQueryMixin,
    UserQueryMixin,
    ChangesetServiceMixin,
    ElementServiceMixin,
    NoteServiceMixin,
    TraceServiceMixin,
    UserPrefServiceMixin,
):
    """
    OpenStreetMap API v0.6 client.

    Read endpoints work without credentials. Mutating endpoints require an auth strategy,
    except note endpoints, where it is optional.

    >>> async with OSMClient(auth=OAuth2Auth('token')) as client:
    ...     changeset_id = await client.create_changeset({'comment': 'x', 'created_by': 'y'})
    """

    __slots__ = ('_auth', '_chunk_size', '_transport')

    def __init__(
        self,
        base_url: str = API_URL,
        auth: AuthStrategy | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        chunk_size: int = MULTI_FETCH_CHUNK_SIZE,
    ) -> None:
        if chunk_size <= 0:
            raise ValueError(f'chunk_size must be positive, got {chunk_size}')
        self._transport = Transport(base_url, http_client=http_client)
        self._auth = auth
        self._chunk_size = chunk_size

    @property
    def base_url(self) -> str:
        return self._transport.base_url

    @property
    def auth(self) -> AuthStrategy | None:
        return self._auth

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()
