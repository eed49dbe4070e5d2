from typing import Literal

from osmclient.format import Format06
from osmclient.lib.exceptions_context import raise_for
from osmclient.lib.geo_utils import format_decimal
from osmclient.models.note import Note
from osmclient.models.types import NoteId
from osmclient.queries.query_base import QueryBase
from osmclient.validators.bounds import validate_point
from osmclient.validators.element import validate_id


class NoteServiceMixin(QueryBase):
    """Note endpoints accept both anonymous and authenticated requests."""

    __slots__ = ()

    async def create_note(self, lat: float, lon: float, text: str) -> Note:
        lon, lat = validate_point(lon, lat)
        if not text:
            raise_for.note_text_empty()
        params = {'lat': format_decimal(lat), 'lon': format_decimal(lon), 'text': text}
        r = await self._transport.send('POST', '0.6/notes', params=params, auth=self._auth)
        return self._decode('note document', Format06.decode_note, r.content)

    async def comment_note(self, id: NoteId, text: str) -> Note:
        if not text:
            raise_for.note_text_empty()
        return await self._note_action(id, 'comment', text)

    async def close_note(self, id: NoteId, text: str | None = None) -> Note:
        return await self._note_action(id, 'close', text)

    async def reopen_note(self, id: NoteId, text: str | None = None) -> Note:
        return await self._note_action(id, 'reopen', text)

    async def _note_action(
        self,
        id: NoteId,
        action: Literal['comment', 'close', 'reopen'],
        text: str | None,
    ) -> Note:
        validate_id('note id', id)
        params = {'text': text} if text else None
        r = await self._transport.send('POST', f'0.6/notes/{id}/{action}', params=params, auth=self._auth)
        return self._decode('note document', Format06.decode_note, r.content)
