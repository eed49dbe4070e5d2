from datetime import datetime
from typing import Any

from osmclient.config import NOTE_QUERY_DEFAULT_CLOSED, NOTE_QUERY_DEFAULT_LIMIT
from osmclient.format import Format06
from osmclient.lib.date_utils import format_query_date
from osmclient.lib.geo_utils import format_bbox
from osmclient.models.bounds import Bounds
from osmclient.models.note import Note
from osmclient.models.types import NoteId, UserId
from osmclient.queries.query_base import QueryBase
from osmclient.validators.bounds import validate_bounds
from osmclient.validators.element import validate_id
from osmclient.validators.query import validate_notes_search


class NoteQueryMixin(QueryBase):
    __slots__ = ()

    async def get_note(self, id: NoteId) -> Note:
        validate_id('note id', id)
        content = await self._get(f'0.6/notes/{id}')
        return self._decode('note document', Format06.decode_note, content)

    async def get_notes(
        self,
        bounds: Bounds,
        *,
        limit: int = NOTE_QUERY_DEFAULT_LIMIT,
        closed_days: int = NOTE_QUERY_DEFAULT_CLOSED,
    ) -> list[Note]:
        """
        Get the notes within the bounds.

        closed_days limits closed notes to those closed within the given number of days:
        0 returns only open notes, -1 returns all notes.
        """
        validate_bounds(bounds)
        validate_id('limit', limit)
        params = {'bbox': format_bbox(bounds), 'limit': limit, 'closed': closed_days}
        content = await self._get('0.6/notes', params=params)
        return self._decode('notes document', Format06.decode_notes, content)

    async def get_notes_feed(self, bounds: Bounds) -> bytes:
        """Get the RSS feed of note activity within the bounds."""
        validate_bounds(bounds)
        return await self._get('0.6/notes/feed', params={'bbox': format_bbox(bounds)})

    async def search_notes(
        self,
        q: str,
        *,
        user_id: UserId | None = None,
        display_name: str | None = None,
        limit: int | None = None,
        closed_days: int | None = None,
        from_date: datetime | None = None,
        to_date: datetime | None = None,
    ) -> list[Note]:
        """Search notes by text, optionally filtered by creator and creation date range."""
        validate_notes_search(
            q=q,
            user_id=user_id,
            display_name=display_name,
            from_date=from_date,
            to_date=to_date,
        )

        params: dict[str, Any] = {'q': q}
        if limit is not None:
            params['limit'] = validate_id('limit', limit)
        if closed_days is not None:
            params['closed'] = closed_days
        if display_name is not None:
            params['display_name'] = display_name
        if user_id is not None:
            params['user'] = validate_id('user id', user_id)
        if from_date is not None:
            params['from'] = format_query_date(from_date)
        if to_date is not None:
            params['to'] = format_query_date(to_date)

        content = await self._get('0.6/notes/search', params=params)
        return self._decode('notes document', Format06.decode_notes, content)
