from collections.abc import Iterable
from datetime import datetime
from typing import Any

from osmclient.format import Format06
from osmclient.lib.date_utils import format_query_date
from osmclient.lib.geo_utils import format_bbox
from osmclient.models.bounds import Bounds
from osmclient.models.changeset import Changeset
from osmclient.models.osmchange import OSMChange
from osmclient.models.types import ChangesetId, UserId
from osmclient.queries.query_base import QueryBase
from osmclient.validators.bounds import validate_bounds
from osmclient.validators.element import validate_id
from osmclient.validators.query import validate_changeset_query


class ChangesetQueryMixin(QueryBase):
    __slots__ = ()

    async def get_changeset(self, id: ChangesetId, *, include_discussion: bool = False) -> Changeset:
        validate_id('changeset id', id)
        params = {'include_discussion': 'true'} if include_discussion else None
        content = await self._get(f'0.6/changeset/{id}', params=params)
        return self._decode('changeset document', Format06.decode_changeset, content)

    async def query_changesets(
        self,
        *,
        bounds: Bounds | None = None,
        user_id: UserId | None = None,
        display_name: str | None = None,
        min_closed_date: datetime | None = None,
        max_opened_date: datetime | None = None,
        open_only: bool = False,
        closed_only: bool = False,
        ids: Iterable[ChangesetId] | None = None,
        limit: int | None = None,
    ) -> list[Changeset]:
        """
        Find changesets matching all of the given filters.

        min_closed_date selects changesets closed after it, max_opened_date additionally
        selects changesets opened before it.
        """
        validate_changeset_query(
            user_id=user_id,
            display_name=display_name,
            min_closed_date=min_closed_date,
            max_opened_date=max_opened_date,
            open_only=open_only,
            closed_only=closed_only,
        )

        params: dict[str, Any] = {}
        if bounds is not None:
            params['bbox'] = format_bbox(validate_bounds(bounds))
        if user_id is not None:
            params['user'] = validate_id('user id', user_id)
        if display_name is not None:
            params['display_name'] = display_name
        if min_closed_date is not None:
            time = format_query_date(min_closed_date)
            if max_opened_date is not None:
                time = f'{time},{format_query_date(max_opened_date)}'
            params['time'] = time
        if open_only:
            params['open'] = 'true'
        if closed_only:
            params['closed'] = 'true'
        if ids is not None:
            params['changesets'] = ','.join(str(validate_id('changeset id', id)) for id in ids)
        if limit is not None:
            params['limit'] = validate_id('limit', limit)

        content = await self._get('0.6/changesets', params=params)
        return self._decode('changesets document', Format06.decode_changesets, content)

    async def get_changeset_download(self, id: ChangesetId) -> OSMChange:
        """Get the changes made in the changeset."""
        validate_id('changeset id', id)
        content = await self._get(f'0.6/changeset/{id}/download')
        return self._decode('osmChange document', Format06.decode_osmchange, content)
