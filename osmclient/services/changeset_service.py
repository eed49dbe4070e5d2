import logging
from collections.abc import Mapping

from osmclient.format import Format06
from osmclient.lib.exceptions_context import raise_for
from osmclient.models.changeset import Changeset
from osmclient.models.osmchange import DiffResultEntry, OSMChange
from osmclient.models.types import ChangesetId
from osmclient.queries.query_base import XML_HEADERS, QueryBase
from osmclient.validators.element import validate_id
from osmclient.validators.tags import CHANGESET_REQUIRED_TAGS, validate_required_tags


class ChangesetServiceMixin(QueryBase):
    __slots__ = ()

    async def create_changeset(self, tags: Mapping[str, str]) -> ChangesetId:
        """
        Open a new changeset.

        The tags must contain non-empty comment and created_by values.
        """
        auth = self._require_auth('create_changeset')
        validate_required_tags(tags, *CHANGESET_REQUIRED_TAGS)
        r = await self._transport.send(
            'PUT',
            '0.6/changeset/create',
            content=Format06.encode_changeset_request(tags),
            headers=XML_HEADERS,
            auth=auth,
        )
        changeset_id = ChangesetId(self._decode_int('changeset id', r.content))
        logging.debug('Created changeset %d', changeset_id)
        return changeset_id

    async def update_changeset(self, id: ChangesetId, tags: Mapping[str, str]) -> Changeset:
        """Replace the tags of an open changeset."""
        auth = self._require_auth('update_changeset')
        validate_id('changeset id', id)
        validate_required_tags(tags, *CHANGESET_REQUIRED_TAGS)
        r = await self._transport.send(
            'PUT',
            f'0.6/changeset/{id}',
            content=Format06.encode_changeset_request(tags),
            headers=XML_HEADERS,
            auth=auth,
        )
        return self._decode('changeset document', Format06.decode_changeset, r.content)

    async def close_changeset(self, id: ChangesetId) -> None:
        auth = self._require_auth('close_changeset')
        validate_id('changeset id', id)
        await self._transport.send('PUT', f'0.6/changeset/{id}/close', auth=auth)

    async def upload_changeset(self, id: ChangesetId, osmchange: OSMChange) -> list[DiffResultEntry]:
        """
        Apply a batch of changes to an open changeset.

        Every element of the batch is stamped with the changeset id.
        Returns the new id and version of every element, in upload order.
        """
        auth = self._require_auth('upload_changeset')
        validate_id('changeset id', id)
        for action in ('create', 'modify', 'delete'):
            for element in osmchange.get(action, ()):
                element['changeset_id'] = id

        r = await self._transport.send(
            'POST',
            f'0.6/changeset/{id}/upload',
            content=Format06.encode_osmchange(osmchange),
            headers=XML_HEADERS,
            auth=auth,
        )
        return self._decode('diffResult document', Format06.decode_diff_result, r.content)

    async def comment_changeset(self, id: ChangesetId, text: str) -> Changeset:
        """Add a comment to the discussion of a closed changeset."""
        auth = self._require_auth('comment_changeset')
        validate_id('changeset id', id)
        if not text:
            raise_for.changeset_comment_empty()
        r = await self._transport.send('POST', f'0.6/changeset/{id}/comment', data={'text': text}, auth=auth)
        return self._decode('changeset document', Format06.decode_changeset, r.content)

    async def subscribe_changeset(self, id: ChangesetId) -> Changeset:
        """Subscribe the authenticated user to the changeset discussion."""
        auth = self._require_auth('subscribe_changeset')
        validate_id('changeset id', id)
        r = await self._transport.send('POST', f'0.6/changeset/{id}/subscribe', auth=auth)
        return self._decode('changeset document', Format06.decode_changeset, r.content)

    async def unsubscribe_changeset(self, id: ChangesetId) -> Changeset:
        auth = self._require_auth('unsubscribe_changeset')
        validate_id('changeset id', id)
        r = await self._transport.send('POST', f'0.6/changeset/{id}/unsubscribe', auth=auth)
        return self._decode('changeset document', Format06.decode_changeset, r.content)
