import logging

from osmclient.format import Format06
from osmclient.lib.complete_graph import to_simple
from osmclient.models.element import CompleteElement, Element, ElementId
from osmclient.models.types import ChangesetId
from osmclient.queries.query_base import XML_HEADERS, QueryBase
from osmclient.validators.element import validate_element_type, validate_has_version, validate_id


class ElementServiceMixin(QueryBase):
    __slots__ = ()

    async def create_element(self, changeset_id: ChangesetId, element: Element) -> ElementId:
        """
        Create an element in an open changeset.

        The element is stamped with the changeset id. Returns the id assigned by the server.
        """
        auth = self._require_auth('create_element')
        validate_id('changeset id', changeset_id)
        type = validate_element_type(element['type'])
        element['changeset_id'] = changeset_id

        r = await self._transport.send(
            'PUT',
            f'0.6/{type}/create',
            content=Format06.encode_element_request(element),
            headers=XML_HEADERS,
            auth=auth,
        )
        id = ElementId(self._decode_int(f'{type} id', r.content))
        logging.debug('Created %s/%d in changeset %d', type, id, changeset_id)
        return id

    async def update_element(self, changeset_id: ChangesetId, element: Element | CompleteElement) -> int:
        """
        Update an element in an open changeset.

        The element version must match the current server version. Complete elements
        are sent in their normalized form. Returns the new version.
        """
        auth = self._require_auth('update_element')
        validate_id('changeset id', changeset_id)
        simple = to_simple(element)
        validate_has_version(simple)
        type = validate_element_type(simple['type'])
        simple['changeset_id'] = changeset_id
        element['changeset_id'] = changeset_id

        r = await self._transport.send(
            'PUT',
            f'0.6/{type}/{simple["id"]}',
            content=Format06.encode_element_request(simple),
            headers=XML_HEADERS,
            auth=auth,
        )
        return self._decode_int(f'{type} version', r.content)

    async def delete_element(self, changeset_id: ChangesetId, element: Element) -> int:
        """
        Delete an element in an open changeset.

        The element version must match the current server version. Returns the new version.
        """
        auth = self._require_auth('delete_element')
        validate_id('changeset id', changeset_id)
        validate_has_version(element)
        type = validate_element_type(element['type'])
        element['changeset_id'] = changeset_id

        r = await self._transport.send(
            'DELETE',
            f'0.6/{type}/{element["id"]}',
            content=Format06.encode_element_request(element),
            headers=XML_HEADERS,
            auth=auth,
        )
        return self._decode_int(f'{type} version', r.content)
