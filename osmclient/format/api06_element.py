import logging
from collections.abc import Iterable, Iterator
from typing import Any

from osmclient.config import GENERATOR
from osmclient.format.api06_tag import Tag06Mixin
from osmclient.lib.exceptions_context import raise_for
from osmclient.lib.xmltodict import XMLToDict, as_list
from osmclient.models.element import (
    Element,
    ElementId,
    ElementMember,
    ElementType,
    Node,
    Relation,
    Way,
)
from osmclient.models.osmchange import OSMChange, OSMChangeAction
from osmclient.models.types import ChangesetId, DisplayName, UserId

_OSMCHANGE_ACTIONS: tuple[OSMChangeAction, ...] = ('create', 'modify', 'delete')


class Element06Mixin:
    @staticmethod
    def encode_element_request(element: Element) -> bytes:
        """Encode the request body of a single element create or update."""
        return XMLToDict.unparse(
            {
                'osm': {
                    '@version': '0.6',
                    '@generator': GENERATOR,
                    element['type']: _encode_element(element),
                }
            },
            binary=True,
        )

    @staticmethod
    def iter_elements(content: bytes, types: Iterable[ElementType]) -> Iterator[Element]:
        """
        Lazily decode the elements of the given types from a response document.

        The iterator is finite and can be consumed only once.
        """
        for type, data in XMLToDict.iterparse(content, frozenset(types)):
            yield _decode_element(type, data)  # type: ignore[arg-type]

    @staticmethod
    def encode_osmchange(osmchange: OSMChange) -> bytes:
        """
        Encode an upload body, preserving the element order of every action.

        >>> encode_osmchange({'create': [Node(...)], 'delete': [Way(...)]})
        b"<?xml version='1.0' encoding='UTF-8'?>\\n<osmChange version="0.6" ...><create><node .../></create>..."
        """
        actions: list[tuple[str, Any]] = [('@version', '0.6'), ('@generator', GENERATOR)]
        for action in _OSMCHANGE_ACTIONS:
            elements = osmchange.get(action)
            if not elements:
                continue
            actions.append((
                action,
                [(element['type'], _encode_element(element)) for element in elements],
            ))
        return XMLToDict.unparse({'osmChange': actions}, binary=True)

    @staticmethod
    def decode_osmchange(content: bytes) -> OSMChange:
        """
        >>> decode_osmchange(b'<osmChange><create><node id="1" .../></create></osmChange>')
        {'create': [Node(...)], 'modify': [], 'delete': []}
        """
        changes = XMLToDict.parse(content, sequence=True).get('osmChange')
        if changes is None:
            raise_for.bad_response('osmChange document', content)

        result: OSMChange = {'create': [], 'modify': [], 'delete': []}
        # text-only osmChange parses as a str
        if not isinstance(changes, list):
            logging.debug('Decoded empty osmChange')
            return result

        for action, elements_data in changes:
            # skip osmChange attributes
            if action.startswith('@'):
                continue
            if action not in result:
                raise_for.bad_response('osmChange document', content)
            # skip text-only actions
            if not isinstance(elements_data, dict):
                continue

            target = result[action]
            for type in ('node', 'way', 'relation'):
                target.extend(_decode_element(type, d) for d in as_list(elements_data.get(type)))  # type: ignore[misc]

        return result


def _encode_element(element: Element) -> dict[str, Any]:
    """
    >>> _encode_element(Node(type='node', id=1, version=1, ...))
    {'@id': 1, '@version': 1, ...}
    """
    type = element['type']
    result: dict[str, Any] = {
        '@id': element.get('id'),
        '@version': element.get('version'),
        '@changeset': element.get('changeset_id'),
        '@timestamp': element.get('timestamp'),
        '@uid': element.get('user_id'),
        '@user': element.get('user'),
        '@visible': element.get('visible'),
    }

    if type == 'node':
        result['@lat'] = element['lat']  # type: ignore[typeddict-item]
        result['@lon'] = element['lon']  # type: ignore[typeddict-item]

    result['tag'] = Tag06Mixin.encode_tags(element['tags'])

    if type == 'way':
        result['nd'] = [{'@ref': ref} for ref in element['nodes']]  # type: ignore[typeddict-item]
    elif type == 'relation':
        result['member'] = [
            {'@type': member.type, '@ref': member.id, '@role': member.role}
            for member in element['members']  # type: ignore[typeddict-item]
        ]

    return result


def _decode_element(type: ElementType, data: dict[str, Any]) -> Element:
    """
    >>> _decode_element('way', {'@id': 1, '@version': 2, 'nd': [{'@ref': 3}], ...})
    Way(type='way', id=1, version=2, nodes=[3], ...)
    """
    id: ElementId = data['@id']
    result: dict[str, Any] = {
        'type': type,
        'id': id,
        'version': data.get('@version'),
        'changeset_id': ChangesetId(data['@changeset']) if '@changeset' in data else None,
        'visible': data.get('@visible', True),
        'tags': Tag06Mixin.decode_tags(data.get('tag')),
    }

    if (timestamp := data.get('@timestamp')) is not None:
        result['timestamp'] = timestamp
    if (uid := data.get('@uid')) is not None:
        result['user_id'] = UserId(uid)
    if (user := data.get('@user')) is not None:
        result['user'] = DisplayName(user)

    if type == 'node':
        result['lat'] = data.get('@lat')
        result['lon'] = data.get('@lon')
        return Node(**result)  # type: ignore[typeddict-item]
    if type == 'way':
        result['nodes'] = [ElementId(nd['@ref']) for nd in as_list(data.get('nd'))]
        return Way(**result)  # type: ignore[typeddict-item]

    result['members'] = [
        ElementMember(member['@type'], ElementId(member['@ref']), member.get('@role', ''))
        for member in as_list(data.get('member'))
    ]
    return Relation(**result)  # type: ignore[typeddict-item]
