from collections.abc import Mapping
from typing import Any

from osmclient.config import GENERATOR
from osmclient.format.api06_tag import Tag06Mixin
from osmclient.lib.exceptions_context import raise_for
from osmclient.lib.xmltodict import XMLToDict, as_list, xml_text
from osmclient.models.types import DisplayName, UserId
from osmclient.models.user import User


class User06Mixin:
    @staticmethod
    def decode_users(content: bytes) -> list[User]:
        osm = XMLToDict.parse(content).get('osm')
        if osm is None:
            raise_for.bad_response('osm document', content)
        if not isinstance(osm, dict):
            return []
        return [_decode_user(data) for data in as_list(osm.get('user'))]

    @staticmethod
    def decode_user(content: bytes) -> User:
        users = User06Mixin.decode_users(content)
        if not users:
            raise_for.bad_response('user document', content)
        return users[0]

    @staticmethod
    def encode_preferences_request(prefs: Mapping[str, str]) -> bytes:
        """
        >>> encode_preferences_request({'key1': 'value1'})
        b"<?xml ...?>\\n<osm ...><preferences><preference k="key1" v="value1"/></preferences></osm>"
        """
        return XMLToDict.unparse(
            {
                'osm': {
                    '@version': '0.6',
                    '@generator': GENERATOR,
                    'preferences': {'preference': [{'@k': k, '@v': v} for k, v in prefs.items()]},
                }
            },
            binary=True,
        )

    @staticmethod
    def decode_preferences(content: bytes) -> dict[str, str]:
        """
        >>> decode_preferences(b'<osm><preferences><preference k="key" v="value"/></preferences></osm>')
        {'key': 'value'}
        """
        osm = XMLToDict.parse(content).get('osm')
        if not isinstance(osm, dict):
            raise_for.bad_response('osm document', content)
        prefs = osm.get('preferences')
        if not isinstance(prefs, dict):
            return {}

        return Tag06Mixin.decode_tags(as_list(prefs.get('preference')))

    @staticmethod
    def decode_permissions(content: bytes) -> list[str]:
        """
        >>> decode_permissions(b'<osm><permissions><permission name="allow_read_prefs"/></permissions></osm>')
        ['allow_read_prefs']
        """
        osm = XMLToDict.parse(content).get('osm')
        if not isinstance(osm, dict):
            raise_for.bad_response('osm document', content)
        permissions = osm.get('permissions')
        if not isinstance(permissions, dict):
            return []
        return [p['@name'] for p in as_list(permissions.get('permission'))]


def _decode_user(data: dict[str, Any]) -> User:
    """
    >>> _decode_user({'@id': 1234, '@display_name': 'userName', ...})
    User(id=1234, display_name='userName', ...)
    """
    terms = data.get('contributor-terms')
    img = data.get('img')
    roles = data.get('roles')
    blocks = data.get('blocks')
    received_blocks = blocks.get('received', {}) if isinstance(blocks, dict) else {}

    result: User = {
        'id': UserId(data['@id']),
        'display_name': DisplayName(data['@display_name']),
        'account_created': data['@account_created'],
        'description': xml_text(data.get('description')),
        'contributor_terms_agreed': terms.get('@agreed', False) if isinstance(terms, dict) else False,
        'roles': list(roles) if isinstance(roles, dict) else [],
        'changesets_count': _count(data.get('changesets')),
        'traces_count': _count(data.get('traces')),
        'blocks_received': received_blocks.get('@count', 0),
        'blocks_received_active': received_blocks.get('@active', 0),
    }
    if isinstance(img, dict) and (href := img.get('@href')):
        result['img'] = href

    if isinstance(home := data.get('home'), dict):
        result['home'] = {
            'lat': home['@lat'],
            'lon': home['@lon'],
            'zoom': home.get('@zoom', 0),
        }
    if isinstance(languages := data.get('languages'), dict):
        result['languages'] = [xml_text(lang) for lang in as_list(languages.get('lang'))]
    if isinstance(messages := data.get('messages'), dict):
        received = messages.get('received', {})
        result['messages_received'] = received.get('@count', 0)
        result['messages_unread'] = received.get('@unread', 0)
        result['messages_sent'] = messages.get('sent', {}).get('@count', 0)
    return result


def _count(value: Any) -> int:
    return value.get('@count', 0) if isinstance(value, dict) else 0
