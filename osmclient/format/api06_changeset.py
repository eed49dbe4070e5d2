from collections.abc import Mapping
from typing import Any

from osmclient.config import GENERATOR
from osmclient.format.api06_tag import Tag06Mixin
from osmclient.lib.exceptions_context import raise_for
from osmclient.lib.xmltodict import XMLToDict, as_list, xml_text
from osmclient.models.changeset import Changeset, ChangesetComment
from osmclient.models.types import ChangesetCommentId, ChangesetId, DisplayName, UserId


class Changeset06Mixin:
    @staticmethod
    def encode_changeset_request(tags: Mapping[str, str]) -> bytes:
        """
        Encode the request body of a changeset create or update.

        >>> encode_changeset_request({'comment': 'x', 'created_by': 'y'})
        b"<?xml ...?>\\n<osm ...><changeset><tag k="comment" v="x"/>...</changeset></osm>"
        """
        return XMLToDict.unparse(
            {
                'osm': {
                    '@version': '0.6',
                    '@generator': GENERATOR,
                    'changeset': {'tag': Tag06Mixin.encode_tags(tags)},
                }
            },
            binary=True,
        )

    @staticmethod
    def decode_changesets(content: bytes) -> list[Changeset]:
        osm = XMLToDict.parse(content).get('osm')
        if osm is None:
            raise_for.bad_response('osm document', content)
        if not isinstance(osm, dict):
            return []
        return [_decode_changeset(data) for data in as_list(osm.get('changeset'))]

    @staticmethod
    def decode_changeset(content: bytes) -> Changeset:
        changesets = Changeset06Mixin.decode_changesets(content)
        if not changesets:
            raise_for.bad_response('changeset document', content)
        return changesets[0]


def _decode_changeset(data: dict[str, Any]) -> Changeset:
    """
    >>> _decode_changeset({'@id': 1, '@created_at': ..., '@open': True, 'tag': [...]})
    Changeset(id=1, ...)
    """
    id = ChangesetId(data['@id'])
    result: Changeset = {
        'id': id,
        'created_at': data['@created_at'],
        'closed_at': data.get('@closed_at'),
        'open': data.get('@open', False),
        'min_lat': data.get('@min_lat'),
        'min_lon': data.get('@min_lon'),
        'max_lat': data.get('@max_lat'),
        'max_lon': data.get('@max_lon'),
        'comments_count': data.get('@comments_count', 0),
        'changes_count': data.get('@changes_count', 0),
        'tags': Tag06Mixin.decode_tags(data.get('tag')),
    }

    if (uid := data.get('@uid')) is not None:
        result['user_id'] = UserId(uid)
    if (user := data.get('@user')) is not None:
        result['user'] = DisplayName(user)

    if (discussion := data.get('discussion')) is not None:
        comments = discussion.get('comment') if isinstance(discussion, dict) else None
        result['discussion'] = [_decode_changeset_comment(c) for c in as_list(comments)]

    return result


def _decode_changeset_comment(data: dict[str, Any]) -> ChangesetComment:
    """
    >>> _decode_changeset_comment({'@id': 1, '@date': ..., '@uid': 2, '@user': 'a', 'text': 'b'})
    ChangesetComment(id=1, ...)
    """
    result: ChangesetComment = {
        'id': ChangesetCommentId(data['@id']),
        'date': data['@date'],
        'text': xml_text(data.get('text')),
    }
    if (uid := data.get('@uid')) is not None:
        result['user_id'] = UserId(uid)
    if (user := data.get('@user')) is not None:
        result['user'] = DisplayName(user)
    return result
