from typing import Any

from osmclient.lib.date_utils import parse_query_date
from osmclient.lib.exceptions_context import raise_for
from osmclient.lib.xmltodict import XMLToDict, as_list, xml_text
from osmclient.models.note import Note, NoteComment
from osmclient.models.types import DisplayName, NoteId, UserId


class Note06Mixin:
    @staticmethod
    def decode_notes(content: bytes) -> list[Note]:
        """
        >>> decode_notes(b'<osm><note lon="0.1" lat="51"><id>16659</id>...</note></osm>')
        [Note(id=16659, ...)]
        """
        osm = XMLToDict.parse(content).get('osm')
        if osm is None:
            raise_for.bad_response('osm document', content)
        if not isinstance(osm, dict):
            return []
        return [_decode_note(data) for data in as_list(osm.get('note'))]

    @staticmethod
    def decode_note(content: bytes) -> Note:
        notes = Note06Mixin.decode_notes(content)
        if not notes:
            raise_for.bad_response('note document', content)
        return notes[0]


def _decode_note(data: dict[str, Any]) -> Note:
    """
    >>> _decode_note({'@lon': 0.1, '@lat': 51.0, 'id': '16659', 'status': 'open', ...})
    Note(id=16659, lat=51.0, lon=0.1, ...)
    """
    closed = data.get('date_closed')
    comments = data.get('comments')
    return {
        'id': NoteId(int(xml_text(data.get('id')))),
        'lat': data['@lat'],
        'lon': data['@lon'],
        'status': xml_text(data.get('status')),  # type: ignore[typeddict-item]
        'created_at': parse_query_date(xml_text(data.get('date_created'))),
        'closed_at': parse_query_date(xml_text(closed)) if closed else None,
        'comments': [
            _decode_note_comment(c)
            for c in as_list(comments.get('comment') if isinstance(comments, dict) else None)
        ],
    }


def _decode_note_comment(data: dict[str, Any]) -> NoteComment:
    """
    >>> _decode_note_comment({'date': '2019-06-15 08:26:04 UTC', 'uid': '1234', 'user': 'userName', ...})
    NoteComment(date=datetime(2019, 6, 15, 8, 26, 4, tzinfo=UTC), ...)
    """
    result: NoteComment = {
        'date': parse_query_date(xml_text(data.get('date'))),
        'action': xml_text(data.get('action')),  # type: ignore[typeddict-item]
        'text': xml_text(data.get('text')),
        'html': xml_text(data.get('html')),
    }
    if (uid := data.get('uid')) is not None:
        result['user_id'] = UserId(int(xml_text(uid)))
    if (user := data.get('user')) is not None:
        result['user'] = DisplayName(xml_text(user))
    return result
