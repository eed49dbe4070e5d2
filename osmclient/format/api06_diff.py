from osmclient.lib.exceptions_context import raise_for
from osmclient.lib.xmltodict import XMLToDict
from osmclient.models.element import ELEMENT_TYPES, ElementId
from osmclient.models.osmchange import DiffResultEntry


class Diff06Mixin:
    @staticmethod
    def decode_diff_result(content: bytes) -> list[DiffResultEntry]:
        """
        Decode the per-element outcome of a changeset upload, in document order.

        >>> decode_diff_result(b'<diffResult><node old_id="-1" new_id="5" new_version="1"/></diffResult>')
        [{'type': 'node', 'old_id': -1, 'new_id': 5, 'new_version': 1}]
        """
        entries = XMLToDict.parse(content, sequence=True).get('diffResult')
        if entries is None:
            raise_for.bad_response('diffResult document', content)
        # text-only diffResult parses as a str
        if not isinstance(entries, list):
            return []

        result: list[DiffResultEntry] = []
        for type, data in entries:
            if type not in ELEMENT_TYPES:
                continue
            new_id = data.get('@new_id')
            result.append({
                'type': type,
                'old_id': ElementId(data['@old_id']),
                'new_id': ElementId(new_id) if new_id is not None else None,
                'new_version': data.get('@new_version'),
            })
        return result
