from typing import Any

from osmclient.config import GENERATOR
from osmclient.format.api06_changeset import _decode_changeset
from osmclient.format.api06_element import _decode_element, _encode_element
from osmclient.format.api06_note import _decode_note
from osmclient.format.api06_tag import Tag06Mixin
from osmclient.format.api06_trace import _decode_gpx_file, _encode_gpx_file
from osmclient.format.api06_user import _decode_user
from osmclient.lib.exceptions_context import raise_for
from osmclient.lib.xmltodict import XMLToDict, as_list
from osmclient.models.bounds import Bounds
from osmclient.models.document import MapData, OSMDocument


class Document06Mixin:
    @staticmethod
    def encode_document(document: OSMDocument) -> bytes:
        """
        Encode a mixed batch of entities into a single osm document.

        Notes, users and permissions are read-only and never encoded.

        >>> encode_document({'nodes': [Node(...)], 'preferences': {'a': '1'}})
        b"<?xml ...?>\\n<osm version="0.6" ...><node .../><preferences>...</preferences></osm>"
        """
        osm: dict[str, Any] = {'@version': '0.6', '@generator': GENERATOR}

        if (bounds := document.get('bounds')) is not None:
            osm['bounds'] = {
                '@minlat': bounds.min_lat,
                '@minlon': bounds.min_lon,
                '@maxlat': bounds.max_lat,
                '@maxlon': bounds.max_lon,
            }
        for key, type in (('nodes', 'node'), ('ways', 'way'), ('relations', 'relation')):
            if elements := document.get(key):
                osm[type] = [_encode_element(element) for element in elements]  # type: ignore[attr-defined]
        if changesets := document.get('changesets'):
            osm['changeset'] = [
                {'@id': changeset['id'], 'tag': Tag06Mixin.encode_tags(changeset['tags'])}
                for changeset in changesets
            ]
        if gpx_files := document.get('gpx_files'):
            osm['gpx_file'] = [_encode_gpx_file(gpx_file) for gpx_file in gpx_files]
        if (prefs := document.get('preferences')) is not None:
            osm['preferences'] = {'preference': [{'@k': k, '@v': v} for k, v in prefs.items()]}

        return XMLToDict.unparse({'osm': osm}, binary=True)

    @staticmethod
    def decode_document(content: bytes) -> OSMDocument:
        """
        Decode an osm document into its entities, grouped by kind.

        Only the kinds present in the document are set.
        """
        osm = XMLToDict.parse(content).get('osm')
        if osm is None:
            raise_for.bad_response('osm document', content)

        result: OSMDocument = {}
        # text-only osm parses as a str
        if not isinstance(osm, dict):
            return result

        if bounds_data := as_list(osm.get('bounds')):
            data = bounds_data[0]
            result['bounds'] = Bounds(
                min_lon=data['@minlon'],
                min_lat=data['@minlat'],
                max_lon=data['@maxlon'],
                max_lat=data['@maxlat'],
            )
        if 'node' in osm:
            result['nodes'] = [_decode_element('node', d) for d in as_list(osm['node'])]  # type: ignore[misc]
        if 'way' in osm:
            result['ways'] = [_decode_element('way', d) for d in as_list(osm['way'])]  # type: ignore[misc]
        if 'relation' in osm:
            result['relations'] = [_decode_element('relation', d) for d in as_list(osm['relation'])]  # type: ignore[misc]
        if 'changeset' in osm:
            result['changesets'] = [_decode_changeset(d) for d in as_list(osm['changeset'])]
        if 'note' in osm:
            result['notes'] = [_decode_note(d) for d in as_list(osm['note'])]
        if 'user' in osm:
            result['users'] = [_decode_user(d) for d in as_list(osm['user'])]
        if 'gpx_file' in osm:
            result['gpx_files'] = [_decode_gpx_file(d) for d in as_list(osm['gpx_file'])]
        if isinstance(prefs := osm.get('preferences'), dict):
            result['preferences'] = Tag06Mixin.decode_tags(as_list(prefs.get('preference')))
        if isinstance(permissions := osm.get('permissions'), dict):
            result['permissions'] = [p['@name'] for p in as_list(permissions.get('permission'))]
        return result

    @staticmethod
    def decode_map(content: bytes) -> MapData:
        """Decode a map response into its bounds and elements."""
        document = Document06Mixin.decode_document(content)
        return {
            'bounds': document.get('bounds'),
            'nodes': document.get('nodes', []),
            'ways': document.get('ways', []),
            'relations': document.get('relations', []),
        }
