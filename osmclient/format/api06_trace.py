from typing import Any

from osmclient.config import GENERATOR
from osmclient.lib.exceptions_context import raise_for
from osmclient.lib.xmltodict import XMLToDict, as_list, xml_text
from osmclient.models.trace import GpxFile
from osmclient.models.types import DisplayName, TraceId, UserId


class Trace06Mixin:
    @staticmethod
    def encode_gpx_file_request(gpx_file: GpxFile) -> bytes:
        """
        Encode the request body of a trace metadata update.

        >>> encode_gpx_file_request(GpxFile(id=1, name='a.gpx', ...))
        b"<?xml ...?>\\n<osm ...><gpx_file id="1" name="a.gpx" ...>...</gpx_file></osm>"
        """
        return XMLToDict.unparse(
            {
                'osm': {
                    '@version': '0.6',
                    '@generator': GENERATOR,
                    'gpx_file': _encode_gpx_file(gpx_file),
                }
            },
            binary=True,
        )

    @staticmethod
    def decode_gpx_files(content: bytes) -> list[GpxFile]:
        osm = XMLToDict.parse(content).get('osm')
        if osm is None:
            raise_for.bad_response('osm document', content)
        if not isinstance(osm, dict):
            return []
        return [_decode_gpx_file(data) for data in as_list(osm.get('gpx_file'))]

    @staticmethod
    def decode_gpx_file(content: bytes) -> GpxFile:
        gpx_files = Trace06Mixin.decode_gpx_files(content)
        if not gpx_files:
            raise_for.bad_response('gpx_file document', content)
        return gpx_files[0]


def _encode_gpx_file(gpx_file: GpxFile) -> dict[str, Any]:
    """
    >>> _encode_gpx_file(GpxFile(id=1, name='a.gpx', visibility='public', ...))
    {'@id': 1, '@name': 'a.gpx', '@visibility': 'public', ...}
    """
    return {
        '@id': gpx_file.get('id'),
        '@name': gpx_file.get('name'),
        '@visibility': gpx_file.get('visibility'),
        'description': gpx_file.get('description'),
        'tag': gpx_file.get('tags', []),
    }


def _decode_gpx_file(data: dict[str, Any]) -> GpxFile:
    """
    >>> _decode_gpx_file({'@id': 1, '@name': 'a.gpx', 'description': 'x', 'tag': ['a'], ...})
    GpxFile(id=1, name='a.gpx', ...)
    """
    result: GpxFile = {
        'id': TraceId(data['@id']),
        'name': data.get('@name', ''),
        'description': xml_text(data.get('description')),
        'visibility': data.get('@visibility', 'private'),
        'tags': [xml_text(tag) for tag in as_list(data.get('tag'))],
    }
    if (uid := data.get('@uid')) is not None:
        result['user_id'] = UserId(uid)
    if (user := data.get('@user')) is not None:
        result['user'] = DisplayName(user)
    if (timestamp := data.get('@timestamp')) is not None:
        result['timestamp'] = timestamp
    if (lat := data.get('@lat')) is not None:
        result['lat'] = lat
    if (lon := data.get('@lon')) is not None:
        result['lon'] = lon
    if (pending := data.get('@pending')) is not None:
        result['pending'] = pending
    return result
