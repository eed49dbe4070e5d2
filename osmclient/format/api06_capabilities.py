from typing import Any

from osmclient.lib.exceptions_context import raise_for
from osmclient.lib.xmltodict import XMLToDict, as_list, xml_text
from osmclient.models.capabilities import Capabilities


class Capabilities06Mixin:
    @staticmethod
    def decode_versions(content: bytes) -> list[str]:
        """
        >>> decode_versions(b'<osm><api><version>0.6</version></api></osm>')
        ['0.6']
        """
        osm = XMLToDict.parse(content).get('osm')
        api = osm.get('api') if isinstance(osm, dict) else None
        if not isinstance(api, dict):
            raise_for.bad_response('versions document', content)
        return [xml_text(v) for v in as_list(api.get('version'))]

    @staticmethod
    def decode_capabilities(content: bytes) -> Capabilities:
        osm = XMLToDict.parse(content).get('osm')
        api = osm.get('api') if isinstance(osm, dict) else None
        if not isinstance(api, dict):
            raise_for.bad_response('capabilities document', content)

        version = _section(api, 'version')
        changesets = _section(api, 'changesets')
        notes = _section(api, 'notes')
        status = _section(api, 'status')

        policy = osm.get('policy')  # type: ignore[union-attr]
        imagery = policy.get('imagery') if isinstance(policy, dict) else None
        blacklist = imagery.get('blacklist') if isinstance(imagery, dict) else None

        return {
            'version_minimum': version.get('@minimum', ''),
            'version_maximum': version.get('@maximum', ''),
            'area_maximum': float(_section(api, 'area').get('@maximum', 0)),
            'note_area_maximum': float(_section(api, 'note_area').get('@maximum', 0)),
            'tracepoints_per_page': int(_section(api, 'tracepoints').get('@per_page', 0)),
            'waynodes_maximum': int(_section(api, 'waynodes').get('@maximum', 0)),
            'relationmembers_maximum': int(_section(api, 'relationmembers').get('@maximum', 0)),
            'changesets_maximum_elements': int(changesets.get('@maximum_elements', 0)),
            'changesets_default_query_limit': int(changesets.get('@default_query_limit', 0)),
            'changesets_maximum_query_limit': int(changesets.get('@maximum_query_limit', 0)),
            'notes_default_query_limit': int(notes.get('@default_query_limit', 0)),
            'notes_maximum_query_limit': int(notes.get('@maximum_query_limit', 0)),
            'timeout': int(_section(api, 'timeout').get('@seconds', 0)),
            'database_status': status.get('@database', 'offline'),
            'api_status': status.get('@api', 'offline'),
            'gpx_status': status.get('@gpx', 'offline'),
            'imagery_blacklist': [entry['@regex'] for entry in as_list(blacklist)],
        }


def _section(api: dict[str, Any], name: str) -> dict[str, Any]:
    value = api.get(name)
    return value if isinstance(value, dict) else {}
