from osmclient.format import Format06
from osmclient.lib.geo_utils import format_bbox
from osmclient.models.bounds import Bounds
from osmclient.models.capabilities import Capabilities
from osmclient.models.document import MapData
from osmclient.queries.query_base import QueryBase
from osmclient.validators.bounds import validate_bounds


class MiscQueryMixin(QueryBase):
    __slots__ = ()

    async def get_versions(self) -> list[str]:
        """Get the API versions supported by the server."""
        content = await self._get('versions')
        return self._decode('versions document', Format06.decode_versions, content)

    async def get_capabilities(self) -> Capabilities:
        content = await self._get('0.6/capabilities')
        return self._decode('capabilities document', Format06.decode_capabilities, content)

    async def get_map(self, bounds: Bounds) -> MapData:
        """
        Get all elements within the bounds, along with the ways and relations referencing them.

        Too large areas are rejected by the server.
        """
        validate_bounds(bounds)
        content = await self._get('0.6/map', params={'bbox': format_bbox(bounds)})
        return self._decode('map document', Format06.decode_map, content)
