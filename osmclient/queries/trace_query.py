from email.message import Message

from osmclient.format import Format06
from osmclient.lib.exceptions_context import raise_for
from osmclient.lib.geo_utils import format_bbox
from osmclient.models.bounds import Bounds
from osmclient.models.trace import GpxFile, TraceData
from osmclient.models.types import TraceId
from osmclient.queries.query_base import QueryBase
from osmclient.validators.bounds import validate_bounds
from osmclient.validators.element import validate_id


class TraceQueryMixin(QueryBase):
    __slots__ = ()

    async def get_trackpoints(self, bounds: Bounds, page: int = 0) -> bytes:
        """
        Get a page of public GPS points within the bounds.

        Returns the raw GPX 1.0 document.
        """
        validate_bounds(bounds)
        if page < 0:
            raise_for.bad_id('page', page)
        return await self._get('0.6/trackpoints', params={'bbox': format_bbox(bounds), 'page': page})

    async def get_trace(self, id: TraceId) -> GpxFile:
        """Get the metadata of a trace; private traces require the owner's credentials."""
        validate_id('trace id', id)
        content = await self._get(f'0.6/gpx/{id}/details')
        return self._decode('gpx_file document', Format06.decode_gpx_file, content)

    async def get_trace_data(self, id: TraceId) -> TraceData:
        """Get the trace file exactly as uploaded, which may be an archive rather than GPX."""
        validate_id('trace id', id)
        r = await self._transport.send('GET', f'0.6/gpx/{id}/data', auth=self._auth)
        return TraceData(
            file_name=_disposition_file_name(r.headers.get('Content-Disposition')),
            content_type=r.headers.get('Content-Type'),
            content=r.content,
        )

    async def get_traces(self) -> list[GpxFile]:
        """Get the metadata of all traces of the authenticated user."""
        auth = self._require_auth('get_traces')
        content = await self._get('0.6/user/gpx_files', auth=auth)
        return self._decode('gpx_files document', Format06.decode_gpx_files, content)


def _disposition_file_name(value: str | None) -> str | None:
    """
    Extract the file name of a Content-Disposition header.

    >>> _disposition_file_name('attachment; filename="123.gpx"')
    '123.gpx'
    """
    if not value:
        return None
    message = Message()
    message['Content-Disposition'] = value
    return message.get_filename()
