from osmclient.format import Format06
from osmclient.lib.exceptions_context import raise_for
from osmclient.models.trace import GpxFile, TraceData
from osmclient.models.types import TraceId
from osmclient.queries.query_base import XML_HEADERS, QueryBase
from osmclient.validators.element import validate_id
from osmclient.validators.trace import validate_trace_metadata


class TraceServiceMixin(QueryBase):
    __slots__ = ()

    async def create_trace(self, gpx_file: GpxFile, file: TraceData) -> TraceId:
        """
        Upload a new trace file with its metadata.

        Name, description and visibility must be set. Returns the id of the new trace.
        """
        auth = self._require_auth('create_trace')
        validate_trace_metadata(gpx_file)
        file_name = file.file_name or gpx_file['name']
        if not file.content:
            raise_for.trace_file_empty(file_name)

        r = await self._transport.send(
            'POST',
            '0.6/gpx/create',
            data={
                'description': gpx_file['description'],
                'tags': ','.join(gpx_file.get('tags', ())),
                'visibility': gpx_file['visibility'],
            },
            files={'file': (file_name, file.content, file.content_type or 'application/gpx+xml')},
            auth=auth,
        )
        return TraceId(self._decode_int('trace id', r.content))

    async def update_trace(self, gpx_file: GpxFile) -> None:
        """Replace the metadata of an existing trace."""
        auth = self._require_auth('update_trace')
        id = validate_id('trace id', gpx_file.get('id'))
        validate_trace_metadata(gpx_file)
        await self._transport.send(
            'PUT',
            f'0.6/gpx/{id}',
            content=Format06.encode_gpx_file_request(gpx_file),
            headers=XML_HEADERS,
            auth=auth,
        )

    async def delete_trace(self, id: TraceId) -> None:
        auth = self._require_auth('delete_trace')
        validate_id('trace id', id)
        await self._transport.send('DELETE', f'0.6/gpx/{id}', auth=auth)
