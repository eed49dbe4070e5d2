from osmclient.lib.exceptions_context import raise_for
from osmclient.models.trace import GpxFile


def validate_trace_metadata(gpx_file: GpxFile) -> None:
    """Ensure name, description and visibility are set before upload."""
    for field in ('name', 'description', 'visibility'):
        if not gpx_file.get(field):
            raise_for.trace_metadata_missing(field)
