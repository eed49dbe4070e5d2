from typing import NoReturn

from osmclient.exceptions.errors import InvalidArgumentError


class TraceExceptionsMixin:
    def trace_metadata_missing(self, field: str) -> NoReturn:
        raise InvalidArgumentError(f'Trace {field} must be set')

    def trace_file_empty(self, file_name: str) -> NoReturn:
        raise InvalidArgumentError(f'Trace file {file_name!r} is empty')
