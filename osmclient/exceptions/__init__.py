from osmclient.exceptions.auth_mixin import AuthExceptionsMixin
from osmclient.exceptions.changeset_mixin import ChangesetExceptionsMixin
from osmclient.exceptions.element_mixin import ElementExceptionsMixin
from osmclient.exceptions.errors import (
    APIError,
    DataIntegrityError,
    InvalidArgumentError,
    OSMClientError,
    TransportError,
)
from osmclient.exceptions.note_mixin import NoteExceptionsMixin
from osmclient.exceptions.request_mixin import RequestExceptionsMixin
from osmclient.exceptions.trace_mixin import TraceExceptionsMixin
from osmclient.exceptions.user_mixin import UserExceptionsMixin


class Exceptions(
    AuthExceptionsMixin,
    ChangesetExceptionsMixin,
    ElementExceptionsMixin,
    NoteExceptionsMixin,
    RequestExceptionsMixin,
    TraceExceptionsMixin,
    UserExceptionsMixin,
): ...


__all__ = (
    'APIError',
    'DataIntegrityError',
    'Exceptions',
    'InvalidArgumentError',
    'OSMClientError',
    'TransportError',
)
