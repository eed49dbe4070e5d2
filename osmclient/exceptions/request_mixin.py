from typing import TYPE_CHECKING, NoReturn

from sizestr import sizestr

from osmclient.exceptions.errors import (
    APIError,
    DataIntegrityError,
    InvalidArgumentError,
    TransportError,
)

if TYPE_CHECKING:
    import httpx

    from osmclient.models.bounds import Bounds


class RequestExceptionsMixin:
    def bad_bbox(self, bounds: 'Bounds', condition: str | None = None) -> NoReturn:
        detail = 'The latitudes must be between -90 and 90, longitudes between -180 and 180 and the minima must be less than the maxima.'
        if condition is not None:
            detail = f'{detail} ({condition})'
        raise InvalidArgumentError(f'Invalid bounds {bounds!r}: {detail}')

    def bad_id(self, name: str, value: object) -> NoReturn:
        raise InvalidArgumentError(f'The {name} must be a positive integer, got {value!r}')

    def bad_xml(self, name: str, message: str, xml_input: bytes | None = None) -> NoReturn:
        preview = ''
        if xml_input:
            preview = ' ' + xml_input[:200].decode(errors='replace')
        raise DataIntegrityError(f'Cannot parse valid {name} from xml string{preview}. {message}')

    def bad_response(self, name: str, content: bytes) -> NoReturn:
        raise DataIntegrityError(
            f'Response is not a valid {name}: {content[:200].decode(errors="replace")!r}'
        )

    def input_too_big(self, size: int) -> NoReturn:
        raise DataIntegrityError(f'Response entity too large: {sizestr(size)}')

    def http_error(self, response: 'httpx.Response') -> NoReturn:
        raise APIError(
            str(response.request.url),
            response.status_code,
            response.reason_phrase,
            response.text,
            error=response.headers.get('Error'),
        )

    def transport_failed(self, request_uri: str, message: str) -> NoReturn:
        raise TransportError(request_uri, message)

    def request_timeout(self, request_uri: str, timeout: float) -> NoReturn:
        raise TransportError(request_uri, f'No response within {timeout:g} seconds')

    def bad_point(self, lon: float, lat: float) -> NoReturn:
        raise InvalidArgumentError(
            f'Invalid coordinates lon={lon!r}, lat={lat!r}: the latitude must be between -90 and 90, longitude between -180 and 180.'
        )
