from math import isfinite

from pydantic import TypeAdapter, ValidationError

from osmclient.config import PYDANTIC_CONFIG
from osmclient.lib.exceptions_context import raise_for
from osmclient.models.bounds import Bounds
from osmclient.models.types import Latitude, Longitude

_LongitudeValidator = TypeAdapter(Longitude, config=PYDANTIC_CONFIG)
_LatitudeValidator = TypeAdapter(Latitude, config=PYDANTIC_CONFIG)


def validate_bounds(bounds: Bounds) -> Bounds:
    """
    Ensure all four coordinates are set, within range, and form a non-degenerate box.

    Returns the bounds unchanged.
    """
    min_lon = bounds.min_lon
    min_lat = bounds.min_lat
    max_lon = bounds.max_lon
    max_lat = bounds.max_lat

    if min_lon is None or min_lat is None or max_lon is None or max_lat is None:
        raise_for.bad_bbox(bounds, 'all coordinates must be set')

    for lon in (min_lon, max_lon):
        if not isfinite(lon) or not -180 <= lon <= 180:
            raise_for.bad_bbox(bounds, f'longitude {lon} out of range')

    for lat in (min_lat, max_lat):
        if not isfinite(lat) or not -90 <= lat <= 90:
            raise_for.bad_bbox(bounds, f'latitude {lat} out of range')

    if min_lat >= max_lat:
        raise_for.bad_bbox(bounds, 'min_lat must be less than max_lat')

    return bounds


def validate_point(lon: float, lat: float) -> tuple[Longitude, Latitude]:
    """Ensure the coordinates are finite and within range."""
    try:
        return _LongitudeValidator.validate_python(lon), _LatitudeValidator.validate_python(lat)
    except ValidationError:
        raise_for.bad_point(lon, lat)
