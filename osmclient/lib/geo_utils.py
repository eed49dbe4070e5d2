from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from osmclient.models.bounds import Bounds

# fractional digits the server accepts for coordinates
_DECIMAL_PRECISION = 10


def format_decimal(value: float) -> str:
    """
    Format a number as locale-invariant fixed-point text.

    >>> format_decimal(12.3456789012345)
    '12.3456789012'
    >>> format_decimal(1e-05)
    '0.00001'
    >>> format_decimal(-0.0)
    '0'
    """
    result = f'{value:.{_DECIMAL_PRECISION}f}'.rstrip('0').rstrip('.')
    return '0' if result == '-0' else result


def format_bbox(bounds: 'Bounds') -> str:
    """
    Format bounds as the min_lon,min_lat,max_lon,max_lat query parameter.

    >>> format_bbox(Bounds(min_lon=-77.04, min_lat=38.89, max_lon=-77.03, max_lat=38.9))
    '-77.04,38.89,-77.03,38.9'
    """
    return ','.join(
        format_decimal(v)  # type: ignore[arg-type]
        for v in (bounds.min_lon, bounds.min_lat, bounds.max_lon, bounds.max_lat)
    )
