from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Bounds:
    """Geographic bounding box in degrees, used only as a request parameter."""

    min_lon: float | None = None
    min_lat: float | None = None
    max_lon: float | None = None
    max_lat: float | None = None
