from dataclasses import dataclass
from datetime import datetime
from typing import Literal, NotRequired, TypedDict

from osmclient.models.types import DisplayName, TraceId, UserId

TraceVisibility = Literal['identifiable', 'public', 'trackable', 'private']


class GpxFile(TypedDict):
    # assigned on create
    id: NotRequired[TraceId]
    name: NotRequired[str]
    description: NotRequired[str]
    visibility: NotRequired[TraceVisibility]
    tags: NotRequired[list[str]]

    # read-only, present in responses
    user_id: NotRequired[UserId]
    user: NotRequired[DisplayName]
    timestamp: NotRequired[datetime]
    lat: NotRequired[float]
    lon: NotRequired[float]
    pending: NotRequired[bool]


@dataclass(frozen=True, slots=True)
class TraceData:
    """Raw trace file as served by the gpx data endpoint."""

    file_name: str | None
    content_type: str | None
    content: bytes
