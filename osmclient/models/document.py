from typing import NotRequired, TypedDict

from osmclient.models.bounds import Bounds
from osmclient.models.changeset import Changeset
from osmclient.models.element import Node, Relation, Way
from osmclient.models.note import Note
from osmclient.models.trace import GpxFile
from osmclient.models.user import User


class MapData(TypedDict):
    bounds: Bounds | None
    nodes: list[Node]
    ways: list[Way]
    relations: list[Relation]


class OSMDocument(TypedDict):
    """Root envelope carrying a mixed batch of entities in one document."""

    bounds: NotRequired[Bounds]
    nodes: NotRequired[list[Node]]
    ways: NotRequired[list[Way]]
    relations: NotRequired[list[Relation]]
    changesets: NotRequired[list[Changeset]]
    notes: NotRequired[list[Note]]
    users: NotRequired[list[User]]
    gpx_files: NotRequired[list[GpxFile]]
    preferences: NotRequired[dict[str, str]]
    permissions: NotRequired[list[str]]
