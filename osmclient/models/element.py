from dataclasses import dataclass
from datetime import datetime
from typing import Literal, NewType, NotRequired, TypedDict

from osmclient.models.types import ChangesetId, DisplayName, UserId

ElementType = Literal['node', 'way', 'relation']
ElementId = NewType('ElementId', int)

ELEMENT_TYPES: tuple[ElementType, ...] = ('node', 'way', 'relation')


@dataclass(frozen=True, slots=True)
class ElementMember:
    type: ElementType
    id: ElementId
    role: str = ''


@dataclass(frozen=True, slots=True)
class ElementRef:
    """Reference to an element, optionally pinned to a version."""

    type: ElementType
    id: ElementId
    version: int | None = None


class _ElementCommon(TypedDict):
    # unset until assigned by the server
    id: NotRequired[ElementId | None]
    # unset for create, required for update and delete
    version: NotRequired[int | None]
    # stamped by the client before upload
    changeset_id: NotRequired[ChangesetId | None]
    tags: dict[str, str]
    visible: NotRequired[bool]

    # read-only, present in responses
    timestamp: NotRequired[datetime]
    user_id: NotRequired[UserId]
    user: NotRequired[DisplayName]


class Node(_ElementCommon):
    type: Literal['node']
    # None for a deleted node version
    lat: float | None
    lon: float | None


class Way(_ElementCommon):
    type: Literal['way']
    nodes: list[ElementId]


class Relation(_ElementCommon):
    type: Literal['relation']
    members: list[ElementMember]


type Element = Node | Way | Relation


class CompleteWay(_ElementCommon):
    type: Literal['way']
    nodes: list[Node]


class CompleteMember(TypedDict):
    role: str
    # nested relations are not expanded by the server
    element: 'Node | CompleteWay | Relation'


class CompleteRelation(_ElementCommon):
    type: Literal['relation']
    members: list[CompleteMember]


type CompleteElement = CompleteWay | CompleteRelation
