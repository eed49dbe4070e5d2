from typing import Literal, NotRequired, TypedDict

from osmclient.models.element import Element, ElementId, ElementType

OSMChangeAction = Literal['create', 'modify', 'delete']


class OSMChange(TypedDict):
    create: NotRequired[list[Element]]
    modify: NotRequired[list[Element]]
    delete: NotRequired[list[Element]]


class DiffResultEntry(TypedDict):
    type: ElementType
    old_id: ElementId
    # None for deletions
    new_id: ElementId | None
    new_version: int | None
