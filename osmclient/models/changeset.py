from datetime import datetime
from typing import NotRequired, TypedDict

from osmclient.models.types import ChangesetCommentId, ChangesetId, DisplayName, UserId


class ChangesetComment(TypedDict):
    id: ChangesetCommentId
    date: datetime
    user_id: NotRequired[UserId]
    user: NotRequired[DisplayName]
    text: str


class Changeset(TypedDict):
    id: ChangesetId
    created_at: datetime
    # None while open
    closed_at: datetime | None
    open: bool
    user_id: NotRequired[UserId]
    user: NotRequired[DisplayName]
    # None for an empty changeset
    min_lat: float | None
    min_lon: float | None
    max_lat: float | None
    max_lon: float | None
    comments_count: int
    changes_count: int
    tags: dict[str, str]
    discussion: NotRequired[list[ChangesetComment]]
