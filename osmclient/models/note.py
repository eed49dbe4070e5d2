from datetime import datetime
from typing import Literal, NotRequired, TypedDict

from osmclient.models.types import DisplayName, NoteId, UserId

NoteStatus = Literal['open', 'closed', 'hidden']
NoteEvent = Literal['opened', 'closed', 'reopened', 'commented', 'hidden']


class NoteComment(TypedDict):
    date: datetime
    user_id: NotRequired[UserId]
    user: NotRequired[DisplayName]
    action: NoteEvent
    text: str
    html: str


class Note(TypedDict):
    id: NoteId
    lat: float
    lon: float
    status: NoteStatus
    created_at: datetime
    # None while open
    closed_at: datetime | None
    comments: list[NoteComment]
