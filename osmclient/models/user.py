from datetime import datetime
from typing import NotRequired, TypedDict

from osmclient.models.types import DisplayName, UserId


class UserHome(TypedDict):
    lat: float
    lon: float
    zoom: int


class User(TypedDict):
    id: UserId
    display_name: DisplayName
    account_created: datetime
    description: str
    contributor_terms_agreed: bool
    img: NotRequired[str]
    roles: list[str]
    changesets_count: int
    traces_count: int
    blocks_received: int
    blocks_received_active: int

    # present for the authenticated user only
    home: NotRequired[UserHome]
    languages: NotRequired[list[str]]
    messages_received: NotRequired[int]
    messages_unread: NotRequired[int]
    messages_sent: NotRequired[int]
