from typing import Annotated, NewType

from annotated_types import Interval, MaxLen, MinLen

DisplayName = NewType('DisplayName', str)

Longitude = Annotated[float, Interval(ge=-180, le=180)]
Latitude = Annotated[float, Interval(ge=-90, le=90)]

ChangesetCommentId = NewType('ChangesetCommentId', int)
ChangesetId = NewType('ChangesetId', int)
NoteId = NewType('NoteId', int)
TraceId = NewType('TraceId', int)
UserId = NewType('UserId', int)
UserPrefKey = NewType('UserPrefKey', str)
UserPrefVal = NewType('UserPrefVal', str)

UserPrefKeyValidating = Annotated[str, MinLen(1), MaxLen(255)]
UserPrefValValidating = Annotated[str, MinLen(1), MaxLen(255)]
