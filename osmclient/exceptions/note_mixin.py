from datetime import datetime
from typing import NoReturn

from osmclient.exceptions.errors import InvalidArgumentError


class NoteExceptionsMixin:
    def note_search_text_missing(self) -> NoReturn:
        raise InvalidArgumentError('Note search requires a search text')

    def note_query_user_conflict(self) -> NoReturn:
        raise InvalidArgumentError('Query can only specify user_id OR display_name, not both.')

    def note_query_date_range(self, from_date: datetime, to_date: datetime) -> NoReturn:
        raise InvalidArgumentError(
            f'Query from_date ({from_date}) must not be later than to_date ({to_date}).'
        )

    def note_text_empty(self) -> NoReturn:
        raise InvalidArgumentError('Note text must not be empty')
