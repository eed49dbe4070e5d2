from typing import NoReturn

from osmclient.exceptions.errors import InvalidArgumentError


class ChangesetExceptionsMixin:
    def changeset_tag_missing(self, key: str) -> NoReturn:
        raise InvalidArgumentError(f'Changeset tags must contain a non-empty {key!r} tag')

    def changeset_query_user_conflict(self) -> NoReturn:
        raise InvalidArgumentError('Query can only specify user_id OR display_name, not both.')

    def changeset_query_state_conflict(self) -> NoReturn:
        raise InvalidArgumentError('Query can only specify open_only OR closed_only, not both.')

    def changeset_query_time_missing(self) -> NoReturn:
        raise InvalidArgumentError(
            'Query must specify min_closed_date if max_opened_date is specified.'
        )

    def changeset_comment_empty(self) -> NoReturn:
        raise InvalidArgumentError('Changeset comment text must not be empty')
