from typing import NoReturn

from osmclient.exceptions.errors import InvalidArgumentError


class UserExceptionsMixin:
    def pref_bad_key(self, key: str) -> NoReturn:
        raise InvalidArgumentError(f'Preference key {key!r} must be between 1 and 255 characters')

    def pref_bad_value(self, key: str, value: str) -> NoReturn:
        raise InvalidArgumentError(
            f'Preference value {value!r} for key {key!r} must be between 1 and 255 characters'
        )
