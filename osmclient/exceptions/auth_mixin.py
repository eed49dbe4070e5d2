from typing import NoReturn

from osmclient.exceptions.errors import InvalidArgumentError


class AuthExceptionsMixin:
    def auth_required(self, operation: str) -> NoReturn:
        raise InvalidArgumentError(f'{operation} requires an authenticated client')
