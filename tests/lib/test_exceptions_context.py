from typing import NoReturn, override

import pytest

from osmclient.exceptions import Exceptions, InvalidArgumentError
from osmclient.lib.exceptions_context import exceptions_context, raise_for


class _CustomError(Exception):
    pass


class _CustomExceptions(Exceptions):
    @override
    def note_text_empty(self) -> NoReturn:
        raise _CustomError('custom')


def test_raise_for_default():
    with pytest.raises(InvalidArgumentError):
        raise_for.note_text_empty()


def test_exceptions_context_replaces_implementation():
    with exceptions_context(_CustomExceptions()), pytest.raises(_CustomError):
        raise_for.note_text_empty()

    with pytest.raises(InvalidArgumentError):
        raise_for.note_text_empty()


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        raise_for.bad_id('note id', 0)
