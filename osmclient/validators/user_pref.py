from pydantic import TypeAdapter, ValidationError

from osmclient.config import PYDANTIC_CONFIG
from osmclient.lib.exceptions_context import raise_for
from osmclient.models.types import (
    UserPrefKey,
    UserPrefKeyValidating,
    UserPrefVal,
    UserPrefValValidating,
)

_KeyValidator = TypeAdapter(UserPrefKeyValidating, config=PYDANTIC_CONFIG)
_ValueValidator = TypeAdapter(UserPrefValValidating, config=PYDANTIC_CONFIG)


def validate_preference_key(key: str) -> UserPrefKey:
    try:
        return UserPrefKey(_KeyValidator.validate_python(key))
    except ValidationError:
        raise_for.pref_bad_key(key)


def validate_preference(key: str, value: str) -> tuple[UserPrefKey, UserPrefVal]:
    """Ensure key and value are each between 1 and 255 characters long."""
    key_ = validate_preference_key(key)
    try:
        value_ = UserPrefVal(_ValueValidator.validate_python(value))
    except ValidationError:
        raise_for.pref_bad_value(key, value)
    return key_, value_
