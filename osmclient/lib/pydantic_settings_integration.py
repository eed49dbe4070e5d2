import logging
from collections.abc import Callable
from sys import modules
from typing import Any, get_type_hints

from pydantic import create_model
from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, SettingsConfigDict


def _is_setting_name(name: str) -> bool:
    return name[:1] != '_' and name.isupper()


def pydantic_settings_integration(
    caller_name: str,
    caller_globals: dict[str, Any],
    /,
    config: SettingsConfigDict | None = None,
    name_filter: Callable[[str], bool] = _is_setting_name,
) -> frozenset[str]:
    """
    Load the upper-case globals of the calling module from the environment.

    A settings model is derived from the module annotations (or the default
    value types), validated against environment variables and .env files,
    and the validated values are written back into the module globals.

    Returns the names whose values differ from the module defaults.
    """
    defaults = {k: v for k, v in caller_globals.items() if name_filter(k)}
    if not defaults:
        logging.warning('No settings found in %s matching the filter', caller_name)
        return frozenset()

    type_hints = get_type_hints(modules[caller_name], defaults)
    fields: dict[str, tuple[Any, Any]] = {
        name: (
            type_hints.get(name, Any if isinstance(value, FieldInfo) else type(value)),
            value,
        )
        for name, value in defaults.items()
    }

    base = type(
        f'{caller_name}_SettingsBase',
        (BaseSettings,),
        {'model_config': config if config is not None else BaseSettings.model_config},
    )
    settings = create_model(
        f'{caller_name}_Settings',
        __base__=base,
        **fields,  # type: ignore
    )()

    overridden: set[str] = set()
    for name, default in defaults.items():
        value = getattr(settings, name)
        if value != default:
            overridden.add(name)
        caller_globals[name] = value

    if overridden:
        logging.debug('Settings overridden in %s: %s', caller_name, ', '.join(sorted(overridden)))
    return frozenset(overridden)
