from collections.abc import Mapping
from urllib.parse import quote

from osmclient.format import Format06
from osmclient.queries.query_base import TEXT_HEADERS, XML_HEADERS, QueryBase
from osmclient.validators.user_pref import validate_preference, validate_preference_key


class UserPrefServiceMixin(QueryBase):
    __slots__ = ()

    async def set_preferences(self, prefs: Mapping[str, str]) -> None:
        """Replace all preferences of the authenticated user."""
        auth = self._require_auth('set_preferences')
        validated = dict(validate_preference(key, value) for key, value in prefs.items())
        await self._transport.send(
            'PUT',
            '0.6/user/preferences',
            content=Format06.encode_preferences_request(validated),
            headers=XML_HEADERS,
            auth=auth,
        )

    async def set_preference(self, key: str, value: str) -> None:
        auth = self._require_auth('set_preference')
        key, value = validate_preference(key, value)
        await self._transport.send(
            'PUT',
            f'0.6/user/preferences/{quote(key, safe="")}',
            content=value.encode(),
            headers=TEXT_HEADERS,
            auth=auth,
        )

    async def delete_preference(self, key: str) -> None:
        auth = self._require_auth('delete_preference')
        key = validate_preference_key(key)
        await self._transport.send('DELETE', f'0.6/user/preferences/{quote(key, safe="")}', auth=auth)
