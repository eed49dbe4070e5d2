from collections.abc import Iterable
from urllib.parse import quote

from osmclient.format import Format06
from osmclient.models.types import UserId, UserPrefVal
from osmclient.models.user import User
from osmclient.queries.query_base import QueryBase
from osmclient.validators.element import validate_id
from osmclient.validators.user_pref import validate_preference_key


class UserQueryMixin(QueryBase):
    __slots__ = ()

    async def get_user(self, id: UserId) -> User:
        validate_id('user id', id)
        content = await self._get(f'0.6/user/{id}')
        return self._decode('user document', Format06.decode_user, content)

    async def get_users(self, ids: Iterable[UserId]) -> list[User]:
        param = ','.join(str(validate_id('user id', id)) for id in ids)
        if not param:
            return []
        content = await self._get('0.6/users', params={'users': param})
        return self._decode('users document', Format06.decode_users, content)

    async def get_permissions(self) -> list[str]:
        """Get the permissions granted to the current credentials, empty when anonymous."""
        content = await self._get('0.6/permissions')
        return self._decode('permissions document', Format06.decode_permissions, content)

    async def get_user_details(self) -> User:
        """Get the details of the authenticated user, including private fields."""
        auth = self._require_auth('get_user_details')
        content = await self._get('0.6/user/details', auth=auth)
        return self._decode('user document', Format06.decode_user, content)

    async def get_preferences(self) -> dict[str, str]:
        auth = self._require_auth('get_preferences')
        content = await self._get('0.6/user/preferences', auth=auth)
        return self._decode('preferences document', Format06.decode_preferences, content)

    async def get_preference(self, key: str) -> UserPrefVal:
        auth = self._require_auth('get_preference')
        key = validate_preference_key(key)
        content = await self._get(f'0.6/user/preferences/{quote(key, safe="")}', auth=auth)
        return UserPrefVal(content.decode())
