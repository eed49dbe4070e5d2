from abc import ABC, abstractmethod
from base64 import b64encode
from collections.abc import Generator
from typing import override

import httpx
from authlib.oauth1 import SIGNATURE_HMAC_SHA1, SIGNATURE_TYPE_HEADER, ClientAuth
from pydantic import SecretStr

_FORM_CONTENT_TYPE = 'application/x-www-form-urlencoded'


class AuthStrategy(httpx.Auth, ABC):
    """
    Credential injection for outgoing requests.

    Implementations only set headers on the request and hold immutable credentials.
    """

    __slots__ = ()

    @abstractmethod
    def authenticate(self, request: httpx.Request) -> None: ...

    @override
    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        self.authenticate(request)
        yield request


class BasicAuth(AuthStrategy):
    __slots__ = ('_header', 'username')

    def __init__(self, username: str, password: str | SecretStr) -> None:
        if isinstance(password, SecretStr):
            password = password.get_secret_value()
        self.username = username
        credentials = b64encode(f'{username}:{password}'.encode()).decode()
        self._header = SecretStr(f'Basic {credentials}')

    @override
    def authenticate(self, request: httpx.Request) -> None:
        request.headers['Authorization'] = self._header.get_secret_value()

    @override
    def __repr__(self) -> str:
        return f'BasicAuth(username={self.username!r})'


class OAuth1Auth(AuthStrategy):
    """
    OAuth 1.0a request signing with HMAC-SHA1.

    Form-encoded bodies take part in the signature base string, other bodies do not.
    """

    __slots__ = ('_client', 'consumer_key')

    def __init__(
        self,
        consumer_key: str,
        consumer_secret: str | SecretStr,
        token: str | SecretStr,
        token_secret: str | SecretStr,
    ) -> None:
        self.consumer_key = consumer_key
        self._client = ClientAuth(
            consumer_key,
            client_secret=_reveal(consumer_secret),
            token=_reveal(token),
            token_secret=_reveal(token_secret),
            signature_method=SIGNATURE_HMAC_SHA1,
            signature_type=SIGNATURE_TYPE_HEADER,
        )

    @override
    def authenticate(self, request: httpx.Request) -> None:
        content_type = request.headers.get('Content-Type', '')
        # multipart bodies are streamed and never signed
        body = request.content if _FORM_CONTENT_TYPE in content_type else b''
        headers = {'Content-Type': content_type} if content_type else {}
        _, headers, _ = self._client.prepare(request.method, str(request.url), headers, body)
        request.headers['Authorization'] = headers['Authorization']

    @override
    def __repr__(self) -> str:
        return f'OAuth1Auth(consumer_key={self.consumer_key!r})'


class OAuth2Auth(AuthStrategy):
    __slots__ = ('_token',)

    def __init__(self, token: str | SecretStr) -> None:
        self._token = token if isinstance(token, SecretStr) else SecretStr(token)

    @override
    def authenticate(self, request: httpx.Request) -> None:
        request.headers['Authorization'] = f'Bearer {self._token.get_secret_value()}'

    @override
    def __repr__(self) -> str:
        return 'OAuth2Auth(token=**********)'


def _reveal(value: str | SecretStr) -> str:
    return value.get_secret_value() if isinstance(value, SecretStr) else value
