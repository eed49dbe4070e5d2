from base64 import b64decode

import httpx
from pydantic import SecretStr

from osmclient.lib.auth_strategy import BasicAuth, OAuth1Auth, OAuth2Auth


def _authenticate(auth, request: httpx.Request) -> httpx.Request:
    flow = auth.auth_flow(request)
    return next(flow)


def test_basic_auth():
    request = _authenticate(BasicAuth('user1', 'password1'), httpx.Request('GET', 'https://osm.test/api/0.6/user/details'))
    scheme, credentials = request.headers['Authorization'].split(' ', 1)
    assert scheme == 'Basic'
    assert b64decode(credentials) == b'user1:password1'


def test_basic_auth_repr_hides_password():
    auth = BasicAuth('user1', SecretStr('password1'))
    assert 'password1' not in repr(auth)
    assert 'user1' in repr(auth)


def test_oauth2_auth():
    auth = OAuth2Auth('abc123')
    request = _authenticate(auth, httpx.Request('GET', 'https://osm.test/api/0.6/user/details'))
    assert request.headers['Authorization'] == 'Bearer abc123'
    assert 'abc123' not in repr(auth)


def test_oauth1_auth():
    auth = OAuth1Auth('consumer', 'consumer-secret', 'token', SecretStr('token-secret'))
    request = _authenticate(auth, httpx.Request('PUT', 'https://osm.test/api/0.6/changeset/create', content=b'<osm/>'))
    header = request.headers['Authorization']
    assert header.startswith('OAuth ')
    assert 'oauth_signature_method="HMAC-SHA1"' in header
    assert 'oauth_consumer_key="consumer"' in header
    assert 'oauth_token="token"' in header
    assert 'oauth_signature=' in header
    assert 'secret' not in repr(auth)


def test_oauth1_auth_form_body():
    auth = OAuth1Auth('consumer', 'consumer-secret', 'token', 'token-secret')
    request = _authenticate(auth, httpx.Request('POST', 'https://osm.test/api/0.6/changeset/1/comment', data={'text': 'hello'}))
    assert request.headers['Authorization'].startswith('OAuth ')
    assert request.content == b'text=hello'


def test_auth_applied_by_client():
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.headers['Authorization'])
        return httpx.Response(200)

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        client.get('https://osm.test/api/0.6/user/details', auth=OAuth2Auth('abc123'))
    assert seen == ['Bearer abc123']
