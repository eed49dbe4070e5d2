import pytest

from osmclient.exceptions import InvalidArgumentError
from tests.utils.fake_server import FakeServer, osm_xml

NOTE = osm_xml(
    '<note lon="-0.1" lat="51.5"><id>9</id><date_created>2024-01-01 00:00:00 UTC</date_created>'
    '<status>open</status><comments/></note>'
)


async def test_create_note_anonymous(client, server: FakeServer):
    server.add('POST', '0.6/notes', NOTE)
    note = await client.create_note(51.5, -0.1, 'Missing bench')
    assert note['id'] == 9
    assert note['comments'] == []
    assert dict(server.last.url.params) == {'lat': '51.5', 'lon': '-0.1', 'text': 'Missing bench'}
    assert 'Authorization' not in server.last.headers


async def test_create_note_authenticated(auth_client, server: FakeServer):
    server.add('POST', '0.6/notes', NOTE)
    await auth_client.create_note(51.5, -0.1, 'Missing bench')
    assert server.last.headers['Authorization'].startswith('Basic ')


@pytest.mark.parametrize(
    ('lat', 'lon', 'text'),
    [
        (91, 0, 'text'),
        (0, 180.5, 'text'),
        (float('nan'), 0, 'text'),
        (0, 0, ''),
    ],
)
async def test_create_note_invalid(client, server: FakeServer, lat, lon, text):
    with pytest.raises(InvalidArgumentError):
        await client.create_note(lat, lon, text)
    assert not server.requests


async def test_comment_note(client, server: FakeServer):
    server.add('POST', '0.6/notes/9/comment', NOTE)
    await client.comment_note(9, 'Still missing')
    assert server.last.url.params['text'] == 'Still missing'


async def test_comment_note_empty(client, server: FakeServer):
    with pytest.raises(InvalidArgumentError):
        await client.comment_note(9, '')
    assert not server.requests


async def test_close_and_reopen_note(auth_client, server: FakeServer):
    server.add('POST', '0.6/notes/9/close', NOTE)
    server.add('POST', '0.6/notes/9/reopen', NOTE)
    await auth_client.close_note(9, 'Fixed')
    await auth_client.reopen_note(9)
    assert server.requests[0].url.params['text'] == 'Fixed'
    assert 'text' not in server.requests[1].url.params
