from datetime import UTC, datetime, timedelta, timezone

import pytest

from osmclient.exceptions import InvalidArgumentError
from osmclient.models.bounds import Bounds
from tests.utils.fake_server import FakeServer, osm_xml

CHANGESET_5 = osm_xml(
    '<changeset id="5" created_at="2021-01-01T10:00:00Z" open="true" user="alice" uid="2">'
    '<tag k="comment" v="fix"/>'
    '<discussion><comment id="1" date="2021-01-01T11:00:00Z" uid="3" user="bob"><text>ok</text></comment></discussion>'
    '</changeset>'
)


async def test_get_changeset(client, server: FakeServer):
    server.add('GET', '0.6/changeset/5', CHANGESET_5)
    changeset = await client.get_changeset(5)
    assert changeset['id'] == 5
    assert changeset['open']
    assert changeset['tags'] == {'comment': 'fix'}
    assert 'include_discussion' not in server.last.url.params


async def test_get_changeset_with_discussion(client, server: FakeServer):
    server.add('GET', '0.6/changeset/5', CHANGESET_5)
    changeset = await client.get_changeset(5, include_discussion=True)
    assert server.last.url.params['include_discussion'] == 'true'
    assert [c['text'] for c in changeset['discussion']] == ['ok']


async def test_query_changesets(client, server: FakeServer):
    server.add('GET', '0.6/changesets', osm_xml(''))
    result = await client.query_changesets(
        bounds=Bounds(min_lon=-1, min_lat=-2, max_lon=1.5, max_lat=2),
        display_name='alice',
        min_closed_date=datetime(2021, 1, 2, 3, 4, 5, tzinfo=UTC),
        max_opened_date=datetime(2021, 2, 1, 1, 0, 0, tzinfo=timezone(timedelta(hours=1))),
        closed_only=True,
        ids=[1, 2],
        limit=10,
    )
    assert result == []
    assert dict(server.last.url.params) == {
        'bbox': '-1,-2,1.5,2',
        'display_name': 'alice',
        'time': '2021-01-02 03:04:05 UTC,2021-02-01 00:00:00 UTC',
        'closed': 'true',
        'changesets': '1,2',
        'limit': '10',
    }


async def test_query_changesets_user_open(client, server: FakeServer):
    server.add('GET', '0.6/changesets', CHANGESET_5)
    result = await client.query_changesets(user_id=2, open_only=True)
    assert [c['id'] for c in result] == [5]
    assert dict(server.last.url.params) == {'user': '2', 'open': 'true'}


@pytest.mark.parametrize(
    'kwargs',
    [
        {'user_id': 1, 'display_name': 'alice'},
        {'open_only': True, 'closed_only': True},
        {'max_opened_date': datetime(2021, 1, 1, tzinfo=UTC)},
        {'bounds': Bounds(min_lon=0, min_lat=1, max_lon=1, max_lat=0)},
        {'limit': 0},
    ],
)
async def test_query_changesets_invalid(client, server: FakeServer, kwargs):
    with pytest.raises(InvalidArgumentError):
        await client.query_changesets(**kwargs)
    assert not server.requests


async def test_get_changeset_download(client, server: FakeServer):
    server.add(
        'GET',
        '0.6/changeset/5/download',
        b'<osmChange version="0.6">'
        b'<create><node id="1" version="1" changeset="5" lat="0" lon="0"/></create>'
        b'<modify><way id="2" version="3" changeset="5"><nd ref="1"/></way></modify>'
        b'</osmChange>',
    )
    osmchange = await client.get_changeset_download(5)
    assert [e['id'] for e in osmchange['create']] == [1]
    assert [e['id'] for e in osmchange['modify']] == [2]
    assert osmchange['delete'] == []
