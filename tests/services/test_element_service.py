import pytest

from osmclient.exceptions import APIError, InvalidArgumentError
from osmclient.lib.xmltodict import XMLToDict
from tests.utils.fake_server import FakeServer


def _node(**kwargs):
    return {'type': 'node', 'tags': {'amenity': 'bench'}, 'lat': 51.5, 'lon': -0.1, **kwargs}


async def test_create_element(auth_client, server: FakeServer):
    server.add('PUT', '0.6/node/create', '1001')
    node = _node()
    assert await auth_client.create_element(42, node) == 1001
    assert node['changeset_id'] == 42

    sent = XMLToDict.parse(server.last.content)['osm']['node'][0]
    assert sent['@changeset'] == 42
    assert sent['@lat'] == 51.5
    assert '@id' not in sent
    assert '@version' not in sent


async def test_update_element(auth_client, server: FakeServer):
    server.add('PUT', '0.6/node/1001', '2')
    node = _node(id=1001, version=1)
    assert await auth_client.update_element(42, node) == 2

    sent = XMLToDict.parse(server.last.content)['osm']['node'][0]
    assert sent['@id'] == 1001
    assert sent['@version'] == 1
    assert sent['@changeset'] == 42


async def test_update_complete_way(auth_client, server: FakeServer):
    server.add('PUT', '0.6/way/10', '4')
    way = {
        'type': 'way',
        'id': 10,
        'version': 3,
        'tags': {},
        'nodes': [_node(id=1, version=1), _node(id=2, version=1)],
    }
    assert await auth_client.update_element(42, way) == 4

    sent = XMLToDict.parse(server.last.content)['osm']['way'][0]
    assert [nd['@ref'] for nd in sent['nd']] == [1, 2]


async def test_update_element_conflict(auth_client, server: FakeServer):
    server.add('PUT', '0.6/node/1001', 'Version mismatch: Provided 1, server had: 2', status_code=409)
    with pytest.raises(APIError) as exc_info:
        await auth_client.update_element(42, _node(id=1001, version=1))
    assert exc_info.value.status_code == 409


async def test_delete_element(auth_client, server: FakeServer):
    server.add('DELETE', '0.6/node/1001', '3')
    assert await auth_client.delete_element(42, _node(id=1001, version=2)) == 3
    assert server.last.method == 'DELETE'
    assert XMLToDict.parse(server.last.content)['osm']['node'][0]['@version'] == 2


@pytest.mark.parametrize('node', [_node(id=1001), _node(version=1), _node(id=1001, version=None)])
async def test_update_delete_without_version(auth_client, server: FakeServer, node):
    with pytest.raises(InvalidArgumentError):
        await auth_client.update_element(42, node)
    with pytest.raises(InvalidArgumentError):
        await auth_client.delete_element(42, node)
    assert not server.requests


async def test_create_element_requires_auth(client, server: FakeServer):
    with pytest.raises(InvalidArgumentError):
        await client.create_element(42, _node())
    assert not server.requests


async def test_create_element_bad_changeset(auth_client, server: FakeServer):
    with pytest.raises(InvalidArgumentError):
        await auth_client.create_element(0, _node())
    assert not server.requests
