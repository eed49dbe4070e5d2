import httpx
import pytest

from osmclient.client import OSMClient
from osmclient.exceptions import APIError, DataIntegrityError, InvalidArgumentError
from osmclient.models.element import ElementMember, ElementRef
from tests.utils.fake_server import API_URL, FakeServer, osm_xml

NODE_1 = '<node id="1" visible="true" version="2" changeset="3" lat="1.5" lon="2.5"><tag k="amenity" v="bench"/></node>'


async def test_get_node(client, server: FakeServer):
    server.add('GET', '0.6/node/1', osm_xml(NODE_1))
    node = await client.get_node(1)
    assert node is not None
    assert node['id'] == 1
    assert node['version'] == 2
    assert node['tags'] == {'amenity': 'bench'}
    assert 'Authorization' not in server.last.headers


async def test_get_node_repeated_tag_key(client, server: FakeServer):
    server.add('GET', '0.6/node/1', osm_xml('<node id="1" version="1" lat="0" lon="0"><tag k="a" v="1"/><tag k="a" v="2"/></node>'))
    node = await client.get_node(1)
    assert node is not None
    assert node['tags'] == {'a': '2'}


@pytest.mark.parametrize('status_code', [404, 410])
async def test_get_element_absent(client, server: FakeServer, status_code):
    server.add('GET', '0.6/way/5', 'Gone', status_code=status_code)
    assert await client.get_way(5) is None


async def test_get_element_server_error(client, server: FakeServer):
    server.add('GET', '0.6/relation/5', 'Database offline', status_code=500)
    with pytest.raises(APIError) as exc_info:
        await client.get_relation(5)
    assert exc_info.value.status_code == 500


async def test_get_element_wrong_type_in_response(client, server: FakeServer):
    server.add('GET', '0.6/node/1', osm_xml('<way id="1"/>'))
    with pytest.raises(DataIntegrityError):
        await client.get_node(1)


@pytest.mark.parametrize('id', [0, -1, True])
async def test_get_element_bad_id(client, server: FakeServer, id):
    with pytest.raises(InvalidArgumentError):
        await client.get_node(id)
    assert not server.requests


async def test_get_element_bad_type(client, server: FakeServer):
    with pytest.raises(InvalidArgumentError):
        await client.get_element('area', 1)
    assert not server.requests


async def test_get_element_authenticated(auth_client, server: FakeServer):
    server.add('GET', '0.6/node/1', osm_xml(NODE_1))
    await auth_client.get_node(1)
    assert server.last.headers['Authorization'].startswith('Basic ')


async def test_get_node_history(client, server: FakeServer):
    server.add(
        'GET',
        '0.6/node/1/history',
        osm_xml(
            '<node id="1" version="1" lat="1" lon="2"/>'
            '<node id="1" version="2" lat="1.5" lon="2.5"/>'
            '<node id="1" version="3" visible="false"/>'
        ),
    )
    history = await client.get_node_history(1)
    assert [n['version'] for n in history] == [1, 2, 3]
    assert history[2]['visible'] is False
    assert history[2]['lat'] is None


async def test_get_way_version(client, server: FakeServer):
    server.add('GET', '0.6/way/10/4', osm_xml('<way id="10" version="4"><nd ref="1"/><nd ref="2"/></way>'))
    way = await client.get_way_version(10, 4)
    assert way['nodes'] == [1, 2]


async def test_get_version_missing(client, server: FakeServer):
    with pytest.raises(APIError) as exc_info:
        await client.get_relation_version(10, 4)
    assert exc_info.value.status_code == 404


async def test_get_nodes_chunked(http_client, server: FakeServer):
    def responder(request: httpx.Request) -> httpx.Response:
        ids = request.url.params['nodes'].split(',')
        return httpx.Response(200, content=osm_xml(''.join(f'<node id="{id}" lat="0" lon="0"/>' for id in ids)))

    server.add('GET', '0.6/nodes', responder)
    client = OSMClient(API_URL, http_client=http_client, chunk_size=2)

    nodes = await client.get_nodes([1, 2, 3, 4, 5])
    assert len(server.requests) == 3
    assert sorted(n['id'] for n in nodes) == [1, 2, 3, 4, 5]
    assert sorted(r.url.params['nodes'] for r in server.requests) == ['1,2', '3,4', '5']


async def test_get_nodes_empty(client, server: FakeServer):
    assert await client.get_nodes([]) == []
    assert not server.requests


async def test_get_ways_versions(client, server: FakeServer):
    server.add('GET', '0.6/ways', osm_xml('<way id="1" version="3"/><way id="2" version="7"/>'))
    ways = await client.get_ways({1: 3, 2: None})
    assert [w['id'] for w in ways] == [1, 2]
    assert server.last.url.params['ways'] == '1v3,2'


async def test_get_nodes_subset(client, server: FakeServer):
    server.add('GET', '0.6/nodes', osm_xml('<node id="1" lat="0" lon="0"/>'))
    nodes = await client.get_nodes([1, 2])
    assert [n['id'] for n in nodes] == [1]


async def test_get_nodes_missing(client, server: FakeServer):
    """The server answers 404 for the whole batch when any id does not exist."""
    server.add('GET', '0.6/nodes', 'Not found', status_code=404)
    with pytest.raises(APIError) as exc_info:
        await client.get_nodes([1, 999999999])
    assert exc_info.value.status_code == 404


async def test_get_nodes_chunk_failure(http_client, server: FakeServer):
    def responder(request: httpx.Request) -> httpx.Response:
        if '3' in request.url.params['nodes'].split(','):
            return httpx.Response(500, text='Database offline')
        return httpx.Response(200, content=osm_xml('<node id="1" lat="0" lon="0"/>'))

    server.add('GET', '0.6/nodes', responder)
    client = OSMClient(API_URL, http_client=http_client, chunk_size=2)

    with pytest.raises(APIError) as exc_info:
        await client.get_nodes([1, 2, 3])
    assert exc_info.value.status_code == 500


async def test_get_elements(client, server: FakeServer):
    server.add('GET', '0.6/nodes', osm_xml('<node id="1" lat="0" lon="0"/>'))
    server.add('GET', '0.6/relations', osm_xml('<relation id="7" version="2"/>'))
    elements = await client.get_elements([
        ElementRef('relation', 7, 2),
        ElementRef('node', 1),
    ])
    assert [(e['type'], e['id']) for e in elements] == [('node', 1), ('relation', 7)]
    assert [r.url.path for r in server.requests] == ['/api/0.6/nodes', '/api/0.6/relations']
    assert server.requests[1].url.params['relations'] == '7v2'


async def test_get_complete_way(client, server: FakeServer):
    server.add(
        'GET',
        '0.6/way/10/full',
        osm_xml(
            '<node id="1" lat="0" lon="0"/><node id="2" lat="1" lon="1"/>'
            '<way id="10" version="1"><nd ref="1"/><nd ref="2"/></way>'
        ),
    )
    way = await client.get_complete_way(10)
    assert [n['id'] for n in way['nodes']] == [1, 2]
    assert way['nodes'][1]['lat'] == 1.0


async def test_get_complete_relation(client, server: FakeServer):
    server.add(
        'GET',
        '0.6/relation/20/full',
        osm_xml(
            '<node id="1" lat="0" lon="0"/><node id="2" lat="1" lon="1"/>'
            '<way id="10"><nd ref="1"/><nd ref="2"/></way>'
            '<relation id="21"/>'
            '<relation id="20"><member type="way" ref="10" role="outer"/><member type="relation" ref="21" role=""/></relation>'
        ),
    )
    relation = await client.get_complete_relation(20)
    way = relation['members'][0]['element']
    assert [n['id'] for n in way['nodes']] == [1, 2]
    assert relation['members'][1]['element']['id'] == 21


async def test_get_complete_relation_missing_member(client, server: FakeServer):
    server.add(
        'GET',
        '0.6/relation/20/full',
        osm_xml('<relation id="20"><member type="node" ref="1" role="label"/></relation>'),
    )
    with pytest.raises(DataIntegrityError):
        await client.get_complete_relation(20)


async def test_get_node_relations_and_ways(client, server: FakeServer):
    server.add('GET', '0.6/node/1/relations', osm_xml('<relation id="7"><member type="node" ref="1" role="stop"/></relation>'))
    server.add('GET', '0.6/node/1/ways', osm_xml('<way id="10"><nd ref="1"/></way><way id="11"><nd ref="1"/></way>'))

    relations = await client.get_node_relations(1)
    assert relations[0]['members'] == [ElementMember('node', 1, 'stop')]
    ways = await client.get_node_ways(1)
    assert [w['id'] for w in ways] == [10, 11]
