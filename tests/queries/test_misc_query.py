import pytest

from osmclient.exceptions import DataIntegrityError, InvalidArgumentError
from osmclient.models.bounds import Bounds
from tests.utils.fake_server import FakeServer, osm_xml

BOUNDS = Bounds(min_lon=-77.04, min_lat=38.89, max_lon=-77.03, max_lat=38.9)


async def test_get_versions(client, server: FakeServer):
    server.add('GET', 'versions', osm_xml('<api><version>0.6</version></api>'))
    assert await client.get_versions() == ['0.6']


async def test_get_capabilities(client, server: FakeServer):
    server.add(
        'GET',
        '0.6/capabilities',
        osm_xml('<api><version minimum="0.6" maximum="0.6"/><waynodes maximum="2000"/><status database="online" api="online" gpx="online"/></api>'),
    )
    capabilities = await client.get_capabilities()
    assert capabilities['version_maximum'] == '0.6'
    assert capabilities['waynodes_maximum'] == 2000
    assert capabilities['api_status'] == 'online'


async def test_get_capabilities_invalid(client, server: FakeServer):
    server.add('GET', '0.6/capabilities', b'<html>maintenance</html>')
    with pytest.raises(DataIntegrityError):
        await client.get_capabilities()


async def test_get_map(client, server: FakeServer):
    server.add(
        'GET',
        '0.6/map',
        osm_xml(
            '<bounds minlat="38.89" minlon="-77.04" maxlat="38.9" maxlon="-77.03"/>'
            '<node id="1" lat="38.895" lon="-77.035"/><way id="2"><nd ref="1"/></way>'
        ),
    )
    result = await client.get_map(BOUNDS)
    assert result['bounds'] == BOUNDS
    assert [n['id'] for n in result['nodes']] == [1]
    assert [w['id'] for w in result['ways']] == [2]
    assert server.last.url.params['bbox'] == '-77.04,38.89,-77.03,38.9'


@pytest.mark.parametrize(
    'bounds',
    [
        Bounds(min_lon=-77.04, min_lat=38.9, max_lon=-77.03, max_lat=38.89),
        Bounds(min_lon=-181, min_lat=38.89, max_lon=-77.03, max_lat=38.9),
        Bounds(min_lon=-77.04, min_lat=38.89, max_lon=-77.03),
        Bounds(min_lon=float('nan'), min_lat=38.89, max_lon=-77.03, max_lat=38.9),
    ],
)
async def test_get_map_invalid_bounds(client, server: FakeServer, bounds):
    with pytest.raises(InvalidArgumentError):
        await client.get_map(bounds)
    assert not server.requests


async def test_get_trackpoints(client, server: FakeServer):
    server.add('GET', '0.6/trackpoints', b'<gpx version="1.0"/>')
    assert await client.get_trackpoints(BOUNDS, page=2) == b'<gpx version="1.0"/>'
    assert server.last.url.params['page'] == '2'


async def test_get_trace(client, server: FakeServer):
    server.add(
        'GET',
        '0.6/gpx/7/details',
        osm_xml('<gpx_file id="7" name="run.gpx" visibility="public" pending="false"><description>Run</description><tag>run</tag></gpx_file>'),
    )
    trace = await client.get_trace(7)
    assert trace['name'] == 'run.gpx'
    assert trace['tags'] == ['run']


async def test_get_trace_data(client, server: FakeServer):
    server.add(
        'GET',
        '0.6/gpx/7/data',
        b'<gpx/>',
        headers={'Content-Type': 'application/gpx+xml', 'Content-Disposition': 'attachment; filename="7.gpx"'},
    )
    data = await client.get_trace_data(7)
    assert data.file_name == '7.gpx'
    assert data.content_type == 'application/gpx+xml'
    assert data.content == b'<gpx/>'


async def test_get_traces(auth_client, server: FakeServer):
    server.add('GET', '0.6/user/gpx_files', osm_xml('<gpx_file id="1" name="a.gpx"/><gpx_file id="2" name="b.gpx"/>'))
    traces = await auth_client.get_traces()
    assert [t['id'] for t in traces] == [1, 2]
