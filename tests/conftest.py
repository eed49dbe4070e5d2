from collections.abc import Collection

import httpx
import pytest
import pytest_asyncio

from osmclient.client import OSMClient
from osmclient.lib.auth_strategy import BasicAuth
from tests.utils.fake_server import API_URL, FakeServer


def pytest_collection_modifyitems(config: pytest.Config, items: Collection[pytest.Item]):
    # run all tests in the session in the same event loop
    # https://pytest-asyncio.readthedocs.io/en/latest/how-to-guides/run_session_tests_in_same_loop.html
    session_scope_marker = pytest.mark.asyncio(loop_scope='session')
    for item in items:
        if pytest_asyncio.is_async_test(item):
            item.add_marker(session_scope_marker, append=False)


@pytest.fixture
def server() -> FakeServer:
    return FakeServer()


@pytest.fixture
def http_client(server: FakeServer) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(server))


@pytest.fixture
def client(http_client: httpx.AsyncClient) -> OSMClient:
    return OSMClient(API_URL, http_client=http_client)


@pytest.fixture
def auth_client(http_client: httpx.AsyncClient) -> OSMClient:
    return OSMClient(API_URL, BasicAuth('user1', 'password1'), http_client=http_client)
