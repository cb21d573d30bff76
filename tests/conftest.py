"""
Shared pytest fixtures for the Alfresco MCP server tests.

Outbound HTTP is mocked with respx: every request the client makes must hit
a route registered on the `alfresco_api` router, anything else fails the
test.
"""

import pytest
import respx

from core.alfresco_client import AlfrescoClient
from tests.payloads import HOST, PASSWORD, USERNAME


@pytest.fixture
def client() -> AlfrescoClient:
    return AlfrescoClient(HOST, USERNAME, PASSWORD)


@pytest.fixture
def alfresco_api():
    """respx router scoped to the fake Alfresco host."""
    with respx.mock(base_url=HOST, assert_all_called=False) as router:
        yield router


@pytest.fixture
def alfresco_env(monkeypatch) -> dict[str, str]:
    """A complete, valid set of ALFRESCO_* variables in os.environ."""
    env = {
        "ALFRESCO_HOST": HOST,
        "ALFRESCO_USERNAME": USERNAME,
        "ALFRESCO_PASSWORD": PASSWORD,
    }
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    return env
