"""Test configuration and fixtures."""

import pytest
import pytest_asyncio
from aiohttp.test_utils import TestServer

from registry_images.core.auth import encode_credential
from registry_images.core.types import RegistryConfig
from registry_images.settings import Settings
from tests.helpers import FakeIssuer, FakeRegistry


@pytest.fixture
def fake_registry():
    """Empty fake registry; tests fill in repositories and tags."""
    return FakeRegistry()


@pytest_asyncio.fixture
async def registry_server(fake_registry):
    """Serve the fake registry on a local port."""
    server = TestServer(fake_registry.make_app())
    await server.start_server()
    yield server
    await server.close()


@pytest.fixture
def registry_config(registry_server):
    """Registry configuration pointing at the fake registry."""
    return RegistryConfig(url=str(registry_server.make_url("/")), timeout=10)


@pytest.fixture
def credential():
    return encode_credential("secret")


@pytest.fixture
def issuer():
    return FakeIssuer(password="secret")


@pytest.fixture
def settings():
    return Settings(
        registry_host="registry.example.com",
        api_token="token",
        account_id="acct123",
        timeout=10,
        concurrency=2,
    )
