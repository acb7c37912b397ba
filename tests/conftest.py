"""Pytest configuration and fixtures."""

from typing import AsyncGenerator

import fakeredis
import fakeredis.aioredis
import pytest
from httpx import ASGITransport, AsyncClient

from config import Config
from shortlinks.common.logging_config import setup_logging
from shortlinks.idgen import IdGenerator
from shortlinks.records import RedirectManager
from shortlinks.store.redis_store import RedisStore
from web_app import create_app


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
async def redis_client():
    """Fake async Redis client with its own server, flushed after the test."""
    client = fakeredis.aioredis.FakeRedis(server=fakeredis.FakeServer(), decode_responses=True)
    yield client
    await client.flushall()


@pytest.fixture
async def store(redis_client, logger) -> AsyncGenerator[RedisStore, None]:
    """Create store backed by the fake client."""
    yield RedisStore(client=redis_client, logger=logger)


@pytest.fixture
def generator():
    """Create identifier generator."""
    return IdGenerator(length=10)


@pytest.fixture
def manager(store, generator, logger) -> RedirectManager:
    """Manager in open mode: no password, listing disabled."""
    return RedirectManager(store=store, generator=generator, logger=logger)


@pytest.fixture
def protected_manager(store, generator, logger) -> RedirectManager:
    """Manager requiring a global password and an admin password."""
    return RedirectManager(
        store=store,
        generator=generator,
        password="s3cret",
        admin_password="admin-s3cret",
        logger=logger,
    )


def build_client(store, manager, **config_values) -> AsyncClient:
    config = Config(server_hostname="http://testserver", **config_values)
    app = create_app(store_instance=store, manager_instance=manager, config=config)
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver")


@pytest.fixture
async def client(store, manager):
    """Test client for an open server."""
    async with build_client(store, manager) as ac:
        yield ac


@pytest.fixture
async def protected_client(store, protected_manager):
    """Test client for a password protected server."""
    async with build_client(
        store,
        protected_manager,
        password="s3cret",
        admin_password="admin-s3cret",
    ) as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
