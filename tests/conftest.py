"""Pytest configuration and fixtures."""

from typing import AsyncGenerator, Iterable

import pytest
from httpx import ASGITransport, AsyncClient

from shortlink.config import Config
from shortlink.service import ShortLinkService
from shortlink.shortcode import ShortCodeGenerator
from shortlink.store.memory import MemoryLinkStore
from shortlink.common.logging_config import setup_logging
from shortlink_web import create_app


class ScriptedGenerator(ShortCodeGenerator):
    """Generator that hands out a fixed sequence of codes, then repeats the last one."""

    def __init__(self, codes: Iterable[str]):
        super().__init__(default_length=5)
        self.codes = list(codes)
        self.calls = 0

    def generate_random(self, length=None) -> str:
        index = min(self.calls, len(self.codes) - 1)
        self.calls += 1
        return self.codes[index]


def make_config(**overrides) -> Config:
    """Config that ignores the developer's .env file."""
    values = {
        "storage_backend": "memory",
        "base_url": "http://testserver",
        "path_prefix": "",
        "redirect_status": None,
    }
    values.update(overrides)
    return Config(_env_file=None, **values)


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def store(logger) -> MemoryLinkStore:
    return MemoryLinkStore(logger=logger)


@pytest.fixture
def short_code_generator():
    """Create short code generator."""
    return ShortCodeGenerator(default_length=5)


@pytest.fixture
def service(store, short_code_generator, logger) -> ShortLinkService:
    """Create service instance over the in-memory store."""
    return ShortLinkService(
        store=store,
        cache=None,
        short_code_generator=short_code_generator,
        logger=logger,
    )


@pytest.fixture
def config() -> Config:
    return make_config()


@pytest.fixture
def app(service, config, logger):
    """Create test FastAPI app."""
    return create_app(service_instance=service, config=config, logger=logger)


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
