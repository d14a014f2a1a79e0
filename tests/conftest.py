import os
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

os.environ["LOG_LEVEL"] = "DEBUG"

from src.config import Settings, get_settings
from src.main import app


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        log_level="DEBUG",
        max_transcript_length=120,
    )


@pytest.fixture
async def client(test_settings: Settings) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides[get_settings] = lambda: test_settings

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
