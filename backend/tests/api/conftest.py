"""API test infrastructure: async httpx client against the ASGI app."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture
async def app():
    from app.core.rate_limit import simulation_limiter
    from app.main import create_app

    application = create_app()

    # Reset rate limiter between tests
    simulation_limiter.reset()

    yield application

    simulation_limiter.reset()


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
