"""Integration test fixtures — require a running MongoDB."""

from __future__ import annotations

import pytest
import pytest_asyncio
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from giveth_testkit.seed import seed_data


@pytest_asyncio.fixture
async def mongo(settings):
    """Default database of ``mongodb_url``; skips when the server is down."""
    client = AsyncMongoClient(
        settings.mongodb_url,
        serverSelectionTimeoutMS=settings.mongodb_server_selection_timeout_ms,
    )
    try:
        await client.admin.command("ping")
    except PyMongoError:
        await client.close()
        pytest.skip(f"MongoDB not available at {settings.mongodb_url}")
    yield client.get_default_database()
    await client.close()


@pytest_asyncio.fixture
async def seeded_db(mongo, settings):
    """Database restored from the shipped fixture snapshot."""
    await seed_data(settings)
    return mongo
