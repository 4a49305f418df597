"""Shared test fixtures."""

from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from src.main import app
from src.om_account.api.dependencies import get_account_store
from src.om_account.domain.models import AccountFlags


@pytest.fixture
def account_store() -> AsyncMock:
    """Mock account state store; every account starts with no flags set."""
    store = AsyncMock()
    store.is_market_expired.return_value = False
    store.get_flags.side_effect = lambda market_id, account: AccountFlags(
        market_id, account.lower()
    )
    return store


@pytest.fixture
async def client(account_store: AsyncMock) -> AsyncClient:
    """Async HTTP client for testing FastAPI endpoints without Redis."""
    app.dependency_overrides[get_account_store] = lambda: account_store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
