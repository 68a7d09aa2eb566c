"""API test fixtures: FastAPI test client over a fixture-built ledger.

Invariants:
    - Every test gets a fresh ledger with a deterministic clock
    - The process-wide ledger_handle is restored after each test

Design Decisions:
    - ASGITransport skips lifespan, so the fixture installs the ledger itself
"""

import pytest
from httpx import ASGITransport, AsyncClient

from pulse_ledger.infrastructure import ledger_handle as handle_module
from pulse_ledger.infrastructure.ledger_handle import init_ledger
from pulse_ledger.main import app


@pytest.fixture
def shared_ledger(step_clock):
    original = handle_module.ledger_handle
    ledger = init_ledger(clock=step_clock)
    yield ledger
    handle_module.ledger_handle = original


@pytest.fixture
async def client(shared_ledger):
    """FastAPI test client bound to the fixture ledger."""
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
