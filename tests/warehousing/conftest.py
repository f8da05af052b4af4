import pytest


@pytest.fixture(scope="session")
def _warehousing_domain():
    """The warehousing domain, initialized once at session start."""
    from warehousing.domain import warehousing

    return warehousing


@pytest.fixture(scope="session", autouse=True)
def setup_db(_warehousing_domain):
    from warehousing.utils.db import drop_db, setup_db

    setup_db(_warehousing_domain)

    yield

    drop_db(_warehousing_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_warehousing_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _warehousing_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    for _, broker in current_domain.brokers.items():
        broker._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


@pytest.fixture()
def sku_unique_per_warehouse(monkeypatch):
    """Switch SKU uniqueness from global to per-warehouse for one test."""
    monkeypatch.setenv("SKU_UNIQUENESS", "warehouse")


@pytest.fixture(autouse=True)
def _default_sku_scope(monkeypatch):
    monkeypatch.delenv("SKU_UNIQUENESS", raising=False)
