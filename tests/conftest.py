"""
conftest.py - Shared pytest fixtures for Demo Insights tests

Provides common fixtures used across unit and conformance tests:
- A controllable clock
- Settings with default and strict customer lookup
- Ledgers (empty and seeded) and the sample demo catalog
"""

import pytest

from demo_insights.catalog import DemoCatalog
from demo_insights.config import LedgerConfig, Settings
from demo_insights.ledger import CustomerLedger
from demo_insights.ledger.seed import sample_catalog, sample_customers
from demo_insights.metrics import MetricsCalculator

from tests.support import FakeClock, sequential_ids


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def settings():
    return Settings(ledger=LedgerConfig(strict_customer_lookup=False))


@pytest.fixture
def strict_settings():
    return Settings(ledger=LedgerConfig(strict_customer_lookup=True))


@pytest.fixture
def empty_ledger(settings, clock):
    return CustomerLedger(settings=settings, clock=clock, id_factory=sequential_ids())


@pytest.fixture
def seeded_ledger(settings, clock):
    return CustomerLedger(
        sample_customers(),
        settings=settings,
        clock=clock,
        id_factory=sequential_ids()
    )


@pytest.fixture
def catalog() -> DemoCatalog:
    return sample_catalog()


@pytest.fixture
def calculator() -> MetricsCalculator:
    return MetricsCalculator()
