"""Pytest fixtures for testing"""

import pytest
from datetime import date, timedelta
from decimal import Decimal
from fastapi.testclient import TestClient

from claimcraft_engine.api.main import create_app
from claimcraft_engine.domain.models import Claim, InvoiceRecord, Party, PartyType, SolvencyStatus
from claimcraft_engine.domain.statutory import StatutoryConfig

# All date arithmetic in the tests runs against this fixed "today"
TODAY = date(2025, 6, 1)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def config() -> StatutoryConfig:
    """Default statutory constants: 4.75% base, 8% uplift, 30-day terms"""
    return StatutoryConfig()


@pytest.fixture
def business() -> Party:
    return Party(
        type=PartyType.BUSINESS,
        name="Acme Supplies Ltd",
        address="1 High Street",
        city="London",
        county="Greater London",
        postcode="SW1A 1AA",
        solvency_status=SolvencyStatus.ACTIVE,
    )


@pytest.fixture
def sole_trader() -> Party:
    return Party(type=PartyType.SOLE_TRADER, name="Jane Doe t/a Doe Plumbing", postcode="M1 1AE")


@pytest.fixture
def individual() -> Party:
    return Party(type=PartyType.INDIVIDUAL, name="John Smith", postcode="B33 8TH")


@pytest.fixture
def b2b_claim(business: Party) -> Claim:
    """£2400 invoice issued 45 days ago, due 15 days ago"""
    defendant = Party(type=PartyType.BUSINESS, name="Widgets Ltd", postcode="CR2 6XH")
    return Claim(
        id="claim-1",
        claimant=business,
        defendant=defendant,
        invoice=InvoiceRecord(
            invoice_number="INV-001",
            total_amount=Decimal("2400"),
            date_issued=TODAY - timedelta(days=45),
            due_date=TODAY - timedelta(days=15),
        ),
    )


@pytest.fixture
def client() -> TestClient:
    """FastAPI test client"""
    return TestClient(create_app())
