"""Pytest fixtures for testing"""

import pytest
from datetime import date
from decimal import Decimal
from fastapi.testclient import TestClient
from limit_gateway.api.main import create_app
from limit_gateway.domain.models import LimitRecord, LimitType, SpendingRecord


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def established_limit() -> LimitRecord:
    """Established account on the full daily limit"""
    return LimitRecord(
        daily_limit=Decimal("1000"),
        limit_type=LimitType.ESTABLISHED_ACCOUNT,
        account_age_days=30,
    )


@pytest.fixture
def new_account_limit() -> LimitRecord:
    """Three-day-old account still on the probation limit"""
    return LimitRecord(
        daily_limit=Decimal("500"),
        limit_type=LimitType.NEW_ACCOUNT,
        account_age_days=3,
    )


@pytest.fixture
def light_spending() -> SpendingRecord:
    """A couple of small purchases today"""
    return SpendingRecord(
        total_spent=Decimal("100"),
        transaction_count=2,
        spending_date=date.today(),
    )
