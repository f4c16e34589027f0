"""Unit tests for fetch-then-evaluate orchestration"""

import asyncio
import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock
from limit_gateway.domain.models import (
    LimitRecord,
    LimitType,
    Loading,
    Ready,
    SpendingRecord,
    StatusTier,
    Unavailable,
)
from limit_gateway.domain.exceptions import DataProviderError, InvalidLimitError
from limit_gateway.services.status_loader import fetch_records, load_limit_status


def make_provider(limit=None, spending=None) -> MagicMock:
    provider = MagicMock()
    provider.get_limit_record = AsyncMock(return_value=limit)
    provider.get_spending_record = AsyncMock(return_value=spending)
    return provider


async def test_load_limit_status_ready(established_limit: LimitRecord):
    """Test joint success evaluates and returns Ready"""
    spending = SpendingRecord(Decimal("950"), transaction_count=9)
    provider = make_provider(established_limit, spending)

    result = await load_limit_status(provider, "user_1")

    assert isinstance(result, Ready)
    assert result.limit is established_limit
    assert result.spending is spending
    assert result.status.status_tier == StatusTier.CRITICAL
    provider.get_limit_record.assert_awaited_once_with("user_1")
    provider.get_spending_record.assert_awaited_once_with("user_1")


async def test_load_limit_status_limit_fetch_fails(light_spending: SpendingRecord):
    """Test a failed limit fetch yields Unavailable, never a partial evaluation"""
    provider = make_provider(spending=light_spending)
    provider.get_limit_record.side_effect = DataProviderError("timeout")

    result = await load_limit_status(provider, "user_1")

    assert isinstance(result, Unavailable)
    assert isinstance(result.error, DataProviderError)


async def test_load_limit_status_spending_fetch_fails(established_limit: LimitRecord):
    provider = make_provider(limit=established_limit)
    provider.get_spending_record.side_effect = DataProviderError("500")

    result = await load_limit_status(provider, "user_1")

    assert isinstance(result, Unavailable)
    assert isinstance(result.error, DataProviderError)


async def test_load_limit_status_invalid_limit(light_spending: SpendingRecord):
    """Test a zero limit yields Unavailable instead of a malformed percentage"""
    zero_limit = LimitRecord(Decimal("0"), LimitType.NEW_ACCOUNT, account_age_days=1)
    provider = make_provider(zero_limit, light_spending)

    result = await load_limit_status(provider, "user_1")

    assert isinstance(result, Unavailable)
    assert isinstance(result.error, InvalidLimitError)


async def test_fetch_records_runs_concurrently(established_limit: LimitRecord, light_spending: SpendingRecord):
    """Test both fetches are in flight before either completes"""
    started = []
    both_started = asyncio.Event()

    async def fetch(name, value):
        started.append(name)
        if len(started) == 2:
            both_started.set()
        await asyncio.wait_for(both_started.wait(), timeout=1.0)
        return value

    provider = MagicMock()
    provider.get_limit_record = lambda user_id: fetch("limit", established_limit)
    provider.get_spending_record = lambda user_id: fetch("spending", light_spending)

    limit, spending = await fetch_records(provider, "user_1")

    assert limit is established_limit
    assert spending is light_spending
    assert sorted(started) == ["limit", "spending"]


def test_loading_variant_carries_no_data():
    """Test the placeholder variant is distinct from Ready and Unavailable"""
    loading = Loading()

    assert loading == Loading()
    assert not isinstance(loading, (Ready, Unavailable))
