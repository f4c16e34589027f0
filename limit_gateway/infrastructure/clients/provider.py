"""Spending data provider HTTP client for fetching limit and spending records"""

import httpx
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict
from limit_gateway.domain.models import LimitRecord, LimitType, SpendingRecord
from limit_gateway.domain.exceptions import DataProviderError
from limit_gateway.infrastructure.observability.metrics import provider_latency_histogram
from limit_gateway.utils.date_utils import account_age_in_days
from limit_gateway.config import settings


def _parse_amount(value: Any, field: str, allow_negative: bool = True) -> Decimal:
    # str() keeps JSON floats from picking up binary drift
    amount = Decimal(str(value))
    if not amount.is_finite():
        raise ValueError(f"{field} is not a finite amount: {value}")
    if not allow_negative and amount < 0:
        raise ValueError(f"{field} must not be negative: {value}")
    return amount


def _parse_count(value: Any, field: str) -> int:
    count = int(value)
    if count < 0:
        raise ValueError(f"{field} must not be negative: {value}")
    return count


class ProviderClient:
    """Client for the external spending data provider (RPC-style JSON API)"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        api_key: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.provider_api_base
        self.timeout = timeout or settings.http_timeout_seconds
        self.api_key = api_key or settings.provider_api_key
        self.transport = transport

    async def get_limit_record(self, user_id: str) -> LimitRecord:
        """
        Fetch the daily limit assigned to a user.

        Raises:
            DataProviderError: On timeout, HTTP errors, or invalid response
        """
        with provider_latency_histogram.labels(record="limit").time():
            data = await self._call("get_user_spending_limit", {"p_user_id": user_id})

        try:
            created_at = data.get("account_created_at")
            account_created_at = datetime.fromisoformat(created_at) if created_at else None

            if data.get("account_age_days") is not None:
                account_age_days = _parse_count(data["account_age_days"], "account_age_days")
            elif account_created_at is not None:
                account_age_days = account_age_in_days(account_created_at)
            else:
                raise KeyError("account_age_days")

            return LimitRecord(
                daily_limit=_parse_amount(data["daily_limit"], "daily_limit"),
                limit_type=LimitType(data["limit_type"]),
                account_age_days=account_age_days,
                account_created_at=account_created_at,
            )
        except (KeyError, ValueError, TypeError, ArithmeticError) as e:
            raise DataProviderError(f"Invalid limit data from provider: {e}") from e

    async def get_spending_record(self, user_id: str) -> SpendingRecord:
        """
        Fetch today's cumulative spending for a user.

        Raises:
            DataProviderError: On timeout, HTTP errors, or invalid response
        """
        with provider_latency_histogram.labels(record="spending").time():
            data = await self._call("get_user_daily_spending", {"p_user_id": user_id})

        try:
            spending_date = data.get("spending_date")
            return SpendingRecord(
                total_spent=_parse_amount(data["total_spent"], "total_spent", allow_negative=False),
                transaction_count=_parse_count(data["transaction_count"], "transaction_count"),
                spending_date=date.fromisoformat(spending_date) if spending_date else None,
            )
        except (KeyError, ValueError, TypeError, ArithmeticError) as e:
            raise DataProviderError(f"Invalid spending data from provider: {e}") from e

    async def _call(self, function: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        headers = {"apikey": self.api_key} if self.api_key else {}

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.post(
                    f"{self.base_url}/rpc/{function}",
                    json=payload,
                    headers=headers,
                )
                response.raise_for_status()
                data = response.json()
            except httpx.TimeoutException as e:
                raise DataProviderError(f"Provider timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise DataProviderError(f"Provider error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise DataProviderError(f"Provider unreachable: {e}") from e
            except ValueError as e:
                raise DataProviderError(f"Provider returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise DataProviderError(f"Unexpected provider payload for {function}")
        if not data.get("success", False):
            raise DataProviderError(data.get("error") or f"{function} failed")

        return data
