"""Fetch-then-evaluate orchestration for the limit status"""

import asyncio
import logging

from limit_gateway.domain.evaluator import evaluate
from limit_gateway.domain.exceptions import DataProviderError, InvalidLimitError
from limit_gateway.domain.models import LimitRecord, LimitStatusResult, Ready, SpendingRecord, Unavailable
from limit_gateway.domain.policy import DEFAULT_POLICY, LimitPolicy
from limit_gateway.infrastructure.clients.provider import ProviderClient
from limit_gateway.infrastructure.observability.metrics import invalid_limit_counter, provider_fetch_failures_counter


async def fetch_records(client: ProviderClient, user_id: str) -> tuple[LimitRecord, SpendingRecord]:
    """
    Fetch the limit and spending records concurrently.

    Both requests are started together and joined; the first failure is
    raised and no partial pair is ever returned.

    Raises:
        DataProviderError: either fetch failed
    """
    limit, spending = await asyncio.gather(
        client.get_limit_record(user_id),
        client.get_spending_record(user_id),
    )
    return limit, spending


async def load_limit_status(
    client: ProviderClient,
    user_id: str,
    policy: LimitPolicy = DEFAULT_POLICY,
) -> LimitStatusResult:
    """
    Fetch both records and evaluate them.

    Returns Ready on joint success. A provider failure or an invalid limit
    yields Unavailable carrying the error; evaluation is skipped.
    """
    try:
        limit, spending = await fetch_records(client, user_id)
    except DataProviderError as e:
        provider_fetch_failures_counter.inc()
        logging.warning("Spending data unavailable", extra={"user_id": user_id, "error": str(e)})
        return Unavailable(error=e)

    try:
        status = evaluate(limit, spending, policy)
    except InvalidLimitError as e:
        invalid_limit_counter.inc()
        logging.warning("Invalid daily limit", extra={"user_id": user_id, "error": str(e)})
        return Unavailable(error=e)

    return Ready(limit=limit, spending=spending, status=status)
