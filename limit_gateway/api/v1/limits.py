"""Daily spending limit endpoints"""

import time
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request

from limit_gateway.api.v1.schemas import (
    LimitStatusResponse,
    LimitTierSchema,
    LimitTiersResponse,
    TransactionCheckRequest,
    TransactionCheckResponse,
)
from limit_gateway.api.dependencies import get_limit_policy, get_limit_tiers, get_provider_client, get_request_id
from limit_gateway.infrastructure.clients.provider import ProviderClient
from limit_gateway.domain.exceptions import DataProviderError, InvalidLimitError, InvalidTransactionAmountError
from limit_gateway.domain.models import LimitTier, Unavailable
from limit_gateway.domain.policy import LimitPolicy
from limit_gateway.domain.tiers import select_tier
from limit_gateway.domain.transactions import check_transaction
from limit_gateway.services.status_loader import fetch_records, load_limit_status
from limit_gateway.infrastructure.observability.metrics import (
    invalid_limit_counter,
    provider_fetch_failures_counter,
    record_evaluation,
    record_transaction_check,
)
from limit_gateway.infrastructure.observability.logging import log_evaluation, log_transaction_check

router = APIRouter()


@router.get("/limits/status", response_model=LimitStatusResponse)
async def get_limit_status(
    request: Request,
    user_id: str = Query(..., min_length=1, description="User identifier"),
    client: ProviderClient = Depends(get_provider_client),
    policy: LimitPolicy = Depends(get_limit_policy),
):
    """
    Current daily limit status for a user.

    Flow:
    1. Fetch limit and spending records concurrently from the data provider
    2. Evaluate remaining amount, usage, tier and upgrade eligibility
    3. Return the ready status, or an error when it cannot be computed
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        result = await load_limit_status(client, user_id, policy)
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    if isinstance(result, Unavailable):
        error = result.error
        if isinstance(error, InvalidLimitError):
            logging.warning(f"Invalid limit: {error}", extra={"request_id": request_id})
            raise HTTPException(status_code=422, detail=str(error))
        logging.error(f"Data provider error: {error}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Spending data unavailable")

    status = result.status

    duration_ms = (time.time() - start_time) * 1000
    record_evaluation(status)
    log_evaluation(request_id, user_id, status, duration_ms)

    return LimitStatusResponse(
        user_id=user_id,
        daily_limit=float(result.limit.daily_limit),
        total_spent=float(result.spending.total_spent),
        remaining=float(status.remaining),
        usage_percentage=float(status.usage_percentage),
        status_tier=status.status_tier.value,
        approaching_limit=status.approaching_limit,
        limit_type=result.limit.limit_type.value,
        is_new_account=status.is_new_account,
        account_age_days=result.limit.account_age_days,
        transaction_count=result.spending.transaction_count,
        upgrade_eligible=status.upgrade_eligible,
        days_until_upgrade=status.days_until_upgrade,
        upgraded_daily_limit=float(policy.upgraded_daily_limit) if status.upgrade_eligible else None,
    )


@router.post("/limits/check", response_model=TransactionCheckResponse)
async def check_limit(
    request_body: TransactionCheckRequest,
    request: Request,
    client: ProviderClient = Depends(get_provider_client),
):
    """
    Check whether a prospective transaction fits in today's remaining limit.

    Does not record the transaction; the data provider owns the running totals.
    """
    request_id = get_request_id(request)

    try:
        limit, spending = await fetch_records(client, request_body.user_id)
        check = check_transaction(limit, spending, request_body.amount)

    except DataProviderError as e:
        provider_fetch_failures_counter.inc()
        logging.error(f"Data provider error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Spending data unavailable")

    except InvalidLimitError as e:
        invalid_limit_counter.inc()
        logging.warning(f"Invalid limit: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except InvalidTransactionAmountError as e:
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    record_transaction_check(check.allowed)
    log_transaction_check(request_id, request_body.user_id, check.allowed, float(check.transaction_amount))

    return TransactionCheckResponse(
        allowed=check.allowed,
        daily_limit=float(check.daily_limit),
        current_spent=float(check.current_spent),
        transaction_amount=float(check.transaction_amount),
        new_total=float(check.new_total),
        remaining_limit=float(check.remaining_limit),
    )


def _tier_schema(tier: LimitTier) -> LimitTierSchema:
    return LimitTierSchema(
        limit_type=tier.limit_type.value,
        daily_limit=float(tier.daily_limit),
        min_account_age_days=tier.min_account_age_days,
    )


@router.get("/limits/tiers", response_model=LimitTiersResponse)
def get_tiers(
    account_age_days: Optional[int] = Query(None, ge=0, description="Resolve the tier for this account age"),
    tiers: List[LimitTier] = Depends(get_limit_tiers),
):
    """List active limit tiers, optionally resolving the one for an account age"""
    resolved = None
    if account_age_days is not None:
        try:
            resolved = _tier_schema(select_tier(account_age_days, tiers))
        except InvalidLimitError as e:
            raise HTTPException(status_code=422, detail=str(e))

    return LimitTiersResponse(
        tiers=[_tier_schema(t) for t in tiers if t.is_active],
        resolved=resolved,
    )
