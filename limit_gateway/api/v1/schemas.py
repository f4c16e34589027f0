"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from decimal import Decimal
from typing import List, Literal, Optional


class LimitStatusResponse(BaseModel):
    """Response for GET /v1/limits/status"""

    state: Literal["ready"] = "ready"
    user_id: str
    daily_limit: float
    total_spent: float
    remaining: float
    usage_percentage: float  # unclamped, may exceed 100
    status_tier: Literal["ok", "warning", "critical"]
    approaching_limit: bool
    limit_type: str
    is_new_account: bool
    account_age_days: int
    transaction_count: int
    upgrade_eligible: bool
    days_until_upgrade: int
    upgraded_daily_limit: Optional[float] = None  # only set when upgrade_eligible


class TransactionCheckRequest(BaseModel):
    """Request body for POST /v1/limits/check"""

    user_id: str = Field(..., min_length=1, description="User identifier")
    amount: Decimal = Field(..., gt=0, description="Prospective transaction amount")


class TransactionCheckResponse(BaseModel):
    """Response for POST /v1/limits/check"""

    allowed: bool
    daily_limit: float
    current_spent: float
    transaction_amount: float
    new_total: float
    remaining_limit: float


class LimitTierSchema(BaseModel):
    """Single configured limit tier"""

    limit_type: str
    daily_limit: float
    min_account_age_days: int


class LimitTiersResponse(BaseModel):
    """Response for GET /v1/limits/tiers"""

    tiers: List[LimitTierSchema]
    resolved: Optional[LimitTierSchema] = None  # tier applying to account_age_days, when given
