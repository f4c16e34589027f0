"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Union


class LimitType(str, Enum):
    """Policy tier a daily limit was assigned from"""

    NEW_ACCOUNT = "new_account"
    ESTABLISHED_ACCOUNT = "established_account"


class StatusTier(str, Enum):
    """How close the day's spending is to the cap"""

    OK = "ok"
    WARNING = "warning"
    CRITICAL = "critical"


@dataclass(frozen=True)
class LimitRecord:
    """Daily limit assigned to an account, as reported by the data provider"""

    daily_limit: Decimal
    limit_type: LimitType
    account_age_days: int
    account_created_at: datetime | None = None


@dataclass(frozen=True)
class SpendingRecord:
    """Cumulative spend for the current day"""

    total_spent: Decimal
    transaction_count: int
    spending_date: date | None = None


@dataclass(frozen=True)
class LimitStatus:
    """Derived limit status consumed by the view layer"""

    remaining: Decimal
    usage_percentage: Decimal
    status_tier: StatusTier
    is_new_account: bool
    upgrade_eligible: bool
    days_until_upgrade: int  # 0 unless upgrade_eligible
    approaching_limit: bool


@dataclass(frozen=True)
class LimitTier:
    """Configured daily limit for accounts of at least a given age"""

    limit_type: LimitType
    daily_limit: Decimal
    min_account_age_days: int
    is_active: bool = True


@dataclass(frozen=True)
class SpendingCheck:
    """Outcome of checking a prospective transaction against the daily limit"""

    allowed: bool
    daily_limit: Decimal
    current_spent: Decimal
    transaction_amount: Decimal
    new_total: Decimal
    remaining_limit: Decimal


@dataclass(frozen=True)
class Loading:
    """Data has been requested but not yet joined"""


@dataclass(frozen=True)
class Ready:
    """Both records were fetched and evaluated"""

    limit: LimitRecord
    spending: SpendingRecord
    status: LimitStatus


@dataclass(frozen=True)
class Unavailable:
    """Status could not be computed; carries the reason"""

    error: Exception


LimitStatusResult = Union[Loading, Ready, Unavailable]
