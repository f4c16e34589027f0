"""Limit tier resolution - assigns a daily limit from account age"""

from datetime import datetime
from decimal import Decimal
from typing import Iterable, List

from limit_gateway.domain.exceptions import InvalidLimitError
from limit_gateway.domain.models import LimitRecord, LimitTier, LimitType
from limit_gateway.utils.date_utils import account_age_in_days


def default_tiers(
    new_account_limit: Decimal = Decimal("3000"),
    established_limit: Decimal = Decimal("10000"),
    upgrade_after_days: int = 7,
) -> List[LimitTier]:
    """
    Two-tier schedule used when nothing else is configured.

    - New accounts (< 7 days): lower limit to reduce fraud exposure
    - Established accounts (>= 7 days): full limit
    """
    return [
        LimitTier(LimitType.NEW_ACCOUNT, new_account_limit, 0),
        LimitTier(LimitType.ESTABLISHED_ACCOUNT, established_limit, upgrade_after_days),
    ]


def select_tier(account_age_days: int, tiers: Iterable[LimitTier]) -> LimitTier:
    """
    Pick the tier that applies to an account of the given age.

    The active tier with the highest minimum age not exceeding the account
    age wins. With no match, the active new-account tier applies.

    Raises:
        InvalidLimitError: no tier matches and no new-account tier is active
    """
    active = [t for t in tiers if t.is_active]

    eligible = [t for t in active if t.min_account_age_days <= account_age_days]
    if eligible:
        tier = max(eligible, key=lambda t: t.min_account_age_days)
    else:
        fallback = [t for t in active if t.limit_type == LimitType.NEW_ACCOUNT]
        if not fallback:
            raise InvalidLimitError(f"No active limit tier for account aged {account_age_days} days")
        tier = fallback[0]

    return tier


def resolve_limit_record(
    account_age_days: int,
    tiers: Iterable[LimitTier],
    account_created_at: datetime | None = None,
) -> LimitRecord:
    """Build the limit record for an account of the given age"""
    tier = select_tier(account_age_days, tiers)
    return LimitRecord(
        daily_limit=tier.daily_limit,
        limit_type=tier.limit_type,
        account_age_days=account_age_days,
        account_created_at=account_created_at,
    )


def resolve_limit_for_account(
    account_created_at: datetime,
    tiers: Iterable[LimitTier],
    now: datetime | None = None,
) -> LimitRecord:
    """Resolve the limit record from the account creation timestamp"""
    age = account_age_in_days(account_created_at, now)
    return resolve_limit_record(age, tiers, account_created_at=account_created_at)
