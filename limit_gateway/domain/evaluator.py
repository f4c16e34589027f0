"""Limit evaluator - derives display status from a limit and a spending snapshot"""

from decimal import Decimal

from limit_gateway.domain.exceptions import InvalidLimitError
from limit_gateway.domain.models import LimitRecord, LimitStatus, LimitType, SpendingRecord, StatusTier
from limit_gateway.domain.policy import DEFAULT_POLICY, LimitPolicy


def determine_status_tier(usage_percentage: Decimal, policy: LimitPolicy = DEFAULT_POLICY) -> StatusTier:
    """
    Map usage percentage to a status tier.

    Tiers (lower bound inclusive):
    - < 70:     ok
    - 70 - 90:  warning
    - 90+:      critical (includes overspend above 100)
    """
    if usage_percentage >= policy.critical_threshold:
        return StatusTier.CRITICAL
    elif usage_percentage >= policy.warning_threshold:
        return StatusTier.WARNING
    else:
        return StatusTier.OK


def evaluate(
    limit: LimitRecord,
    spending: SpendingRecord,
    policy: LimitPolicy = DEFAULT_POLICY,
) -> LimitStatus:
    """
    Main entry point: derive the limit status for one snapshot.

    Amounts are neither rounded nor clamped, so a caller can detect
    overspend (remaining < 0, usage_percentage > 100). Rounding and
    progress-bar clamping are left to the view layer.

    Raises:
        InvalidLimitError: daily_limit is not a positive finite amount, or
            total_spent is not finite
    """
    if not limit.daily_limit.is_finite() or limit.daily_limit <= 0:
        raise InvalidLimitError(f"Daily limit must be positive, got {limit.daily_limit}")
    if not spending.total_spent.is_finite():
        raise InvalidLimitError(f"Usage cannot be computed for total spent {spending.total_spent}")

    remaining = limit.daily_limit - spending.total_spent
    usage_percentage = spending.total_spent / limit.daily_limit * 100

    is_new_account = limit.limit_type == LimitType.NEW_ACCOUNT
    upgrade_eligible = is_new_account and limit.account_age_days < policy.upgrade_after_days
    days_until_upgrade = policy.upgrade_after_days - limit.account_age_days if upgrade_eligible else 0

    return LimitStatus(
        remaining=remaining,
        usage_percentage=usage_percentage,
        status_tier=determine_status_tier(usage_percentage, policy),
        is_new_account=is_new_account,
        upgrade_eligible=upgrade_eligible,
        days_until_upgrade=days_until_upgrade,
        approaching_limit=usage_percentage >= policy.approaching_threshold,
    )
