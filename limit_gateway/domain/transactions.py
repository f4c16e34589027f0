"""Transaction guard against the daily spending limit"""

from dataclasses import replace
from decimal import Decimal

from limit_gateway.domain.exceptions import InvalidLimitError, InvalidTransactionAmountError
from limit_gateway.domain.models import LimitRecord, SpendingCheck, SpendingRecord


def check_transaction(limit: LimitRecord, spending: SpendingRecord, amount: Decimal) -> SpendingCheck:
    """
    Decide whether a transaction fits in what is left of today's limit.

    Refused when current spend + amount exceeds the limit; landing exactly
    on the limit is allowed. On refusal remaining_limit reports what is
    still spendable (floored at zero); on approval it reports what would be
    left after the transaction.

    Raises:
        InvalidTransactionAmountError: amount is zero or negative
        InvalidLimitError: daily_limit is zero, negative or not finite
    """
    if amount <= 0:
        raise InvalidTransactionAmountError(f"Transaction amount must be positive, got {amount}")
    if not limit.daily_limit.is_finite() or limit.daily_limit <= 0:
        raise InvalidLimitError(f"Daily limit must be positive, got {limit.daily_limit}")

    new_total = spending.total_spent + amount

    if new_total > limit.daily_limit:
        return SpendingCheck(
            allowed=False,
            daily_limit=limit.daily_limit,
            current_spent=spending.total_spent,
            transaction_amount=amount,
            new_total=new_total,
            remaining_limit=max(Decimal(0), limit.daily_limit - spending.total_spent),
        )

    return SpendingCheck(
        allowed=True,
        daily_limit=limit.daily_limit,
        current_spent=spending.total_spent,
        transaction_amount=amount,
        new_total=new_total,
        remaining_limit=limit.daily_limit - new_total,
    )


def record_transaction(spending: SpendingRecord, amount: Decimal) -> SpendingRecord:
    """Return a new snapshot with the transaction added to today's totals"""
    if amount <= 0:
        raise InvalidTransactionAmountError(f"Transaction amount must be positive, got {amount}")

    return replace(
        spending,
        total_spent=spending.total_spent + amount,
        transaction_count=spending.transaction_count + 1,
    )
