"""Tunable spending-limit policy constants"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class LimitPolicy:
    """
    Thresholds driving the derived limit status.

    Percentages are of the daily limit:
    - warning_threshold: status tier becomes "warning"
    - critical_threshold: status tier becomes "critical"
    - approaching_threshold: the separate "approaching daily limit" notice,
      deliberately not tied to either tier boundary

    upgrade_after_days is the age at which new accounts move to the
    established tier, and upgraded_daily_limit is the limit they move to.
    """

    warning_threshold: Decimal = Decimal("70")
    critical_threshold: Decimal = Decimal("90")
    approaching_threshold: Decimal = Decimal("80")
    upgrade_after_days: int = 7
    upgraded_daily_limit: Decimal = Decimal("10000")

    def __post_init__(self) -> None:
        if self.warning_threshold >= self.critical_threshold:
            raise ValueError("warning_threshold must be below critical_threshold")
        if self.upgrade_after_days <= 0:
            raise ValueError("upgrade_after_days must be positive")

    @classmethod
    def from_settings(cls, settings) -> "LimitPolicy":
        """Build policy from application settings"""
        return cls(
            warning_threshold=settings.warning_threshold,
            critical_threshold=settings.critical_threshold,
            approaching_threshold=settings.approaching_threshold,
            upgrade_after_days=settings.upgrade_after_days,
            upgraded_daily_limit=settings.upgraded_daily_limit,
        )


DEFAULT_POLICY = LimitPolicy()
