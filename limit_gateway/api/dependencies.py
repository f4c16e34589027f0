"""Dependency injection for FastAPI endpoints"""

from typing import List
from fastapi import Request
from limit_gateway.config import settings
from limit_gateway.domain.models import LimitTier
from limit_gateway.domain.policy import LimitPolicy
from limit_gateway.domain.tiers import default_tiers
from limit_gateway.infrastructure.clients.provider import ProviderClient


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_provider_client() -> ProviderClient:
    """Provide spending data provider client instance"""
    return ProviderClient()


def get_limit_policy() -> LimitPolicy:
    """Provide limit policy built from settings"""
    return LimitPolicy.from_settings(settings)


def get_limit_tiers() -> List[LimitTier]:
    """Provide configured limit tiers"""
    return default_tiers(
        new_account_limit=settings.new_account_daily_limit,
        established_limit=settings.established_daily_limit,
        upgrade_after_days=settings.upgrade_after_days,
    )
