"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from limit_gateway.config import settings
from limit_gateway.domain.models import LimitStatus


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_evaluation(
    request_id: str,
    user_id: str,
    status: LimitStatus,
    duration_ms: float,
) -> None:
    """Log structured evaluation outcome for analysis"""
    logging.info(
        "Limit status evaluated",
        extra={
            "request_id": request_id,
            "user_id": user_id,
            "step": "evaluation_complete",
            "status_tier": status.status_tier.value,
            "usage_percentage": float(status.usage_percentage),
            "approaching_limit": status.approaching_limit,
            "upgrade_eligible": status.upgrade_eligible,
            "duration_ms": duration_ms,
        },
    )


def log_transaction_check(request_id: str, user_id: str, allowed: bool, amount: float) -> None:
    """Log the outcome of a transaction limit check"""
    logging.info(
        "Transaction checked",
        extra={
            "request_id": request_id,
            "user_id": user_id,
            "step": "transaction_check",
            "check_outcome": "allowed" if allowed else "refused",
            "amount": amount,
        },
    )
