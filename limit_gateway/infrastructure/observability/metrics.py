"""Prometheus metrics for monitoring limit usage and data provider health"""

from prometheus_client import Counter, Histogram

from limit_gateway.domain.models import LimitStatus

# Evaluation metrics
evaluation_counter = Counter(
    "limit_evaluation_total",
    "Total limit status evaluations",
    ["tier"],  # ok | warning | critical
)

approaching_limit_counter = Counter(
    "limit_approaching_total",
    "Evaluations where the approaching-limit notice fired",
)

invalid_limit_counter = Counter(
    "limit_invalid_total",
    "Evaluations rejected for a non-positive daily limit",
)

transaction_check_counter = Counter(
    "limit_transaction_check_total",
    "Transaction limit checks",
    ["outcome"],  # allowed | refused
)

# Data provider metrics
provider_latency_histogram = Histogram(
    "provider_fetch_latency_seconds",
    "Data provider response time",
    ["record"],  # limit | spending
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

provider_fetch_failures_counter = Counter(
    "provider_fetch_failures_total",
    "Failed data provider calls",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_evaluation(status: LimitStatus) -> None:
    """Record evaluation metrics for monitoring how close users run to their caps"""
    evaluation_counter.labels(tier=status.status_tier.value).inc()
    if status.approaching_limit:
        approaching_limit_counter.inc()


def record_transaction_check(allowed: bool) -> None:
    transaction_check_counter.labels(outcome="allowed" if allowed else "refused").inc()
