"""Prometheus metrics for simplification volume, plan size and conservation anomalies"""

from prometheus_client import Counter, Histogram
from settleup_gateway.domain.models import SettlementResult

# Simplification metrics
simplification_counter = Counter(
    "settleup_simplification_total",
    "Total debt simplifications run",
    ["source"],  # adhoc | explain | group
)

transfers_per_plan_histogram = Histogram(
    "settleup_transfers_per_plan",
    "Number of transfers in each settlement plan",
    buckets=[0, 1, 2, 5, 10, 25, 50, 100],
)

anomaly_counter = Counter(
    "settleup_anomaly_total",
    "Conservation anomalies reported by the matcher",
    ["kind"],  # unbalanced_totals | residual_debt | residual_credit
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_simplification(source: str, result: SettlementResult) -> None:
    """Record plan size and any anomalies for one simplification"""
    simplification_counter.labels(source=source).inc()

    transfer_count = sum(len(payees) for payees in result.plan.values())
    transfers_per_plan_histogram.observe(transfer_count)

    for anomaly in result.anomalies:
        anomaly_counter.labels(kind=anomaly.kind).inc()
