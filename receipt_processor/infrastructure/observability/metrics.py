"""Prometheus metrics for monitoring receipt intake, awarded points, and lookups"""

from prometheus_client import Counter, Histogram

# Intake metrics
receipts_processed_counter = Counter(
    "receipts_processed_total",
    "Receipts submitted for scoring",
    ["outcome"],  # accepted | rejected
)

receipt_points_histogram = Histogram(
    "receipt_points",
    "Points awarded per accepted receipt",
    buckets=[0, 10, 25, 50, 75, 100, 150, 250, 500],
)

# Lookup metrics
receipt_lookup_counter = Counter(
    "receipt_lookups_total",
    "Points lookups by receipt id",
    ["outcome"],  # hit | miss
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_receipt_accepted(points: int) -> None:
    """Record an accepted receipt and the points it earned"""
    receipts_processed_counter.labels(outcome="accepted").inc()
    receipt_points_histogram.observe(points)


def record_receipt_rejected() -> None:
    receipts_processed_counter.labels(outcome="rejected").inc()


def record_lookup(found: bool) -> None:
    receipt_lookup_counter.labels(outcome="hit" if found else "miss").inc()
