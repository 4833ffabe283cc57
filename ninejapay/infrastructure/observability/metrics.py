"""Prometheus metrics for 9jaPay API calls"""

from prometheus_client import Counter, Histogram

request_counter = Counter(
    "ninejapay_requests_total",
    "Total 9jaPay API calls",
    ["operation", "outcome"],  # success | provider_error | transport_error
)

request_latency_histogram = Histogram(
    "ninejapay_request_latency_seconds",
    "9jaPay API response time",
    ["operation"],
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)

error_counter = Counter(
    "ninejapay_errors_total",
    "Failed 9jaPay API calls by error kind and provider status code",
    ["kind", "provider_code"],
)


def record_request(operation: str, duration_seconds: float) -> None:
    request_counter.labels(operation=operation, outcome="success").inc()
    request_latency_histogram.labels(operation=operation).observe(duration_seconds)


def record_failure(operation: str, kind: str, provider_code: str | None, duration_seconds: float) -> None:
    """Record a failed call; provider_code is "none" when the provider sent no code"""
    request_counter.labels(operation=operation, outcome=f"{kind}_error").inc()
    request_latency_histogram.labels(operation=operation).observe(duration_seconds)
    error_counter.labels(kind=kind, provider_code=provider_code or "none").inc()


def record_decode_failure(operation: str, provider_code: str | None) -> None:
    """Record a 2xx response whose body did not fit the operation's model"""
    request_counter.labels(operation=operation, outcome="decode_error").inc()
    error_counter.labels(kind="decode", provider_code=provider_code or "none").inc()
