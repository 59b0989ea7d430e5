"""Prometheus metrics for calculator usage, recommendation outcomes, and text generation latency"""

from prometheus_client import Counter, Histogram

# Calculator metrics
maturity_calculation_counter = Counter(
    "fd_maturity_calculations_total",
    "Total FD maturity calculations",
    ["frequency"],  # annually | half_yearly | quarterly | monthly
)

validation_failure_counter = Counter(
    "fd_validation_failures_total",
    "Requests rejected by input validation",
    ["operation"],  # maturity | recommendation
)

# Recommendation metrics
recommendation_counter = Counter(
    "fd_recommendation_total",
    "Total recommendation requests forwarded to text generation",
    ["outcome"],  # success | timeout | malformed_response | service_error
)

# Text generation metrics
textgen_latency_histogram = Histogram(
    "textgen_latency_seconds",
    "Text generation response time",
    buckets=[0.5, 1.0, 2.5, 5.0, 10.0, 20.0, 30.0, 60.0],
)

textgen_failure_counter = Counter(
    "textgen_failures_total",
    "Failed text generation calls",
    ["reason"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(frequency_name: str) -> None:
    """Record a completed maturity calculation"""
    maturity_calculation_counter.labels(frequency=frequency_name.lower()).inc()


def record_validation_failure(operation: str) -> None:
    """Record a request rejected before any computation or external call"""
    validation_failure_counter.labels(operation=operation).inc()


def record_recommendation(outcome: str) -> None:
    """Record recommendation outcome; failures also count against text generation"""
    recommendation_counter.labels(outcome=outcome).inc()
    if outcome != "success":
        textgen_failure_counter.labels(reason=outcome).inc()
