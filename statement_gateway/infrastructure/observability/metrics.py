"""Prometheus metrics for statement generation and holiday lookups"""

from prometheus_client import Counter, Histogram

# Generation metrics
statement_counter = Counter(
    "statement_generated_total",
    "Total statements generated",
    ["outcome"],  # converged | approximate
)

convergence_iterations_histogram = Histogram(
    "statement_convergence_iterations",
    "Simulator passes needed per statement",
    buckets=[1, 2, 3, 4, 5, 6, 8, 10],
)

transaction_count_histogram = Histogram(
    "statement_transactions",
    "Synthesized transactions per statement",
    buckets=[0, 10, 25, 50, 100, 250, 500],
)

# Holiday API metrics
holiday_fetch_failures_counter = Counter(
    "holiday_fetch_failures_total",
    "Failed holiday calendar calls",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_statement(converged: bool, iterations: int, transaction_count: int) -> None:
    """Record generation metrics for monitoring convergence quality"""
    outcome = "converged" if converged else "approximate"
    statement_counter.labels(outcome=outcome).inc()
    convergence_iterations_histogram.observe(iterations)
    transaction_count_histogram.observe(transaction_count)
