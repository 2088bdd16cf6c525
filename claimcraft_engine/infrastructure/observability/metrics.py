"""Prometheus metrics for claim calculations, fee bands and import quality"""

from prometheus_client import Counter, Histogram

# Calculation metrics
claim_calculation_counter = Counter(
    "claimcraft_claim_calculations_total",
    "Total claim calculations",
    ["outcome"],  # viable | not_viable
)

court_fee_band_counter = Counter(
    "claimcraft_court_fee_band_total",
    "Court fees computed by band",
    ["band"],
)

# Import metrics
normalization_failure_counter = Counter(
    "claimcraft_normalization_failures_total",
    "Imported records rejected during normalisation",
    ["record"],  # claimant | defendant | invoice
)

# Deadline metrics
deadline_suggestion_counter = Counter(
    "claimcraft_deadline_suggestions_total",
    "Deadlines suggested from lifecycle events",
    ["event"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_claim_calculation(is_viable: bool, fee_band: str) -> None:
    """Record viability outcome and the court fee band it landed in"""
    outcome = "viable" if is_viable else "not_viable"
    claim_calculation_counter.labels(outcome=outcome).inc()
    court_fee_band_counter.labels(band=fee_band).inc()
