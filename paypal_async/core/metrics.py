"""
Prometheus metrics for PayPal API calls.

The collectors register on the default ``prometheus_client`` registry, so an
application exposing ``/metrics`` picks them up without extra wiring.
"""

from prometheus_client import Counter, Histogram

requests_total = Counter(
    "paypal_requests_total",
    "Total number of PayPal API calls",
    ["endpoint", "method", "status"],  # status is the HTTP code or "error"
)

request_latency = Histogram(
    "paypal_request_latency_seconds",
    "Time taken for PayPal API calls to complete",
    ["endpoint"],
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

token_refresh_total = Counter(
    "paypal_token_refresh_total",
    "Total number of OAuth2 token exchanges",
    ["outcome"],  # success, rejected, error
)
