"""
Prometheus metrics - single place for metric objects. Exposed at /metrics.
"""

from prometheus_client import Counter, Histogram

SEARCH_LATENCY = Histogram(
    "roster_member_search_seconds",
    "Member search latency in seconds",
    ["mode"],
)
SEARCH_ERRORS = Counter(
    "roster_member_search_errors_total",
    "Member searches that raised",
    ["mode", "error"],
)
