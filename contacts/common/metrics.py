"""Metrics collection for the contacts services.

A thin wrapper around ``prometheus_client`` so the API and the search index
record HTTP, indexing, and search metrics with consistent label sets.

Design notes
- Metrics and labels are predeclared; no free-form label values
- A single registry is kept per collector (can be injected for tests)
"""

from typing import Optional

from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest
import structlog

logger = structlog.get_logger("metrics")


class MetricsCollector:
    """Centralized metrics collection for contacts services.

    Parameters
    - service_name: Logical name of the owning service
    - registry: Optional custom ``CollectorRegistry`` (e.g. for testing)
    """

    def __init__(self, service_name: str, registry: Optional[CollectorRegistry] = None):
        self.service_name = service_name
        self.registry = registry or CollectorRegistry()

        self.request_count = Counter(
            'http_requests_total',
            'Total HTTP requests',
            ['method', 'endpoint', 'status'],
            registry=self.registry
        )

        self.request_duration = Histogram(
            'http_request_duration_seconds',
            'HTTP request duration',
            ['method', 'endpoint'],
            registry=self.registry
        )

        self.index_operations = Counter(
            'contacts_index_operations_total',
            'Total search index write operations',
            ['operation', 'status'],
            registry=self.registry
        )

        self.search_requests = Counter(
            'contacts_search_requests_total',
            'Total contact searches',
            ['field', 'status'],
            registry=self.registry
        )

        self.search_duration = Histogram(
            'contacts_search_duration_seconds',
            'Contact search duration',
            ['field'],
            registry=self.registry
        )

        self.search_results = Histogram(
            'contacts_search_results',
            'Number of contacts returned per search',
            buckets=(0, 1, 5, 10, 25, 50, 100, 500),
            registry=self.registry
        )

    def record_http_request(
        self,
        method: str,
        endpoint: str,
        status: int,
        duration: float
    ) -> None:
        """Record HTTP request metrics.

        duration is expected in seconds to match Prometheus histogram units.
        """
        self.request_count.labels(method=method, endpoint=endpoint, status=status).inc()
        self.request_duration.labels(method=method, endpoint=endpoint).observe(duration)

    def record_index_operation(self, operation: str, status: str) -> None:
        """Record an ``index`` or ``unindex`` outcome."""
        self.index_operations.labels(operation=operation, status=status).inc()

    def record_search(
        self,
        field: str,
        status: str,
        duration: float,
        results: int = 0
    ) -> None:
        """Record search metrics."""
        self.search_requests.labels(field=field, status=status).inc()
        self.search_duration.labels(field=field).observe(duration)
        if status == "success":
            self.search_results.observe(results)

    def get_metrics(self) -> str:
        """Get metrics in Prometheus exposition format for scraping."""
        return generate_latest(self.registry).decode('utf-8')


_metrics_collector: Optional[MetricsCollector] = None


def get_metrics_collector(service_name: str) -> MetricsCollector:
    """Get or create the process-wide metrics collector."""
    global _metrics_collector
    if _metrics_collector is None:
        _metrics_collector = MetricsCollector(service_name)
        logger.debug("Metrics collector created", service_name=service_name)
    return _metrics_collector
