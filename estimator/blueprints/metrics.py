"""
Prometheus metrics: per-request HTTP metrics plus business counters.

GET /metrics is unauthenticated; keep it on the internal network.
"""
import os
import time

from flask import Blueprint, Response, g, request
from prometheus_client import (
    CONTENT_TYPE_LATEST, REGISTRY, CollectorRegistry, Counter, Gauge, Histogram, generate_latest, multiprocess,
)

metrics_bp = Blueprint('metrics', __name__)

# Gunicorn workers share metrics through PROMETHEUS_MULTIPROC_DIR
MULTIPROCESS_MODE = 'PROMETHEUS_MULTIPROC_DIR' in os.environ
_metric_registry = None if MULTIPROCESS_MODE else REGISTRY

http_requests_total = Counter(
    'http_requests_total',
    'HTTP requests by method, endpoint and status',
    ['method', 'endpoint', 'http_status'],
    registry=_metric_registry,
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request latency in seconds',
    ['method', 'endpoint'],
    registry=_metric_registry,
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
)

http_requests_in_flight = Gauge(
    'http_requests_in_flight',
    'Requests currently being served',
    registry=_metric_registry,
)

estimations_created_total = Counter(
    'estimations_created_total',
    'Estimations created, by quote currency',
    ['currency'],
    registry=_metric_registry,
)


def setup_metrics_instrumentation(app):
    """Time every request and count it by endpoint and status."""

    @app.before_request
    def start_request_timer():
        g._metrics_started = time.perf_counter()
        http_requests_in_flight.inc()

    @app.after_request
    def record_request_metrics(response):
        started = g.pop('_metrics_started', None)
        if started is None:
            return response
        try:
            endpoint = request.endpoint or 'unknown'
            http_request_duration_seconds.labels(request.method, endpoint).observe(time.perf_counter() - started)
            http_requests_total.labels(request.method, endpoint, response.status_code).inc()
        except ValueError as e:
            app.logger.warning(f"[METRICS] Failed to record request: {e}")
        finally:
            http_requests_in_flight.dec()
        return response


def _exposition_registry():
    if not MULTIPROCESS_MODE:
        return REGISTRY
    registry = CollectorRegistry()
    multiprocess.MultiProcessCollector(registry)
    return registry


@metrics_bp.route('/metrics')
def metrics():
    return Response(generate_latest(_exposition_registry()), mimetype=CONTENT_TYPE_LATEST)
