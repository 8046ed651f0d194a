# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time

from flask import Flask, Response, request
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    GCCollector,
    Histogram,
    PlatformCollector,
    ProcessCollector,
    generate_latest,
)

from signup_backend.shared.logging import logger

METRICS_PREFIX = "signup_backend"
LATENCY_BUCKETS: tuple[float, ...] = (0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5)
LABELS: tuple[str, ...] = ("method", "route", "status_code")

_EXTENSION_KEY = "signup_backend.metrics"
_STARTED_AT = "signup_backend.metrics.started_at"
_RECORDED = "signup_backend.metrics.recorded"


class RequestMetrics:
    def __init__(
        self,
        registry: CollectorRegistry | None = None,
        *,
        prefix: str = METRICS_PREFIX,
        runtime_collectors: bool = True,
    ) -> None:
        self.registry = registry or CollectorRegistry()
        self.requests = Counter(
            f"{prefix}_requests_total",
            "Total HTTP requests handled by the backend",
            labelnames=LABELS,
            registry=self.registry,
        )
        self.latency = Histogram(
            f"{prefix}_request_duration_seconds",
            "HTTP request duration in seconds",
            labelnames=LABELS,
            buckets=LATENCY_BUCKETS,
            registry=self.registry,
        )
        if runtime_collectors:
            ProcessCollector(namespace=prefix, registry=self.registry)
            PlatformCollector(registry=self.registry)
            GCCollector(registry=self.registry)

    def observe(self, method: str, route: str, status_code: int | str, duration: float) -> None:
        labels = {"method": method, "route": route, "status_code": str(status_code)}
        self.requests.labels(**labels).inc()
        self.latency.labels(**labels).observe(max(duration, 0.0))

    def render(self) -> bytes:
        return generate_latest(self.registry)


def _route_label() -> str:
    rule = request.url_rule
    return rule.rule if rule is not None else request.path


def _finish(metrics: RequestMetrics, status_code: int) -> None:
    environ = request.environ
    if environ.get(_RECORDED):
        return
    environ[_RECORDED] = True
    started = environ.get(_STARTED_AT, time.perf_counter())
    metrics.observe(request.method, _route_label(), status_code, time.perf_counter() - started)


def configure_metrics(app: Flask, metrics: RequestMetrics) -> RequestMetrics:
    """Install request metrics hooks and the /metrics endpoint once per app."""
    existing = app.extensions.get(_EXTENSION_KEY)
    if existing is not None:
        return existing
    app.extensions[_EXTENSION_KEY] = metrics

    @app.before_request
    def _start_timer() -> None:
        request.environ[_STARTED_AT] = time.perf_counter()

    @app.after_request
    def _record(response: Response) -> Response:
        _finish(metrics, response.status_code)
        return response

    @app.teardown_request
    def _record_unfinished(exc: BaseException | None) -> None:
        if exc is not None:
            _finish(metrics, 500)

    def metrics_endpoint() -> Response:
        return Response(metrics.render(), content_type=CONTENT_TYPE_LATEST)

    app.add_url_rule("/metrics", endpoint="metrics", view_func=metrics_endpoint, methods=["GET"])
    logger.info("metrics: request metrics initialized")
    return metrics


__all__ = [
    "LATENCY_BUCKETS",
    "METRICS_PREFIX",
    "RequestMetrics",
    "configure_metrics",
]
