"""Lightweight observability helpers used across the project.

Metrics go to the default ``prometheus_client`` registry and spans to the
globally configured OpenTelemetry tracer provider. Without an exporter or SDK
configured both stay cheap: counters only live in process memory and the
OpenTelemetry API hands out non-recording spans.
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator, Optional

from opentelemetry import trace
from prometheus_client import REGISTRY, Counter, Histogram


class StructuredLoggerAdapter(logging.LoggerAdapter):
    """Simple adapter that renders structured context inline with messages."""

    def bind(self, **context: Any) -> "StructuredLoggerAdapter":
        merged = dict(self.extra)
        merged.update(context)
        return StructuredLoggerAdapter(self.logger, merged)

    def process(self, msg: str, kwargs: Dict[str, Any]):
        event_context: Dict[str, Any] = dict(self.extra)
        provided = kwargs.pop("context", None)
        if isinstance(provided, dict):
            event_context.update(provided)
        if event_context:
            try:
                payload = json.dumps(event_context, sort_keys=True, default=str)
            except TypeError:
                payload = json.dumps({str(k): str(v) for k, v in event_context.items()})
            msg = f"{msg} | {payload}"
        return msg, kwargs


def get_logger(name: str, **context: Any) -> StructuredLoggerAdapter:
    """Return a project logger with optional bound context."""

    base_logger = logging.getLogger(name)
    return StructuredLoggerAdapter(base_logger, context)


class _MetricWrapper:
    """Base wrapper providing ``labels`` passthrough for metrics."""

    def __init__(self, impl: Any) -> None:
        self._impl = impl

    def labels(self, **labels: Any):
        return self.__class__(self._impl.labels(**labels))


class CounterHandle(_MetricWrapper):
    """Wrapper around Prometheus counters."""

    def inc(self, amount: float = 1.0) -> None:
        self._impl.inc(amount)


class HistogramHandle(_MetricWrapper):
    """Wrapper around Prometheus histograms."""

    def observe(self, value: float) -> None:
        self._impl.observe(value)

    @contextmanager
    def time(self) -> Iterator[None]:
        start = time.perf_counter()
        try:
            yield
        finally:
            self.observe(time.perf_counter() - start)


def _registered_collector(name: str) -> Any:
    # prometheus_client refuses duplicate names; services built more than once
    # in a process (tests, reloads) share the collector registered first.
    return REGISTRY._names_to_collectors[name]


def create_counter(
    name: str,
    documentation: str,
    label_names: Optional[Iterable[str]] = None,
) -> CounterHandle:
    """Create (or re-use) a Prometheus counter."""

    try:
        impl = Counter(name, documentation, labelnames=tuple(label_names or ()))
    except ValueError:
        impl = _registered_collector(name)
    return CounterHandle(impl)


def create_histogram(
    name: str,
    documentation: str,
    label_names: Optional[Iterable[str]] = None,
) -> HistogramHandle:
    """Create (or re-use) a Prometheus histogram."""

    try:
        impl = Histogram(name, documentation, labelnames=tuple(label_names or ()))
    except ValueError:
        impl = _registered_collector(name)
    return HistogramHandle(impl)


@contextmanager
def start_span(name: str, attributes: Optional[Dict[str, Any]] = None):
    """Start an OpenTelemetry span named ``name`` under the ``songpad`` tracer."""

    tracer = trace.get_tracer("songpad")
    with tracer.start_as_current_span(name) as span:
        if attributes:
            add_span_attributes(span, attributes)
        yield span


def add_span_attributes(span: Any, attributes: Dict[str, Any]) -> None:
    """Attach ``attributes`` to ``span``; ``None`` values are skipped."""

    for key, value in attributes.items():
        if not isinstance(key, str) or value is None:
            continue
        span.set_attribute(key, value)


def record_exception(span: Any, error: BaseException) -> None:
    """Log an exception to an active span."""

    span.record_exception(error)
    span.set_attribute("error", True)


__all__ = [
    "StructuredLoggerAdapter",
    "get_logger",
    "CounterHandle",
    "HistogramHandle",
    "create_counter",
    "create_histogram",
    "start_span",
    "add_span_attributes",
    "record_exception",
]
