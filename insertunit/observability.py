from dataclasses import dataclass, field
import json
import logging
from typing import Any, Callable, Mapping

# ==================================================
# Observability Types
# ==================================================

EventObserveHook = Callable[["CompileEvent"], None]
LabelMap = Mapping[str, str]


@dataclass(frozen=True)
class ObservabilitySettings:
    """
    Compiler observability settings.
    """

    event_observer: EventObserveHook | None = None
    metadata: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class CompileEvent:
    """
    Structured compile lifecycle event payload.
    """

    timestamp: str
    event: str
    compiler: str
    clause_kind: str
    success: bool
    metadata: Mapping[str, Any] = field(default_factory=dict)
    table: str | None = None
    row_count: int | None = None
    column_count: int | None = None
    param_count: int | None = None
    duration_ms: float | None = None
    error_type: str | None = None
    error_message: str | None = None


def compile_event_to_dict(event: CompileEvent) -> dict[str, Any]:
    """
    Converts a CompileEvent dataclass into a JSON-safe dictionary.
    """

    return {
        "timestamp": event.timestamp,
        "event": event.event,
        "compiler": event.compiler,
        "clause_kind": event.clause_kind,
        "success": event.success,
        "metadata": dict(event.metadata),
        "table": event.table,
        "row_count": event.row_count,
        "column_count": event.column_count,
        "param_count": event.param_count,
        "duration_ms": event.duration_ms,
        "error_type": event.error_type,
        "error_message": event.error_message,
    }


def make_json_event_logger(
    *,
    logger: logging.Logger,
    level: int = logging.INFO,
) -> EventObserveHook:
    """
    Builds an EventObserveHook that emits one JSON log line per CompileEvent.
    """

    def _log_event(event: CompileEvent) -> None:
        payload = compile_event_to_dict(event)
        logger.log(level, json.dumps(payload, separators=(",", ":"), sort_keys=True, default=str))

    return _log_event


def compose_event_observers(*observers: EventObserveHook) -> EventObserveHook:
    """
    Composes multiple event observers into a single observer.
    """

    def _composed(event: CompileEvent) -> None:
        for observer in observers:
            observer(event)

    return _composed


def _event_labels(event: CompileEvent) -> dict[str, str]:
    return {
        "compiler": event.compiler or "unknown",
        "clause_kind": event.clause_kind or "unknown",
        "error_type": event.error_type or "none",
    }


def _labels_key(labels: LabelMap) -> tuple[tuple[str, str], ...]:
    return tuple(sorted((str(key), str(value)) for key, value in labels.items()))


@dataclass(frozen=True)
class MetricPoint:
    """
    Single metric point lookup result.
    """

    name: str
    labels: Mapping[str, str]
    value: int | float


class InMemoryMetricsAdapter:
    """
    In-memory metrics adapter for CompileEvent streams.
    """

    def __init__(self) -> None:
        self._counters: dict[tuple[str, tuple[tuple[str, str], ...]], int] = {}
        self._histograms: dict[tuple[str, tuple[tuple[str, str], ...]], list[float]] = {}

    def __call__(self, event: CompileEvent) -> None:
        if event.event != "compile.end":
            return
        labels = _event_labels(event)
        self._inc("insertunit_compiles_total", labels, 1)
        if not event.success:
            self._inc("insertunit_compile_failures_total", labels, 1)
        if event.duration_ms is not None:
            self._observe("insertunit_compile_duration_ms", labels, event.duration_ms)
        if event.row_count is not None:
            self._observe("insertunit_compile_rows", labels, event.row_count)

    def _inc(self, metric: str, labels: LabelMap, delta: int) -> None:
        key = (metric, _labels_key(labels))
        self._counters[key] = self._counters.get(key, 0) + delta

    def _observe(self, metric: str, labels: LabelMap, value: float) -> None:
        key = (metric, _labels_key(labels))
        bucket = self._histograms.setdefault(key, [])
        bucket.append(value)

    def counter_value(self, metric: str, labels: LabelMap) -> int:
        return self._counters.get((metric, _labels_key(labels)), 0)

    def histogram_values(self, metric: str, labels: LabelMap) -> list[float]:
        values = self._histograms.get((metric, _labels_key(labels)), [])
        return list(values)

    def counters(self) -> list[MetricPoint]:
        points: list[MetricPoint] = []
        for (name, label_key), value in self._counters.items():
            points.append(MetricPoint(name=name, labels=dict(label_key), value=value))
        return points

    def histograms(self) -> list[MetricPoint]:
        points: list[MetricPoint] = []
        for (name, label_key), values in self._histograms.items():
            for value in values:
                points.append(MetricPoint(name=name, labels=dict(label_key), value=value))
        return points
