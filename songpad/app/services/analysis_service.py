"""Analysis service wrapping the lyric pipeline with logging and metrics."""

from __future__ import annotations

from typing import Any, Dict, Optional

from songpad.core import BREAK_MARKER, BufferAnalysis, analyze_buffer

from ...utils.observability import (
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)
from .gutter_formatter import GutterFormatter


class AnalysisService:
    """Runs :func:`analyze_buffer` for the editor and records what happened.

    Every call analyses the buffer it is given from scratch; the service keeps
    no per-buffer state between calls.
    """

    def __init__(
        self,
        *,
        break_marker: str = BREAK_MARKER,
        formatter: Optional[GutterFormatter] = None,
    ) -> None:
        self.break_marker = break_marker
        self.formatter = formatter or GutterFormatter()
        self._logger = get_logger(__name__).bind(
            component="analysis_service",
            break_marker=break_marker,
        )

        self._metric_request_total = create_counter(
            "songpad_analysis_requests_total",
            "Total buffer analyses requested.",
        )
        self._metric_request_failures = create_counter(
            "songpad_analysis_failures_total",
            "Total buffer analyses that raised an exception.",
        )
        self._metric_request_duration = create_histogram(
            "songpad_analysis_seconds",
            "Latency of buffer analyses.",
        )
        self._metric_groups = create_counter(
            "songpad_groups_total",
            "Rhyme groups produced by buffer analyses.",
            label_names=("kind",),
        )

    def analyze(self, text: Optional[str]) -> BufferAnalysis:
        buffer = text or ""
        request_context: Dict[str, Any] = {
            "characters": len(buffer),
            "lines": buffer.count("\n") + 1,
        }

        self._metric_request_total.inc()
        self._logger.debug("Analysis requested", context=request_context)

        with start_span("songpad.analyze", request_context) as span:
            try:
                with self._metric_request_duration.time():
                    analysis = analyze_buffer(buffer, self.break_marker)
            except Exception as exc:
                failure_context = dict(request_context)
                failure_context["error"] = str(exc)
                self._metric_request_failures.inc()
                self._logger.error("Analysis failed", context=failure_context)
                record_exception(span, exc)
                raise

            counts = {
                "rhyme": len(analysis.rhyme_groups),
                "near-rhyme": len(analysis.near_rhyme_groups),
            }
            for kind, count in counts.items():
                if count:
                    self._metric_groups.labels(kind=kind).inc(count)

            self._logger.info(
                "Analysis completed",
                context={
                    "lines": len(analysis.lines),
                    "sections": len(analysis.sections),
                    "group_counts": counts,
                },
            )
            add_span_attributes(
                span,
                {
                    "analysis.sections": len(analysis.sections),
                    "analysis.rhyme_groups": counts["rhyme"],
                    "analysis.near_rhyme_groups": counts["near-rhyme"],
                },
            )
            return analysis

    def render(self, text: Optional[str]) -> Dict[str, str]:
        """Analyse ``text`` and return gutter markup plus a one-line summary."""

        analysis = self.analyze(text)
        return {
            "table": self.formatter.render_table(analysis),
            "summary": self.formatter.summary(analysis),
        }


__all__ = ["AnalysisService"]
