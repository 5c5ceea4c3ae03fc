"""Utility helpers shared across the :mod:`songpad` package."""

from __future__ import annotations

from .logging_config import configure_logging
from .syllables import (
    SYLLABLE_EXCEPTIONS,
    VOWELS,
    count_line_syllables,
    count_syllables,
)
from .observability import (
    StructuredLoggerAdapter,
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)

__all__ = [
    "configure_logging",
    "SYLLABLE_EXCEPTIONS",
    "VOWELS",
    "count_line_syllables",
    "count_syllables",
    "StructuredLoggerAdapter",
    "add_span_attributes",
    "create_counter",
    "create_histogram",
    "get_logger",
    "record_exception",
    "start_span",
]
