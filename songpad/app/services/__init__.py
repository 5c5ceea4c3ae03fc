"""Services backing the SongPad editor."""

from .analysis_service import AnalysisService
from .editing import clear_buffer, export_buffer, insert_break, remove_blank_lines
from .gutter_formatter import GUTTER_CSS, GutterFormatter

__all__ = [
    "AnalysisService",
    "GUTTER_CSS",
    "GutterFormatter",
    "clear_buffer",
    "export_buffer",
    "insert_break",
    "remove_blank_lines",
]
