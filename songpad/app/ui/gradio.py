"""User interface assembly for the Gradio front-end."""

from __future__ import annotations

from typing import Optional, Tuple

import gradio as gr

from ..services.analysis_service import AnalysisService
from ..services.editing import (
    clear_buffer,
    export_buffer,
    insert_break,
    remove_blank_lines,
)
from ..services.gutter_formatter import GUTTER_CSS
from ...utils.observability import get_logger

_logger = get_logger(__name__).bind(component="gradio_ui")

_PLACEHOLDER = (
    "Write your lyrics here.\n"
    "Put --- on its own line to start a new section."
)


class EditorHandlers:
    """Event callbacks wired to the editor components.

    The remembered cursor is an offset into the text as it was when the user
    last selected. Any handler that rewrites the buffer, and any typing,
    returns ``None`` for it so that the next break lands at the end of the
    buffer instead of at a stale offset.
    """

    def __init__(self, service: AnalysisService) -> None:
        self.service = service
        self.marker = service.break_marker

    def refresh(self, text: str) -> Tuple[str, str]:
        rendered = self.service.render(text)
        return rendered["table"], rendered["summary"]

    @staticmethod
    def remember_cursor(evt: gr.SelectData) -> Optional[int]:
        index = evt.index
        if isinstance(index, (list, tuple)):
            index = index[-1] if index else None
        return index if isinstance(index, int) else None

    @staticmethod
    def forget_cursor() -> None:
        return None

    def add_break(self, text: str, cursor: Optional[int]) -> Tuple[str, int]:
        return insert_break(text, cursor, self.marker)

    def tidy(self, text: str) -> Tuple[str, None]:
        return remove_blank_lines(text, self.marker), None

    @staticmethod
    def clear() -> Tuple[str, None]:
        return clear_buffer(), None

    @staticmethod
    def download(text: str) -> Tuple[Optional[str], str]:
        try:
            path = export_buffer(text)
        except OSError as exc:
            _logger.warning("Export failed", context={"error": str(exc)})
            return None, f"Export failed: {exc}"
        return str(path), f"Saved `{path.name}`"


def create_interface(service: AnalysisService) -> gr.Blocks:
    """Construct the editor Blocks UI around ``service``."""

    handlers = EditorHandlers(service)

    interface_css = GUTTER_CSS + """
    .sp-container {max-width: 1200px; margin: 0 auto; gap: 24px;}
    .sp-hero {text-align: center; padding-bottom: 12px;}
    .sp-editor textarea {font-family: ui-monospace, monospace; line-height: 1.5rem;}
    """

    with gr.Blocks(
        title="SongPad - Lyric Editor",
        theme=gr.themes.Soft(),
        css=interface_css,
    ) as interface:
        with gr.Column(elem_classes=["sp-container"]):
            gr.Markdown(
                "<h2>SongPad</h2>\n"
                "<p>Syllable counts and rhyme groups for every line, section by section.</p>",
                elem_classes=["sp-hero"],
            )
            cursor_state = gr.State(None)
            with gr.Row():
                with gr.Column(scale=1):
                    editor = gr.Textbox(
                        label="Lyrics",
                        lines=24,
                        placeholder=_PLACEHOLDER,
                        show_copy_button=True,
                        elem_classes=["sp-editor"],
                    )
                    with gr.Row():
                        break_button = gr.Button("Insert break")
                        tidy_button = gr.Button("Remove blank lines")
                        clear_button = gr.Button("Clear all", variant="stop")
                        download_button = gr.Button("Download .txt")
                    download_file = gr.File(label="Download", interactive=False)
                with gr.Column(scale=1):
                    summary = gr.Markdown()
                    gutter = gr.HTML()

        editor.change(handlers.refresh, inputs=editor, outputs=[gutter, summary])
        editor.select(handlers.remember_cursor, inputs=None, outputs=cursor_state)
        editor.input(handlers.forget_cursor, inputs=None, outputs=cursor_state)
        break_button.click(
            handlers.add_break,
            inputs=[editor, cursor_state],
            outputs=[editor, cursor_state],
        )
        tidy_button.click(handlers.tidy, inputs=editor, outputs=[editor, cursor_state])
        clear_button.click(handlers.clear, inputs=None, outputs=[editor, cursor_state])
        download_button.click(handlers.download, inputs=editor, outputs=[download_file, summary])
        interface.load(handlers.refresh, inputs=editor, outputs=[gutter, summary])

    return interface


__all__ = ["EditorHandlers", "create_interface"]
