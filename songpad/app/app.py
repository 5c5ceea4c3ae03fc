"""Application wiring for the SongPad project."""

from __future__ import annotations

from typing import Optional

from songpad.app.config import AppConfig
from songpad.app.services.analysis_service import AnalysisService
from songpad.utils.logging_config import configure_logging
from songpad.utils.observability import get_logger


class SongPadApp:
    """High-level application facade bundling dependencies."""

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        *,
        analysis_service: Optional[AnalysisService] = None,
    ) -> None:
        self.config = config or AppConfig.from_env()
        self._logger = get_logger(__name__).bind(component="app_facade")

        self.analysis_service = analysis_service or AnalysisService(
            break_marker=self.config.break_marker,
        )
        self._logger.info(
            "Application dependencies wired",
            context={
                "break_marker": self.analysis_service.break_marker,
                "server_port": self.config.server_port,
            },
        )

    def analyze(self, text: Optional[str]):
        return self.analysis_service.analyze(text)

    def create_gradio_interface(self):
        # Deferred so the CLI and tests can use the facade without Gradio loaded.
        from songpad.app.ui.gradio import create_interface

        return create_interface(self.analysis_service)


def main() -> None:
    config = AppConfig.from_env()
    configure_logging(config.log_level)

    app = SongPadApp(config)
    interface = app.create_gradio_interface()
    interface.launch(
        server_name=config.server_name,
        server_port=config.server_port,
        share=config.share,
    )


__all__ = ["SongPadApp", "main"]
