"""Application layer: configuration, services and the Gradio editor."""
