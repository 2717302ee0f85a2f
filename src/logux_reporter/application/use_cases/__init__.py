"""Use cases orchestrating the rendering pipeline."""

from __future__ import annotations

from .render_event import BASE_ERROR_NAME, FORMATTERS, create_render_event, join_blocks

__all__ = ["BASE_ERROR_NAME", "FORMATTERS", "create_render_event", "join_blocks"]
