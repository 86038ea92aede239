"""Text rendering for structured errors."""

from .text import RenderMode, render, render_compact, render_detailed

__all__ = ["RenderMode", "render", "render_compact", "render_detailed"]
