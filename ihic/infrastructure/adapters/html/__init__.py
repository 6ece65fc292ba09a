"""HTML page rendering adapter."""

from .renderer import HtmlPageRenderer, RendererConfig

__all__ = ["HtmlPageRenderer", "RendererConfig"]
