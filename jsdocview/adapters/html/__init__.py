"""HTML adapter - renders extracted documentation as a standalone page."""

from __future__ import annotations

from .manager import DEFAULT_TITLE, HtmlRenderer, render_document

__all__ = ["HtmlRenderer", "render_document", "DEFAULT_TITLE"]
