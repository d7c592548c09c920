"""
PreviewSession - live documentation preview for one document.

Replaces a global "current panel / current watcher" pair with an explicit
object owned by the host integration:

- open(document): validate, bind to the document, render
- notify_change(document): re-render the bound document, dropping stale versions
- close(): drop the binding; later notifications are ignored

Usage:
    with PreviewSession(on_render=panel.set_html) as session:
        session.open(SourceDocument("file:///app.js", "javascript", text, 1))
        ...
        session.notify_change(SourceDocument("file:///app.js", "javascript", new_text, 2))
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from jsdocview.adapters.html import DEFAULT_TITLE, HtmlRenderer
from jsdocview.adapters.treesitter import SyntaxManager

from .extraction import DocumentAssembler

logger = logging.getLogger(__name__)


class PreviewError(Exception):
    """Base class for user-facing preview rejections."""


class NoActiveDocumentError(PreviewError):
    def __init__(self) -> None:
        super().__init__("No active editor found!")


class UnsupportedLanguageError(PreviewError):
    def __init__(self, language_id: str) -> None:
        super().__init__(
            f"File type '{language_id}' is not supported. Only JavaScript is supported."
        )
        self.language_id = language_id


@dataclass(frozen=True)
class SourceDocument:
    """Snapshot of a document as seen by the host."""

    uri: str
    language_id: str
    text: str
    version: int = 0


def should_show_affordance(language_id: str | None) -> bool:
    """Whether the preview shortcut should be visible for a focused document."""
    return SyntaxManager.supports_language(language_id)


def ensure_supported(document: SourceDocument | None) -> SourceDocument:
    """Validate a document before it reaches the extraction core.

    Raises:
        NoActiveDocumentError: If there is no document
        UnsupportedLanguageError: If the document is not JavaScript
    """
    if document is None:
        raise NoActiveDocumentError()
    if not SyntaxManager.supports_language(document.language_id):
        raise UnsupportedLanguageError(document.language_id)
    return document


class PreviewSession:
    """Keeps one rendered preview in sync with one document.

    Args:
        on_render: Callback receiving each rendered HTML document
        assembler: Extraction entry point (a new DocumentAssembler by default)
        renderer: HTML renderer (a new HtmlRenderer by default)
        title: Document title used when creating the default renderer
    """

    def __init__(
        self,
        on_render: Callable[[str], None],
        assembler: DocumentAssembler | None = None,
        renderer: HtmlRenderer | None = None,
        title: str = DEFAULT_TITLE,
    ) -> None:
        self.on_render = on_render
        self.assembler = assembler or DocumentAssembler()
        self.renderer = renderer or HtmlRenderer(title=title)
        self._uri: str | None = None
        self._version: int | None = None

    # =========================================================================
    # Lifecycle
    # =========================================================================

    @property
    def is_open(self) -> bool:
        return self._uri is not None

    @property
    def document_uri(self) -> str | None:
        return self._uri

    def open(self, document: SourceDocument | None) -> str:
        """Bind the session to a document and render it.

        Opening a different document replaces the previous binding.

        Returns:
            The rendered HTML

        Raises:
            PreviewError: If the document is missing or unsupported
        """
        document = ensure_supported(document)
        if self._uri is not None and self._uri != document.uri:
            logger.info("Preview moved from %s to %s", self._uri, document.uri)
        self._uri = document.uri
        self._version = None
        return self._render(document)

    def notify_change(self, document: SourceDocument) -> str | None:
        """Handle an edit notification.

        Returns:
            The rendered HTML, or None when the notification was ignored
            (session closed, other document, or stale version)
        """
        if self._uri is None or document.uri != self._uri:
            return None
        if self._version is not None and document.version <= self._version:
            logger.debug(
                "Discarding stale version %d of %s (rendered %d)",
                document.version,
                document.uri,
                self._version,
            )
            return None
        return self._render(document)

    def close(self) -> None:
        """Drop the document binding."""
        if self._uri is not None:
            logger.debug("Closing preview of %s", self._uri)
        self._uri = None
        self._version = None

    def __enter__(self) -> PreviewSession:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # =========================================================================
    # Private helpers
    # =========================================================================

    def _render(self, document: SourceDocument) -> str:
        items = self.assembler.extract(document.text)
        html = self.renderer.render(items)
        self._version = document.version
        self.on_render(html)
        return html


__all__ = [
    "PreviewError",
    "NoActiveDocumentError",
    "UnsupportedLanguageError",
    "SourceDocument",
    "PreviewSession",
    "should_show_affordance",
    "ensure_supported",
]
