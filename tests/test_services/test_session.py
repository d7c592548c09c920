"""Tests for jsdocview.services.session module (PreviewSession)."""

from unittest.mock import MagicMock

import pytest

from jsdocview.services.session import (
    NoActiveDocumentError,
    PreviewError,
    PreviewSession,
    SourceDocument,
    UnsupportedLanguageError,
    ensure_supported,
    should_show_affordance,
)

URI = "file:///project/app.js"


def document(text: str = "function f() {}", version: int = 1, uri: str = URI, language: str = "javascript"):
    return SourceDocument(uri=uri, language_id=language, text=text, version=version)


@pytest.fixture
def rendered():
    """Collect every HTML document passed to on_render."""
    return []


@pytest.fixture
def session(rendered):
    return PreviewSession(on_render=rendered.append)


class TestAffordance:
    """Tests for should_show_affordance and ensure_supported."""

    def test_javascript_shows_affordance(self):
        assert should_show_affordance("javascript")

    def test_other_languages_hide_affordance(self):
        assert not should_show_affordance("python")
        assert not should_show_affordance(None)

    def test_missing_document(self):
        """Should reject a missing document."""
        with pytest.raises(NoActiveDocumentError, match="No active editor found!"):
            ensure_supported(None)

    def test_unsupported_language(self):
        """Should name the rejected file type."""
        with pytest.raises(UnsupportedLanguageError) as exc_info:
            ensure_supported(document(language="python"))
        assert str(exc_info.value) == "File type 'python' is not supported. Only JavaScript is supported."
        assert exc_info.value.language_id == "python"

    def test_errors_share_base_class(self):
        assert issubclass(NoActiveDocumentError, PreviewError)
        assert issubclass(UnsupportedLanguageError, PreviewError)


class TestPreviewSessionLifecycle:
    """Tests for PreviewSession lifecycle methods."""

    def test_not_open_on_init(self, session):
        assert not session.is_open
        assert session.document_uri is None

    def test_open_renders(self, session, rendered):
        """Should render the document on open."""
        html = session.open(document("function greet(name) {}"))
        assert session.is_open
        assert session.document_uri == URI
        assert rendered == [html]
        assert "greet(name)" in html

    def test_open_rejects_unsupported(self, session, rendered):
        """Should not bind or render unsupported documents."""
        with pytest.raises(UnsupportedLanguageError):
            session.open(document(language="markdown"))
        assert not session.is_open
        assert rendered == []

    def test_open_rejects_missing_document(self, session):
        with pytest.raises(NoActiveDocumentError):
            session.open(None)

    def test_open_replaces_document(self, session):
        """Should rebind to a newly opened document."""
        session.open(document(uri="file:///a.js"))
        session.open(document(uri="file:///b.js"))
        assert session.document_uri == "file:///b.js"

    def test_close(self, session):
        session.open(document())
        session.close()
        assert not session.is_open

    def test_context_manager_closes(self, rendered):
        """Should close the session on exit."""
        with PreviewSession(on_render=rendered.append) as session:
            session.open(document())
            assert session.is_open
        assert not session.is_open


class TestNotifyChange:
    """Tests for change notifications."""

    def test_rerenders_newer_version(self, session, rendered):
        """Should re-render when a newer version arrives."""
        session.open(document("function a() {}", version=1))
        html = session.notify_change(document("function b() {}", version=2))
        assert html is not None
        assert "b()" in html
        assert len(rendered) == 2

    def test_discards_stale_version(self, session, rendered):
        """Should ignore versions not newer than the rendered one."""
        session.open(document(version=5))
        assert session.notify_change(document("function old() {}", version=4)) is None
        assert session.notify_change(document("function same() {}", version=5)) is None
        assert len(rendered) == 1

    def test_ignores_other_documents(self, session, rendered):
        session.open(document())
        assert session.notify_change(document(uri="file:///other.js", version=9)) is None
        assert len(rendered) == 1

    def test_ignored_after_close(self, session, rendered):
        """Should not render after the session is closed."""
        session.open(document(version=1))
        session.close()
        assert session.notify_change(document(version=2)) is None
        assert len(rendered) == 1

    def test_invalid_edit_renders_placeholder(self, session):
        """Should render the empty document for unparsable text."""
        session.open(document(version=1))
        html = session.notify_change(document("function broken( {", version=2))
        assert "No code elements or comments found." in html


class TestInjectedCollaborators:
    """Tests for custom assembler and renderer."""

    def test_uses_given_assembler_and_renderer(self):
        assembler = MagicMock()
        assembler.extract.return_value = ["item"]
        renderer = MagicMock()
        renderer.render.return_value = "<html></html>"
        on_render = MagicMock()

        session = PreviewSession(on_render=on_render, assembler=assembler, renderer=renderer)
        session.open(document("let a;"))

        assembler.extract.assert_called_once_with("let a;")
        renderer.render.assert_called_once_with(["item"])
        on_render.assert_called_once_with("<html></html>")

    def test_title(self):
        html = PreviewSession(on_render=lambda _: None, title="My Docs").open(document())
        assert "<title>My Docs</title>" in html
