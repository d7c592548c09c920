"""Tests for adapters.html.manager module."""

from __future__ import annotations

from jsdocview.adapters.html import DEFAULT_TITLE, HtmlRenderer, render_document
from jsdocview.adapters.html.manager import method_signature, param_rows, summary
from jsdocview.adapters.treesitter.models import Comment, CommentKind, Position, Span
from jsdocview.modules.extraction.models import (
    DocField,
    MethodInfo,
    MethodKind,
    ParamDoc,
)
from jsdocview.services.extraction import extract

SPAN = Span(Position(3, 0), Position(3, 10))


def comment(text: str, line: int = 3) -> Comment:
    return Comment(CommentKind.LINE, text, Span(Position(line, 0), Position(line, 10)))


class TestRenderModes:
    """Tests for the three output modes."""

    def test_empty(self):
        """Should render the placeholder for no items."""
        html = HtmlRenderer().render([])
        assert "No code elements or comments found." in html
        assert f"<h1>{DEFAULT_TITLE}</h1>" in html

    def test_none_is_empty(self):
        assert "No code elements or comments found." in HtmlRenderer().render(None)

    def test_raw_comments(self):
        """Should render each comment's literal text and line."""
        html = HtmlRenderer().render([comment(" remember to refactor", line=7)])
        assert "remember to refactor" in html
        assert "Line: 7" in html

    def test_structured_groups(self, sample_source):
        """Should group elements under their section headings."""
        html = HtmlRenderer().render(extract(sample_source))
        for heading in ("Functions", "Variables", "Classes", "Exports"):
            assert f"<h2>{heading}</h2>" in html
        assert html.index("<h2>Functions</h2>") < html.index("<h2>Classes</h2>")

    def test_empty_groups_are_dropped(self):
        """Should omit headings without elements."""
        html = HtmlRenderer().render(extract("function f() {}"))
        assert "<h2>Functions</h2>" in html
        assert "<h2>Variables</h2>" not in html

    def test_custom_title(self):
        html = render_document([], title="API Docs")
        assert "<title>API Docs</title>" in html

    def test_styles_are_inlined(self):
        """Should produce a standalone document."""
        html = HtmlRenderer().render([])
        assert html.lstrip().startswith("<!DOCTYPE html>")
        assert "<style>" in html
        assert "font-family" in html


class TestStructuredContent:
    """Tests for rendered element details."""

    def test_function_signature_table(self, sample_source):
        """Should merge documented and code parameters."""
        html = HtmlRenderer().render(extract(sample_source))
        assert "add(a, b)" in html
        assert "first operand" in html
        assert "Returns" in html
        assert "the sum" in html
        assert "Implementation Notes" in html
        assert "plain addition" in html
        assert "Local Variables" in html

    def test_undocumented_param(self):
        """Should mark parameters without documentation."""
        html = HtmlRenderer().render(extract("/** Does it. */\nfunction f(a) {}"))
        assert "No documentation" in html
        assert "any" in html

    def test_missing_description(self):
        html = HtmlRenderer().render(extract("function f() {}"))
        assert "No description available" in html

    def test_plain_comment_used_as_description(self):
        html = HtmlRenderer().render(extract("// Starts the app\nfunction start() {}"))
        assert "Starts the app" in html

    def test_class_methods(self, sample_source):
        """Should list methods with their signatures."""
        html = HtmlRenderer().render(extract(sample_source))
        assert "Point extends Shape" in html
        assert "constructor(x, y)" in html
        assert "static origin()" in html
        assert "Build a point." in html

    def test_exports(self):
        html = HtmlRenderer().render(extract("module.exports.foo = function(x) {}\nexports.bar = 1;"))
        assert "module.exports.foo(x)" in html
        assert "module.exports.bar" in html

    def test_deprecated_and_since(self):
        html = HtmlRenderer().render(
            extract("/**\n * Old.\n * @deprecated use g\n * @since 2.0\n */\nfunction f() {}")
        )
        assert "Deprecated: use g" in html
        assert "Since 2.0" in html

    def test_examples_and_throws(self):
        html = HtmlRenderer().render(
            extract("/**\n * Parse.\n * @throws {SyntaxError} on bad input\n * @example\n * parse('1')\n */\nfunction parse(s) {}")
        )
        assert "Throws" in html
        assert "SyntaxError" in html
        assert "Examples" in html
        assert "parse(&#39;1&#39;)" in html

    def test_html_is_escaped(self):
        """Should escape markup found in comments."""
        html = HtmlRenderer().render([comment(" <script>alert(1)</script>")])
        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;" in html


class TestTemplateHelpers:
    """Tests for the template helper functions."""

    def test_param_rows_merge(self):
        doc = DocField(params=[ParamDoc(type="number", name="a", description="first")])
        rows = param_rows(doc, ["a", "b"])
        assert rows == [
            {"name": "a", "type": "number", "description": "first"},
            {"name": "b", "type": "any", "description": None},
        ]

    def test_param_rows_without_doc(self):
        assert param_rows(None, ["x"]) == [{"name": "x", "type": "any", "description": None}]

    def test_param_rows_untyped_doc(self):
        doc = DocField(params=[ParamDoc(type="", name="a", description="first")])
        assert param_rows(doc, ["a"])[0]["type"] == "any"

    def test_summary(self):
        """Should prefer the doc description over comment text."""
        assert summary(DocField(description="Doc."), [comment(" plain")]) == "Doc."
        assert summary(None, [comment(" plain ")]) == "plain"
        assert summary(DocField(), [comment(" plain")]) is None
        assert summary(None, []) is None

    def test_method_signature(self):
        method = MethodInfo(
            name="size",
            method_kind=MethodKind.GET,
            is_static=True,
            params=[],
            span=SPAN,
        )
        assert method_signature(method) == "static get size()"

    def test_returns_row_without_params(self):
        """Should show the signature table for a documented return alone."""
        html = HtmlRenderer().render(extract("/** @returns the answer */\nfunction f() {}"))
        assert "<strong>Returns</strong>" in html
        assert "the answer" in html
