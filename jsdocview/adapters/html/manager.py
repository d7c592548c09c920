"""HTML rendering of extracted documentation with Jinja2 templates.

Three outputs are produced:
- a placeholder document when nothing was extracted,
- structured mode, one block per element grouped by kind,
- raw mode, one block per comment with its verbatim text.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from jinja2 import Environment, PackageLoader, select_autoescape

from jsdocview.adapters.treesitter.models import Comment
from jsdocview.modules.extraction.models import (
    DocField,
    Element,
    ElementType,
    MethodInfo,
)

DEFAULT_TITLE = "Code Documentation"

# Section order and headings of structured mode
ELEMENT_GROUPS: tuple[tuple[ElementType, str], ...] = (
    (ElementType.FUNCTION, "Functions"),
    (ElementType.VARIABLE, "Variables"),
    (ElementType.CLASS, "Classes"),
    (ElementType.EXPORT, "Exports"),
)


class HtmlRenderer:
    """Renders elements or raw comments into a standalone HTML document."""

    def __init__(self, title: str = DEFAULT_TITLE) -> None:
        self.title = title
        self.env = Environment(
            loader=PackageLoader("jsdocview.adapters.html", "templates"),
            autoescape=select_autoescape(["html"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.globals["param_rows"] = param_rows
        self.env.globals["summary"] = summary
        self.env.globals["method_signature"] = method_signature

    def render(self, items: Sequence[Element | Comment] | None) -> str:
        """Render extracted items.

        Args:
            items: Output of the extraction service (elements or comments)

        Returns:
            Complete HTML document
        """
        if not items:
            return self.render_empty()

        elements = [item for item in items if isinstance(item, Element)]
        if elements:
            return self.render_structured(elements)

        comments = [item for item in items if isinstance(item, Comment)]
        return self.render_raw(comments)

    def render_empty(self) -> str:
        return self.env.get_template("empty.html").render(title=self.title)

    def render_structured(self, elements: Sequence[Element]) -> str:
        groups = [
            (heading, [e for e in elements if e.element_type == element_type])
            for element_type, heading in ELEMENT_GROUPS
        ]
        return self.env.get_template("structured.html").render(
            title=self.title,
            groups=[(heading, members) for heading, members in groups if members],
        )

    def render_raw(self, comments: Sequence[Comment]) -> str:
        return self.env.get_template("raw.html").render(title=self.title, comments=comments)


# =============================================================================
# Template helpers
# =============================================================================


def param_rows(doc: DocField | None, params: Sequence[str]) -> list[dict[str, Any]]:
    """Merge code parameters with their documented counterparts.

    Undocumented parameters get type ``any`` and no description.
    """
    rows: list[dict[str, Any]] = []
    for name in params:
        documented = doc.find_param(name) if doc else None
        rows.append(
            {
                "name": name,
                "type": (documented.type if documented else "") or "any",
                "description": documented.description if documented else None,
            }
        )
    return rows


def summary(doc: DocField | None, comments: Sequence[Comment]) -> str | None:
    """Description of a documented item, else the text of its first comment."""
    if doc and doc.description:
        return doc.description
    if doc is None and comments:
        return comments[0].text.strip() or None
    return None


def method_signature(method: MethodInfo) -> str:
    prefix = "static " if method.is_static else ""
    if method.method_kind.value in ("get", "set"):
        prefix += f"{method.method_kind.value} "
    return f"{prefix}{method.name}({', '.join(method.params)})"


def render_document(
    items: Sequence[Element | Comment] | None, title: str = DEFAULT_TITLE
) -> str:
    """Render extracted items with a new renderer."""
    return HtmlRenderer(title=title).render(items)


__all__ = ["HtmlRenderer", "render_document", "param_rows", "summary", "method_signature"]
