"""Parser for documentation comment tags.

Selects the first documentation comment (``/** ... */``) of a comment list
and extracts description, ``@param``, ``@returns``, ``@example``,
``@throws``, ``@deprecated`` and ``@since``. Tag bodies run up to the next
``@`` or the end of the comment; unknown tags are ignored and malformed
types simply produce an empty type.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from jsdocview.adapters.treesitter.models import Comment

from .models import DocField, ParamDoc, ReturnDoc, ThrowsDoc

# Leading " * " gutter of a documentation comment line
_GUTTER = re.compile(r"^[ \t]*\*(?!/)[ \t]?")

_DESCRIPTION = re.compile(r"^(.*?)(?=@|\Z)", re.DOTALL)
_PARAM = re.compile(
    r"@param\b\s*(?:\{([^}]*)\})?\s*(?:\[([^\]]*)\]|(\S+))\s*-?\s*(.*?)(?=@|\Z)",
    re.DOTALL,
)
_RETURNS = re.compile(r"@returns?\b\s*(?:\{([^}]*)\})?\s*-?\s*(.*?)(?=@|\Z)", re.DOTALL)
_EXAMPLE = re.compile(r"@example\b(.*?)(?=@|\Z)", re.DOTALL)
_THROWS = re.compile(r"@throws?\b\s*(?:\{([^}]*)\})?\s*-?\s*(.*?)(?=@|\Z)", re.DOTALL)
_DEPRECATED = re.compile(r"@deprecated\b(.*?)(?=@|\Z)", re.DOTALL)
_SINCE = re.compile(r"@since\b(.*?)(?=@|\Z)", re.DOTALL)


def select_doc_comment(comments: Sequence[Comment] | None) -> Comment | None:
    """Return the first documentation comment, if any."""
    if not comments:
        return None
    for comment in comments:
        if comment.is_doc:
            return comment
    return None


def extract_doc_field(comments: Sequence[Comment] | None) -> DocField | None:
    """Parse the first documentation comment of ``comments``.

    Returns:
        DocField, or None when no comment is a documentation comment
    """
    comment = select_doc_comment(comments)
    if comment is None:
        return None
    return parse_doc_text(comment.text)


def parse_doc_text(text: str) -> DocField:
    """Parse the body of a documentation comment (delimiters removed)."""
    body = _strip_gutter(text)
    doc = DocField()

    desc_match = _DESCRIPTION.match(body)
    if desc_match:
        doc.description = _clean_lines(desc_match.group(1))

    for match in _PARAM.finditer(body):
        doc.params.append(
            ParamDoc(
                type=(match.group(1) or "").strip(),
                name=(match.group(2) or match.group(3) or "").strip(),
                description=_clean_lines(match.group(4) or ""),
            )
        )

    returns_match = _RETURNS.search(body)
    if returns_match:
        doc.returns = ReturnDoc(
            type=(returns_match.group(1) or "").strip(),
            description=_clean_lines(returns_match.group(2) or ""),
        )

    for match in _EXAMPLE.finditer(body):
        doc.examples.append(match.group(1).strip())

    throws = [
        ThrowsDoc(
            type=(match.group(1) or "").strip(),
            description=_clean_lines(match.group(2) or ""),
        )
        for match in _THROWS.finditer(body)
    ]
    if throws:
        doc.throws = throws

    deprecated_match = _DEPRECATED.search(body)
    if deprecated_match:
        doc.deprecated = _clean_lines(deprecated_match.group(1))

    since_match = _SINCE.search(body)
    if since_match:
        doc.since = _clean_lines(since_match.group(1))

    return doc


def _strip_gutter(text: str) -> str:
    """Drop the leading doc marker and the ``*`` gutter of every line."""
    body = text.lstrip()
    if body.startswith("*"):
        body = body[1:]
    return "\n".join(_GUTTER.sub("", line, count=1).rstrip() for line in body.splitlines())


def _clean_lines(text: str) -> str:
    """Strip every line and the block as a whole."""
    return "\n".join(line.strip() for line in text.strip().splitlines())


__all__ = ["select_doc_comment", "extract_doc_field", "parse_doc_text"]
