"""Positional association of comments with code.

Comments are not owned by syntax nodes; ownership is inferred from line
distance. Every extractor goes through these functions so the heuristic
lives in one place.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from jsdocview.adapters.treesitter.models import (
    BlockStatement,
    Comment,
    Span,
    Statement,
    VariableDeclaration,
)

from .models import ClassElement, DeclarationKind, Element, LocalVariable
from .params import extract_param_name

# A comment may end at most this many lines above the node it documents.
MAX_PRECEDING_GAP = 2


def find_preceding_comments(span: Span | None, comments: Sequence[Comment]) -> list[Comment]:
    """Find the comments directly above a node.

    A comment qualifies when it ends on or before the node's first line and
    no more than ``MAX_PRECEDING_GAP`` lines above it. All qualifying comments
    are returned in source order.

    Args:
        span: Span of the node being documented
        comments: All comments of the document

    Returns:
        Qualifying comments (empty when there is no position data)
    """
    if span is None or not comments:
        return []

    start_line = span.start.line
    return [
        comment
        for comment in comments
        if comment.span is not None
        and 0 <= start_line - comment.span.end.line <= MAX_PRECEDING_GAP
    ]


def find_inline_comments(body: BlockStatement | None, comments: Sequence[Comment]) -> list[Comment]:
    """Find comments strictly inside a block body.

    Comments sharing a line with the opening or closing brace are excluded.
    """
    if body is None or body.span is None:
        return []

    body_start = body.span.start.line
    body_end = body.span.end.line
    return [
        comment
        for comment in comments
        if comment.span.start.line > body_start and comment.span.end.line < body_end
    ]


def extract_local_variables(body: Sequence[Statement]) -> list[LocalVariable]:
    """Collect variables declared by the immediate statements of a body.

    Only one level is scanned; declarations in nested blocks are ignored.
    """
    variables: list[LocalVariable] = []
    for statement in body:
        if not isinstance(statement, VariableDeclaration):
            continue
        kind = to_declaration_kind(statement.kind)
        for declarator in statement.declarations:
            variables.append(
                LocalVariable(
                    name=extract_param_name(declarator.target),
                    decl_kind=kind,
                    span=declarator.span or statement.span,
                )
            )
    return variables


def to_declaration_kind(kind: str) -> DeclarationKind:
    """Map a declaration keyword to its kind, defaulting to ``var``."""
    try:
        return DeclarationKind(kind)
    except ValueError:
        return DeclarationKind.VAR


# =============================================================================
# Raw comment grouping
# =============================================================================


@dataclass
class CommentGroups:
    """Comments of a document split by their relation to code."""

    attached: list[Comment] = field(default_factory=list)
    inline: list[Comment] = field(default_factory=list)
    standalone: list[Comment] = field(default_factory=list)


def group_comments_by_proximity(
    comments: Sequence[Comment], elements: Sequence[Element]
) -> CommentGroups:
    """Split comments into attached, inline and standalone groups.

    Comments are identified by their start position, so the same comment
    reported by two elements is counted once per group.
    """
    groups = CommentGroups()

    for element in elements:
        groups.attached.extend(element.comments)
        groups.inline.extend(getattr(element, "inline_comments", []))
        if isinstance(element, ClassElement):
            for method in element.methods:
                groups.attached.extend(method.comments)
                groups.inline.extend(method.inline_comments)

    seen = {comment.span.start for comment in groups.attached}
    seen.update(comment.span.start for comment in groups.inline)

    groups.standalone = [c for c in comments if c.span.start not in seen]
    return groups


__all__ = [
    "MAX_PRECEDING_GAP",
    "find_preceding_comments",
    "find_inline_comments",
    "extract_local_variables",
    "to_declaration_kind",
    "CommentGroups",
    "group_comments_by_proximity",
]
