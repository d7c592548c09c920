"""Tree-sitter adapter - JavaScript parsing into a typed syntax model.

Wraps tree-sitter-javascript and exposes the parse result as frozen
dataclasses (see :mod:`.models`) instead of raw tree-sitter nodes.
"""

from __future__ import annotations

from .manager import ParseError, SyntaxManager
from .models import Comment, CommentKind, Position, Program, Span

__all__ = [
    "SyntaxManager",
    "ParseError",
    "Program",
    "Comment",
    "CommentKind",
    "Position",
    "Span",
]
