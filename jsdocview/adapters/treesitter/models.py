"""Syntax model produced by the tree-sitter adapter.

The concrete tree-sitter tree is converted into a closed set of dataclasses,
one variant per declaration, statement, expression and pattern shape that the
extraction layer cares about. Anything else collapses into an ``Other*`` /
``Unknown*`` variant so consumers can dispatch exhaustively with isinstance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

# =============================================================================
# Positions and comments
# =============================================================================


@dataclass(frozen=True)
class Position:
    """A point in the source. Lines are 1-indexed, columns 0-indexed."""

    line: int
    column: int


@dataclass(frozen=True)
class Span:
    """Start/end range attached to every node and comment."""

    start: Position
    end: Position


class CommentKind(str, Enum):
    """Comment delimiter style."""

    LINE = "Line"
    BLOCK = "Block"


@dataclass(frozen=True)
class Comment:
    """A source comment with its delimiters stripped."""

    kind: CommentKind
    text: str
    span: Span

    @property
    def is_doc(self) -> bool:
        """True for documentation comments (``/** ... */`` style)."""
        return self.text.strip().startswith("*")


# =============================================================================
# Patterns (formal parameters and declaration targets)
# =============================================================================


@dataclass(frozen=True)
class Identifier:
    name: str
    span: Span


@dataclass(frozen=True)
class AssignmentPattern:
    """Defaulted binding: ``left = <default>``."""

    left: Pattern
    span: Span


@dataclass(frozen=True)
class RestElement:
    """Rest binding: ``...argument``."""

    argument: Pattern
    span: Span


@dataclass(frozen=True)
class PropertyPattern:
    """One entry of an object pattern.

    ``key`` is None when the key cannot be read as a plain name
    (computed keys with non-trivial expressions).
    """

    key: str | None
    value: Pattern | None
    span: Span


@dataclass(frozen=True)
class ObjectPattern:
    properties: tuple[PropertyPattern | RestElement, ...]
    span: Span


@dataclass(frozen=True)
class ArrayPattern:
    """Array destructuring; elided slots are ``None``."""

    elements: tuple[Pattern | None, ...]
    span: Span


@dataclass(frozen=True)
class UnknownPattern:
    kind: str
    span: Span


Pattern = Union[
    Identifier, AssignmentPattern, RestElement, ObjectPattern, ArrayPattern, UnknownPattern
]


# =============================================================================
# Expressions
# =============================================================================


@dataclass(frozen=True)
class FunctionExpression:
    """Function, generator or arrow function used as a value."""

    name: str | None
    params: tuple[Pattern, ...]
    body: BlockStatement | None  # None when an arrow function has an expression body
    span: Span
    is_arrow: bool = False
    is_async: bool = False


@dataclass(frozen=True)
class IdentifierReference:
    name: str
    span: Span


@dataclass(frozen=True)
class MemberExpression:
    """``object.property``; property is None for computed access."""

    object: Expression
    property: str | None
    span: Span


@dataclass(frozen=True)
class AssignmentExpression:
    operator: str
    left: Expression
    right: Expression
    span: Span


@dataclass(frozen=True)
class OtherExpression:
    kind: str
    span: Span


Expression = Union[
    FunctionExpression,
    IdentifierReference,
    MemberExpression,
    AssignmentExpression,
    OtherExpression,
]


# =============================================================================
# Statements and declarations
# =============================================================================


@dataclass(frozen=True)
class BlockStatement:
    body: tuple[Statement, ...]
    span: Span


@dataclass(frozen=True)
class FunctionDeclaration:
    name: str | None
    params: tuple[Pattern, ...]
    body: BlockStatement
    span: Span
    is_async: bool = False
    is_generator: bool = False


@dataclass(frozen=True)
class VariableDeclarator:
    target: Pattern
    init: Expression | None
    span: Span


@dataclass(frozen=True)
class VariableDeclaration:
    kind: str  # 'var', 'let' or 'const'
    declarations: tuple[VariableDeclarator, ...]
    span: Span


@dataclass(frozen=True)
class MethodDefinition:
    """A class method. ``key_name`` is the identifier key, ``key_literal`` the
    value of a string/number key; both None for unreadable computed keys."""

    key_name: str | None
    key_literal: str | None
    kind: str  # 'constructor', 'method', 'get' or 'set'
    is_static: bool
    value: FunctionExpression
    span: Span


@dataclass(frozen=True)
class FieldDefinition:
    key_name: str | None
    value: Expression | None
    is_static: bool
    span: Span


@dataclass(frozen=True)
class StaticBlock:
    body: BlockStatement
    span: Span


ClassMember = Union[MethodDefinition, FieldDefinition, StaticBlock]


@dataclass(frozen=True)
class ClassDeclaration:
    name: str | None
    superclass: str | None
    members: tuple[ClassMember, ...]
    span: Span


@dataclass(frozen=True)
class ExpressionStatement:
    expression: Expression
    span: Span


@dataclass(frozen=True)
class ExportDeclaration:
    """``export [default] <declaration>``; declaration is None for
    export clauses and exported expressions."""

    declaration: Statement | None
    is_default: bool
    span: Span


@dataclass(frozen=True)
class LoopStatement:
    kind: str  # 'for', 'for_in', 'while' or 'do'
    body: Statement
    span: Span


@dataclass(frozen=True)
class IfStatement:
    consequent: Statement
    alternate: Statement | None
    span: Span


@dataclass(frozen=True)
class TryStatement:
    block: BlockStatement
    handler: BlockStatement | None
    finalizer: BlockStatement | None
    span: Span


@dataclass(frozen=True)
class SwitchStatement:
    cases: tuple[tuple[Statement, ...], ...]
    span: Span


@dataclass(frozen=True)
class LabeledStatement:
    body: Statement
    span: Span


@dataclass(frozen=True)
class OtherStatement:
    kind: str
    span: Span


Statement = Union[
    BlockStatement,
    FunctionDeclaration,
    VariableDeclaration,
    ClassDeclaration,
    ExpressionStatement,
    ExportDeclaration,
    LoopStatement,
    IfStatement,
    TryStatement,
    SwitchStatement,
    LabeledStatement,
    OtherStatement,
]


@dataclass(frozen=True)
class Program:
    """Root of a parsed document."""

    body: tuple[Statement, ...]
    comments: tuple[Comment, ...] = field(default_factory=tuple)
    span: Span | None = None


__all__ = [
    "Position",
    "Span",
    "CommentKind",
    "Comment",
    "Identifier",
    "AssignmentPattern",
    "RestElement",
    "PropertyPattern",
    "ObjectPattern",
    "ArrayPattern",
    "UnknownPattern",
    "Pattern",
    "FunctionExpression",
    "IdentifierReference",
    "MemberExpression",
    "AssignmentExpression",
    "OtherExpression",
    "Expression",
    "BlockStatement",
    "FunctionDeclaration",
    "VariableDeclarator",
    "VariableDeclaration",
    "MethodDefinition",
    "FieldDefinition",
    "StaticBlock",
    "ClassMember",
    "ClassDeclaration",
    "ExpressionStatement",
    "ExportDeclaration",
    "LoopStatement",
    "IfStatement",
    "TryStatement",
    "SwitchStatement",
    "LabeledStatement",
    "OtherStatement",
    "Statement",
    "Program",
]
