"""Recursive traversal of a program's statements.

Statements are visited once each, depth-first in document order. Function
declarations own the traversal of their bodies; every other compound
statement is entered through :func:`nested_bodies` with a refined scope.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from jsdocview.adapters.treesitter.models import (
    BlockStatement,
    ClassDeclaration,
    Comment,
    ExportDeclaration,
    ExpressionStatement,
    FunctionDeclaration,
    IfStatement,
    LabeledStatement,
    LoopStatement,
    OtherStatement,
    Program,
    Statement,
    StaticBlock,
    SwitchStatement,
    TryStatement,
    VariableDeclaration,
)

from .declarations import extract_class, extract_export, extract_function, extract_variables
from .models import Element
from .scope import Scope, create_scope

logger = logging.getLogger(__name__)


class TreeWalker:
    """Collects elements from a statement list.

    Args:
        comments: All comments of the document, used for association
    """

    def __init__(self, comments: Sequence[Comment]) -> None:
        self.comments = comments
        self.elements: list[Element] = []

    def walk_program(self, program: Program) -> list[Element]:
        """Walk a whole program from a fresh root scope."""
        self.walk(program.body, create_scope())
        return self.elements

    def walk(self, statements: Sequence[Statement], scope: Scope) -> None:
        for statement in statements:
            self.visit(statement, scope)

    def visit(self, statement: Statement, scope: Scope) -> None:
        """Dispatch one statement on its shape."""
        if isinstance(statement, FunctionDeclaration):
            self.elements.append(extract_function(statement, self.comments))
            self.walk(statement.body.body, scope.child(in_function=True))
            return

        if isinstance(statement, VariableDeclaration):
            if scope.is_top_level:
                self.elements.extend(extract_variables(statement, self.comments))
            else:
                logger.debug(
                    "Skipping %s declaration at line %d inside a function body",
                    statement.kind,
                    statement.span.start.line,
                )
            return

        if isinstance(statement, ClassDeclaration):
            self.elements.append(extract_class(statement, self.comments))
            for member in statement.members:
                if isinstance(member, StaticBlock):
                    self.walk(member.body.body, scope.child(in_class=True, in_function=True))
            return

        if isinstance(statement, ExpressionStatement):
            export = extract_export(statement, self.comments)
            if export is not None:
                self.elements.append(export)
            return

        if isinstance(statement, ExportDeclaration):
            if statement.declaration is not None:
                self.visit(statement.declaration, scope)
            return

        for body, body_scope in nested_bodies(statement, scope):
            self.walk(body, body_scope)


def nested_bodies(statement: Statement, scope: Scope) -> list[tuple[Sequence[Statement], Scope]]:
    """Statement lists nested in a compound statement, with their scopes.

    Entering a loop body sets ``in_loop``; other blocks inherit the scope.
    """
    if isinstance(statement, BlockStatement):
        return [(statement.body, scope)]

    if isinstance(statement, LoopStatement):
        return [(_as_statements(statement.body), scope.child(in_loop=True))]

    if isinstance(statement, IfStatement):
        bodies = [(_as_statements(statement.consequent), scope)]
        if statement.alternate is not None:
            bodies.append((_as_statements(statement.alternate), scope))
        return bodies

    if isinstance(statement, TryStatement):
        blocks = [statement.block, statement.handler, statement.finalizer]
        return [(block.body, scope) for block in blocks if block is not None]

    if isinstance(statement, SwitchStatement):
        return [(case, scope) for case in statement.cases]

    if isinstance(statement, LabeledStatement):
        return [(_as_statements(statement.body), scope)]

    if isinstance(statement, OtherStatement):
        return []

    # Declarations are handled by TreeWalker.visit and never reach here
    return []


def _as_statements(statement: Statement) -> Sequence[Statement]:
    if isinstance(statement, BlockStatement):
        return statement.body
    return (statement,)


def walk_program(program: Program) -> list[Element]:
    """Extract all reportable elements of a program."""
    return TreeWalker(program.comments).walk_program(program)


__all__ = ["TreeWalker", "nested_bodies", "walk_program"]
