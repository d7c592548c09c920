"""Element builders, one per declaration shape.

Each builder is total: missing names fall back to placeholders
(``anonymous``, ``unnamed``, ``default``) so a single odd declaration
never aborts extraction of the rest of the document.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from jsdocview.adapters.treesitter.models import (
    AssignmentExpression,
    ClassDeclaration,
    Comment,
    Expression,
    ExpressionStatement,
    FieldDefinition,
    FunctionDeclaration,
    FunctionExpression,
    IdentifierReference,
    MemberExpression,
    MethodDefinition,
    VariableDeclaration,
)

from .comments import (
    extract_local_variables,
    find_inline_comments,
    find_preceding_comments,
    to_declaration_kind,
)
from .jsdoc import extract_doc_field
from .models import (
    ClassElement,
    ExportElement,
    FunctionElement,
    MethodInfo,
    MethodKind,
    VariableElement,
)
from .params import UNNAMED, extract_param_name, extract_param_names

logger = logging.getLogger(__name__)

ANONYMOUS = "anonymous"
DEFAULT_EXPORT = "default"

# Objects whose member assignments are CommonJS exports
EXPORT_OBJECTS = {"module", "exports"}


def extract_function(node: FunctionDeclaration, comments: Sequence[Comment]) -> FunctionElement:
    """Build a function element from a function declaration."""
    preceding = find_preceding_comments(node.span, comments)
    element = FunctionElement(
        name=node.name or ANONYMOUS,
        span=node.span,
        comments=preceding,
        doc=extract_doc_field(preceding),
        params=extract_param_names(node.params),
        inline_comments=find_inline_comments(node.body, comments),
        local_variables=extract_local_variables(node.body.body),
        is_async=node.is_async,
    )
    logger.debug(
        "Function %s(%s): %d comment(s), %d local(s)",
        element.name,
        ", ".join(element.params),
        len(element.comments),
        len(element.local_variables),
    )
    return element


def extract_variables(node: VariableDeclaration, comments: Sequence[Comment]) -> list[VariableElement]:
    """Build one variable element per declarator.

    All declarators share the comments found above the declaration statement.
    """
    preceding = find_preceding_comments(node.span, comments)
    decl_kind = to_declaration_kind(node.kind)
    elements: list[VariableElement] = []

    for declarator in node.declarations:
        element = VariableElement(
            name=extract_param_name(declarator.target),
            span=declarator.span or node.span,
            comments=list(preceding),
            doc=extract_doc_field(preceding),
            decl_kind=decl_kind,
        )

        init = declarator.init
        if isinstance(init, FunctionExpression):
            element.is_function_valued = True
            element.params = extract_param_names(init.params)
            # Expression-bodied arrows have no block to hold comments
            if init.body is not None:
                element.inline_comments = find_inline_comments(init.body, comments)

        elements.append(element)

    return elements


def extract_class(node: ClassDeclaration, comments: Sequence[Comment]) -> ClassElement:
    """Build a class element including its method-shaped members."""
    preceding = find_preceding_comments(node.span, comments)
    methods: list[MethodInfo] = []

    for member in node.members:
        if isinstance(member, MethodDefinition):
            methods.append(_extract_method(member, comments))
        elif isinstance(member, FieldDefinition) and isinstance(member.value, FunctionExpression):
            # Arrow function class fields behave like methods
            methods.append(_extract_field_method(member, member.value, comments))

    return ClassElement(
        name=node.name or ANONYMOUS,
        span=node.span,
        comments=preceding,
        doc=extract_doc_field(preceding),
        methods=methods,
        superclass=node.superclass,
    )


def extract_export(node: ExpressionStatement, comments: Sequence[Comment]) -> ExportElement | None:
    """Build an export element for ``module.X = ...`` / ``exports.X = ...``.

    Returns:
        ExportElement, or None when the statement is not an export assignment
    """
    assignment = node.expression
    if not isinstance(assignment, AssignmentExpression):
        return None

    target = assignment.left
    if not isinstance(target, MemberExpression) or not is_export_object(target.object):
        return None

    preceding = find_preceding_comments(assignment.span, comments)
    element = ExportElement(
        name=target.property or DEFAULT_EXPORT,
        span=assignment.span,
        comments=preceding,
        doc=extract_doc_field(preceding),
    )

    value = assignment.right
    if isinstance(value, FunctionExpression):
        element.is_function_valued = True
        element.params = extract_param_names(value.params)
        element.inline_comments = find_inline_comments(value.body, comments)

    return element


def is_export_object(expression: Expression) -> bool:
    """True for ``module``, ``exports`` and ``module.exports``."""
    if isinstance(expression, IdentifierReference):
        return expression.name in EXPORT_OBJECTS
    if isinstance(expression, MemberExpression):
        return (
            isinstance(expression.object, IdentifierReference)
            and expression.object.name == "module"
            and expression.property == "exports"
        )
    return False


# =============================================================================
# Class members
# =============================================================================


def _extract_method(member: MethodDefinition, comments: Sequence[Comment]) -> MethodInfo:
    preceding = find_preceding_comments(member.span, comments)
    return MethodInfo(
        name=member.key_name or member.key_literal or UNNAMED,
        method_kind=_to_method_kind(member.kind),
        is_static=member.is_static,
        params=extract_param_names(member.value.params),
        span=member.span,
        comments=preceding,
        doc=extract_doc_field(preceding),
        inline_comments=find_inline_comments(member.value.body, comments),
        is_async=member.value.is_async,
    )


def _extract_field_method(
    member: FieldDefinition, value: FunctionExpression, comments: Sequence[Comment]
) -> MethodInfo:
    preceding = find_preceding_comments(member.span, comments)
    return MethodInfo(
        name=member.key_name or UNNAMED,
        method_kind=MethodKind.METHOD,
        is_static=member.is_static,
        params=extract_param_names(value.params),
        span=member.span,
        comments=preceding,
        doc=extract_doc_field(preceding),
        inline_comments=find_inline_comments(value.body, comments),
        is_async=value.is_async,
    )


def _to_method_kind(kind: str) -> MethodKind:
    try:
        return MethodKind(kind)
    except ValueError:
        return MethodKind.METHOD


__all__ = [
    "ANONYMOUS",
    "DEFAULT_EXPORT",
    "extract_function",
    "extract_variables",
    "extract_class",
    "extract_export",
    "is_export_object",
]
