"""
Extraction module - Pure functions turning a syntax model into documentation elements.

Architecture:
- params.py: display names for formal parameters
- comments.py: positional comment association and local variable scanning
- jsdoc.py: documentation comment tag parsing
- scope.py: immutable traversal scope
- declarations.py: one element builder per declaration shape
- walker.py: recursive statement traversal and dispatch

All functions are pure: no I/O, no state shared between calls, and no
exceptions for odd input (placeholders are substituted instead).

Usage:
    from jsdocview.adapters.treesitter import SyntaxManager
    from jsdocview.modules.extraction import walk_program

    program = SyntaxManager().parse(source)
    elements = walk_program(program)
"""

from __future__ import annotations

from .comments import (
    MAX_PRECEDING_GAP,
    CommentGroups,
    extract_local_variables,
    find_inline_comments,
    find_preceding_comments,
    group_comments_by_proximity,
)
from .declarations import extract_class, extract_export, extract_function, extract_variables
from .jsdoc import extract_doc_field, parse_doc_text, select_doc_comment
from .models import (
    ELEMENT_CLASSES,
    ClassElement,
    DeclarationKind,
    DocField,
    Element,
    ElementType,
    ExportElement,
    FunctionElement,
    LocalVariable,
    MethodInfo,
    MethodKind,
    ParamDoc,
    ReturnDoc,
    ThrowsDoc,
    VariableElement,
)
from .params import extract_param_name, extract_param_names
from .scope import Scope, create_scope
from .walker import TreeWalker, walk_program

__all__ = [
    # comments
    "MAX_PRECEDING_GAP",
    "CommentGroups",
    "find_preceding_comments",
    "find_inline_comments",
    "extract_local_variables",
    "group_comments_by_proximity",
    # declarations
    "extract_function",
    "extract_variables",
    "extract_class",
    "extract_export",
    # jsdoc
    "select_doc_comment",
    "extract_doc_field",
    "parse_doc_text",
    # models
    "ELEMENT_CLASSES",
    "ElementType",
    "DeclarationKind",
    "MethodKind",
    "DocField",
    "ParamDoc",
    "ReturnDoc",
    "ThrowsDoc",
    "Element",
    "FunctionElement",
    "VariableElement",
    "ClassElement",
    "ExportElement",
    "LocalVariable",
    "MethodInfo",
    # params
    "extract_param_name",
    "extract_param_names",
    # scope / walker
    "Scope",
    "create_scope",
    "TreeWalker",
    "walk_program",
]
