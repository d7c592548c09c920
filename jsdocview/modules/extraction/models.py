"""Data models for documentation extraction results.

Elements are the normalized units handed to the renderer. Every element
carries the comments found directly above it and, when one of those is a
documentation comment, the parsed :class:`DocField`.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, ClassVar

from jsdocview.adapters.treesitter.models import Comment, Span


class ElementType(str, Enum):
    """Tag of the element union."""

    FUNCTION = "function"
    VARIABLE = "variable"
    CLASS = "class"
    EXPORT = "export"


class DeclarationKind(str, Enum):
    VAR = "var"
    LET = "let"
    CONST = "const"


class MethodKind(str, Enum):
    CONSTRUCTOR = "constructor"
    METHOD = "method"
    GET = "get"
    SET = "set"


# =============================================================================
# Documentation comment fields
# =============================================================================


@dataclass
class ParamDoc:
    """A documented ``@param``."""

    type: str
    name: str
    description: str


@dataclass
class ReturnDoc:
    type: str
    description: str


@dataclass
class ThrowsDoc:
    type: str
    description: str


@dataclass
class DocField:
    """Structured data parsed from a documentation comment."""

    description: str = ""
    params: list[ParamDoc] = field(default_factory=list)
    returns: ReturnDoc | None = None
    examples: list[str] = field(default_factory=list)
    throws: list[ThrowsDoc] | None = None
    deprecated: str | None = None
    since: str | None = None

    def find_param(self, name: str) -> ParamDoc | None:
        """Return the documented parameter with the given name, if any."""
        for param in self.params:
            if param.name == name:
                return param
        return None


# =============================================================================
# Elements
# =============================================================================


@dataclass
class LocalVariable:
    """A variable declared directly in a function body."""

    name: str
    decl_kind: DeclarationKind
    span: Span


@dataclass
class MethodInfo:
    """A method-shaped class member."""

    name: str
    method_kind: MethodKind
    is_static: bool
    params: list[str]
    span: Span
    comments: list[Comment] = field(default_factory=list)
    doc: DocField | None = None
    inline_comments: list[Comment] = field(default_factory=list)
    is_async: bool = False


@dataclass
class Element:
    """Fields shared by every element variant."""

    name: str
    span: Span
    comments: list[Comment] = field(default_factory=list)
    doc: DocField | None = None

    element_type: ClassVar[ElementType]

    @property
    def line(self) -> int:
        return self.span.start.line

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary tagged with its type."""
        data = asdict(self)
        data["type"] = self.element_type.value
        return data


@dataclass
class FunctionElement(Element):
    element_type: ClassVar[ElementType] = ElementType.FUNCTION

    params: list[str] = field(default_factory=list)
    inline_comments: list[Comment] = field(default_factory=list)
    local_variables: list[LocalVariable] = field(default_factory=list)
    is_async: bool = False


@dataclass
class VariableElement(Element):
    element_type: ClassVar[ElementType] = ElementType.VARIABLE

    decl_kind: DeclarationKind = DeclarationKind.VAR
    is_function_valued: bool = False
    params: list[str] = field(default_factory=list)
    inline_comments: list[Comment] = field(default_factory=list)


@dataclass
class ClassElement(Element):
    element_type: ClassVar[ElementType] = ElementType.CLASS

    methods: list[MethodInfo] = field(default_factory=list)
    superclass: str | None = None


@dataclass
class ExportElement(Element):
    element_type: ClassVar[ElementType] = ElementType.EXPORT

    is_function_valued: bool = False
    params: list[str] = field(default_factory=list)
    inline_comments: list[Comment] = field(default_factory=list)


ELEMENT_CLASSES: tuple[type[Element], ...] = (
    FunctionElement,
    VariableElement,
    ClassElement,
    ExportElement,
)


__all__ = [
    "ElementType",
    "DeclarationKind",
    "MethodKind",
    "ParamDoc",
    "ReturnDoc",
    "ThrowsDoc",
    "DocField",
    "LocalVariable",
    "MethodInfo",
    "Element",
    "FunctionElement",
    "VariableElement",
    "ClassElement",
    "ExportElement",
    "ELEMENT_CLASSES",
]
