"""Display names for formal parameters."""

from __future__ import annotations

from collections.abc import Iterable

from jsdocview.adapters.treesitter.models import (
    ArrayPattern,
    AssignmentPattern,
    Identifier,
    ObjectPattern,
    Pattern,
    PropertyPattern,
    RestElement,
)

UNNAMED = "unnamed"


def extract_param_name(param: Pattern | None) -> str:
    """Render one parameter pattern as a display string.

    ``a`` -> ``a``, ``b = 1`` -> ``b``, ``...c`` -> ``...c``,
    ``{d, e}`` -> ``{d, e}``, ``[f, , g]`` -> ``[f, , g]``.
    Anything unrecognised renders as ``unnamed``.
    """
    if param is None:
        return UNNAMED

    if isinstance(param, Identifier):
        return param.name or UNNAMED

    if isinstance(param, AssignmentPattern):
        # Default parameters
        return extract_param_name(param.left)

    if isinstance(param, RestElement):
        return f"...{extract_param_name(param.argument)}"

    if isinstance(param, ObjectPattern):
        return "{" + ", ".join(_property_name(p) for p in param.properties) + "}"

    if isinstance(param, ArrayPattern):
        return "[" + ", ".join(
            extract_param_name(e) if e is not None else "" for e in param.elements
        ) + "]"

    return UNNAMED


def extract_param_names(params: Iterable[Pattern]) -> list[str]:
    return [extract_param_name(p) for p in params]


def _property_name(prop: PropertyPattern | RestElement) -> str:
    if isinstance(prop, RestElement):
        return extract_param_name(prop)
    return prop.key or UNNAMED


__all__ = ["UNNAMED", "extract_param_name", "extract_param_names"]
