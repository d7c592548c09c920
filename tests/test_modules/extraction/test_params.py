"""Tests for modules.extraction.params module."""

from __future__ import annotations

import pytest

from jsdocview.adapters.treesitter.models import (
    Identifier,
    Position,
    Span,
    UnknownPattern,
)
from jsdocview.modules.extraction.params import UNNAMED, extract_param_name, extract_param_names

SPAN = Span(Position(1, 0), Position(1, 1))


def params_of(parse, signature: str) -> list[str]:
    """Display names of the parameters of `function f(<signature>) {}`."""
    node = parse(f"function f({signature}) {{}}").body[0]
    return extract_param_names(node.params)


class TestExtractParamName:
    """Tests for extract_param_name."""

    @pytest.mark.parametrize(
        "signature,expected",
        [
            ("a", "a"),
            ("b = 1", "b"),
            ("...c", "...c"),
            ("{d, e}", "{d, e}"),
            ("[f, , g]", "[f, , g]"),
        ],
    )
    def test_parameter_shapes(self, parse, signature, expected):
        """Should render each parameter shape by its bound names."""
        assert params_of(parse, signature) == [expected]

    def test_all_shapes_in_one_signature(self, parse):
        """Should keep parameter order."""
        names = params_of(parse, "a, b = 1, {d, e}, [f, , g], ...c")
        assert names == ["a", "b", "{d, e}", "[f, , g]", "...c"]

    def test_renamed_object_property_uses_key(self, parse):
        """Should render object properties by their key."""
        assert params_of(parse, "{ a: x, b }") == ["{a, b}"]

    def test_object_rest_property(self, parse):
        """Should render object rest entries with a spread prefix."""
        assert params_of(parse, "{ a, ...others }") == ["{a, ...others}"]

    def test_defaulted_destructuring(self, parse):
        """Should see through a default around a pattern."""
        assert params_of(parse, "{ a } = {}") == ["{a}"]

    def test_nested_array(self, parse):
        """Should render nested array patterns."""
        assert params_of(parse, "[a, [b, c]]") == ["[a, [b, c]]"]

    def test_rest_of_array_pattern(self, parse):
        """Should render a rest element around a pattern."""
        assert params_of(parse, "...[a, b]") == ["...[a, b]"]

    def test_no_parameters(self, parse):
        """Should return an empty list for an empty signature."""
        assert params_of(parse, "") == []

    def test_identifier_model(self):
        """Should work directly on model instances."""
        assert extract_param_name(Identifier("x", SPAN)) == "x"

    def test_unknown_pattern(self):
        """Should render unknown shapes as unnamed."""
        assert extract_param_name(UnknownPattern("member_expression", SPAN)) == UNNAMED

    def test_none(self):
        """Should render a missing pattern as unnamed."""
        assert extract_param_name(None) == UNNAMED
