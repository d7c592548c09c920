"""Tests for modules.extraction.walker module."""

from __future__ import annotations

from jsdocview.modules.extraction.models import (
    ClassElement,
    DeclarationKind,
    ExportElement,
    FunctionElement,
    VariableElement,
)
from jsdocview.modules.extraction.scope import create_scope
from jsdocview.modules.extraction.walker import TreeWalker, nested_bodies


def names(elements, cls=None):
    return [e.name for e in elements if cls is None or isinstance(e, cls)]


class TestScopeSuppression:
    """Tests for top-level reporting of variables."""

    def test_function_locals_are_not_top_level(self, walk):
        """Should report y but keep x as a local of f."""
        elements = walk("function f(){ let x = 1; } let y = 2;")

        assert names(elements, VariableElement) == ["y"]
        function = elements[0]
        assert isinstance(function, FunctionElement)
        assert [(v.name, v.decl_kind) for v in function.local_variables] == [
            ("x", DeclarationKind.LET)
        ]

    def test_nested_block_variables_inside_function(self, walk):
        """Should suppress variables at any depth inside a function."""
        elements = walk("function f() { if (a) { for (;;) { var deep = 1; } } }")
        assert names(elements, VariableElement) == []

    def test_variables_in_top_level_blocks(self, walk):
        """Should report variables in top-level control flow."""
        source = (
            "if (ready) { var a = 1; } else { var b = 2; }\n"
            "for (const item of items) { let c = item; }\n"
            "try { var d; } catch (e) { var f; } finally { var g; }\n"
            "switch (k) { case 1: var h; }\n"
            "{ let i; }\n"
        )
        assert names(walk(source), VariableElement) == ["a", "b", "c", "d", "f", "g", "h", "i"]

    def test_nested_functions_are_reported(self, walk):
        """Should report function declarations inside function bodies."""
        elements = walk("function outer() {\n  function inner() { let z; }\n}\n")
        assert names(elements, FunctionElement) == ["outer", "inner"]
        assert names(elements, VariableElement) == []


class TestWalkerDispatch:
    """Tests for element dispatch on statement shapes."""

    def test_document_order(self, walk, sample_source):
        """Should emit elements in document order."""
        elements = walk(sample_source)
        assert [(type(e).__name__, e.name) for e in elements] == [
            ("FunctionElement", "add"),
            ("VariableElement", "greeting"),
            ("ClassElement", "Point"),
            ("ExportElement", "add"),
        ]

    def test_es_module_exports(self, walk):
        """Should look through export declarations."""
        elements = walk("export function f() {}\nexport const g = 1;\nexport class C {}\n")
        assert [(type(e).__name__, e.name) for e in elements] == [
            ("FunctionElement", "f"),
            ("VariableElement", "g"),
            ("ClassElement", "C"),
        ]

    def test_anonymous_default_function(self, walk):
        """Should report an unnamed default-exported function."""
        [element] = walk("/** Doc */\nexport default function (a) {}\n")
        assert isinstance(element, FunctionElement)
        assert element.name == "anonymous"
        assert element.params == ["a"]
        assert element.doc is not None
        assert element.doc.description == "Doc"

    def test_anonymous_default_class(self, walk):
        """Should report an unnamed default-exported class with its methods."""
        [element] = walk("/** Shapes. */\nexport default class { m() {} }\n")
        assert isinstance(element, ClassElement)
        assert element.name == "anonymous"
        assert [m.name for m in element.methods] == ["m"]
        assert element.doc is not None
        assert element.doc.description == "Shapes."

    def test_anonymous_default_function_locals(self, walk):
        """Should keep variables of the exported function out of the top level."""
        elements = walk("export default function () { let hidden = 1; }\nlet shown;\n")
        assert names(elements, FunctionElement) == ["anonymous"]
        assert names(elements, VariableElement) == ["shown"]

    def test_commonjs_exports(self, walk):
        """Should report CommonJS export assignments."""
        elements = walk("module.exports.foo = function(x) {}\nexports.bar = 1;\n")
        assert names(elements, ExportElement) == ["foo", "bar"]
        assert elements[0].is_function_valued is True
        assert elements[0].params == ["x"]
        assert elements[1].is_function_valued is False

    def test_class_static_block_locals(self, walk):
        """Should treat static block bodies as function scope."""
        elements = walk("class A {\n  static {\n    let hidden = 1;\n    function helper() {}\n  }\n}\n")
        assert names(elements, ClassElement) == ["A"]
        assert names(elements, VariableElement) == []
        assert names(elements, FunctionElement) == ["helper"]

    def test_only_comments(self, walk):
        """Should find no elements in a comment-only document."""
        assert walk("// just a note\n/* and a block */\n") == []

    def test_each_statement_visited_once(self, walk):
        """Should not report a nested function twice."""
        elements = walk("function a() { function b() {} }\n")
        assert names(elements) == ["a", "b"]

    def test_walker_instance(self, parse):
        """Should accumulate elements on the walker."""
        program = parse("function f() {}\nlet v;\n")
        walker = TreeWalker(program.comments)
        elements = walker.walk_program(program)
        assert elements is walker.elements
        assert names(elements) == ["f", "v"]


class TestNestedBodies:
    """Tests for nested_bodies."""

    def test_loop_sets_in_loop(self, parse):
        """Should enter loop bodies with in_loop set."""
        loop = parse("while (x) { let a; }").body[0]
        [(body, scope)] = nested_bodies(loop, create_scope())
        assert scope.in_loop is True
        assert len(body) == 1

    def test_if_without_else(self, parse):
        statement = parse("if (x) { let a; }").body[0]
        assert len(nested_bodies(statement, create_scope())) == 1

    def test_single_statement_body(self, parse):
        """Should wrap non-block bodies as one statement."""
        statement = parse("if (x) var a = 1;").body[0]
        [(body, _)] = nested_bodies(statement, create_scope())
        assert len(body) == 1

    def test_opaque_statement(self, parse):
        statement = parse("debugger;").body[0]
        assert nested_bodies(statement, create_scope()) == []
