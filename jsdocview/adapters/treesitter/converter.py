"""Conversion from tree-sitter-javascript parse trees to the syntax model."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import tree_sitter

from .models import (
    ArrayPattern,
    AssignmentExpression,
    AssignmentPattern,
    BlockStatement,
    ClassDeclaration,
    ClassMember,
    Comment,
    CommentKind,
    ExportDeclaration,
    Expression,
    ExpressionStatement,
    FieldDefinition,
    FunctionDeclaration,
    FunctionExpression,
    Identifier,
    IdentifierReference,
    IfStatement,
    LabeledStatement,
    LoopStatement,
    MemberExpression,
    MethodDefinition,
    ObjectPattern,
    OtherExpression,
    OtherStatement,
    Pattern,
    Position,
    Program,
    PropertyPattern,
    RestElement,
    Span,
    Statement,
    StaticBlock,
    SwitchStatement,
    TryStatement,
    UnknownPattern,
    VariableDeclaration,
    VariableDeclarator,
)

# Node types used as function values. Older grammars call the plain
# function expression 'function'.
FUNCTION_EXPRESSION_TYPES = {
    "function_expression",
    "function",
    "generator_function",
    "arrow_function",
}

LOOP_TYPES = {
    "for_statement": "for",
    "for_in_statement": "for_in",
    "while_statement": "while",
    "do_statement": "do",
}

IDENTIFIER_KEY_TYPES = {
    "property_identifier",
    "private_property_identifier",
    "identifier",
}

LITERAL_KEY_TYPES = {"string", "number"}


class JavaScriptConverter:
    """Builds a :class:`Program` from a tree-sitter tree.

    One converter is created per parse; it only holds the source bytes.
    """

    def __init__(self, source: bytes) -> None:
        self.source = source

    def convert(self, tree: tree_sitter.Tree) -> Program:
        """Convert the whole tree, collecting comments in document order."""
        root = tree.root_node
        return Program(
            body=tuple(self._statements(root)),
            comments=tuple(self.collect_comments(root)),
            span=self.get_span(root),
        )

    # =========================================================================
    # Helpers
    # =========================================================================

    def get_node_text(self, node: tree_sitter.Node) -> str:
        """Extract text content from a tree-sitter node."""
        return self.source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")

    def get_span(self, node: tree_sitter.Node) -> Span:
        """Get the 1-indexed line span of a node."""
        return Span(
            start=Position(node.start_point[0] + 1, node.start_point[1]),
            end=Position(node.end_point[0] + 1, node.end_point[1]),
        )

    def find_child_by_field(
        self, node: tree_sitter.Node, field_name: str
    ) -> tree_sitter.Node | None:
        return node.child_by_field_name(field_name)

    def first_named_child(self, node: tree_sitter.Node) -> tree_sitter.Node | None:
        """First named child that is not a comment."""
        for child in node.named_children:
            if child.type != "comment":
                return child
        return None

    def has_keyword(self, node: tree_sitter.Node, *keywords: str) -> bool:
        """Check the anonymous (keyword) children of a node."""
        return any(
            not child.is_named and child.type in keywords for child in node.children
        )

    def collect_comments(self, root: tree_sitter.Node) -> list[Comment]:
        """Collect every comment node in document order."""
        comments: list[Comment] = []

        def _walk(n: tree_sitter.Node) -> None:
            if n.type == "comment":
                comment = self._comment(n)
                if comment:
                    comments.append(comment)
                return
            for child in n.children:
                _walk(child)

        _walk(root)
        return comments

    def _comment(self, node: tree_sitter.Node) -> Comment | None:
        raw = self.get_node_text(node)
        if raw.startswith("//"):
            return Comment(CommentKind.LINE, raw[2:], self.get_span(node))
        if raw.startswith("/*"):
            text = raw[2:-2] if raw.endswith("*/") and len(raw) >= 4 else raw[2:]
            return Comment(CommentKind.BLOCK, text, self.get_span(node))
        return None

    # =========================================================================
    # Statements
    # =========================================================================

    def _statements(self, node: tree_sitter.Node) -> list[Statement]:
        return [
            self._statement(child)
            for child in node.named_children
            if child.type != "comment"
        ]

    def _block(self, node: tree_sitter.Node) -> BlockStatement:
        if node.type == "statement_block":
            return BlockStatement(tuple(self._statements(node)), self.get_span(node))
        # Single statement bodies (e.g. `for (...) x();`) become one-item blocks
        return BlockStatement((self._statement(node),), self.get_span(node))

    def _statement(self, node: tree_sitter.Node) -> Statement:
        node_type = node.type
        span = self.get_span(node)

        if node_type == "statement_block":
            return self._block(node)

        if node_type in ("function_declaration", "generator_function_declaration"):
            return self._function_declaration(node)

        if node_type in ("lexical_declaration", "variable_declaration"):
            return self._variable_declaration(node)

        if node_type == "class_declaration":
            return self._class_declaration(node)

        if node_type == "expression_statement":
            expr_node = self.first_named_child(node)
            if expr_node is None:
                return OtherStatement(node_type, span)
            return ExpressionStatement(self._expression(expr_node), span)

        if node_type == "export_statement":
            decl_node = self.find_child_by_field(node, "declaration")
            if decl_node is not None:
                declaration: Statement | None = self._statement(decl_node)
            else:
                declaration = self._default_export_value(node)
            return ExportDeclaration(
                declaration=declaration,
                is_default=self.has_keyword(node, "default"),
                span=span,
            )

        if node_type in LOOP_TYPES:
            kind = LOOP_TYPES[node_type]
            operator = self.find_child_by_field(node, "operator")
            if operator is not None and self.get_node_text(operator) == "of":
                kind = "for_of"
            body = self.find_child_by_field(node, "body")
            if body is None:
                return OtherStatement(node_type, span)
            return LoopStatement(kind, self._statement(body), span)

        if node_type == "if_statement":
            consequence = self.find_child_by_field(node, "consequence")
            if consequence is None:
                return OtherStatement(node_type, span)
            alternate: Statement | None = None
            else_clause = self.find_child_by_field(node, "alternative")
            if else_clause is not None:
                inner = self.first_named_child(else_clause)
                if inner is not None:
                    alternate = self._statement(inner)
            return IfStatement(self._statement(consequence), alternate, span)

        if node_type == "try_statement":
            return self._try_statement(node)

        if node_type == "switch_statement":
            cases: list[tuple[Statement, ...]] = []
            body = self.find_child_by_field(node, "body")
            if body is not None:
                for case in body.named_children:
                    if case.type not in ("switch_case", "switch_default"):
                        continue
                    cases.append(
                        tuple(
                            self._statement(stmt)
                            for stmt in case.children_by_field_name("body")
                            if stmt.type != "comment"
                        )
                    )
            return SwitchStatement(tuple(cases), span)

        if node_type == "labeled_statement":
            body = self.find_child_by_field(node, "body")
            if body is None:
                return OtherStatement(node_type, span)
            return LabeledStatement(self._statement(body), span)

        return OtherStatement(node_type, span)

    def _function_declaration(self, node: tree_sitter.Node) -> Statement:
        body = self.find_child_by_field(node, "body")
        if body is None:
            return OtherStatement(node.type, self.get_span(node))
        name_node = self.find_child_by_field(node, "name")
        return FunctionDeclaration(
            name=self.get_node_text(name_node) if name_node else None,
            params=tuple(self._parameters(node)),
            body=self._block(body),
            span=self.get_span(node),
            is_async=self.has_keyword(node, "async"),
            is_generator=node.type.startswith("generator_function"),
        )

    def _default_export_value(self, node: tree_sitter.Node) -> Statement | None:
        """Declaration form of an unnamed ``export default`` function or class.

        The grammar stores these under ``value`` as expressions; other
        exported values (identifiers, objects, arrows) are not declarations.
        """
        value = self.find_child_by_field(node, "value")
        if value is None:
            return None
        if value.type in ("function_expression", "function", "generator_function"):
            return self._function_declaration(value)
        if value.type == "class":
            return self._class_declaration(value)
        return None

    def _variable_declaration(self, node: tree_sitter.Node) -> VariableDeclaration:
        kind_node = self.find_child_by_field(node, "kind")
        if kind_node is not None:
            kind = self.get_node_text(kind_node)
        elif node.type == "variable_declaration":
            kind = "var"
        else:
            kind = self.get_node_text(node.children[0]) if node.children else "let"

        declarators: list[VariableDeclarator] = []
        for child in node.named_children:
            if child.type != "variable_declarator":
                continue
            name_node = self.find_child_by_field(child, "name")
            value_node = self.find_child_by_field(child, "value")
            target: Pattern = (
                self._pattern(name_node)
                if name_node is not None
                else UnknownPattern("missing", self.get_span(child))
            )
            declarators.append(
                VariableDeclarator(
                    target=target,
                    init=self._expression(value_node) if value_node is not None else None,
                    span=self.get_span(child),
                )
            )

        return VariableDeclaration(kind, tuple(declarators), self.get_span(node))

    def _class_declaration(self, node: tree_sitter.Node) -> ClassDeclaration:
        name_node = self.find_child_by_field(node, "name")

        superclass: str | None = None
        for child in node.named_children:
            if child.type == "class_heritage":
                base = self.first_named_child(child)
                if base is not None:
                    superclass = self.get_node_text(base)

        members: list[ClassMember] = []
        body = self.find_child_by_field(node, "body")
        if body is not None:
            for item in body.named_children:
                member = self._class_member(item)
                if member is not None:
                    members.append(member)

        return ClassDeclaration(
            name=self.get_node_text(name_node) if name_node else None,
            superclass=superclass,
            members=tuple(members),
            span=self.get_span(node),
        )

    def _class_member(self, node: tree_sitter.Node) -> ClassMember | None:
        if node.type == "method_definition":
            body = self.find_child_by_field(node, "body")
            if body is None:
                return None
            key_name, key_literal = self._property_key(self.find_child_by_field(node, "name"))
            is_static = self.has_keyword(node, "static", "static get")

            if self.has_keyword(node, "get", "static get"):
                kind = "get"
            elif self.has_keyword(node, "set"):
                kind = "set"
            elif key_name == "constructor" and not is_static:
                kind = "constructor"
            else:
                kind = "method"

            value = FunctionExpression(
                name=key_name,
                params=tuple(self._parameters(node)),
                body=self._block(body),
                span=self.get_span(node),
                is_async=self.has_keyword(node, "async"),
            )
            return MethodDefinition(
                key_name=key_name,
                key_literal=key_literal,
                kind=kind,
                is_static=is_static,
                value=value,
                span=self.get_span(node),
            )

        if node.type in ("field_definition", "public_field_definition"):
            prop = self.find_child_by_field(node, "property")
            key_name, key_literal = self._property_key(prop)
            value_node = self.find_child_by_field(node, "value")
            return FieldDefinition(
                key_name=key_name if key_name is not None else key_literal,
                value=self._expression(value_node) if value_node is not None else None,
                is_static=self.has_keyword(node, "static"),
                span=self.get_span(node),
            )

        if node.type == "class_static_block":
            body = self.find_child_by_field(node, "body")
            if body is None:
                return None
            return StaticBlock(self._block(body), self.get_span(node))

        return None

    def _try_statement(self, node: tree_sitter.Node) -> Statement:
        body = self.find_child_by_field(node, "body")
        if body is None:
            return OtherStatement(node.type, self.get_span(node))

        handler: BlockStatement | None = None
        catch_clause = self.find_child_by_field(node, "handler")
        if catch_clause is not None:
            catch_body = self.find_child_by_field(catch_clause, "body")
            if catch_body is not None:
                handler = self._block(catch_body)

        finalizer: BlockStatement | None = None
        finally_clause = self.find_child_by_field(node, "finalizer")
        if finally_clause is not None:
            finally_body = self.find_child_by_field(finally_clause, "body")
            if finally_body is not None:
                finalizer = self._block(finally_body)

        return TryStatement(self._block(body), handler, finalizer, self.get_span(node))

    # =========================================================================
    # Expressions
    # =========================================================================

    def _expression(self, node: tree_sitter.Node) -> Expression:
        node_type = node.type
        span = self.get_span(node)

        if node_type == "parenthesized_expression":
            inner = self.first_named_child(node)
            return self._expression(inner) if inner is not None else OtherExpression(node_type, span)

        if node_type in FUNCTION_EXPRESSION_TYPES:
            return self._function_expression(node)

        if node_type == "identifier":
            return IdentifierReference(self.get_node_text(node), span)

        if node_type == "member_expression":
            obj = self.find_child_by_field(node, "object")
            prop = self.find_child_by_field(node, "property")
            return MemberExpression(
                object=self._expression(obj) if obj is not None else OtherExpression("missing", span),
                property=self.get_node_text(prop)
                if prop is not None and prop.type in IDENTIFIER_KEY_TYPES
                else None,
                span=span,
            )

        if node_type == "subscript_expression":
            obj = self.find_child_by_field(node, "object")
            return MemberExpression(
                object=self._expression(obj) if obj is not None else OtherExpression("missing", span),
                property=None,
                span=span,
            )

        if node_type in ("assignment_expression", "augmented_assignment_expression"):
            left = self.find_child_by_field(node, "left")
            right = self.find_child_by_field(node, "right")
            if left is None or right is None:
                return OtherExpression(node_type, span)
            operator = self.find_child_by_field(node, "operator")
            return AssignmentExpression(
                operator=self.get_node_text(operator) if operator is not None else "=",
                left=self._expression(left),
                right=self._expression(right),
                span=span,
            )

        return OtherExpression(node_type, span)

    def _function_expression(self, node: tree_sitter.Node) -> FunctionExpression:
        name_node = self.find_child_by_field(node, "name")
        body_node = self.find_child_by_field(node, "body")
        body = (
            self._block(body_node)
            if body_node is not None and body_node.type == "statement_block"
            else None
        )

        if node.type == "arrow_function":
            single = self.find_child_by_field(node, "parameter")
            params = (self._pattern(single),) if single is not None else tuple(self._parameters(node))
        else:
            params = tuple(self._parameters(node))

        return FunctionExpression(
            name=self.get_node_text(name_node) if name_node else None,
            params=params,
            body=body,
            span=self.get_span(node),
            is_arrow=node.type == "arrow_function",
            is_async=self.has_keyword(node, "async"),
        )

    # =========================================================================
    # Patterns
    # =========================================================================

    def _parameters(self, node: tree_sitter.Node) -> list[Pattern]:
        """Formal parameters of a function-like node."""
        params_node = self.find_child_by_field(node, "parameters")
        if params_node is None:
            return []
        return [
            self._pattern(child)
            for child in params_node.named_children
            if child.type != "comment"
        ]

    def _pattern(self, node: tree_sitter.Node) -> Pattern:
        node_type = node.type
        span = self.get_span(node)

        if node_type in ("identifier", "shorthand_property_identifier_pattern", "undefined"):
            return Identifier(self.get_node_text(node), span)

        if node_type in ("assignment_pattern", "object_assignment_pattern"):
            left = self.find_child_by_field(node, "left")
            if left is None:
                return UnknownPattern(node_type, span)
            return AssignmentPattern(self._pattern(left), span)

        if node_type == "rest_pattern":
            inner = self.first_named_child(node)
            if inner is None:
                return UnknownPattern(node_type, span)
            return RestElement(self._pattern(inner), span)

        if node_type == "object_pattern":
            properties: list[PropertyPattern | RestElement] = []
            for child in node.named_children:
                if child.type == "comment":
                    continue
                properties.append(self._object_pattern_entry(child))
            return ObjectPattern(tuple(properties), span)

        if node_type == "array_pattern":
            return ArrayPattern(tuple(self._array_pattern_elements(node)), span)

        return UnknownPattern(node_type, span)

    def _object_pattern_entry(self, node: tree_sitter.Node) -> PropertyPattern | RestElement:
        span = self.get_span(node)

        if node.type == "shorthand_property_identifier_pattern":
            name = self.get_node_text(node)
            return PropertyPattern(name, Identifier(name, span), span)

        if node.type == "pair_pattern":
            key_name, key_literal = self._property_key(self.find_child_by_field(node, "key"))
            value = self.find_child_by_field(node, "value")
            return PropertyPattern(
                key_name if key_name is not None else key_literal,
                self._pattern(value) if value is not None else None,
                span,
            )

        if node.type == "object_assignment_pattern":
            left = self.find_child_by_field(node, "left")
            key = (
                self.get_node_text(left)
                if left is not None and left.type == "shorthand_property_identifier_pattern"
                else None
            )
            return PropertyPattern(key, self._pattern(node), span)

        if node.type == "rest_pattern":
            pattern = self._pattern(node)
            if isinstance(pattern, RestElement):
                return pattern

        return PropertyPattern(None, None, span)

    def _array_pattern_elements(self, node: tree_sitter.Node) -> list[Pattern | None]:
        """Rebuild the element list, including elided slots.

        tree-sitter has no node for holes, so slots are delimited by commas:
        ``[a, , b]`` yields ``[a, None, b]`` and a trailing comma adds nothing.
        """
        elements: list[Pattern | None] = []
        current: Pattern | None = None
        for child in node.children:
            if child.type == "comment":
                continue
            if not child.is_named:
                if child.type == ",":
                    elements.append(current)
                    current = None
                continue
            current = self._pattern(child)
        if current is not None:
            elements.append(current)
        return elements

    def _property_key(self, node: tree_sitter.Node | None) -> tuple[str | None, str | None]:
        """Read a property key as (identifier name, literal value)."""
        if node is None:
            return None, None

        if node.type in IDENTIFIER_KEY_TYPES:
            return self.get_node_text(node), None

        if node.type in LITERAL_KEY_TYPES:
            return None, self._literal_value(node)

        if node.type == "computed_property_name":
            inner = self.first_named_child(node)
            if inner is not None:
                if inner.type == "identifier":
                    return self.get_node_text(inner), None
                if inner.type in LITERAL_KEY_TYPES:
                    return None, self._literal_value(inner)

        return None, None

    def _literal_value(self, node: tree_sitter.Node) -> str:
        text = self.get_node_text(node)
        if node.type == "string" and len(text) >= 2:
            return text[1:-1]
        return text


__all__ = ["JavaScriptConverter"]
