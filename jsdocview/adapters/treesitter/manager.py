"""Tree-sitter based parser manager for JavaScript documents.

Parses source text with tree-sitter-javascript and converts the result into
the closed syntax model in :mod:`.models`. Malformed source raises
:class:`ParseError`; tree-sitter itself never fails, so error recovery nodes
in the tree are treated as a failed parse.
"""

from __future__ import annotations

import os
from typing import Any

import tree_sitter

from .converter import JavaScriptConverter
from .models import Program


class ParseError(Exception):
    """Raised when source text is not syntactically valid JavaScript."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None):
        super().__init__(message)
        self.line = line
        self.column = column


class SyntaxManager:
    """Parses JavaScript source text into a :class:`Program`."""

    # Supported languages
    SUPPORTED_LANGUAGES = {"javascript"}

    # Extension to language mapping
    EXTENSION_MAP: dict[str, str] = {
        ".js": "javascript",
        ".mjs": "javascript",
        ".cjs": "javascript",
        ".jsx": "javascript",
    }

    def __init__(self) -> None:
        """Initialize the manager."""
        self._parser: tree_sitter.Parser | None = None

    def parse(self, source: str) -> Program:
        """Parse source code into the syntax model.

        Args:
            source: JavaScript source code as string

        Returns:
            Program with top-level statements and all comments

        Raises:
            ParseError: If the source contains syntax errors or cannot be
                encoded as UTF-8
        """
        try:
            source_bytes = source.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ParseError(f"Source is not valid UTF-8 text: {e.reason}") from e
        tree = self._get_parser().parse(source_bytes)

        if tree.root_node.has_error:
            error_node = self._find_error(tree.root_node)
            if error_node is not None:
                line = error_node.start_point[0] + 1
                column = error_node.start_point[1]
                raise ParseError(
                    f"Unexpected token at line {line}, column {column}", line, column
                )
            raise ParseError("Source contains syntax errors")

        return JavaScriptConverter(source_bytes).convert(tree)

    @classmethod
    def detect_language(cls, file_path: str) -> str | None:
        """Detect language from file extension.

        Args:
            file_path: Path to the file

        Returns:
            Language name or None if not detected
        """
        ext = os.path.splitext(file_path)[1].lower()
        return cls.EXTENSION_MAP.get(ext)

    @classmethod
    def supports_language(cls, language: str | None) -> bool:
        """Check if a language is supported.

        Args:
            language: Language name

        Returns:
            True if the language is supported
        """
        return bool(language) and language.lower() in cls.SUPPORTED_LANGUAGES

    # =========================================================================
    # Private helper methods
    # =========================================================================

    def _get_language(self) -> Any:
        """Return the tree-sitter JavaScript grammar."""
        import tree_sitter_javascript

        return tree_sitter_javascript.language()

    def _get_parser(self) -> tree_sitter.Parser:
        """Get or create the tree-sitter parser."""
        if self._parser is None:
            # Wrap in Language object (tree-sitter 0.24+ API)
            ts_language = tree_sitter.Language(self._get_language())
            self._parser = tree_sitter.Parser(ts_language)
        return self._parser

    def _find_error(self, node: tree_sitter.Node) -> tree_sitter.Node | None:
        """Find the first ERROR or MISSING node in document order."""
        if node.type == "ERROR" or node.is_missing:
            return node
        for child in node.children:
            if child.has_error or child.is_missing:
                found = self._find_error(child)
                if found is not None:
                    return found
        return None


__all__ = ["SyntaxManager", "ParseError"]
