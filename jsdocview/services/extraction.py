"""
Extraction service - the boundary between source text and renderable items.

Parses the text, walks the program, and falls back through an ordered list
of strategies:

1. structured elements (functions, variables, classes, exports)
2. the raw comment list, when no element was found
3. an empty list

Nothing raised by parsing or extraction escapes :meth:`DocumentAssembler.extract`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Union

from jsdocview.adapters.treesitter import Comment, ParseError, Program, SyntaxManager
from jsdocview.modules.extraction import ELEMENT_CLASSES, Element, walk_program

logger = logging.getLogger(__name__)

ExtractedItem = Union[Element, Comment]
Strategy = Callable[[Program], list]


def structured_elements(program: Program) -> list[Element]:
    """Walk the program and keep only recognised element records."""
    return [
        element
        for element in walk_program(program)
        if isinstance(element, ELEMENT_CLASSES)
    ]


def raw_comments(program: Program) -> list[Comment]:
    """Every comment of the program, in document order."""
    return list(program.comments)


DEFAULT_STRATEGIES: tuple[Strategy, ...] = (structured_elements, raw_comments)


class DocumentAssembler:
    """Top-level entry point for documentation extraction.

    Args:
        syntax_manager: Parser to use (a new SyntaxManager by default)
        strategies: Ordered fallback strategies; the first non-empty result wins
    """

    def __init__(
        self,
        syntax_manager: SyntaxManager | None = None,
        strategies: Sequence[Strategy] = DEFAULT_STRATEGIES,
    ) -> None:
        self.syntax_manager = syntax_manager or SyntaxManager()
        self.strategies = tuple(strategies)

    def extract(self, source: str) -> list[ExtractedItem]:
        """Extract documentation items from source text.

        Args:
            source: JavaScript source code

        Returns:
            Elements, or raw comments when no element was found, or an
            empty list when the source cannot be parsed
        """
        return self.extract_with_program(source)[1]

    def extract_with_program(self, source: str) -> tuple[Program | None, list[ExtractedItem]]:
        """Like :meth:`extract`, also returning the parsed program.

        The program is None when the source cannot be parsed.
        """
        program = self.parse(source)
        if program is None:
            return None, []
        return program, self.run_strategies(program)

    def run_strategies(self, program: Program) -> list[ExtractedItem]:
        """Return the first non-empty strategy result for a parsed program."""
        for strategy in self.strategies:
            try:
                items = strategy(program)
            except Exception:
                logger.exception("Extraction strategy %s failed", strategy.__name__)
                continue
            if items:
                logger.debug("Strategy %s produced %d item(s)", strategy.__name__, len(items))
                return items

        return []

    def parse(self, source: str) -> Program | None:
        """Parse source text, returning None on failure."""
        try:
            return self.syntax_manager.parse(source)
        except ParseError as e:
            logger.warning("Failed to parse source: %s", e)
        except Exception:
            logger.exception("Unexpected error while parsing source")
        return None


def extract(source: str) -> list[ExtractedItem]:
    """Extract documentation items from source text with a fresh assembler."""
    return DocumentAssembler().extract(source)


def is_structured(items: Sequence[ExtractedItem]) -> bool:
    """True when the items are elements rather than raw comments."""
    return any(isinstance(item, Element) for item in items)


__all__ = [
    "ExtractedItem",
    "Strategy",
    "DEFAULT_STRATEGIES",
    "DocumentAssembler",
    "structured_elements",
    "raw_comments",
    "extract",
    "is_structured",
]
