"""
Shared pytest fixtures for jsdocview tests.

Fixtures are organized by purpose:
- parsing: SyntaxManager and helpers turning source text into a Program
- extraction: helpers running the walker over source text
- files: sample JavaScript files on disk for CLI tests
"""

import pytest

# =============================================================================
# Sample Source Fixtures
# =============================================================================

SAMPLE_SOURCE = """\
/**
 * Adds two numbers.
 * @param {number} a - first operand
 * @param {number} b - second operand
 * @returns {number} the sum
 */
function add(a, b) {
  // plain addition
  const result = a + b;
  return result;
}

// Default greeting
const greeting = "hello";

/** A point in the plane. */
class Point extends Shape {
  /** Build a point. */
  constructor(x, y) {
    this.x = x;
  }

  static origin() {
    return new Point(0, 0);
  }
}

module.exports.add = add;
"""


@pytest.fixture
def sample_source():
    """A small document exercising every element type."""
    return SAMPLE_SOURCE


# =============================================================================
# Parsing Fixtures
# =============================================================================


@pytest.fixture
def syntax_manager():
    """Provide a SyntaxManager instance for tests."""
    from jsdocview.adapters.treesitter import SyntaxManager

    return SyntaxManager()


@pytest.fixture
def parse(syntax_manager):
    """Parse JavaScript source into a Program.

    Usage:
        def test_something(parse):
            program = parse("function f() {}")
    """
    return syntax_manager.parse


@pytest.fixture
def walk(parse):
    """Parse source and return the elements found by the walker."""
    from jsdocview.modules.extraction import walk_program

    def _walk(source: str):
        return walk_program(parse(source))

    return _walk


# =============================================================================
# File Fixtures
# =============================================================================


@pytest.fixture
def js_file(tmp_path):
    """Factory fixture writing a JavaScript file into a temporary directory.

    Usage:
        def test_something(js_file):
            path = js_file("function f() {}", name="app.js")
    """

    def _make(content: str, name: str = "app.js"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _make
