"""Test configuration and fixtures for formatting tests."""

import pytest


# Source files for formatting tests
ERA_SOURCE = '''// The start of an era.
// The end of an era.
const era = new Era();
'''

FUNCTION_SOURCE = '''function area(width, height) {
  // Multiply the two sides
  // of the rectangle.
  return width * height; // trailing remark
}
'''

MIXED_SOURCE = '''/**
 * Block comments are never touched,
 * however they are laid out.
 */
const url = "http://example.com"; // not a run start inside the string

// first paragraph
// continues here

// second paragraph
'''

UNTERMINATED_SOURCE = '''const a = 1;
/* this block never ends
const b = 2;
'''


@pytest.fixture
def era_source():
    """Two comment lines that merge into one."""
    return ERA_SOURCE


@pytest.fixture
def function_source():
    """Indented comment run inside a function body."""
    return FUNCTION_SOURCE


@pytest.fixture
def mixed_source():
    """Block comments, strings and blank-line separated runs."""
    return MIXED_SOURCE


@pytest.fixture
def unterminated_source():
    """Source with a block comment that is never closed."""
    return UNTERMINATED_SOURCE
