"""
Test fixtures package for binmerkle tests.

This package provides factory functions for creating test inputs.
- common.py: Random element generators and literal examples

Usage:
    from fixtures.common import make_random_elements

    def test_something():
        elements = make_random_elements(100)
"""

from .common import (
    CHARSET,
    LITERAL_ELEMENTS,
    generate_random_string,
    make_random_elements,
)

__all__ = [
    "CHARSET",
    "LITERAL_ELEMENTS",
    "generate_random_string",
    "make_random_elements",
]
