"""
Naming utilities for generated symbols and files.
"""

from __future__ import annotations

import re


_CAMEL_TO_SNAKE_PATTERN = re.compile(r'([a-z0-9])([A-Z])')
_ACRONYM_PATTERN = re.compile(r'([A-Z]+)([A-Z][a-z])')


def to_snake_case(name: str) -> str:
    """
    Convert PascalCase or camelCase to snake_case.

    Examples:
        StringFilter -> string_filter
        JsonNullableFilter -> json_nullable_filter
        HTTPResponse -> http_response
    """
    # Handle consecutive uppercase (HTTP -> http)
    result = _ACRONYM_PATTERN.sub(r'\1_\2', name)
    result = _CAMEL_TO_SNAKE_PATTERN.sub(r'\1_\2', result)
    return result.lower()


def to_kebab_case(name: str) -> str:
    """
    Convert PascalCase to kebab-case.

    Examples:
        DummyCountOrderByAggregateInput -> dummy-count-order-by-aggregate-input
        SortOrder -> sort-order
    """
    return to_snake_case(name).replace('_', '-')
