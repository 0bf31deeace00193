"""
Base utilities for command implementations.

This module provides common helper functions that command modules can use
to reduce code duplication and maintain consistency.
"""

import re


_LEADING_INT = re.compile(r'\s*([+-]?\d+)')


def parse_status(text: str) -> int:
    """
    Parse an exit status the way C atoi() does.

    Leading whitespace and an optional sign are accepted, then the longest
    run of digits is used. Text without leading digits parses as 0.

    Example:
        >>> parse_status("7")
        7
        >>> parse_status("7abc")
        7
        >>> parse_status("abc")
        0
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    return int(match.group(1))


__all__ = [
    'parse_status',
]
