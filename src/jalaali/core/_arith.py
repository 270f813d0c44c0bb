"""
Truncating integer division.

Calendar formulas below were designed around division that rounds toward
zero, not Python's floor division. The two differ for negative operands.
"""

from __future__ import annotations


def div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def mod(a: int, b: int) -> int:
    """Remainder matching div(); takes the sign of a."""
    return a - div(a, b) * b
