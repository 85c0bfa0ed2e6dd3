"""
Small text helpers: ASCII case folding, C-style escapes and splitting.
"""

__all__ = [
    "escape",
    "split",
    "to_lower",
    "to_upper",
    "unescape",
]

from .escape import escape, unescape
from .format import split, to_lower, to_upper
