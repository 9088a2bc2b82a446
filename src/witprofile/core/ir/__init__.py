"""
Profile syntax tree types.

All types are re-exported from this package.
"""

from .declarations import (
    Declaration,
    Docs,
    Extend,
    Id,
    Implement,
    NameSource,
    Provide,
    Require,
)
from .location import ByteOffsets, Span, line_column
from .profile import Profile

__all__ = [
    "ByteOffsets",
    "Declaration",
    "Docs",
    "Extend",
    "Id",
    "Implement",
    "NameSource",
    "Profile",
    "Provide",
    "Require",
    "Span",
    "line_column",
]
