"""
witprofile - parser for component profile documents.

A profile names the interfaces a unit extends, provides, requires or
implements. This package turns profile text into a typed syntax tree with
exact source spans for diagnostics.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version

# Re-export commonly used types for convenience
from .core import ir
from .core.errors import ParseError, ProfileError
from .core.parser_impl import parse_profile

try:
    __version__ = _metadata_version("witprofile")
except PackageNotFoundError:
    # running from a source checkout without an install
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "ir",
    "ParseError",
    "ProfileError",
    "parse_profile",
]
