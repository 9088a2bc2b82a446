"""
Environment configuration for the profile parser.

Settings are read from environment variables on each call so tests and
embedding tools can change them without reloading the module.

Environment values:
    - WITPROFILE_SNIPPET_LINES: lines of source shown before and after an
      error location (default 2)
    - WITPROFILE_MAX_SOURCE_BYTES: reject sources larger than this many
      UTF-8 bytes before tokenizing (default 0, meaning unlimited)

Usage:
    from witprofile.core.config import get_snippet_lines

    context = get_snippet_lines()
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

SNIPPET_LINES_VAR = "WITPROFILE_SNIPPET_LINES"
MAX_SOURCE_BYTES_VAR = "WITPROFILE_MAX_SOURCE_BYTES"

_DEFAULT_SNIPPET_LINES = 2
_DEFAULT_MAX_SOURCE_BYTES = 0


def _read_non_negative_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        value = -1
    if value < 0:
        logger.warning(
            "Invalid %s value '%s'. Expected a non-negative integer. Defaulting to %d.",
            name,
            raw,
            default,
        )
        return default
    return value


def get_snippet_lines() -> int:
    """Number of context lines rendered on each side of an error."""
    return _read_non_negative_int(SNIPPET_LINES_VAR, _DEFAULT_SNIPPET_LINES)


def get_max_source_bytes() -> int:
    """Largest accepted source size in bytes, or 0 for no limit."""
    return _read_non_negative_int(MAX_SOURCE_BYTES_VAR, _DEFAULT_MAX_SOURCE_BYTES)
