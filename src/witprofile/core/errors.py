"""
Error types for profile tokenizing and parsing.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import get_snippet_lines
from .ir.location import ByteOffsets, Span, index_line_column


class ProfileError(Exception):
    """Base exception for all profile errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseError(ProfileError):
    """
    Raised when profile text cannot be tokenized or parsed.

    Examples:
    - Unrecognized characters
    - Unterminated string literals or block comments
    - Invalid escape sequences
    - Missing or unexpected keywords and operands

    Attributes:
        span: Source range the error points at (empty at end of input)
    """

    def __init__(self, message: str, span: Span, context: ErrorContext | None = None):
        self.span = span
        super().__init__(message, context)


@dataclass
class ErrorContext:
    """
    Context information for an error, including source location.

    Attributes:
        file: Path to the source file, if the text came from one
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        width: Number of characters to underline (at least 1)
        snippet: Optional source lines surrounding the error
        first_line: Line number of the first snippet line
    """

    file: Path | None
    line: int
    column: int
    width: int = 1
    snippet: str | None = None
    first_line: int = 1

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "world.profile:3:9"
        """
        location = f"{self.file or '<input>'}:{self.line}:{self.column}"

        if self.snippet:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format code snippet with line numbers and error marker."""
        if not self.snippet:
            return ""

        formatted = []
        for i, line in enumerate(self.snippet.split("\n")):
            line_num = self.first_line + i
            prefix = f"{line_num:4d} | "
            formatted.append(prefix + line)

            if line_num == self.line:
                marker_pos = len(prefix) + self.column - 1
                width = max(1, min(self.width, len(line) - self.column + 1))
                formatted.append(" " * marker_pos + "^" * width)

        return "\n".join(formatted)


def format_expected(expected: str, found: str) -> str:
    """The single "expected X, found Y" message shape used by every failure."""
    return f"expected {expected}, found {found}"


def _snippet(text: str, line: int) -> tuple[str, int]:
    lines = text.split("\n")
    context = get_snippet_lines()
    first = max(1, line - context)
    last = min(len(lines), line + context)
    return "\n".join(lines[first - 1 : last]), first


def make_parse_error(
    message: str,
    span: Span,
    text: str,
    file: Path | None = None,
) -> ParseError:
    """
    Helper to create a ParseError with context.

    Args:
        message: Error description
        span: Offending source range
        text: Full source text; the span holds UTF-8 byte offsets into it
        file: Optional source file path

    Returns:
        ParseError with context attached
    """
    offsets = ByteOffsets(text)
    start = offsets.to_index(span.start)
    line, column = index_line_column(text, start)
    snippet, first_line = _snippet(text, line)
    context = ErrorContext(
        file=file,
        line=line,
        column=column,
        width=offsets.to_index(span.end) - start,
        snippet=snippet,
        first_line=first_line,
    )
    return ParseError(message, span, context)
