"""
Lexer/Tokenizer for profile documents.

Produces tokens on demand from a cursor into the source text. Tokens carry
only their span and type; their text is recovered by slicing the source
(or, for string literals, by decoding the slice with ``parse_str``).

Lookahead never mutates the committed cursor: callers ``clone()`` the
tokenizer, read ahead on the copy and ``accept()`` it once they decide to
consume what they read.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .errors import ParseError, format_expected, make_parse_error
from .ir.location import ByteOffsets, Span


class TokenType(Enum):
    """Token types in profile documents."""

    WHITESPACE = "whitespace"
    COMMENT = "comment"
    ID = "id"
    STR_LIT = "str_lit"

    # Keywords
    EXTEND = "extend"
    PROVIDE = "provide"
    REQUIRE = "require"
    IMPLEMENT = "implement"
    WITH = "with"

    def describe(self) -> str:
        """Human description used in "expected ..., found ..." messages."""
        if self in _DESCRIPTIONS:
            return _DESCRIPTIONS[self]
        return f"keyword `{self.value}`"


_DESCRIPTIONS = {
    TokenType.WHITESPACE: "whitespace",
    TokenType.COMMENT: "a comment",
    TokenType.ID: "an identifier",
    TokenType.STR_LIT: "a string",
}

# Keywords mapping
KEYWORDS = {
    "extend": TokenType.EXTEND,
    "provide": TokenType.PROVIDE,
    "require": TokenType.REQUIRE,
    "implement": TokenType.IMPLEMENT,
    "with": TokenType.WITH,
}

WHITESPACE_CHARS = frozenset(" \t\n\r")

TRIVIA = frozenset({TokenType.WHITESPACE, TokenType.COMMENT})

SIMPLE_ESCAPES = {
    '"': '"',
    "'": "'",
    "\\": "\\",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "0": "\0",
}

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def is_id_start(ch: str) -> bool:
    return ch.isalpha() or ch == "_"


def is_id_continue(ch: str) -> bool:
    # decimal digits only, so numeric symbols like ½ and ² end an identifier
    return ch.isalpha() or ch.isdecimal() or ch in "_-"


@dataclass(frozen=True)
class Token:
    """
    A single token.

    Attributes:
        span: Source range the token covers
        type: Type of token
    """

    span: Span
    type: TokenType

    def __repr__(self) -> str:
        return f"Token({self.type.value}, {self.span})"


class Tokenizer:
    """
    Cursor-based tokenizer for profile documents.

    A tokenizer is just the source text plus a character index, so
    ``clone()`` is cheap and a clone can be read ahead freely without
    affecting the original. Token spans are reported as UTF-8 byte offsets.
    """

    def __init__(
        self,
        text: str,
        file: Path | None = None,
        pos: int = 0,
        offsets: ByteOffsets | None = None,
    ):
        """
        Initialize tokenizer.

        Args:
            text: Source text to tokenize
            file: Source file path (for error reporting)
            pos: Starting character index
            offsets: Byte offset map of ``text``, shared between clones
        """
        self.text = text
        self.file = file
        self.pos = pos
        self.offsets = offsets or ByteOffsets(text)

    def clone(self) -> Tokenizer:
        """Duplicate the cursor for non-destructive lookahead."""
        return Tokenizer(self.text, self.file, self.pos, self.offsets)

    def accept(self, other: Tokenizer) -> None:
        """Commit the position reached by a clone."""
        self.pos = other.pos

    def next_raw(self) -> Token | None:
        """
        Consume the next token, whitespace and comments included.

        Returns:
            The token, or None at end of input

        Raises:
            ParseError: On an invalid character, an unterminated string or
                block comment, or a malformed escape sequence
        """
        text = self.text
        start = self.pos
        if start >= len(text):
            return None

        ch = text[start]
        if ch in WHITESPACE_CHARS:
            end = start + 1
            while end < len(text) and text[end] in WHITESPACE_CHARS:
                end += 1
            token_type = TokenType.WHITESPACE
        elif text.startswith("//", start):
            end = text.find("\n", start)
            if end == -1:
                end = len(text)
            token_type = TokenType.COMMENT
        elif text.startswith("/*", start):
            end = self._read_block_comment(start)
            token_type = TokenType.COMMENT
        elif ch == '"':
            end = self._read_string(start)
            token_type = TokenType.STR_LIT
        elif is_id_start(ch):
            end = start + 1
            while end < len(text) and is_id_continue(text[end]):
                end += 1
            token_type = KEYWORDS.get(text[start:end], TokenType.ID)
        else:
            raise self.error(
                format_expected("a token", f"invalid character {ch!r}"),
                self._span(start, start + 1),
            )

        self.pos = end
        return Token(self._span(start, end), token_type)

    def next(self) -> Token | None:
        """Consume the next token, skipping whitespace and comments."""
        while True:
            token = self.next_raw()
            if token is None or token.type not in TRIVIA:
                return token

    def peek(self) -> Token | None:
        """Return the next significant token without consuming it."""
        return self.clone().next()

    def at_end(self) -> bool:
        """True when only whitespace and comments remain."""
        return self.peek() is None

    def expect(self, token_type: TokenType) -> Span:
        """
        Consume the next significant token, which must be ``token_type``.

        Returns:
            Span of the consumed token

        Raises:
            ParseError: If the token is missing or of another type
        """
        token = self.next()
        if token is not None and token.type is token_type:
            return token.span
        raise self.expected_error(token_type.describe(), token)

    def get_span(self, span: Span) -> str:
        """Source text covered by ``span``."""
        offsets = self.offsets
        return self.text[offsets.to_index(span.start) : offsets.to_index(span.end)]

    def parse_str(self, span: Span) -> str:
        """
        Decode the string literal token at ``span``.

        Returns:
            The literal's contents with quotes removed and escapes resolved
        """
        start = self.offsets.to_index(span.start)
        body_start, body_end = start + 1, self.offsets.to_index(span.end) - 1
        body = self.text[body_start:body_end]
        if "\\" not in body:
            return body

        chars = []
        i = body_start
        while i < body_end:
            ch = self.text[i]
            if ch == "\\":
                decoded, i = self._read_escape(i, start)
                chars.append(decoded)
            else:
                chars.append(ch)
                i += 1
        return "".join(chars)

    def format_expected_error(self, expected: str, found: Token | None) -> tuple[Span, str]:
        """
        Build the span and message for an "expected ..., found ..." error.

        Args:
            expected: Description of what the grammar wanted
            found: The token actually read, or None at end of input

        Returns:
            Tuple of (span, message); the span is the end-of-input marker
            when nothing was found
        """
        if found is None:
            return self._span(len(self.text), len(self.text)), format_expected(expected, "eof")
        return found.span, format_expected(expected, found.type.describe())

    def expected_error(self, expected: str, found: Token | None) -> ParseError:
        span, message = self.format_expected_error(expected, found)
        return self.error(message, span)

    def error(self, message: str, span: Span) -> ParseError:
        return make_parse_error(message, span, self.text, self.file)

    def _span(self, start: int, end: int) -> Span:
        """Span for the character range ``[start, end)``."""
        return Span(start=self.offsets.to_byte(start), end=self.offsets.to_byte(end))

    def __iter__(self) -> Iterator[Token]:
        while (token := self.next()) is not None:
            yield token

    def _read_block_comment(self, start: int) -> int:
        """Return the offset just past a (possibly nested) block comment."""
        text = self.text
        depth = 0
        i = start
        while i < len(text):
            if text.startswith("/*", i):
                depth += 1
                i += 2
            elif text.startswith("*/", i):
                depth -= 1
                i += 2
                if depth == 0:
                    return i
            else:
                i += 1
        raise self.error(
            format_expected("end of block comment", "eof"),
            self._span(start, len(text)),
        )

    def _read_string(self, start: int) -> int:
        """Validate a string literal and return the offset past its closing quote."""
        text = self.text
        i = start + 1
        while i < len(text):
            ch = text[i]
            if ch == '"':
                return i + 1
            if ch == "\\":
                _, i = self._read_escape(i, start)
            else:
                i += 1
        raise self.error(
            format_expected("closing quote", "eof"),
            self._span(start, len(text)),
        )

    def _read_escape(self, i: int, literal_start: int) -> tuple[str, int]:
        """
        Decode the escape sequence whose backslash is at offset ``i``.

        Returns:
            Tuple of (decoded character, offset past the sequence)
        """
        text = self.text
        if i + 1 >= len(text):
            raise self.error(
                format_expected("closing quote", "eof"),
                self._span(literal_start, len(text)),
            )

        ch = text[i + 1]
        if ch in SIMPLE_ESCAPES:
            return SIMPLE_ESCAPES[ch], i + 2

        if ch == "u" and text.startswith("{", i + 2):
            j = i + 3
            while j < len(text) and text[j] in HEX_DIGITS and j - (i + 3) < 6:
                j += 1
            digits = text[i + 3 : j]
            if digits and text.startswith("}", j):
                value = int(digits, 16)
                if value <= 0x10FFFF and not 0xD800 <= value <= 0xDFFF:
                    return chr(value), j + 1
                end = j + 1
            else:
                end = j
        else:
            end = i + 2

        found = text[i:end]
        raise self.error(
            format_expected("a valid escape sequence", f"`{found}`"),
            self._span(i, end),
        )


def tokenize(text: str, file: Path | None = None, raw: bool = False) -> list[Token]:
    """
    Convenience function to tokenize profile text.

    Args:
        text: Source text
        file: Source file path
        raw: Keep whitespace and comment tokens

    Returns:
        List of tokens
    """
    tokenizer = Tokenizer(text, file)
    read = tokenizer.next_raw if raw else tokenizer.next
    tokens = []
    while (token := read()) is not None:
        tokens.append(token)
    return tokens
