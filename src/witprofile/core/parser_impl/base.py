"""
Base parser class for profile documents.

Provides the tokenizer plumbing and identifier parsing shared by all
parser mixins.
"""

from pathlib import Path
from typing import Protocol, runtime_checkable

from .. import ir
from ..errors import ParseError
from ..lexer import Token, Tokenizer, TokenType


@runtime_checkable
class ParserProtocol(Protocol):
    """
    Protocol defining the interface available to parser mixins.

    This allows mypy to understand that mixins will have access to
    BaseParser methods when combined in the final Parser class.
    """

    tokens: Tokenizer

    def expect(self, token_type: TokenType) -> ir.Span: ...
    def expected_error(self, expected: str, found: Token | None) -> ParseError: ...
    def parse_id(self) -> ir.Id: ...


class BaseParser:
    """
    Base parser class with token manipulation utilities.

    The parser owns a single committed cursor, ``self.tokens``. Lookahead
    always goes through a clone of it.
    """

    def __init__(self, text: str, file: Path | None = None):
        """
        Initialize parser.

        Args:
            text: Source text to parse
            file: Source file path (for error reporting)
        """
        self.tokens = Tokenizer(text, file)

    def expect(self, token_type: TokenType) -> ir.Span:
        """
        Expect a specific token type and consume it.

        Raises:
            ParseError: If token doesn't match
        """
        return self.tokens.expect(token_type)

    def expected_error(self, expected: str, found: Token | None) -> ParseError:
        return self.tokens.expected_error(expected, found)

    def parse_id(self) -> ir.Id:
        """
        Parse an identifier written bare or as a string literal.

        Bare identifiers keep their source text; string literals are decoded.

        Raises:
            ParseError: If the next token is neither
        """
        token = self.tokens.next()
        if token is not None and token.type is TokenType.ID:
            return ir.Id(name=self.tokens.get_span(token.span), span=token.span)
        if token is not None and token.type is TokenType.STR_LIT:
            return ir.Id(
                name=self.tokens.parse_str(token.span),
                span=token.span,
                source=ir.NameSource.DECODED,
            )
        raise self.expected_error("an identifier or string", token)
