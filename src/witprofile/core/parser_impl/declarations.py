"""
Declaration parsing for profile documents.

Handles the four declaration kinds: extend, provide, require and implement.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from .. import ir
from ..lexer import TokenType

if TYPE_CHECKING:
    from ..lexer import Tokenizer


DECLARATION_KEYWORDS = "`extend`, `provide`, `require`, or `implement`"


class DeclarationParserMixin:
    """
    Mixin providing declaration parsing.

    Note: This mixin expects to be combined with BaseParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        tokens: Tokenizer
        expect: Any
        expected_error: Any
        parse_id: Any

    def parse_declaration(self, docs: ir.Docs) -> ir.Declaration:
        """
        Parse one declaration, chosen by its leading keyword.

        Args:
            docs: Comments collected ahead of the declaration

        Raises:
            ParseError: If the next token does not start a declaration
        """
        token = self.tokens.peek()
        dispatch = self._declaration_dispatch()
        if token is None or token.type not in dispatch:
            raise self.expected_error(DECLARATION_KEYWORDS, token)
        return dispatch[token.type](docs)

    def _declaration_dispatch(self) -> dict[TokenType, Callable[[ir.Docs], ir.Declaration]]:
        return {
            TokenType.EXTEND: lambda _docs: self.parse_extend(),
            TokenType.PROVIDE: self.parse_provide,
            TokenType.REQUIRE: self.parse_require,
            TokenType.IMPLEMENT: self.parse_implement,
        }

    def parse_extend(self) -> ir.Extend:
        """Parse ``extend <id>``."""
        span = self.expect(TokenType.EXTEND)
        profile = self.parse_id()
        return ir.Extend(span=span.extend_to(profile.span), profile=profile)

    def parse_provide(self, docs: ir.Docs) -> ir.Provide:
        """Parse ``provide <id>``."""
        span = self.expect(TokenType.PROVIDE)
        interface = self.parse_id()
        return ir.Provide(docs=docs, span=span.extend_to(interface.span), interface=interface)

    def parse_require(self, docs: ir.Docs) -> ir.Require:
        """Parse ``require <id>``."""
        span = self.expect(TokenType.REQUIRE)
        interface = self.parse_id()
        return ir.Require(docs=docs, span=span.extend_to(interface.span), interface=interface)

    def parse_implement(self, docs: ir.Docs) -> ir.Implement:
        """
        Parse ``implement "<interface>" with "<component>"``.

        Unlike the other declarations, both operands must be string
        literals; a bare identifier is rejected.
        """
        span = self.expect(TokenType.IMPLEMENT)
        interface = self.expect(TokenType.STR_LIT)
        self.expect(TokenType.WITH)
        component = self.expect(TokenType.STR_LIT)

        return ir.Implement(
            docs=docs,
            span=span.extend_to(component),
            interface=self.tokens.parse_str(interface),
            component=self.tokens.parse_str(component),
        )
