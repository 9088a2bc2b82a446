"""
Doc comment collection for profile documents.
"""

from typing import TYPE_CHECKING

from .. import ir
from ..lexer import TokenType

if TYPE_CHECKING:
    from ..lexer import Tokenizer


class DocsParserMixin:
    """
    Mixin collecting the comments that precede a declaration.

    Note: This mixin expects to be combined with BaseParser via multiple inheritance.
    """

    if TYPE_CHECKING:
        tokens: Tokenizer

    def parse_docs(self) -> ir.Docs:
        """
        Collect the run of comments ahead of the cursor.

        Whitespace between comments, blank lines included, does not break the
        run; the first other token ends it and is left unconsumed. The
        committed cursor ends just after the last comment collected.
        """
        docs: list[str] = []
        lookahead = self.tokens.clone()

        while (token := lookahead.next_raw()) is not None:
            if token.type is TokenType.COMMENT:
                docs.append(self.tokens.get_span(token.span))
                self.tokens.accept(lookahead)
            elif token.type is not TokenType.WHITESPACE:
                break

        return ir.Docs(docs=docs)
