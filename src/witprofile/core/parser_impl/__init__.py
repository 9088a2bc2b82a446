"""
Profile Parser Package.

The parser is built from mixins that separate parsing logic by construct,
combined over a shared BaseParser.

The main exports are:
- Parser: The complete parser class
- parse_profile: Convenience function to parse profile text

Usage:
    from witprofile.core.parser_impl import parse_profile

    profile = parse_profile(text)
"""

import logging
from pathlib import Path

from .. import ir
from ..config import get_max_source_bytes
from ..errors import ProfileError
from .base import BaseParser, ParserProtocol
from .declarations import DECLARATION_KEYWORDS, DeclarationParserMixin
from .docs import DocsParserMixin

logger = logging.getLogger(__name__)


class Parser(
    BaseParser,
    DocsParserMixin,
    DeclarationParserMixin,
):
    """
    Complete profile parser.

    - DocsParserMixin: Doc comments preceding declarations
    - DeclarationParserMixin: extend, provide, require and implement
    """

    def parse(self) -> ir.Profile:
        """
        Parse the entire document.

        Returns:
            Profile with every declaration in source order

        Raises:
            ParseError: On the first lexical or syntax error
        """
        declarations: list[ir.Declaration] = []

        while self.tokens.clone().next() is not None:
            docs = self.parse_docs()
            declaration = self.parse_declaration(docs)
            logger.debug("Parsed %s declaration at %s", declaration.kind, declaration.span)
            declarations.append(declaration)

        logger.debug("Parsed %d declarations", len(declarations))
        return ir.Profile(declarations=declarations)


def parse_profile(text: str, file: Path | None = None) -> ir.Profile:
    """
    Parse profile text.

    Args:
        text: Profile source text
        file: Source file path, used only in error messages

    Returns:
        The parsed Profile

    Raises:
        ProfileError: If the text exceeds the configured size limit
        ParseError: If the text is malformed
    """
    limit = get_max_source_bytes()
    if limit:
        size = ir.ByteOffsets(text).size
        if size > limit:
            raise ProfileError(
                f"{file or '<input>'}: profile is {size} bytes, larger than the {limit} byte limit"
            )

    return Parser(text, file).parse()


__all__ = [
    "DECLARATION_KEYWORDS",
    "Parser",
    "ParserProtocol",
    "parse_profile",
    "BaseParser",
    "DocsParserMixin",
    "DeclarationParserMixin",
]
