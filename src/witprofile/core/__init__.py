"""Core profile functionality: tokenizer, syntax tree and parser."""

from . import ir
from .errors import ErrorContext, ParseError, ProfileError
from .lexer import Token, Tokenizer, TokenType, tokenize
from .parser_impl import Parser, parse_profile

__all__ = [
    "ir",
    "ProfileError",
    "ParseError",
    "ErrorContext",
    "Token",
    "TokenType",
    "Tokenizer",
    "tokenize",
    "Parser",
    "parse_profile",
]
