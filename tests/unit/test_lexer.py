"""Tests for the profile tokenizer."""

import pytest

from witprofile.core.errors import ParseError
from witprofile.core.ir import Span
from witprofile.core.lexer import Tokenizer, TokenType, tokenize


def kinds(text: str, raw: bool = False) -> list[TokenType]:
    return [t.type for t in tokenize(text, raw=raw)]


class TestTokenKinds:
    """Lexical classes and their boundaries."""

    def test_raw_tokens_include_trivia(self) -> None:
        tokens = tokenize("extend foo // c\n", raw=True)
        assert [(t.type, t.span.start, t.span.end) for t in tokens] == [
            (TokenType.EXTEND, 0, 6),
            (TokenType.WHITESPACE, 6, 7),
            (TokenType.ID, 7, 10),
            (TokenType.WHITESPACE, 10, 11),
            (TokenType.COMMENT, 11, 15),
            (TokenType.WHITESPACE, 15, 16),
        ]

    def test_filtered_tokens_skip_trivia(self) -> None:
        assert kinds("provide /* x */ foo // y\n") == [TokenType.PROVIDE, TokenType.ID]

    def test_all_keywords(self) -> None:
        assert kinds("extend provide require implement with") == [
            TokenType.EXTEND,
            TokenType.PROVIDE,
            TokenType.REQUIRE,
            TokenType.IMPLEMENT,
            TokenType.WITH,
        ]

    def test_keyword_prefix_is_identifier(self) -> None:
        assert kinds("extends providers with-x") == [TokenType.ID, TokenType.ID, TokenType.ID]

    def test_identifier_with_hyphen_and_digits(self) -> None:
        tokens = tokenize("wasi-http2_x")
        assert len(tokens) == 1
        assert tokens[0].type is TokenType.ID
        assert tokens[0].span == Span(start=0, end=12)

    def test_whitespace_run_is_one_token(self) -> None:
        tokens = tokenize(" \t\r\n\n x", raw=True)
        assert tokens[0].type is TokenType.WHITESPACE
        assert tokens[0].span == Span(start=0, end=6)

    def test_line_comment_excludes_newline(self) -> None:
        text = "// hello\nfoo"
        comment = tokenize(text, raw=True)[0]
        assert comment.type is TokenType.COMMENT
        assert comment.span.slice(text) == "// hello"

    def test_line_comment_at_end_of_input(self) -> None:
        tokens = tokenize("// last", raw=True)
        assert tokens[0].span == Span(start=0, end=7)

    def test_nested_block_comment(self) -> None:
        text = "/* a /* b */ c */ provide"
        tokens = tokenize(text, raw=True)
        assert tokens[0].type is TokenType.COMMENT
        assert tokens[0].span.slice(text) == "/* a /* b */ c */"
        assert tokens[-1].type is TokenType.PROVIDE

    def test_string_literal_span_includes_quotes(self) -> None:
        text = 'require "a b"'
        literal = tokenize(text)[1]
        assert literal.type is TokenType.STR_LIT
        assert literal.span.slice(text) == '"a b"'

    def test_empty_input(self) -> None:
        assert tokenize("") == []
        assert tokenize("", raw=True) == []

    def test_multibyte_spans_are_byte_offsets(self) -> None:
        tokens = tokenize("é x")
        assert [t.span for t in tokens] == [Span(start=0, end=2), Span(start=3, end=4)]

    def test_decimal_digits_continue_identifier(self) -> None:
        tokens = tokenize("v\u0663")
        assert len(tokens) == 1
        assert tokens[0].span == Span(start=0, end=3)

    @pytest.mark.parametrize("symbol", ["½", "²"])
    def test_numeric_symbol_ends_identifier(self, symbol: str) -> None:
        with pytest.raises(ParseError) as exc_info:
            tokenize(f"x{symbol}")
        assert exc_info.value.message == f"expected a token, found invalid character {symbol!r}"
        assert exc_info.value.span == Span(start=1, end=3)


class TestLexicalErrors:
    """Malformed input is reported with the offending span."""

    def test_invalid_character(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            tokenize("provide $")
        assert exc_info.value.message == "expected a token, found invalid character '$'"
        assert exc_info.value.span == Span(start=8, end=9)

    def test_unterminated_string(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            tokenize('"abc')
        assert exc_info.value.message == "expected closing quote, found eof"
        assert exc_info.value.span == Span(start=0, end=4)

    def test_trailing_backslash_is_unterminated(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            tokenize('"abc\\')
        assert exc_info.value.message == "expected closing quote, found eof"

    def test_unterminated_block_comment(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            tokenize("/* a /* b */")
        assert exc_info.value.message == "expected end of block comment, found eof"
        assert exc_info.value.span == Span(start=0, end=12)

    def test_invalid_escape(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            tokenize('"a\\qb"')
        assert exc_info.value.message == "expected a valid escape sequence, found `\\q`"
        assert exc_info.value.span == Span(start=2, end=4)

    def test_surrogate_unicode_escape(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            tokenize('"\\u{D800}"')
        assert exc_info.value.message == "expected a valid escape sequence, found `\\u{D800}`"
        assert exc_info.value.span == Span(start=1, end=9)

    @pytest.mark.parametrize("literal", ['"\\u{}"', '"\\u{1234567}"', '"\\u0041"', '"\\u{110000}"'])
    def test_malformed_unicode_escape(self, literal: str) -> None:
        with pytest.raises(ParseError, match="expected a valid escape sequence"):
            tokenize(literal)


class TestStringDecoding:
    """parse_str resolves escapes inside string literals."""

    def decode(self, literal: str) -> str:
        tokenizer = Tokenizer(literal)
        token = tokenizer.next()
        assert token is not None and token.type is TokenType.STR_LIT
        return tokenizer.parse_str(token.span)

    def test_plain_string(self) -> None:
        assert self.decode('"wasi:http/handler"') == "wasi:http/handler"

    def test_empty_string(self) -> None:
        assert self.decode('""') == ""

    def test_simple_escapes(self) -> None:
        assert self.decode('"a\\"b\\\\c\\n\\t\\r\\\'\\0"') == "a\"b\\c\n\t\r'\0"

    def test_unicode_escape(self) -> None:
        assert self.decode('"globe \\u{1F310}!"') == "globe \U0001f310!"

    def test_raw_newline_is_kept(self) -> None:
        assert self.decode('"two\nlines"') == "two\nlines"


class TestCursor:
    """Lookahead through clones never moves the committed cursor."""

    def test_clone_is_independent(self) -> None:
        tokenizer = Tokenizer("provide foo")
        clone = tokenizer.clone()
        clone.next()
        assert tokenizer.pos == 0
        assert clone.pos == 7

    def test_accept_commits_clone_position(self) -> None:
        tokenizer = Tokenizer("provide foo")
        clone = tokenizer.clone()
        clone.next()
        tokenizer.accept(clone)
        token = tokenizer.next()
        assert token is not None and token.type is TokenType.ID

    def test_peek_does_not_consume(self) -> None:
        tokenizer = Tokenizer("  // c\n require x")
        peeked = tokenizer.peek()
        assert peeked is not None and peeked.type is TokenType.REQUIRE
        assert tokenizer.pos == 0
        assert tokenizer.next() == peeked

    def test_at_end_ignores_trivia(self) -> None:
        assert Tokenizer(" /* only */ // comments\n").at_end()
        assert not Tokenizer(" x").at_end()

    def test_iteration_yields_significant_tokens(self) -> None:
        assert [t.type for t in Tokenizer("extend a // b")] == [TokenType.EXTEND, TokenType.ID]

    def test_get_span(self) -> None:
        tokenizer = Tokenizer("require abc")
        assert tokenizer.get_span(Span(start=8, end=11)) == "abc"


class TestExpect:
    """expect() consumes a token of the given type or reports what it found."""

    def test_returns_span(self) -> None:
        tokenizer = Tokenizer("  with")
        assert tokenizer.expect(TokenType.WITH) == Span(start=2, end=6)

    def test_mismatch(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            Tokenizer("foo").expect(TokenType.STR_LIT)
        assert exc_info.value.message == "expected a string, found an identifier"
        assert exc_info.value.span == Span(start=0, end=3)

    def test_end_of_input(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            Tokenizer("  ").expect(TokenType.WITH)
        assert exc_info.value.message == "expected keyword `with`, found eof"
        assert exc_info.value.span == Span(start=2, end=2)

    def test_format_expected_error(self) -> None:
        tokenizer = Tokenizer("implement")
        token = tokenizer.clone().next()
        span, message = tokenizer.format_expected_error("an identifier", token)
        assert span == Span(start=0, end=9)
        assert message == "expected an identifier, found keyword `implement`"


class TestDescribe:
    def test_descriptions(self) -> None:
        assert TokenType.WHITESPACE.describe() == "whitespace"
        assert TokenType.COMMENT.describe() == "a comment"
        assert TokenType.ID.describe() == "an identifier"
        assert TokenType.STR_LIT.describe() == "a string"
        assert TokenType.EXTEND.describe() == "keyword `extend`"
