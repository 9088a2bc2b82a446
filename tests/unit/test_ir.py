"""Tests for profile syntax tree models."""

import pytest
from pydantic import ValidationError

from witprofile.core import ir
from witprofile.core.parser_impl import parse_profile


class TestId:
    def test_bare_identifier(self) -> None:
        ident = ir.Id(name="foo", span=ir.Span(start=0, end=3))
        assert ident.source is ir.NameSource.SLICE
        assert not ident.quoted

    def test_decoded_identifier(self) -> None:
        ident = ir.Id(name="foo", span=ir.Span(start=0, end=5), source=ir.NameSource.DECODED)
        assert ident.quoted


class TestDeclarations:
    def test_kind_defaults(self) -> None:
        span = ir.Span(start=0, end=1)
        assert ir.Extend(span=span, profile=ir.Id(name="a", span=span)).kind == "extend"
        assert ir.Implement(span=span, interface="i", component="c").docs.docs == []

    def test_frozen(self) -> None:
        provide = parse_profile("provide foo").provides()[0]
        with pytest.raises(ValidationError):
            provide.interface = provide.interface  # type: ignore[misc]


class TestProfile:
    def test_dump_and_validate(self) -> None:
        profile = parse_profile('// d\nprovide a\nimplement "i" with "c"\nextend b')
        data = profile.model_dump()
        assert [d["kind"] for d in data["declarations"]] == ["provide", "implement", "extend"]
        assert ir.Profile.model_validate(data) == profile

    def test_accessors_filter_by_kind(self) -> None:
        profile = parse_profile("require a\nprovide b\nrequire c")
        assert [r.interface.name for r in profile.requires()] == ["a", "c"]
        assert profile.extends() == []
        assert profile.implements() == []
