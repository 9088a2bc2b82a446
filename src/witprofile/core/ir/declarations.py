"""
Declaration types for profile documents.

Each declaration records the span of the whole construct, from its leading
keyword to the last token it consumed. Every kind except ``extend`` also
carries the doc comments that immediately precede it.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from .location import Span


class NameSource(StrEnum):
    """Where an identifier's name came from."""

    SLICE = "slice"  # verbatim source text of a bare identifier
    DECODED = "decoded"  # string literal with escapes resolved


class Id(BaseModel):
    """
    An identifier operand, written bare or as a string literal.

    Attributes:
        name: The identifier text (decoded for string literals)
        span: Span of the identifier token, quotes included
        source: Whether ``name`` is a source slice or a decoded literal
    """

    name: str
    span: Span
    source: NameSource = NameSource.SLICE

    model_config = ConfigDict(frozen=True)

    @property
    def quoted(self) -> bool:
        return self.source is NameSource.DECODED


class Docs(BaseModel):
    """
    Comment lines attached to a declaration, in source order.

    Each entry is the full comment text including its ``//`` or ``/* */``
    delimiters.
    """

    docs: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def __bool__(self) -> bool:
        return bool(self.docs)


class Extend(BaseModel):
    """
    ``extend <profile>``: inherit another profile's declarations.

    Extend statements are not documented, so no docs are kept.
    """

    kind: Literal["extend"] = "extend"
    span: Span
    profile: Id

    model_config = ConfigDict(frozen=True)


class Provide(BaseModel):
    """``provide <interface>``: the unit exports an interface."""

    kind: Literal["provide"] = "provide"
    docs: Docs = Field(default_factory=Docs)
    span: Span
    interface: Id

    model_config = ConfigDict(frozen=True)


class Require(BaseModel):
    """``require <interface>``: the unit imports an interface."""

    kind: Literal["require"] = "require"
    docs: Docs = Field(default_factory=Docs)
    span: Span
    interface: Id

    model_config = ConfigDict(frozen=True)


class Implement(BaseModel):
    """
    ``implement "<interface>" with "<component>"``: bind an interface to a
    component implementation.

    Both operands are always string literals, stored decoded.
    """

    kind: Literal["implement"] = "implement"
    docs: Docs = Field(default_factory=Docs)
    span: Span
    interface: str
    component: str

    model_config = ConfigDict(frozen=True)


Declaration = Annotated[
    Extend | Provide | Require | Implement,
    Field(discriminator="kind"),
]
