"""
Top-level profile tree.

A ``Profile`` is the parser's output: every declaration in file order.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field

from .declarations import Declaration, Extend, Implement, Provide, Require


class Profile(BaseModel):
    """
    Parsed profile document.

    Attributes:
        declarations: All declarations, in the order they appear in the source
    """

    declarations: list[Declaration] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def __len__(self) -> int:
        return len(self.declarations)

    def __iter__(self) -> Iterator[Declaration]:  # type: ignore[override]
        return iter(self.declarations)

    def extends(self) -> list[Extend]:
        return [d for d in self.declarations if isinstance(d, Extend)]

    def provides(self) -> list[Provide]:
        return [d for d in self.declarations if isinstance(d, Provide)]

    def requires(self) -> list[Require]:
        return [d for d in self.declarations if isinstance(d, Require)]

    def implements(self) -> list[Implement]:
        return [d for d in self.declarations if isinstance(d, Implement)]
