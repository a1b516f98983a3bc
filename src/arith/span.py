"""Source spans and the located-value wrapper shared by every stage."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


#half-open byte range [start, end) into the original source text
@dataclass(frozen=True, slots=True)
class Span:
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"invalid span {self.start}-{self.end}")

    def merge(self, other: Span) -> Span:
        """Return the minimal span that covers both spans."""

        return Span(min(self.start, other.start), max(self.end, other.end))

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


#pairs any payload with the span of text it was derived from
@dataclass(frozen=True, slots=True)
class Located(Generic[T]):
    value: T
    span: Span

    def __str__(self) -> str:
        return f"{self.span}: {self.value}"


__all__ = ["Located", "Span"]
