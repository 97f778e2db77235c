"""Linked paths used to address values while merging."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from hoconlite.errors import InvalidPathExpressionError


class RefPath:
    """A path of segments stored as a chain of nodes."""

    __slots__ = ("first", "remainder")

    def __init__(self, first: str, remainder: Optional["RefPath"] = None) -> None:
        self.first = first
        self.remainder = remainder

    @classmethod
    def from_parts(cls, parts: Iterable[str]) -> "RefPath":
        """Build a path from its segments; an empty sequence is an error."""
        segments = list(parts)
        if not segments:
            raise InvalidPathExpressionError("path is empty")
        node: Optional[RefPath] = None
        for segment in reversed(segments):
            node = cls(segment, node)
        assert node is not None
        return node

    def next(self) -> Optional["RefPath"]:
        """The path without its first segment, or None at the end."""
        return self.remainder

    def join(self, other: "RefPath") -> "RefPath":
        """A new path made of this path followed by ``other``."""
        return RefPath.from_parts([*self.parts(), *other.parts()])

    def tail(self) -> "RefPath":
        """The last node of the path."""
        node = self
        while node.remainder is not None:
            node = node.remainder
        return node

    def __iter__(self) -> Iterator["RefPath"]:
        """Yield each node, from this one to the tail."""
        node: Optional[RefPath] = self
        while node is not None:
            yield node
            node = node.remainder

    def parts(self) -> list[str]:
        """The segments of the path in order."""
        return [node.first for node in self]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RefPath):
            return NotImplemented
        return self.parts() == other.parts()

    def __hash__(self) -> int:
        return hash(tuple(self.parts()))

    def __str__(self) -> str:
        return ".".join(self.parts())

    def __repr__(self) -> str:
        return f"RefPath({str(self)!r})"