"""Dotted configuration keys."""

from __future__ import annotations

from functools import total_ordering
from typing import Iterable


@total_ordering
class Key:
    """A key made of path segments, written with dots between them."""

    __slots__ = ("_parts",)

    def __init__(self, parts: Iterable[str] = ()) -> None:
        self._parts = [str(part) for part in parts]

    @property
    def parts(self) -> tuple[str, ...]:
        return tuple(self._parts)

    def push(self, part: str) -> None:
        """Append one segment to the key."""
        self._parts.append(str(part))

    @classmethod
    def parse(cls, text: str) -> "Key":
        """Build a key by splitting ``text`` on every dot."""
        return cls(text.split("."))

    def __str__(self) -> str:
        return ".".join(self._parts)

    def __repr__(self) -> str:
        return f"Key({self._parts!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Key):
            return NotImplemented
        return self._parts == other._parts

    def __lt__(self, other: "Key") -> bool:
        if not isinstance(other, Key):
            return NotImplemented
        return self._parts < other._parts

    def __hash__(self) -> int:
        return hash(tuple(self._parts))

    def __len__(self) -> int:
        return len(self._parts)

    def __iter__(self):
        return iter(self._parts)