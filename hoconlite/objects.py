"""The mapping type of fully resolved configuration objects."""

from __future__ import annotations

from typing import Any, Iterable


class Object(dict):
    """A resolved configuration object mapping keys to values."""

    @classmethod
    def with_kvs(cls, kvs: Iterable[tuple[str, Any]]) -> "Object":
        """Build an object from key/value pairs; later keys win."""
        return cls(kvs)

    def __str__(self) -> str:
        joined = ", ".join(f"{key}: {value}" for key, value in self.items())
        return "{" + joined + "}"

    def __repr__(self) -> str:
        return f"Object({dict.__repr__(self)})"