"""Building a configuration from key/value pairs and resolving it."""

from __future__ import annotations

import copy
from typing import Any, Iterable, Mapping, Optional, Union

from hoconlite.errors import ResolveNotCompleteError
from hoconlite.key import Key
from hoconlite.merge import value as values
from hoconlite.merge.object import MergeObject
from hoconlite.merge.resolver import resolve as resolve_value
from hoconlite.merge.resolver import to_plain
from hoconlite.objects import Object
from hoconlite.options import ConfigOptions

__all__ = ["Config"]

KeyLike = Union[str, Key, Iterable[str]]


def _normalise_key(key: KeyLike) -> Union[str, tuple[str, ...]]:
    if isinstance(key, str):
        return key
    if isinstance(key, Key):
        return key.parts
    return tuple(str(part) for part in key)


class Config:
    """An ordered list of fields that resolves into a configuration object.

    String keys are path expressions, so ``"a.b"`` creates a nested object.
    Keys given as :class:`Key` or as sequences of segments are taken literally.
    """

    def __init__(self, options: Optional[ConfigOptions] = None) -> None:
        self.options = options if options is not None else ConfigOptions()
        self._fields: list[tuple[Union[str, tuple[str, ...]], Any]] = []

    @property
    def fields(self) -> list[tuple[Union[str, tuple[str, ...]], Any]]:
        return list(self._fields)

    def add_kv(self, key: KeyLike, value: Any) -> "Config":
        """Append one field; returns the configuration for chaining."""
        self._fields.append((_normalise_key(key), value))
        return self

    def add_kvs(self, kvs: Iterable[tuple[KeyLike, Any]]) -> "Config":
        """Append several fields in order."""
        for key, item in kvs:
            self.add_kv(key, item)
        return self

    def add_object(
        self, items: Union[Mapping[KeyLike, Any], Iterable[tuple[KeyLike, Any]]]
    ) -> "Config":
        """Append the fields of a mapping or of a sequence of pairs."""
        pairs = items.items() if isinstance(items, Mapping) else items
        return self.add_kvs(pairs)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "Config":
        """A configuration whose keys are literal, never path expressions."""
        config = cls()
        for key, item in mapping.items():
            config.add_kv((key,), item)
        return config

    def resolve(self) -> Object:
        """Merge the fields, resolve substitutions and return plain data."""
        root = MergeObject.from_items(copy.deepcopy(self._fields))
        resolved = resolve_value(root)
        if not values.is_merged(resolved):
            raise ResolveNotCompleteError()
        return to_plain(resolved)

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Config):
            return NotImplemented
        return self.options == other.options and self._fields == other._fields

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Config({self._fields!r})"