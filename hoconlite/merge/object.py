"""Objects in the intermediate merge tree.

An object is either *merged*, meaning nothing below it awaits resolution,
or *unmerged*, meaning substitutions, concatenations or ``+=`` values may
still be present somewhere inside it. Keeping the flag lets the resolver
skip whole subtrees that are already final.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Mapping, Optional, Sequence, Union

from hoconlite.errors import InvalidPathExpressionError
from hoconlite.merge import value as values
from hoconlite.merge.path import RefPath
from hoconlite.merge.substitution import Substitution
from hoconlite.merge.value import AddAssign, Array, Cell, Concat, DelayReplacement

__all__ = ["MergeObject"]

_log = logging.getLogger(__name__)

KeyParts = Union[str, Sequence[str]]


def _key_parts(key: KeyParts) -> list[str]:
    """Split a dotted key, or take a sequence of segments as given."""
    if isinstance(key, str):
        return key.split(".")
    return [str(part) for part in key]


class MergeObject:
    """A keyed collection of cells, iterated in sorted key order."""

    __slots__ = ("_entries", "_merged")

    def __init__(
        self,
        entries: Optional[Mapping[str, Any]] = None,
        merged: bool = False,
    ) -> None:
        self._entries: dict[str, Cell] = {}
        for key, item in (entries or {}).items():
            self._entries[key] = item if isinstance(item, Cell) else Cell(item)
        self._merged = merged

    # -- construction -------------------------------------------------------

    @classmethod
    def from_items(
        cls,
        items: Iterable[tuple[KeyParts, Any]],
        parent: Optional[RefPath] = None,
    ) -> "MergeObject":
        """Build an object by putting each ``(key, value)`` pair in turn.

        String keys are path expressions split on dots; a sequence of
        strings gives the segments literally.
        """
        root = cls()
        for key, item in items:
            root.put(key, item, parent)
        return root

    def put(
        self,
        key_parts: KeyParts,
        value: Any,
        parent: Optional[RefPath] = None,
    ) -> None:
        """Set ``value`` at the path ``key_parts`` below this object."""
        parts = _key_parts(key_parts)
        if not parts:
            raise InvalidPathExpressionError("empty")
        key_path = RefPath.from_parts(parts)
        path = key_path if parent is None else parent.join(key_path)
        converted = _convert(value, path)
        expanded = self._from_path(parts, converted)
        expanded.fixup_substitution(parent)
        self.merge(expanded, parent)

    @classmethod
    def _from_path(cls, parts: Sequence[str], value: Any) -> "MergeObject":
        _log.debug("create object from path: `%s` value: `%s`", ".".join(parts), values.display(value))
        if not parts:
            raise InvalidPathExpressionError("empty")
        current = value
        for part in reversed(parts):
            obj = cls()
            obj._entries[part] = Cell(current)
            current = obj
        return current

    # -- merging ------------------------------------------------------------

    def merge(self, other: "MergeObject", parent: Optional[RefPath] = None) -> None:
        """Merge ``other`` into this object; ``other``'s values take priority."""
        both_merged = self.is_merged() and other.is_merged()
        for key, right_cell in other.items():
            node = RefPath(key)
            sub_path = node if parent is None else parent.join(node)
            right = right_cell.value
            left_cell = self._entries.get(key)
            if left_cell is not None:
                left = left_cell.value
                if isinstance(left, MergeObject) and isinstance(right, MergeObject):
                    left.merge(right, parent)
                    continue
                left_cell.value = None
                # Treated as unmerged even if the replacement is final.
                result = values.replacement(sub_path, left, right)
                if isinstance(result, MergeObject):
                    result.resolve_add_assign()
                left_cell.value = result
            else:
                result = values.replacement(sub_path, None, right)
                if isinstance(result, MergeObject):
                    result.resolve_add_assign()
                self._entries[key] = Cell(result)
        if not both_merged:
            self._merged = False
        else:
            self.try_become_merged()

    def resolve_add_assign(self) -> None:
        """Turn leftover ``+=`` values below this object into arrays."""
        if self._merged:
            return
        for cell in self._entries.values():
            cell.value = values.resolve_add_assign(cell.value)

    def try_become_merged(self) -> bool:
        """Mark this object merged if nothing below it awaits resolution."""
        all_merged = True
        for cell in self.values():
            item = cell.value
            if isinstance(item, MergeObject):
                if not item.try_become_merged():
                    all_merged = False
                    break
            elif not values.try_become_merged(item):
                all_merged = False
                break
        if all_merged:
            self._merged = True
            _log.debug("%s become merged", self)
        return all_merged

    def is_merged(self) -> bool:
        """True when the object is marked as fully merged."""
        return self._merged

    def fixup_substitution(self, parent: Optional[RefPath]) -> None:
        """Prefix substitution paths found below this object with ``parent``."""
        if parent is None:
            return
        for cell in self._entries.values():
            item = cell.value
            if isinstance(item, MergeObject):
                item.fixup_substitution(parent)
            elif isinstance(item, Substitution):
                path = RefPath.from_parts([*parent.parts(), *item.path.parts()])
                cell.value = Substitution(path, item.optional)
            elif isinstance(item, (Array, Concat, DelayReplacement)):
                for element in item.items:
                    if isinstance(element.value, MergeObject):
                        element.value.fixup_substitution(parent)
            elif isinstance(item, AddAssign):
                if isinstance(item.value, MergeObject):
                    item.value.fixup_substitution(parent)

    # -- lookup -------------------------------------------------------------

    def get_by_path(self, path: RefPath) -> Optional[Cell]:
        """The cell at ``path``, or None if any segment is missing."""
        cell = self._entries.get(path.first)
        node = path.next()
        while cell is not None and node is not None:
            if not isinstance(cell.value, MergeObject):
                return None
            cell = cell.value.get(node.first)
            node = node.next()
        return cell

    def get(self, key: str) -> Optional[Cell]:
        return self._entries.get(key)

    def keys(self) -> list[str]:
        return sorted(self._entries)

    def items(self) -> list[tuple[str, Cell]]:
        return [(key, self._entries[key]) for key in sorted(self._entries)]

    def values(self) -> list[Cell]:
        return [self._entries[key] for key in sorted(self._entries)]

    def __getitem__(self, key: str) -> Cell:
        return self._entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MergeObject):
            return NotImplemented
        return self._merged == other._merged and self._entries == other._entries

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        state = "merged" if self._merged else "unmerged"
        inner = {key: cell.value for key, cell in self.items()}
        return f"MergeObject({inner!r}, {state})"

    def __str__(self) -> str:
        joined = ", ".join(f"{key} : {values.display(cell.value)}" for key, cell in self.items())
        return "{" + joined + "}"


def _convert(item: Any, parent: Optional[RefPath]) -> Any:
    """Turn plain mappings and lists into merge values below ``parent``."""
    if isinstance(item, Cell):
        return _convert(item.value, parent)
    if isinstance(item, MergeObject):
        return item
    if isinstance(item, Mapping):
        return MergeObject.from_items(item.items(), parent)
    if isinstance(item, (list, tuple)):
        return Array([_convert(element, parent) for element in item])
    if isinstance(item, Array):
        return Array([_convert(cell.value, parent) for cell in item.items])
    if isinstance(item, Concat):
        return Concat([_convert(cell.value, parent) for cell in item.items])
    if isinstance(item, AddAssign):
        return AddAssign(_convert(item.value, parent))
    return item