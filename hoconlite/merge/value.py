"""Intermediate values used while merging and resolving a configuration.

Plain values are Python objects: ``None`` for null, ``bool``, ``str``,
``int`` or ``float``. Objects are merge objects that provide ``merge``,
``is_merged``, ``try_become_merged`` and ``resolve_add_assign``.
Everything that still awaits resolution uses the classes defined here or
:class:`~hoconlite.merge.substitution.Substitution`.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Iterable, Optional, Protocol, runtime_checkable

from hoconlite.errors import ConcatenationDifferentTypeError
from hoconlite.merge.path import RefPath
from hoconlite.merge.substitution import Substitution

__all__ = [
    "Cell",
    "AddAssign",
    "Array",
    "Concat",
    "DelayReplacement",
    "delay_replacement",
    "type_name",
    "display",
    "is_merged",
    "try_become_merged",
    "resolve_add_assign",
    "replacement",
    "concatenate",
]

_log = logging.getLogger(__name__)


@runtime_checkable
class _ObjectLike(Protocol):
    def merge(self, other: Any, parent: Optional[RefPath]) -> None: ...

    def is_merged(self) -> bool: ...

    def try_become_merged(self) -> bool: ...

    def resolve_add_assign(self) -> None: ...


def _is_object(value: Any) -> bool:
    return isinstance(value, _ObjectLike) and not isinstance(value, type)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_scalar(value: Any) -> bool:
    """True for booleans, strings and numbers (not null)."""
    return isinstance(value, (bool, str)) or _is_number(value)


class Cell:
    """A mutable slot holding one value."""

    __slots__ = ("value",)

    def __init__(self, value: Any = None) -> None:
        self.value = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self.value == other.value

    def __repr__(self) -> str:
        return f"Cell({self.value!r})"


def _cells(items: Iterable[Any]) -> list[Cell]:
    return [item if isinstance(item, Cell) else Cell(item) for item in items]


class AddAssign:
    """A value appended to an array with ``+=``."""

    __slots__ = ("value",)

    def __init__(self, value: Any = None) -> None:
        self.value = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddAssign):
            return NotImplemented
        return self.value == other.value

    def __repr__(self) -> str:
        return f"AddAssign({self.value!r})"

    def __str__(self) -> str:
        return f"+={display(self.value)}"


class Array:
    """An array whose elements may still need resolution."""

    __slots__ = ("items",)

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.items: list[Cell] = _cells(items)

    def is_merged(self) -> bool:
        """True when every element is fully merged."""
        return all(is_merged(cell.value) for cell in self.items)

    def values(self) -> list[Any]:
        return [cell.value for cell in self.items]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Array):
            return NotImplemented
        return self.items == other.items

    def __repr__(self) -> str:
        return f"Array({self.values()!r})"

    def __str__(self) -> str:
        return "[" + ", ".join(display(cell.value) for cell in self.items) + "]"


class Concat:
    """A sequence of values to be concatenated once resolved."""

    __slots__ = ("items",)

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.items: deque[Cell] = deque(_cells(items))

    def values(self) -> list[Any]:
        return [cell.value for cell in self.items]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Concat):
            return NotImplemented
        return list(self.items) == list(other.items)

    def __repr__(self) -> str:
        return f"Concat({self.values()!r})"

    def __str__(self) -> str:
        return "Concat(" + ", ".join(display(cell.value) for cell in self.items) + ")"


class DelayReplacement:
    """Values whose replacement must wait until substitutions are resolved.

    The final result depends on whether a pending substitution turns out
    to be a simple value or an object, so the values are kept in order and
    merged later.
    """

    __slots__ = ("items",)

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.items: deque[Cell] = deque(_cells(items))

    def flatten(self) -> "DelayReplacement":
        """A copy in which nested delayed replacements are spliced in."""
        flat: list[Cell] = []
        for cell in self.items:
            if isinstance(cell.value, DelayReplacement):
                flat.extend(cell.value.flatten().items)
            else:
                flat.append(cell)
        return DelayReplacement(flat)

    def values(self) -> list[Any]:
        return [cell.value for cell in self.items]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DelayReplacement):
            return NotImplemented
        return list(self.items) == list(other.items)

    def __repr__(self) -> str:
        return f"DelayReplacement({self.values()!r})"

    def __str__(self) -> str:
        joined = ", ".join(display(cell.value) for cell in self.items)
        return f"DelayReplacement({joined})"


def delay_replacement(values: Iterable[Any]) -> DelayReplacement:
    """A flattened delayed replacement of ``values``."""
    return DelayReplacement(values).flatten()


def type_name(value: Any) -> str:
    """The kind of ``value`` as used in error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, str):
        return "string"
    if _is_number(value):
        return "number"
    if isinstance(value, Array):
        return "array"
    if isinstance(value, Substitution):
        return "substitution"
    if isinstance(value, Concat):
        return "concat"
    if isinstance(value, AddAssign):
        return "add_assign"
    if isinstance(value, DelayReplacement):
        return "delay_replacement"
    if _is_object(value):
        return "object"
    raise TypeError(f"unsupported value type: {type(value).__name__}")


def display(value: Any) -> str:
    """Render ``value`` as text; strings are written without quotes."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def is_merged(value: Any) -> bool:
    """True when ``value`` needs no further resolution."""
    if value is None or _is_scalar(value):
        return True
    if isinstance(value, Array):
        return value.is_merged()
    if isinstance(value, (Substitution, Concat, AddAssign, DelayReplacement)):
        return False
    if _is_object(value):
        return value.is_merged()
    raise TypeError(f"unsupported value type: {type(value).__name__}")


def try_become_merged(value: Any) -> bool:
    """Mark objects inside ``value`` as merged where possible; report success."""
    if value is None or _is_scalar(value):
        return True
    if isinstance(value, Array):
        return all(try_become_merged(cell.value) for cell in value.items)
    if isinstance(value, (Substitution, Concat, AddAssign, DelayReplacement)):
        return False
    if _is_object(value):
        return value.try_become_merged()
    raise TypeError(f"unsupported value type: {type(value).__name__}")


def resolve_add_assign(value: Any) -> Any:
    """Turn a leftover ``+=`` into a one-element array; returns the new value."""
    if isinstance(value, AddAssign):
        array = Array([value.value])
        try_become_merged(array)
        return array
    if _is_object(value):
        value.resolve_add_assign()
    return value


def replacement(path: RefPath, left: Any, right: Any) -> Any:
    """The value of a key set to ``left`` and then to ``right``."""
    _log.debug("replacement: `%s`: `%s` <- `%s`", path, display(left), display(right))
    if isinstance(left, AddAssign):
        raise ConcatenationDifferentTypeError(type_name(left), type_name(right))
    if isinstance(left, (Substitution, Concat, DelayReplacement)):
        result: Any = delay_replacement([left, right])
    elif _is_object(left):
        result = _replace_object(path, left, right)
    elif isinstance(left, Array):
        if isinstance(right, (Substitution, DelayReplacement)):
            result = delay_replacement([left, right])
        elif isinstance(right, AddAssign):
            left.items.append(Cell(right.value))
            result = left
        else:
            result = right
    elif left is None:
        result = Array([right.value]) if isinstance(right, AddAssign) else right
    else:
        # A substitution on the right may refer to the previous value.
        if isinstance(right, Substitution):
            result = delay_replacement([left, right])
        else:
            result = right
    _log.debug("replacement result: `%s`=`%s`", path, display(result))
    return result


def _replace_object(path: RefPath, left: Any, right: Any) -> Any:
    if _is_object(right):
        left.merge(right, path)
        return left
    if right is None or _is_scalar(right) or isinstance(right, Array):
        return right
    if isinstance(right, Substitution):
        return delay_replacement([left, right])
    if isinstance(right, Concat):
        if all(
            _is_object(cell.value) or isinstance(cell.value, Substitution)
            for cell in right.items
        ):
            # The concatenation may still yield an object to merge with.
            right.items.appendleft(Cell(left))
        return right
    if isinstance(right, AddAssign):
        raise ConcatenationDifferentTypeError("object", "array")
    if isinstance(right, DelayReplacement):
        right.items.appendleft(Cell(left))
        return right
    raise TypeError(f"unsupported value type: {type(right).__name__}")


def concatenate(path: RefPath, left: Any, right: Any) -> Any:
    """The value of ``left`` immediately followed by ``right``."""
    _log.debug("concatenate: `%s`: `%s` <- `%s`", path, display(left), display(right))
    if left is None:
        result: Any = right
    elif isinstance(left, (Substitution, DelayReplacement)):
        result = Concat([left, right])
    elif isinstance(left, Concat):
        left.items.append(Cell(right))
        result = left
    elif isinstance(left, AddAssign):
        raise ConcatenationDifferentTypeError(type_name(left), type_name(right))
    elif isinstance(left, Array):
        if not isinstance(right, Array):
            raise ConcatenationDifferentTypeError("array", type_name(right))
        left.items.extend(right.items)
        result = left
    elif _is_scalar(left):
        if not _is_scalar(right):
            raise ConcatenationDifferentTypeError(type_name(left), type_name(right))
        result = display(left) + display(right)
    elif _is_object(left):
        result = _concatenate_object(path, left, right)
    else:
        raise TypeError(f"unsupported value type: {type(left).__name__}")
    _log.debug("concatenate result: `%s`=`%s`", path, display(result))
    return result


def _concatenate_object(path: RefPath, left: Any, right: Any) -> Any:
    if right is None:
        return left
    if _is_object(right):
        left.merge(right, path)
        return left
    if isinstance(right, (Substitution, DelayReplacement)):
        return Concat([left, right])
    if isinstance(right, Concat):
        right.items.appendleft(Cell(left))
        return right
    raise ConcatenationDifferentTypeError("object", type_name(right))