"""Resolution of substitutions, concatenations and ``+=`` values in a merge tree."""

from __future__ import annotations

import copy
import logging
import os
from typing import Any, Optional

from hoconlite.errors import (
    CycleSubstitutionError,
    InvalidConversionError,
    SubstitutionNotFoundError,
)
from hoconlite.merge import value as values
from hoconlite.merge.object import MergeObject
from hoconlite.merge.path import RefPath
from hoconlite.merge.substitution import Substitution
from hoconlite.merge.value import AddAssign, Array, Cell, Concat, DelayReplacement
from hoconlite.objects import Object

__all__ = ["substitute_value", "substitute", "resolve", "to_plain"]

_log = logging.getLogger(__name__)


def substitute_value(
    root: MergeObject,
    path: RefPath,
    cell: Cell,
    tracker: list[Substitution],
) -> None:
    """Resolve everything pending inside ``cell``, which lives at ``path`` in ``root``."""
    current = cell.value
    if values.is_merged(current):
        return
    if isinstance(current, MergeObject):
        for key, child in current.items():
            substitute_value(root, path.join(RefPath(key)), child, tracker)
        current.try_become_merged()
    elif isinstance(current, Array):
        for index, element in enumerate(current.items):
            substitute_value(root, path.join(RefPath(str(index))), element, tracker)
    elif isinstance(current, Substitution):
        _substitute_reference(root, path, cell, current, tracker)
    elif isinstance(current, Concat):
        _fold(root, path, cell, tracker, Concat, values.concatenate)
    elif isinstance(current, AddAssign):
        inner = Cell(current.value)
        cell.value = AddAssign(None)
        substitute_value(root, path, inner, tracker)
        resolved = inner.value
        values.try_become_merged(resolved)
        cell.value = AddAssign(resolved)
    elif isinstance(current, DelayReplacement):
        _fold(root, path, cell, tracker, DelayReplacement, values.replacement)
    else:
        raise TypeError(f"unsupported value type: {type(current).__name__}")


def _substitute_reference(
    root: MergeObject,
    path: RefPath,
    cell: Cell,
    substitution: Substitution,
    tracker: list[Substitution],
) -> None:
    if substitution in tracker:
        raise CycleSubstitutionError(str(substitution))
    tracker.append(substitution)
    _log.debug("substitute: %s", substitution)
    target = root.get_by_path(substitution.path)
    if target is not None:
        _log.debug("find substitution: %s -> %s", substitution, values.display(target.value))
        if substitution.path == path and isinstance(target.value, Substitution):
            if not substitution.optional:
                raise CycleSubstitutionError(str(substitution))
            target.value = None
        else:
            substitute_value(root, substitution.path, target, tracker)
            cell.value = copy.deepcopy(target.value)
    else:
        env_value = os.environ.get(substitution.full_path())
        if env_value is not None:
            _log.debug("set environment variable %s", substitution.full_path())
            cell.value = env_value
        elif substitution.optional:
            cell.value = None
        else:
            raise SubstitutionNotFoundError(str(substitution))
    tracker.pop()


def _pop_last(cell: Cell, kind: type) -> Optional[Cell]:
    container = cell.value
    if isinstance(container, kind) and container.items:
        return container.items.pop()
    return None


def _fold(
    root: MergeObject,
    path: RefPath,
    cell: Cell,
    tracker: list[Substitution],
    kind: type,
    combine: Any,
) -> None:
    """Combine the pending values of a container from the right until one remains."""
    last = _pop_last(cell, kind)
    if last is None:
        cell.value = None
        return
    substitute_value(root, path, last, tracker)
    if isinstance(cell.value, kind):
        second_last = _pop_last(cell, kind)
        if second_last is None:
            result = last.value
            values.try_become_merged(result)
            cell.value = result
            return
        substitute_value(root, path, second_last, tracker)
        combined = Cell(combine(path, second_last.value, last.value))
        substitute_value(root, path, combined, tracker)
        result = combined.value
        values.try_become_merged(result)
        remaining = cell.value
        if isinstance(remaining, kind) and remaining.items:
            remaining.items.append(Cell(result))
            substitute_value(root, path, cell, tracker)
        else:
            cell.value = result
    else:
        previous = cell.value
        cell.value = None
        result = combine(path, previous, last.value)
        values.try_become_merged(result)
        cell.value = result
        substitute_value(root, path, cell, tracker)


def substitute(root: MergeObject) -> None:
    """Resolve every substitution found in ``root``."""
    tracker: list[Substitution] = []
    for key, cell in root.items():
        substitute_value(root, RefPath(key), cell, tracker)


def resolve(value: Any) -> Any:
    """Resolve substitutions and leftover ``+=`` values; returns the result."""
    if isinstance(value, MergeObject):
        substitute(value)
    value = values.resolve_add_assign(value)
    values.try_become_merged(value)
    return value


def to_plain(value: Any) -> Any:
    """Convert a resolved merge value into plain Python data."""
    if value is None or isinstance(value, (bool, str, int, float)):
        return value
    if isinstance(value, MergeObject):
        return Object((key, to_plain(cell.value)) for key, cell in value.items())
    if isinstance(value, Array):
        return [to_plain(cell.value) for cell in value.items]
    raise InvalidConversionError(values.type_name(value), "value")