"""Exceptions raised while building, merging and resolving configurations."""

from __future__ import annotations


class HoconError(Exception):
    """Base class of every error raised by this package."""


class InvalidConversionError(HoconError):
    """A value cannot be converted to the requested type."""

    def __init__(self, source: str, target: str) -> None:
        self.source = source
        self.target = target
        super().__init__(f"Cannot convert `{source}` to `{target}`")


class InvalidPathExpressionError(HoconError):
    """A path expression is malformed, for example empty."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid path expression: {reason}")


class ParseError(HoconError):
    """The configuration text could not be parsed."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Parse error: {detail}")


class ConcatenationDifferentTypeError(HoconError):
    """Two values of incompatible types were concatenated."""

    def __init__(self, ty1: str, ty2: str) -> None:
        self.ty1 = ty1
        self.ty2 = ty2
        super().__init__(f"Cannot concatenation different type: {ty1} {ty2}")


class InvalidValueError(HoconError):
    """A value appears where its kind is not allowed."""

    def __init__(self, val: str, ty: str) -> None:
        self.val = val
        self.ty = ty
        super().__init__(f"{val} is not allowed in {ty}")


class SubstitutionNotFoundError(HoconError):
    """A required substitution has no target and no environment variable."""

    def __init__(self, substitution: str) -> None:
        self.substitution = substitution
        super().__init__(f"Substitution {substitution} not found")


class ResolveNotCompleteError(HoconError):
    """Resolution finished but unresolved values remain."""

    def __init__(self) -> None:
        super().__init__(
            "Resolve incomplete. This should never happen outside this library. "
            "If you see this, it's a bug."
        )


class InclusionCycleError(HoconError):
    """The maximum inclusion depth was exceeded."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Maximum inclusion depth reached for {name}. An inclusion cycle might "
            "have occurred. If not, try increasing `max_include_depth` in "
            "`ConfigOptions`."
        )


class InclusionNotFoundError(HoconError):
    """A required inclusion could not be found."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Inclusion not found: {name}")


class CycleSubstitutionError(HoconError):
    """Substitutions refer to each other in a cycle."""

    def __init__(self, substitution: str) -> None:
        self.substitution = substitution
        super().__init__(f"A cycle substitution found at {substitution}")


class DeserializeError(HoconError):
    """A resolved value could not be turned into the requested structure."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Deserialize error: {detail}")


class ConfigNotFoundError(HoconError):
    """A configuration source does not exist."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(detail)