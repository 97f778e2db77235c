"""Substitution references such as ``${a.b}`` and ``${?a.b}``."""

from __future__ import annotations

from dataclasses import dataclass

from hoconlite.merge.path import RefPath


@dataclass(frozen=True)
class Substitution:
    """A reference to another value in the configuration."""

    path: RefPath
    optional: bool = False

    def full_path(self) -> str:
        """The referenced path as dotted text, also used as an environment name."""
        return ".".join(self.path.parts())

    def __str__(self) -> str:
        marker = "?" if self.optional else ""
        return f"${{{marker}{self.path}}}"