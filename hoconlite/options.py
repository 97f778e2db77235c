"""Options that control loading and resolving a configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable


def default_compare(left: Any, right: Any) -> int:
    """Three-way comparison using natural ordering: negative, zero or positive."""
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


@dataclass
class OverrideOptions:
    """Whether later sources may override earlier ones, and how they rank."""

    allow_override: bool = True
    compare: Callable[[Any, Any], int] = field(default=default_compare, repr=False)


@dataclass
class ConfigOptions:
    """Settings used when loading a configuration."""

    max_include_depth: int = 50
    use_system_environment: bool = True
    override_options: OverrideOptions = field(default_factory=OverrideOptions)
    classpath: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not 0 <= self.max_include_depth <= 255:
            raise ValueError("max_include_depth must be between 0 and 255")