"""Build HOCON-style configuration trees in Python and resolve merges, appends, concatenations and substitutions."""

__version__ = "0.1.0"
__all__ = ["config", "errors", "key", "objects", "options"]