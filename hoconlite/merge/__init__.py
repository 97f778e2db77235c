"""Merge tree values, paths, substitutions and their resolution."""

__all__ = ["object", "path", "resolver", "substitution", "value"]