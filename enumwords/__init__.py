"""Inflection, literal formatting and text building helpers for enum code generation."""

__version__ = "0.4.2"
__all__ = ["inflect", "literal", "builder"]