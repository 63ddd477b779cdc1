"""Collection of generic types and type aliases for the cronparser package."""

__all__ = ["FieldValues"]

from typing import TypeAlias

FieldValues: TypeAlias = tuple[str, ...]
"""Expanded values of one field, in the order they were produced."""
