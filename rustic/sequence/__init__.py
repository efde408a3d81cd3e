"""Eager sequence transformations with a manual cursor."""

from ._sequence import Sequence

__all__ = ["Sequence"]
