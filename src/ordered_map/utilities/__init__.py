"""Utilities relating to: key sets and key renaming."""

from . import bijection, ordered_set
