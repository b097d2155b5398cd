"""Reductions over the values of an OrderedMap"""

import builtins
import math

import numpy as np

from .classes.ordered_map import OrderedMap


def numeric_values(m: OrderedMap):
    """Values of `m` in order as a 1-d numeric array. Raises ValueError if they are not all numbers."""
    values = np.asarray(list(m.values()))
    if values.ndim != 1 or not (np.issubdtype(values.dtype, np.number) or values.dtype == np.bool_):
        raise ValueError(f"The values of {m!r} have dtype: {values.dtype} and shape: {values.shape},"
                         f" which is not a one-dimensional numeric type.")
    return values


def _all_ints(m: OrderedMap):
    # python ints are unbounded, int64 arrays are not
    return all(isinstance(v, int) for v in m.values())


def sum(m: OrderedMap):
    if m.is_empty():
        return 0
    if _all_ints(m):
        return builtins.sum(m.values())
    return np.sum(numeric_values(m)).item()


def product(m: OrderedMap):
    if m.is_empty():
        return 1
    if _all_ints(m):
        return math.prod(m.values())
    return np.prod(numeric_values(m)).item()


def maximum(m: OrderedMap):
    """Largest value, or None if `m` is empty. Only the values need to be orderable."""
    if m.is_empty():
        return None
    return max(m.values())


def minimum(m: OrderedMap):
    """Smallest value, or None if `m` is empty."""
    if m.is_empty():
        return None
    return min(m.values())
