"""Combining two (or more) OrderedMaps.

Every combinator is biased, and the bias differs in what wins on a key collision (the value)
and in which order survives:

    union(a, b)      a's values win; all of a in a's order, then b's other keys in b's order
    append(a, b)     b's values win; a's keys missing from b in a's order, then exactly b
    intersect(a, b)  a's values; keys in both, in a's order
    diff(a, b)       a's values; keys of a missing from b, in a's order
    concat(maps)     append(m1, append(m2, ... append(mn-1, mn)))

`merge` is the general three-way traversal the others are special cases of.

Either argument of each combinator may be any mapping or iterable of pairs; it is converted with
`OrderedMap.coerce` first.
"""

from typing import Any, Callable, Iterable

from .classes.ordered_map import OrderedMap
from .utilities.ordered_set import OrderedSet


def union(a: OrderedMap, b) -> OrderedMap:
    a, b = OrderedMap.coerce(a), OrderedMap.coerce(b)
    return OrderedMap.from_list(
        list(a.items()) + [(k, v) for k, v in b.items() if k not in a])


def append(a: OrderedMap, b) -> OrderedMap:
    a, b = OrderedMap.coerce(a), OrderedMap.coerce(b)
    return OrderedMap.from_list(
        [(k, v) for k, v in a.items() if k not in b] + list(b.items()))


def intersect(a: OrderedMap, b) -> OrderedMap:
    a, b = OrderedMap.coerce(a), OrderedMap.coerce(b)
    return OrderedMap.from_list((k, v) for k, v in a.items() if k in b)


def diff(a: OrderedMap, b) -> OrderedMap:
    a, b = OrderedMap.coerce(a), OrderedMap.coerce(b)
    return OrderedMap.from_list((k, v) for k, v in a.items() if k not in b)


def concat(maps: Iterable) -> OrderedMap:
    """Right fold of `append` over `maps`; the empty map if there are none."""
    result = OrderedMap()
    for m in reversed(list(maps)):
        result = append(m, result)
    return result


def merge(on_left_only: Callable[[Any, Any, Any], Any],
          on_both: Callable[[Any, Any, Any, Any], Any],
          on_right_only: Callable[[Any, Any, Any], Any],
          a: OrderedMap, b, seed):
    """Fold over the keys of both maps, distinguishing where each key occurs.

    Walks `a` in order, calling `on_both(key, a_value, b_value, acc)` for keys also in `b` and
    `on_left_only(key, a_value, acc)` for the rest. Then walks the keys of `b` that were not
    seen, in `b`'s order, calling `on_right_only(key, b_value, acc)`. Returns the final `acc`.
    """
    a, b = OrderedMap.coerce(a), OrderedMap.coerce(b)
    pending = OrderedSet(b)
    acc = seed
    for k, av in a.items():
        if k in pending:
            acc = on_both(k, av, b[k], acc)
            pending.discard(k)
        else:
            acc = on_left_only(k, av, acc)
    for k in pending:
        acc = on_right_only(k, b[k], acc)
    return acc
