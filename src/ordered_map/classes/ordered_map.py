"""OrderedMap class: a dictionary whose key order is explicit and under the caller's control."""

import functools
from collections.abc import Mapping
from typing import Any, Callable, Iterable, List, Optional, Tuple

from .relative_position import RelativePosition, BeforeKey, AfterKey
from ..utilities.bijection import Bijection


class OrderedMap(Mapping):
    """Immutable mapping with an arbitrary, caller-controlled key order.

    Internally a lookup table (key -> value) plus an order sequence (list of keys) that always
    hold exactly the same keys. Both are private: the only code that writes to them are the
    `_put`, `_put_front`, `_put_at`, `_delete` and `_reorder` primitives, which are only ever
    applied to a fresh instance before it is returned. Every public operation returns a new
    OrderedMap and leaves `self` untouched.

    Operations that may have no result (`get`, `head`, `get_at`, `next`, ...) return None
    rather than raising. Only `m[key]`, which follows the Mapping protocol, raises KeyError.

    Ordering rules to keep in mind:
        insert(k, v)  an existing key keeps its slot, a new key goes to the end
        cons(k, v)    the key always ends up at the front
        from_list     folds through insert, so a repeated key keeps its first slot and last value

    Interior insertions and removals cost O(n) in the order sequence; lookups are O(1).
    """

    __slots__ = '_lookup', '_order'

    def __init__(self, pairs: Iterable = ()):
        self._lookup = {}
        self._order = []
        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        for pair in pairs:
            try:
                k, v = pair
            except (TypeError, ValueError):
                raise ValueError(f'OrderedMap entries must be (key, value) pairs, got {pair!r}')
            self._put(k, v)

    # construction

    @classmethod
    def empty(cls) -> 'OrderedMap':
        return cls()

    @classmethod
    def singleton(cls, key, value) -> 'OrderedMap':
        m = cls()
        m._put(key, value)
        return m

    @classmethod
    def from_list(cls, pairs: Iterable[Tuple[Any, Any]]) -> 'OrderedMap':
        """Fold (key, value) pairs left to right through `insert`."""
        return cls(pairs)

    @classmethod
    def from_dict(cls, d: Mapping) -> 'OrderedMap':
        """Adopt the enumeration order of `d`. For a plain unordered mapping that order is arbitrary."""
        m = cls()
        for k, v in d.items():
            m._put(k, v)
        return m

    @classmethod
    def coerce(cls, obj) -> 'OrderedMap':
        """Return `obj` if it already is an OrderedMap, otherwise build one from a mapping or pairs."""
        if isinstance(obj, OrderedMap):
            return obj
        elif isinstance(obj, Mapping):
            return cls.from_dict(obj)
        else:
            return cls.from_list(obj)

    # private mutation primitives, only applied to instances not yet handed out

    def _copy(self):
        new = type(self).__new__(type(self))
        new._lookup = dict(self._lookup)
        new._order = list(self._order)
        return new

    def _put(self, key, value):
        if key not in self._lookup:
            self._order.append(key)
        self._lookup[key] = value

    def _put_front(self, key, value):
        if key in self._lookup:
            self._order.remove(key)
        self._order.insert(0, key)
        self._lookup[key] = value

    def _put_at(self, index, key, value):
        # caller has already excised `key`
        self._order.insert(index, key)
        self._lookup[key] = value

    def _delete(self, key):
        if key in self._lookup:
            del self._lookup[key]
            self._order.remove(key)

    def _reorder(self, keys):
        # `keys` is a permutation of the current order sequence
        self._order = list(keys)

    def _entry(self, i):
        key = self._order[i]
        return key, self._lookup[key]

    # lookup

    def get(self, key, default=None):
        return self._lookup.get(key, default)

    def member(self, key) -> bool:
        return key in self._lookup

    def size(self) -> int:
        return len(self._lookup)

    def is_empty(self) -> bool:
        return not self._lookup

    def head(self) -> Optional[Tuple[Any, Any]]:
        """First (key, value) pair, or None if empty."""
        return self._entry(0) if self._order else None

    def last(self) -> Optional[Tuple[Any, Any]]:
        """Final (key, value) pair, or None if empty."""
        return self._entry(-1) if self._order else None

    def tail(self) -> Optional['OrderedMap']:
        """Everything but the first entry, or None if empty."""
        if not self._order:
            return None
        return self.remove(self._order[0])

    # mutation

    def insert(self, key, value) -> 'OrderedMap':
        """Set `key` to `value`. An existing key keeps its position; a new key is appended."""
        new = self._copy()
        new._put(key, value)
        return new

    def cons(self, key, value) -> 'OrderedMap':
        """Set `key` to `value` and move it to the front."""
        new = self._copy()
        new._put_front(key, value)
        return new

    def remove(self, key) -> 'OrderedMap':
        new = self._copy()
        new._delete(key)
        return new

    def update(self, key, f: Callable[[Optional[Any]], Optional[Any]]) -> 'OrderedMap':
        """Replace the value at `key` with `f(current value or None)`.

        If `f` returns None the key is removed, otherwise the result is stored as with `insert`.
        A stored None value is also passed to `f` as None; use `member` to tell it from an absent key.
        """
        value = f(self._lookup.get(key))
        if value is None:
            return self.remove(key)
        return self.insert(key, value)

    # positional addressing

    def index_of_key(self, key) -> Optional[int]:
        if key not in self._lookup:
            return None
        return self._order.index(key)

    def get_at(self, i: int) -> Optional[Tuple[Any, Any]]:
        if 0 <= i < len(self._order):
            return self._entry(i)
        return None

    def get_key_at(self, i: int):
        if 0 <= i < len(self._order):
            return self._order[i]
        return None

    def next(self, key) -> Optional[Tuple[Any, Any]]:
        """The entry right after `key`, or None if `key` is absent or last."""
        i = self.index_of_key(key)
        if i is None:
            return None
        return self.get_at(i + 1)

    def previous(self, key) -> Optional[Tuple[Any, Any]]:
        """The entry right before `key`, or None if `key` is absent or first."""
        i = self.index_of_key(key)
        if i is None:
            return None
        return self.get_at(i - 1)

    def relative_position(self, key) -> Optional[RelativePosition]:
        """Describe where `key` sits in terms of a neighbor.

        AfterKey(predecessor) if there is one, else BeforeKey(successor) if there is one, else None.
        A map holding only `key` therefore gives None, as does an absent key.
        """
        i = self.index_of_key(key)
        if i is None:
            return None
        if i > 0:
            return AfterKey(self._order[i - 1])
        if i + 1 < len(self._order):
            return BeforeKey(self._order[i + 1])
        return None

    def at_relative_position(self, position: RelativePosition) -> Optional[Tuple[Any, Any]]:
        """The entry occupying `position`: before the anchor for BeforeKey, after it for AfterKey."""
        if isinstance(position, BeforeKey):
            return self.previous(position.key)
        elif isinstance(position, AfterKey):
            return self.next(position.key)
        raise TypeError(f'Expected BeforeKey or AfterKey, got {type(position).__name__}')

    def insert_after(self, anchor, key, value) -> 'OrderedMap':
        """Insert or move `key` to sit immediately after `anchor`.

        The anchor's index is looked up once `key` has been taken out of the order, so moving a key
        past its own neighbor works. `anchor == key` only updates the value. A missing anchor puts
        the pair at the end.
        """
        if anchor == key:
            return self.insert(key, value)
        new = self._copy()
        new._delete(key)
        if anchor in new._lookup:
            index = new._order.index(anchor) + 1
        else:
            index = len(new._order)
        new._put_at(index, key, value)
        return new

    def insert_before(self, anchor, key, value) -> 'OrderedMap':
        """Insert or move `key` to sit immediately before `anchor`. A missing anchor puts the pair first."""
        if anchor == key:
            return self.insert(key, value)
        new = self._copy()
        new._delete(key)
        if anchor in new._lookup:
            index = new._order.index(anchor)
        else:
            index = 0
        new._put_at(index, key, value)
        return new

    def insert_relative_to(self, position: RelativePosition, key, value) -> 'OrderedMap':
        if isinstance(position, BeforeKey):
            return self.insert_before(position.key, key, value)
        elif isinstance(position, AfterKey):
            return self.insert_after(position.key, key, value)
        raise TypeError(f'Expected BeforeKey or AfterKey, got {type(position).__name__}')

    # combination, see ordered_map.algebra

    def union(self, other) -> 'OrderedMap':
        from ..algebra import union
        return union(self, other)

    def append(self, other) -> 'OrderedMap':
        from ..algebra import append
        return append(self, other)

    def intersect(self, other) -> 'OrderedMap':
        from ..algebra import intersect
        return intersect(self, other)

    def diff(self, other) -> 'OrderedMap':
        from ..algebra import diff
        return diff(self, other)

    def __or__(self, other):
        return self.union(other)

    def __add__(self, other):
        return self.append(other)

    def __and__(self, other):
        return self.intersect(other)

    def __sub__(self, other):
        return self.diff(other)

    # traversal and transforms

    def foldl(self, f: Callable[[Any, Any, Any], Any], acc):
        """Accumulate `acc = f(key, value, acc)` from first to last."""
        for k in self._order:
            acc = f(k, self._lookup[k], acc)
        return acc

    def foldr(self, f: Callable[[Any, Any, Any], Any], acc):
        """Accumulate `acc = f(key, value, acc)` from last to first."""
        for k in reversed(self._order):
            acc = f(k, self._lookup[k], acc)
        return acc

    def map(self, f: Callable[[Any, Any], Any]) -> 'OrderedMap':
        new = self._copy()
        for k in self._order:
            new._put(k, f(k, self._lookup[k]))
        return new

    def indexed_map(self, f: Callable[[int, Any, Any], Any]) -> 'OrderedMap':
        new = self._copy()
        for i, k in enumerate(self._order):
            new._put(k, f(i, k, self._lookup[k]))
        return new

    def map_keys(self, f) -> 'OrderedMap':
        """Re-key every entry by `f(key)` (`f` may be a Bijection).

        Entries are re-inserted in order, so if `f` sends two keys to the same new key, the slot of
        the first one is kept and the value of the later one wins.
        """
        if isinstance(f, Bijection):
            f = f.__getitem__
        new = type(self)()
        for k in self._order:
            new._put(f(k), self._lookup[k])
        return new

    def __matmul__(self, x):
        if isinstance(x, Bijection):
            return self.map_keys(x)
        return NotImplemented

    def __rmatmul__(self, x):
        return self.__matmul__(x)

    def filter(self, pred: Callable[[Any, Any], bool]) -> 'OrderedMap':
        new = type(self)()
        for k in self._order:
            v = self._lookup[k]
            if pred(k, v):
                new._put(k, v)
        return new

    def partition(self, pred: Callable[[Any, Any], bool]) -> Tuple['OrderedMap', 'OrderedMap']:
        """Split into (entries satisfying `pred`, entries that do not), both in the original order."""
        passed, failed = type(self)(), type(self)()
        for k in self._order:
            v = self._lookup[k]
            (passed if pred(k, v) else failed)._put(k, v)
        return passed, failed

    def filter_map(self, f: Callable[[Any, Any], Optional[Any]]) -> 'OrderedMap':
        """Replace each value by `f(key, value)`, dropping entries for which it returns None."""
        new = type(self)()
        for k in self._order:
            v = f(k, self._lookup[k])
            if v is not None:
                new._put(k, v)
        return new

    def reverse(self) -> 'OrderedMap':
        new = self._copy()
        new._reorder(reversed(self._order))
        return new

    def take(self, n: int) -> 'OrderedMap':
        """The first `n` entries; `n` is clamped to [0, size]."""
        n = max(0, min(n, len(self._order)))
        new = type(self)()
        for k in self._order[:n]:
            new._put(k, self._lookup[k])
        return new

    def drop(self, n: int) -> 'OrderedMap':
        """All but the first `n` entries; `n` is clamped to [0, size]."""
        n = max(0, min(n, len(self._order)))
        new = type(self)()
        for k in self._order[n:]:
            new._put(k, self._lookup[k])
        return new

    def sort(self, reverse: bool = False) -> 'OrderedMap':
        """Reorder by value. Stable: keys with equal values keep their relative order."""
        return self.sort_by(lambda v: v, reverse=reverse)

    def sort_by(self, f: Callable[[Any], Any], reverse: bool = False) -> 'OrderedMap':
        """Reorder by `f(value)`, stably."""
        new = self._copy()
        new._reorder(sorted(self._order, key=lambda k: f(self._lookup[k]), reverse=reverse))
        return new

    def sort_with(self, cmp: Callable[[Any, Any], int]) -> 'OrderedMap':
        """Reorder with a comparator on values returning negative, zero or positive, stably."""
        key = functools.cmp_to_key(lambda a, b: cmp(self._lookup[a], self._lookup[b]))
        new = self._copy()
        new._reorder(sorted(self._order, key=key))
        return new

    # conversions

    def to_list(self) -> List[Tuple[Any, Any]]:
        return [(k, self._lookup[k]) for k in self._order]

    def to_dict(self) -> dict:
        """A copy of the lookup table. Do not rely on its key order."""
        return dict(self._lookup)

    # Mapping protocol

    def __getitem__(self, key):
        return self._lookup[key]

    def __contains__(self, key):
        return key in self._lookup

    def __iter__(self):
        return iter(self._order)

    def __reversed__(self):
        return reversed(self._order)

    def __len__(self):
        return len(self._lookup)

    def __eq__(self, other):
        if isinstance(other, OrderedMap):
            return self.to_list() == other.to_list()
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f'{type(self).__name__}({self.to_list()!r})'
