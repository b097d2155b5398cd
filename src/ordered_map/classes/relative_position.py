"""Placement of a key relative to an anchor key, independent of numeric index."""


class RelativePosition:
    """Base of the two placements `BeforeKey` and `AfterKey`. Not instantiated directly."""

    __slots__ = ('key',)

    def __init__(self, key):
        if type(self) is RelativePosition:
            raise TypeError('RelativePosition is abstract, use BeforeKey(key) or AfterKey(key)')
        self.key = key

    def __repr__(self):
        return f'{type(self).__name__}({self.key!r})'

    def __eq__(self, other):
        if isinstance(other, RelativePosition):
            return type(self) is type(other) and self.key == other.key
        return NotImplemented

    def __hash__(self):
        return hash((type(self).__name__, self.key))


class BeforeKey(RelativePosition):
    """Immediately before the anchor `key`."""
    __slots__ = ()


class AfterKey(RelativePosition):
    """Immediately after the anchor `key`."""
    __slots__ = ()
