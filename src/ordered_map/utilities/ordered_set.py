from typing import Iterable

class OrderedSet:
    """Ordered set implemented as dict (where key insertion order is preserved) mapping all to None.

    Used to track which keys of an OrderedMap are still outstanding during a traversal: discarding
    members never disturbs the relative order of the ones that remain."""

    def __init__(self, members: Iterable = ()):
        self.d = {k: None for k in members}

    def __iter__(self):
        return iter(self.d)

    def __repr__(self):
        return f"OrderedSet({list(self)})"

    def __contains__(self, k):
        return k in self.d

    def __len__(self):
        return len(self.d)

    def discard(self, k):
        self.d.pop(k, None)
