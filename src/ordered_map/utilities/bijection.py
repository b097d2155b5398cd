class Bijection:
    """Invertible renaming of keys. Keys not mentioned are mapped to themselves.

    Applied to an OrderedMap with `m @ bijection` (or `bijection @ m`), which is `m.map_keys(bijection)`.
    """

    def __init__(self, map):
        # identity always implicit, remove if there explicitly
        self.map = {k: v for k, v in map.items() if k != v}
        invmap = {}
        for k, v in self.map.items():
            if v in invmap:
                raise ValueError(f'Duplicate target {v!r}, for keys {invmap[v]!r} and {k!r}')
            invmap[v] = k
        self.invmap = invmap

    @property
    def inv(self):
        inverse = Bijection.__new__(Bijection)
        inverse.map = self.invmap
        inverse.invmap = self.map
        return inverse

    def __repr__(self):
        return f'Bijection({self.map!r})'

    def __len__(self):
        return len(self.map)

    def __getitem__(self, k):
        return self.map.get(k, k)

    def __call__(self, k):
        return self[k]

    def __eq__(self, other):
        if isinstance(other, Bijection):
            return self.map == other.map
        return NotImplemented

    __hash__ = None

    def __matmul__(self, x):
        if isinstance(x, Bijection):
            # compose self: v -> u with x: w -> v
            # assume everything missing in either is the identity
            M = {}
            for v, u in self.map.items():
                w = x.invmap.get(v, v)
                M[w] = u
            for w, v in x.map.items():
                if v not in self.map:
                    M[w] = v
            return Bijection(M)
        else:
            return NotImplemented
