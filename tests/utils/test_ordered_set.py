from ordered_map.utilities.ordered_set import OrderedSet

def test_ordered_set():
    # first insertion determines order
    assert list(OrderedSet([5,1,6,5])) == [5,1,6]
    assert repr(OrderedSet([5,1,6,5])) == 'OrderedSet([5, 1, 6])'
    assert len(OrderedSet([5,1,6,5])) == 3


def test_ordered_set_discard_keeps_order():
    s = OrderedSet(['d', 'c', 'b', 'a', 'e'])
    s.discard('c')
    s.discard('a')
    s.discard('z')
    assert list(s) == ['d', 'b', 'e']
    assert len(s) == 3 and 'b' in s and 'c' not in s
