"""Test construction, lookup and the mutation operations"""

import pytest

from ordered_map import OrderedMap


def test_construction():
    assert OrderedMap.empty().is_empty()
    assert OrderedMap.empty() == OrderedMap()
    assert OrderedMap.singleton('k', 1).to_list() == [('k', 1)]

    # later duplicates update the first slot
    m = OrderedMap.from_list([(1, 'a'), (2, 'b'), (1, 'c')])
    assert m.to_list() == [(1, 'c'), (2, 'b')]

    with pytest.raises(ValueError):
        OrderedMap([(1, 'a'), 'xyz'])

    assert OrderedMap.from_dict({'x': 1, 'y': 2}).to_dict() == {'x': 1, 'y': 2}

    # a mapping passed to the constructor contributes its items, not its keys
    assert OrderedMap({'ab': 1}).to_list() == [('ab', 1)]
    assert OrderedMap({'a': 1, 'b': 2}).to_list() == [('a', 1), ('b', 2)]
    assert OrderedMap(OrderedMap([(2, 'x'), (1, 'y')])).to_list() == [(2, 'x'), (1, 'y')]


def test_lookup(abc):
    assert abc.get('b') == 2
    assert abc.get('z') is None
    assert abc.get('z', 0) == 0
    assert abc.member('a') and not abc.member('z')
    assert 'a' in abc and 'z' not in abc
    assert abc.size() == len(abc) == 3
    assert not abc.is_empty()
    assert abc['c'] == 3
    with pytest.raises(KeyError):
        abc['z']


def test_insert_keeps_position_of_existing_key(abc):
    m = abc.insert('b', 20)
    assert m.to_list() == [('a', 1), ('b', 20), ('c', 3)]
    assert m.index_of_key('b') == abc.index_of_key('b')

    m = abc.insert('d', 4)
    assert list(m) == ['a', 'b', 'c', 'd']
    assert m.index_of_key('d') == m.size() - 1

    # the original is untouched
    assert abc.to_list() == [('a', 1), ('b', 2), ('c', 3)]


def test_cons(abc):
    assert abc.cons('z', 0).to_list() == [('z', 0), ('a', 1), ('b', 2), ('c', 3)]
    assert abc.cons('c', 30).to_list() == [('c', 30), ('a', 1), ('b', 2)]
    assert abc.cons('a', 10).to_list() == [('a', 10), ('b', 2), ('c', 3)]


def test_remove(abc):
    assert abc.remove('b').to_list() == [('a', 1), ('c', 3)]

    m = abc.remove('z')
    assert m == abc
    assert m is not abc


def test_update(abc):
    assert abc.update('b', lambda v: v * 10).to_list() == [('a', 1), ('b', 20), ('c', 3)]
    assert abc.update('b', lambda v: None).to_list() == [('a', 1), ('c', 3)]
    assert abc.update('d', lambda v: 4 if v is None else v).to_list() == [('a', 1), ('b', 2), ('c', 3), ('d', 4)]
    assert abc.update('d', lambda v: None) == abc

    # a stored None reads as absent
    m = abc.insert('n', None)
    assert m.member('n')
    assert not m.update('n', lambda v: v).member('n')


def test_head_last_tail(abc):
    assert abc.head() == ('a', 1)
    assert abc.last() == ('c', 3)
    assert abc.tail().to_list() == [('b', 2), ('c', 3)]

    empty = OrderedMap.empty()
    assert empty.head() is None
    assert empty.last() is None
    assert empty.tail() is None


def test_protocol(abc):
    assert list(abc.keys()) == ['a', 'b', 'c']
    assert list(abc.values()) == [1, 2, 3]
    assert list(abc.items()) == [('a', 1), ('b', 2), ('c', 3)]
    assert list(reversed(abc)) == ['c', 'b', 'a']
    assert repr(abc) == "OrderedMap([('a', 1), ('b', 2), ('c', 3)])"

    # equality depends on order
    assert abc != abc.reverse()
    assert abc != {'a': 1, 'b': 2, 'c': 3}

    with pytest.raises(TypeError):
        hash(abc)


def test_concrete_insert_before():
    m = OrderedMap.empty().insert(1, 'a').insert(2, 'b')
    m = m.insert_before(1, 3, 'c')
    assert list(m) == [3, 1, 2]
    assert m.to_dict() == {3: 'c', 1: 'a', 2: 'b'}
