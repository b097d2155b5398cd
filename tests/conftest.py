"""Fixtures used by tests."""

import pytest

from ordered_map import OrderedMap


@pytest.fixture
def abc():
    return OrderedMap([('a', 1), ('b', 2), ('c', 3)])


@pytest.fixture
def left():
    return OrderedMap([(1, 'a'), (2, 'b')])


@pytest.fixture
def right():
    return OrderedMap([(2, 'B'), (3, 'C')])
