from .ordered_map import OrderedMap
from .relative_position import RelativePosition, BeforeKey, AfterKey
