"""Public-facing objects."""

from . import algebra, decode, reductions, utilities

from .classes.ordered_map import OrderedMap
from .classes.relative_position import RelativePosition, BeforeKey, AfterKey
from .algebra import union, append, intersect, diff, concat, merge
from .decode import DecodeError, decode_keyed, decode_array, decode_object
from .utilities.bijection import Bijection
from .utilities.ordered_set import OrderedSet

# Ensure warning uniformity across package
import warnings

# Force warnings.warn() to omit the source code line in the message
formatwarning_orig = warnings.formatwarning
warnings.formatwarning = lambda message, category, filename, lineno, line=None: \
    formatwarning_orig(message, category, filename, lineno, line='')
