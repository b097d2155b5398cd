"""Building OrderedMaps from serialized data (JSON text or the nested dicts/lists it parses into).

A decoder is any callable taking the raw value and returning the decoded one. It signals failure by
raising DecodeError, ValueError, TypeError or KeyError. `decode_keyed` and `decode_array` do not stop
at the first failure: every failing key (or entry) is reported in a single DecodeError.
"""

import json
import warnings
from collections.abc import Mapping
from typing import Any, Callable, Iterable, List, Union

from .classes.ordered_map import OrderedMap

DECODE_FAILURES = (ValueError, TypeError, KeyError)


class DecodeError(ValueError):
    """Decoding failed. `errors` holds one message per failing key or entry."""

    def __init__(self, errors: Union[str, List[str]]):
        self.errors = [errors] if isinstance(errors, str) else list(errors)
        super().__init__('\n'.join(self.errors))


def decode_keyed(keys: Iterable, decoder: Union[Callable, Mapping], source) -> OrderedMap:
    """Decode the fields `keys` of an object, in that order.

    `decoder` is either one callable used for every field or a mapping from key to callable.
    """
    obj = _load(source)
    if not isinstance(obj, Mapping):
        raise DecodeError(f'Expected an object, got {type(obj).__name__}')

    pairs, errors = [], []
    for key in keys:
        if key not in obj:
            errors.append(f'{key!r}: field is missing')
            continue
        if isinstance(decoder, Mapping):
            if key not in decoder:
                errors.append(f'{key!r}: no decoder given for this field')
                continue
            f = decoder[key]
        else:
            f = decoder
        try:
            pairs.append((key, f(obj[key])))
        except DECODE_FAILURES as e:
            errors.append(f'{key!r}: {_message(e)}')

    if errors:
        raise DecodeError(errors)
    return OrderedMap.from_list(pairs)


def decode_array(key_of: Callable[[Any], Any], decoder: Callable, source) -> OrderedMap:
    """Decode an array of entries, keyed by `key_of(decoded entry)`, in array order.

    Entries fold through `insert`: a repeated key keeps the slot of its first entry and the value of
    its last.
    """
    arr = _load(source)
    if not isinstance(arr, (list, tuple)):
        raise DecodeError(f'Expected an array, got {type(arr).__name__}')

    pairs, errors = [], []
    for i, entry in enumerate(arr):
        try:
            value = decoder(entry)
            pairs.append((key_of(value), value))
        except DECODE_FAILURES as e:
            errors.append(f'[{i}]: {_message(e)}')

    if errors:
        raise DecodeError(errors)
    return OrderedMap.from_list(pairs)


def decode_object(decoder: Callable, source) -> OrderedMap:
    """Decode every field of an object, in whatever order the parsed object enumerates them.

    Serialized objects carry no ordering guarantee, so use `decode_keyed` or `decode_array` when
    order matters.
    """
    obj = _load(source)
    if not isinstance(obj, Mapping):
        raise DecodeError(f'Expected an object, got {type(obj).__name__}')
    warnings.warn('decode_object keeps the enumeration order of the source object, which the '
                  'serialized form does not guarantee. Use decode_keyed or decode_array to fix the order.',
                  stacklevel=2)
    return decode_keyed(list(obj), decoder, obj)


def _load(source):
    if isinstance(source, (str, bytes, bytearray)):
        try:
            return json.loads(source)
        except ValueError as e:
            # JSONDecodeError, or UnicodeDecodeError for bytes that are not valid text
            raise DecodeError(f'Invalid JSON: {e}') from e
    return source


def _message(e):
    if isinstance(e, KeyError) and e.args:
        return f'missing field {e.args[0]!r}'
    return str(e)
