# Author: Eric Kow
# License: BSD3

"""
Values attached to metadata layers.

A value is one of bool, int, float, str, array or object, nested to
any depth. We use native Python values for these. Inside a
`MetaLayer` we keep a frozen copy (tuples for arrays, frozendicts for
objects) so that layers stay immutable and hashable; `thaw` turns
that back into plain lists and dicts.
"""

import math

from frozendict import frozendict

from .errors import InvalidNumber, UnsupportedShape

MIN_INT = -2 ** 63
MAX_INT = 2 ** 63 - 1


def freeze(value, index=None):
    """
    Check that a Python value is a valid teanga Value and return an
    immutable copy of it.

    `None` is only allowed by the caller at the top level (it stands
    for an explicit null metadata layer); nested `None` is refused.

    Parameters
    ----------
    value : bool, int, float, str, list, tuple or dict
        Value to check
    index : int, optional
        Position to report in errors, if we are looking at an element
        of some array

    Raises
    ------
    UnsupportedShape
        If something in there is not a Value
    InvalidNumber
        If an integer does not fit in 64 bits
    """
    if isinstance(value, bool):
        return value
    elif isinstance(value, int):
        if value < MIN_INT or value > MAX_INT:
            raise InvalidNumber('integer %d does not fit in 64 bits' % value,
                                index)
        return value
    elif isinstance(value, (float, str)):
        return value
    elif isinstance(value, (list, tuple)):
        return tuple(freeze(v, i) for i, v in enumerate(value))
    elif isinstance(value, (dict, frozendict)):
        items = []
        for key, val in value.items():
            if not isinstance(key, str):
                raise UnsupportedShape('object keys must be strings, not %r'
                                       % (key,), index)
            items.append((key, freeze(val, index)))
        return frozendict(items)
    else:
        raise UnsupportedShape('not a value: %r' % (value,), index)


def comparison_key(value):
    """
    Form of a frozen value that compares and hashes equal only to
    values of the same kind, so that `True`, `1` and `1.0` are three
    different values (which they are not to Python)
    """
    if isinstance(value, bool):
        return ('bool', value)
    elif isinstance(value, int):
        return ('int', value)
    elif isinstance(value, float):
        return ('float', value)
    elif isinstance(value, str):
        return ('string', value)
    elif isinstance(value, tuple):
        return ('array', tuple(comparison_key(v) for v in value))
    elif isinstance(value, frozendict):
        return ('object', frozendict((k, comparison_key(v))
                                     for k, v in value.items()))
    else:
        return ('null', value)


def thaw(value):
    """
    Plain (mutable) Python form of a frozen value.

    Floats that are not finite have no representation outside Python
    and come out as None.
    """
    if isinstance(value, tuple):
        return [thaw(v) for v in value]
    elif isinstance(value, frozendict):
        return dict((k, thaw(v)) for k, v in value.items())
    elif isinstance(value, float) and not math.isfinite(value):
        return None
    else:
        return value
