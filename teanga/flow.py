# Author: Eric Kow
# License: BSD3

"""
Flow literals: the compact, single-line notation we use for layer
values in the teanga text format, eg. ::

    [[0,2],[2,3]]
    ["NOUN", "VERB"]
    {"author":"me","year":2013}

This is essentially JSON on a single line. We write it by hand
(`render_flow`) and read it back with a small funcparserlib grammar
(`parse_flow`) that works directly on the characters of the string.
The reader is slightly more forgiving than the writer: it allows
horizontal whitespace around punctuation and a few extra escapes
(`\\'`, `\\0`).
"""

from functools import reduce
import math

import funcparserlib.parser as fp

from .errors import text_format_error_from


# ---------------------------------------------------------------------
# writing
# ---------------------------------------------------------------------

_ESCAPED = {
    '\\': '\\\\',
    '"': '\\"',
    '\n': '\\n',
    '\r': '\\r',
    '\t': '\\t',
}


def _escape_char(char):
    if char in _ESCAPED:
        return _ESCAPED[char]
    elif ord(char) < 0x20:
        return '\\u%04x' % ord(char)
    else:
        return char


def quote(text):
    """
    Double-quoted form of a string, with backslashes, quotes and
    control characters escaped
    """
    return '"' + ''.join(_escape_char(c) for c in text) + '"'


def render_flow(value, sep=','):
    """
    Compact single-line rendering of a JSON-like value.

    Parameters
    ----------
    value : None, bool, int, float, str, list, tuple or dict
        Value to render
    sep : str
        Separator between array items (`','` for compact output,
        `', '` if you want it a bit more readable)
    """
    if value is None:
        return 'null'
    elif value is True:
        return 'true'
    elif value is False:
        return 'false'
    elif isinstance(value, int):
        return str(value)
    elif isinstance(value, float):
        return repr(value) if math.isfinite(value) else 'null'
    elif isinstance(value, str):
        return quote(value)
    elif isinstance(value, (list, tuple)):
        return '[' + sep.join(render_flow(v, sep) for v in value) + ']'
    elif isinstance(value, dict):
        return '{' + ','.join(quote(k) + ':' + render_flow(v, sep)
                              for k, v in value.items()) + '}'
    else:
        # not reachable from a well-formed layer
        return 'null'


# ---------------------------------------------------------------------
# funcparserlib utilities
# ---------------------------------------------------------------------
_const = lambda x: lambda _: x


def _cons(pair):
    head, tail = pair
    return [head] + tail


def _mkstr(x):
    return "".join(x)


def _flatten_str(x):
    """
    Glue together all the characters in a nested parse result
    (skipping over any None left behind by `fp.maybe`)
    """
    if x is None:
        return ''
    elif isinstance(x, str):
        return x
    else:
        return ''.join(_flatten_str(y) for y in x)


def _satisfies(fn):
    return fp.some(fn)


def _oneof(xs):
    return _satisfies(lambda x: x in xs)


def _many_char(fn):
    return fp.many(_satisfies(fn)) >> _mkstr


def _sepby(delim, p):
    return p + fp.many(fp.skip(delim) + p) >> _cons


def _sequence(ps):
    return reduce(lambda x, y: x + y, ps)


def _literal(xs):
    """String -> Parser(str, str)

    Match this literal string
    """
    return _sequence([fp.a(c) for c in xs]) >> _flatten_str


def _noise(xs):
    """String -> Parser(str, ())

    Skip over this literal string
    """
    return fp.skip(_literal(xs))


# ---------------------------------------------------------------------
# elementary parts
# ---------------------------------------------------------------------
_DIGITS = '0123456789'
_HEX_DIGITS = '0123456789abcdefABCDEF'
_UNESCAPED = {
    '"': '"',
    "'": "'",
    '\\': '\\',
    '/': '/',
    '0': '\0',
    'b': '\b',
    'f': '\f',
    'n': '\n',
    'r': '\r',
    't': '\t',
}

# horizontal only
_sp = fp.skip(_many_char(lambda x: x in ' \t'))
_comma = _sp + fp.skip(fp.a(',')) + _sp
_colon = _sp + fp.skip(fp.a(':')) + _sp

_digits = fp.oneplus(_oneof(_DIGITS))
_hex = _oneof(_HEX_DIGITS)


def _mknumber(parts):
    text = _flatten_str(parts)
    if any(c in text for c in '.eE'):
        return float(text)
    else:
        return int(text)


_number = (fp.maybe(fp.a('-')) + _digits +
           fp.maybe(fp.a('.') + _digits) +
           fp.maybe(_oneof('eE') + fp.maybe(_oneof('+-')) + _digits))\
    >> _mknumber

_unicode_escape = fp.skip(fp.a('u')) + _hex + _hex + _hex + _hex\
    >> (lambda x: chr(int(_mkstr(x), 16)))
_simple_escape = _oneof(_UNESCAPED) >> _UNESCAPED.get
_escape = fp.skip(fp.a('\\')) + (_unicode_escape | _simple_escape)
_plain_char = _satisfies(lambda c: c not in '"\\\n')

_string = fp.skip(fp.a('"')) + fp.many(_plain_char | _escape) +\
    fp.skip(fp.a('"')) >> _mkstr

_true = _literal('true') >> _const(True)
_false = _literal('false') >> _const(False)
_null = _literal('null') >> _const(None)

_value = fp.forward_decl()

_array = fp.skip(fp.a('[')) + _sp +\
    fp.maybe(_sepby(_comma, _value)) +\
    _sp + fp.skip(fp.a(']')) >> (lambda x: x or [])

_member = _string + _colon + _value >> tuple

_object = fp.skip(fp.a('{')) + _sp +\
    fp.maybe(_sepby(_comma, _member)) +\
    _sp + fp.skip(fp.a('}')) >> (lambda x: dict(x or []))

_value.define(_string | _number | _true | _false | _null | _array | _object)

_flow = _sp + _value + _sp + fp.skip(fp.finished)


def parse_flow(text):
    """
    Read a single flow literal (see module docs) into a Python value

    Raises
    ------
    TextFormatError
        If the text is not a well-formed literal
    """
    try:
        return _flow.parse(text)
    except fp.NoParseError as exc:
        raise text_format_error_from(exc, text)


# ---------------------------------------------------------------------
# building blocks for the corpus grammar (see teanga.parse)
# ---------------------------------------------------------------------
flow_value = _value
hspace = _sp
satisfies = _satisfies
many_char = _many_char
noise = _noise
flatten_str = _flatten_str
