# Author: Eric Kow
# License: BSD3

"""
Exceptions raised by teanga.

Everything we raise on bad input is a `TeangaError`. The decoder errors
share the `DecodeError` base so that you can catch them all at once,
but each one also reports its `kind` (see `ErrorKind`) if you would
rather branch on a value than on a class.
"""

from enum import Enum


class ErrorKind(Enum):
    """
    Closed set of error kinds
    """
    shape_mismatch = 'ShapeMismatch'
    arity_mismatch = 'ArityMismatch'
    unsupported_shape = 'UnsupportedShape'
    invalid_number = 'InvalidNumber'
    invalid_descriptor = 'InvalidDescriptor'
    corpus = 'CorpusError'
    text_format = 'TextFormatError'


class TeangaError(Exception):
    """
    Base class for all teanga errors
    """
    kind = None

    def __init__(self, message):
        Exception.__init__(self, message)
        self.message = message


class DecodeError(TeangaError):
    """
    An untyped value could not be turned into a layer.

    Attributes
    ----------
    index : int or None
        Position of the offending element in the outer array (None if
        the problem is with the value as a whole)
    offset : int or None
        Position of the offending entry inside that element, if the
        element is itself an array
    """
    def __init__(self, message, index=None, offset=None):
        if index is not None:
            where = 'element %d' % index
            if offset is not None:
                where += ', entry %d' % offset
            message = '%s (at %s)' % (message, where)
        TeangaError.__init__(self, message)
        self.index = index
        self.offset = offset


class ShapeMismatch(DecodeError):
    "array elements do not have the same type as the first element"
    kind = ErrorKind.shape_mismatch


class ArityMismatch(DecodeError):
    "a nested array does not have the arity the layer requires"
    kind = ErrorKind.arity_mismatch


class UnsupportedShape(DecodeError):
    "the value matches none of the recognised layer shapes"
    kind = ErrorKind.unsupported_shape


class InvalidNumber(DecodeError):
    "expected a non-negative 32-bit integer (or a 64-bit one in values)"
    kind = ErrorKind.invalid_number


class InvalidDescriptor(TeangaError):
    "unknown layer type or data type"
    kind = ErrorKind.invalid_descriptor


class CorpusError(TeangaError):
    "the corpus store refused an operation"
    kind = ErrorKind.corpus


class TextFormatError(TeangaError):
    """
    Text in the teanga text format could not be read.

    Attributes
    ----------
    line : int or None
        1-based line of the problem, if known
    column : int or None
        1-based column of the problem, if known
    """
    kind = ErrorKind.text_format

    def __init__(self, message, line=None, column=None):
        if line is not None and column is not None:
            message = '%s (line %d, column %d)' % (message, line, column)
        TeangaError.__init__(self, message)
        self.line = line
        self.column = column


def _line_col(text, pos):
    """
    1-based line and column for a 0-based position in a string
    """
    pos = max(0, min(pos, len(text)))
    line = text.count('\n', 0, pos) + 1
    column = pos - (text.rfind('\n', 0, pos) + 1) + 1
    return line, column


def _parse_position(exc):
    "position a funcparserlib error points at (None if unknown)"
    state = getattr(exc, 'state', None)
    if state is None:
        return None
    return getattr(state, 'max', getattr(state, 'pos', None))


def invalid_descriptor_from(exc, literal):
    """
    Convert a failure to read a data type literal (eg. an enum list)
    into an `InvalidDescriptor`
    """
    return InvalidDescriptor('Invalid data type: %s [%s]' % (literal, exc))


def text_format_error_from(exc, text):
    """
    Convert a parse failure on teanga text into a `TextFormatError`
    pointing at the furthest position the parser reached
    """
    pos = _parse_position(exc)
    if pos is None:
        return TextFormatError('Could not read teanga text: %s' % exc)
    line, column = _line_col(text, pos)
    return TextFormatError('Could not read teanga text', line, column)
