# Author: Eric Kow
# License: BSD3

"""
Layers and their descriptors.

A teanga document is a mapping from layer names to layers. Each layer
holds one kind of annotation data, eg. the text itself, token spans
over that text, or a part of speech tag for each token. The corpus
schema says what to expect in each named layer through a
`LayerDescriptor`.

The layer variants are named after the shape of a single annotation:

=============== ============================== =====================
variant         one annotation                 eg.
=============== ============================== =====================
`Characters`    (the whole layer is a string)  document text
`L1`            index                          token boundaries
`L2`            (start, end)                   token spans
`L3`            (start, end, link)             linked spans
`LS`            string                         tag per token
`L1S`           (index, string)                labelled divisions
`L2S`           (start, end, string)           labelled spans
`L3S`           (start, end, link, string)     typed links
`MetaLayer`     (the whole layer is a value)   document metadata
=============== ============================== =====================

Indices are non-negative 32-bit integers and are checked when a layer
is built, so any layer you hold is well-formed.
"""

# pylint: disable=invalid-name, too-few-public-methods

from collections import namedtuple
from enum import Enum

from .errors import (ArityMismatch, InvalidDescriptor, InvalidNumber,
                     ShapeMismatch, TextFormatError, UnsupportedShape,
                     invalid_descriptor_from)
from .flow import parse_flow, render_flow
from .value import comparison_key, freeze, thaw

MAX_INDEX = 2 ** 32 - 1


def is_number(value):
    """
    True if the value is a number in the JSON sense (bools are not)
    """
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def check_index(value, index=None, offset=None):
    """
    Return the value if it is usable as an index (non-negative 32-bit
    integer), else raise `InvalidNumber`.

    Floats are refused even when integral: we do not coerce.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidNumber('expected a non-negative integer, got %r' % value,
                            index, offset)
    if value < 0 or value > MAX_INDEX:
        raise InvalidNumber('index %d is out of range' % value,
                            index, offset)
    return value


def is_array(value):
    "lists and tuples both count as arrays"
    return isinstance(value, (list, tuple))


# ---------------------------------------------------------------------
# layers
# ---------------------------------------------------------------------


class Layer(object):
    """
    Data for one layer of one document.

    This is an abstract class; see the module documentation for the
    variants. Layers are compared by variant and content, so an empty
    `L1` is not the same thing as an empty `L2`.
    """
    def _content(self):
        "what we compare and hash on"
        raise NotImplementedError()

    def __eq__(self, other):
        return (type(self) is type(other) and
                self._content() == other._content())

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.__class__.__name__, self._content()))


class Characters(Layer):
    """
    The base text of a document
    """
    def __init__(self, text):
        if not isinstance(text, str):
            raise UnsupportedShape('characters layer needs a string, not %r'
                                   % (text,))
        self.text = text

    def _content(self):
        return self.text

    def __repr__(self):
        return 'Characters(%r)' % self.text

    def __len__(self):
        return len(self.text)


class AnnotationLayer(Layer):
    """
    Sequence of annotations, each made of `arity` indices, followed
    by a string if `with_string` is set.

    Annotations are stored as a tuple of rows, where a row is an `int`
    for `L1`, a `str` for `LS`, and a tuple for everything else.
    """
    arity = 0
    with_string = False

    def __init__(self, rows=()):
        if not is_array(rows):
            raise UnsupportedShape('%s needs an array, not %r' %
                                   (self.__class__.__name__, rows))
        self.rows = tuple(self.check_row(row, i)
                          for i, row in enumerate(rows))

    @classmethod
    def width(cls):
        "number of entries in one annotation"
        return cls.arity + (1 if cls.with_string else 0)

    @classmethod
    def check_row(cls, row, index=None):
        """
        Check a single (untyped) annotation and return its normal form.

        Raises
        ------
        ShapeMismatch
            If the annotation is not of the same type as the ones
            this layer expects (eg. a string in an `L1`, a number
            where an array is expected)
        ArityMismatch
            If an array annotation has the wrong number of entries or
            non-numbers where the indices should be
        InvalidNumber
            If an index is negative, fractional or too large
        """
        if cls.width() == 1:
            if cls.with_string:
                if not isinstance(row, str):
                    raise ShapeMismatch('expected a string', index)
                return row
            if not is_number(row):
                raise ShapeMismatch('expected a number', index)
            return check_index(row, index)

        if not is_array(row):
            raise ShapeMismatch('expected an array of %d' % cls.width(),
                                index)
        if len(row) != cls.width():
            raise ArityMismatch('expected %d entries, got %d' %
                                (cls.width(), len(row)), index)
        indices = []
        for offset, entry in enumerate(row[:cls.arity]):
            if not is_number(entry):
                raise ArityMismatch('expected a number', index, offset)
            indices.append(check_index(entry, index, offset))
        if cls.with_string:
            if not isinstance(row[-1], str):
                raise ShapeMismatch('expected a string', index, cls.arity)
            return tuple(indices) + (row[-1],)
        return tuple(indices)

    def _content(self):
        return self.rows

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, list(self.rows))

    def __len__(self):
        return len(self.rows)

    def __iter__(self):
        return iter(self.rows)

    def __getitem__(self, i):
        return self.rows[i]


class L1(AnnotationLayer):
    "one index per annotation"
    arity = 1


class L2(AnnotationLayer):
    "pair of indices per annotation, usually a (start, end) span"
    arity = 2


class L3(AnnotationLayer):
    "triple of indices per annotation"
    arity = 3


class LS(AnnotationLayer):
    "one string per annotation"
    with_string = True


class L1S(AnnotationLayer):
    "index and string per annotation"
    arity = 1
    with_string = True


class L2S(AnnotationLayer):
    "pair of indices and string per annotation"
    arity = 2
    with_string = True


class L3S(AnnotationLayer):
    "triple of indices and string per annotation"
    arity = 3
    with_string = True


class MetaLayer(Layer):
    """
    Arbitrary value attached to a document, eg. its author.
    `None` stands for an explicit null
    """
    def __init__(self, value=None):
        self.value = None if value is None else freeze(value)

    def _content(self):
        return comparison_key(self.value)

    def thawed(self):
        "the value as plain lists and dicts"
        return None if self.value is None else thaw(self.value)

    def __repr__(self):
        return 'MetaLayer(%r)' % (self.thawed(),)


# ---------------------------------------------------------------------
# descriptors
# ---------------------------------------------------------------------


class LayerType(Enum):
    """
    Structural class of a layer
    """
    characters = 'characters'
    span = 'span'
    seq = 'seq'
    div = 'div'
    element = 'element'

    def __str__(self):
        return self.value

    @classmethod
    def from_string(cls, name):
        """
        Layer type for its name, or `InvalidDescriptor`
        """
        try:
            return cls(name)
        except ValueError:
            raise InvalidDescriptor('Invalid layer type: %s' % name)


STRING = 'string'
LINK = 'link'
ENUM = 'enum'


class DataType(namedtuple('DataType', 'kind values')):
    """
    What, besides indices, each annotation of a layer carries

    * `string`: a free string
    * `link`: an index into the base layer
    * `enum`: a string from a closed set of labels (`values`)

    Layers without a data type are represented by `None` rather than
    a `DataType`
    """
    def __new__(cls, kind, values=None):
        if kind == ENUM:
            values = tuple(values or ())
        elif kind in (STRING, LINK):
            values = None
        else:
            raise InvalidDescriptor('Invalid data type: %s' % kind)
        return super(DataType, cls).__new__(cls, kind, values)

    @classmethod
    def enum(cls, values):
        """
        Enumerated data type for the given labels, which must be
        strings without duplicates
        """
        if not is_array(values):
            raise InvalidDescriptor('Invalid data type: %r' % (values,))
        seen = set()
        for val in values:
            if not isinstance(val, str):
                raise InvalidDescriptor('Enum labels must be strings: %r'
                                        % (val,))
            if val in seen:
                raise InvalidDescriptor('Duplicate enum label: %s' % val)
            seen.add(val)
        return cls(ENUM, values)

    @classmethod
    def from_string(cls, text):
        """
        Read a data type as callers (and the text format) write it:
        `string`, `link`, or a list literal of enum labels
        """
        text = text.strip()
        if text in (STRING, LINK):
            return cls(text)
        elif text.startswith('['):
            try:
                values = parse_flow(text)
            except TextFormatError as exc:
                raise invalid_descriptor_from(exc, text)
            return cls.enum(values)
        else:
            raise InvalidDescriptor('Invalid data type: %s' % text)

    @classmethod
    def from_value(cls, value):
        """
        Data type from a string (see `from_string`) or from a list
        of enum labels
        """
        if isinstance(value, str):
            return cls.from_string(value)
        else:
            return cls.enum(value)

    def to_value(self):
        "`string`, `link` or the list of enum labels"
        return list(self.values) if self.kind == ENUM else self.kind

    def __str__(self):
        if self.kind == ENUM:
            return render_flow(list(self.values), sep=', ')
        else:
            return self.kind


# layer_type -> data kind -> layer class
_LAYER_CLASS = {
    LayerType.characters: {None: Characters},
    LayerType.seq: {STRING: LS, ENUM: LS, LINK: L1},
    LayerType.div: {None: L1, STRING: L1S, ENUM: L1S, LINK: L2},
    LayerType.element: {None: L1, STRING: L1S, ENUM: L1S, LINK: L2},
    LayerType.span: {None: L2, STRING: L2S, ENUM: L2S, LINK: L3},
}


class LayerDescriptor(namedtuple('LayerDescriptor',
                                 'layer_type base data')):
    """
    Schema entry for one named layer

    :param layer_type: structural class of the layer
    :type layer_type: LayerType

    :param base: name of the layer this one indexes into (None for
        characters layers)
    :type base: string

    :param data: what each annotation carries besides indices
    :type data: DataType or None
    """
    def __new__(cls, layer_type, base=None, data=None):
        if not isinstance(layer_type, LayerType):
            layer_type = LayerType.from_string(layer_type)
        if data is not None and not isinstance(data, DataType):
            data = DataType.from_value(data)
        return super(LayerDescriptor, cls).__new__(cls, layer_type,
                                                   base, data)

    @classmethod
    def from_strings(cls, layer_type, base=None, data=None):
        """
        Descriptor from the strings a caller would supply, eg.
        `('span', 'text', '["NOUN", "VERB"]')`
        """
        return cls(LayerType.from_string(layer_type), base,
                   None if data is None else DataType.from_value(data))

    def layer_class(self):
        """
        The `Layer` subclass that layers with this descriptor hold,
        or None if the combination of layer type and data type makes
        no sense (eg. characters with a data type)
        """
        kind = None if self.data is None else self.data.kind
        return _LAYER_CLASS[self.layer_type].get(kind)

    def to_value(self):
        "dictionary form, leaving out absent fields"
        res = {'layer_type': str(self.layer_type)}
        if self.base is not None:
            res['base'] = self.base
        if self.data is not None:
            res['data'] = self.data.to_value()
        return res
