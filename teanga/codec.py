# Author: Eric Kow
# License: BSD3

"""
Conversion between layers and untyped (JSON-like) values.

`decode` works out which layer an untyped value is by looking at its
shape alone, so it needs no schema, but it can only ever produce
`Characters`, `L1`, `L2`, `L3` or `LS`. If you know what layer you
want (typically because the corpus schema tells you), `decode_as`
will build any variant, including the string-carrying ones and
`MetaLayer`.

`encode` goes the other way and never fails. For the variants that
`decode` can reach, `decode(encode(layer)) == layer` (except that all
empty array layers come back as an empty `L1`).
"""

from .errors import ShapeMismatch, UnsupportedShape
from .layer import (Characters, L1, L2, L3, LS, AnnotationLayer, MetaLayer,
                    is_array, is_number)


def decode(value):
    """
    Turn an untyped value into a layer by inspecting its shape.

    The rules, tried in order:

    1. a string is a `Characters` layer
    2. an empty array is an empty `L1`
    3. an array starting with a number is an `L1`
    4. an array starting with a 2-element array is an `L2`
    5. an array starting with a 3-element array is an `L3`
    6. an array starting with an array of any other length is refused
    7. an array starting with a string is an `LS`
    8. an array starting with anything else is refused
    9. anything else is refused

    The first element decides the variant (and with it the arity);
    every other element must then agree with it.

    Raises
    ------
    UnsupportedShape
        If the value matches none of the rules
    ShapeMismatch
        If an element is not of the same type as the first
    ArityMismatch
        If a nested array does not have the arity of the first one
    InvalidNumber
        If an index is not a non-negative 32-bit integer
    """
    if isinstance(value, str):
        return Characters(value)
    if not is_array(value):
        raise UnsupportedShape('unsupported value type: %s' %
                               type(value).__name__)
    if len(value) == 0:
        return L1([])

    first = value[0]
    if is_number(first):
        return L1(value)
    elif is_array(first):
        if len(first) == 2:
            return L2(value)
        elif len(first) == 3:
            return L3(value)
        else:
            raise UnsupportedShape('unsupported array structure: nested '
                                   'arrays of length %d' % len(first), 0)
    elif isinstance(first, str):
        return LS(value)
    else:
        raise UnsupportedShape('unsupported array content: %s' %
                               type(first).__name__, 0)


def decode_as(value, layer_class):
    """
    Turn an untyped value into a layer of the given class.

    Parameters
    ----------
    value : JSON-like value
        Untyped layer data
    layer_class : subclass of Layer
        Variant to produce

    Raises
    ------
    DecodeError
        (any of its subclasses) if the value does not fit the class
    """
    if layer_class is Characters:
        if not isinstance(value, str):
            raise ShapeMismatch('expected a string for a characters layer')
        return Characters(value)
    elif layer_class is MetaLayer:
        return MetaLayer(value)
    elif issubclass(layer_class, AnnotationLayer):
        if not is_array(value):
            raise UnsupportedShape('expected an array for %s, got %s' %
                                   (layer_class.__name__,
                                    type(value).__name__))
        return layer_class(value)
    else:
        raise TypeError('not a layer class: %r' % (layer_class,))


def encode(layer):
    """
    Untyped value for a layer: a string for `Characters`, the value
    itself for `MetaLayer`, and an array with one item per annotation
    for everything else (numbers for `L1`, strings for `LS`, arrays
    for the others, with the string coming last if there is one)
    """
    if isinstance(layer, Characters):
        return layer.text
    elif isinstance(layer, MetaLayer):
        return layer.thawed()
    elif isinstance(layer, AnnotationLayer):
        if layer.width() == 1:
            return list(layer.rows)
        else:
            return [list(row) for row in layer.rows]
    else:
        raise TypeError('not a layer: %r' % (layer,))


# ---------------------------------------------------------------------
# documents
# ---------------------------------------------------------------------


def is_meta_name(name):
    """
    Layers whose name starts with an underscore hold document metadata
    rather than annotations
    """
    return name.startswith('_')


def _hinted_class(descriptor):
    """
    Layer class to decode into explicitly, or None if shape inference
    should do the job
    """
    if descriptor is None:
        return None
    cls = descriptor.layer_class()
    if cls is not None and issubclass(cls, AnnotationLayer) and\
            cls.with_string and cls is not LS:
        return cls
    return None


def decode_layer(name, value, descriptor=None):
    """
    Decode the untyped value for the named layer of a document.

    Metadata layers (see `is_meta_name`) become a `MetaLayer`; layers
    whose descriptor asks for one of the string-carrying variants that
    shape inference cannot reach are decoded as that variant; the rest
    go through `decode`
    """
    if is_meta_name(name):
        return MetaLayer(value)
    cls = _hinted_class(descriptor)
    if cls is not None:
        return decode_as(value, cls)
    return decode(value)


def decode_document(doc, descriptors=None):
    """
    Decode a mapping of layer names to untyped values.

    :param descriptors: schema, if known (mapping of layer names to
        `LayerDescriptor`)
    :type descriptors: dict

    Returns a dict of layer names to layers, in the same order
    """
    if not isinstance(doc, dict):
        raise UnsupportedShape('a document must be a mapping of layer '
                               'names to values, not %s' %
                               type(doc).__name__)
    for name in doc:
        if not isinstance(name, str):
            raise UnsupportedShape('layer names must be strings, not %r'
                                   % (name,))
    descriptors = descriptors or {}
    return dict((name, decode_layer(name, value, descriptors.get(name)))
                for name, value in doc.items())


def encode_document(layers):
    """
    Untyped form of a mapping from layer names to layers
    """
    return dict((name, encode(layer)) for name, layer in layers.items())
