# Author: Eric Kow
# License: BSD3

"""
Corpus management
"""
#
# A corpus consists of
#
# - a schema: an ordered mapping from layer names to LayerDescriptor
# - documents: each a mapping from layer names to Layer, identified
#   by a short id derived from the document's text
#
# The codec does not care how these are stored. It talks to the store
# through the small `Corpus` interface below; `SimpleCorpus` is the
# in-memory version of it.

import base64
import hashlib

from .codec import is_meta_name
from .errors import CorpusError
from .layer import AnnotationLayer, Characters, L1, LayerType, MetaLayer

MIN_ID_LENGTH = 4


def is_valid_name(name):
    """
    True if the string can be used as a layer name. Names must be
    non-empty and have no colons, line breaks or surrounding
    whitespace, so that they can be written out as keys in the text
    format
    """
    return (isinstance(name, str) and bool(name) and
            name == name.strip() and
            not any(c in name for c in ':\n\r'))


def teanga_id(existing, layers):
    """
    Identifier for a new document.

    This is the base64 SHA-256 digest of the document's characters
    layers, cut down to the shortest prefix (of at least
    `MIN_ID_LENGTH` characters) that is not already in use.

    :param existing: ids already in use
    :type existing: set(string)

    :param layers: the document
    :type layers: dict(string, Layer)
    """
    text = ''
    for name in sorted(layers):
        layer = layers[name]
        if isinstance(layer, Characters):
            text += name + '\x00' + layer.text + '\x00'
    digest = hashlib.sha256(text.encode('utf-8')).digest()
    code = base64.b64encode(digest).decode('ascii')
    size = MIN_ID_LENGTH
    while code[:size] in existing and size < len(code):
        size += 1
    if code[:size] in existing:
        raise CorpusError('Document already exists: %s' % code)
    return code[:size]


class Corpus(object):
    """
    What we need from a corpus store.

    This is an abstract class; `SimpleCorpus` is a working in-memory
    implementation, but you could equally well wrap a database.
    Implementations are expected to raise `CorpusError` when they
    refuse something.
    """
    def add_layer_descriptor(self, name, descriptor):
        """
        Declare a new layer.

        Should refuse duplicate names and `base` references to layers
        that have not (yet) been declared
        """
        raise NotImplementedError()

    def add_document(self, layers):
        """
        Add a document (dict from layer name to `Layer`) and return
        its id
        """
        raise NotImplementedError()

    def get_document(self, doc_id):
        """
        Layers of the document with the given id
        """
        raise NotImplementedError()

    def list_document_ids(self):
        """
        Ids of all documents, in the order they should be read
        """
        raise NotImplementedError()

    def list_layer_descriptors(self):
        """
        Ordered dict from layer names to their `LayerDescriptor`
        """
        raise NotImplementedError()


class SimpleCorpus(Corpus):
    """
    Corpus kept entirely in memory, with documents and layers
    remembered in insertion order.

    Layers are checked against the schema as they come in: each layer
    must be declared (unless it is a metadata layer, whose name starts
    with an underscore) and must be of the variant its descriptor
    calls for (see `LayerDescriptor.layer_class`). We do not check
    anything beyond that, eg. whether indices fall inside their base
    layer or whether strings belong to an enum.
    """
    def __init__(self):
        self._meta = {}
        self._docs = {}

    def add_layer_descriptor(self, name, descriptor):
        if not is_valid_name(name) or is_meta_name(name):
            raise CorpusError('Invalid layer name: %r' % (name,))
        if name in self._meta:
            raise CorpusError('Layer already exists: %s' % name)
        if descriptor.layer_type == LayerType.characters:
            if descriptor.base is not None:
                raise CorpusError('Characters layer %s cannot have a base'
                                  % name)
        elif descriptor.base is None:
            raise CorpusError('Layer %s (%s) needs a base layer' %
                              (name, descriptor.layer_type))
        elif descriptor.base == name:
            raise CorpusError('Layer %s cannot be its own base' % name)
        elif descriptor.base not in self._meta:
            raise CorpusError('Base layer %s of %s does not exist' %
                              (descriptor.base, name))
        if descriptor.layer_class() is None:
            raise CorpusError('Layer %s: %s layers cannot have data %s' %
                              (name, descriptor.layer_type,
                               descriptor.data))
        self._meta[name] = descriptor

    def _check_layer(self, name, layer):
        """
        Return the layer as it should be stored, or complain if it
        does not fit the schema
        """
        if not is_valid_name(name):
            raise CorpusError('Invalid layer name: %r' % (name,))
        if is_meta_name(name):
            if not isinstance(layer, MetaLayer):
                raise CorpusError('Metadata layer %s must be a MetaLayer'
                                  % name)
            return layer
        if name not in self._meta:
            raise CorpusError('Layer %s is not declared' % name)
        expected = self._meta[name].layer_class()
        if type(layer) is expected:
            return layer
        # an empty array decodes to L1 for lack of anything better
        if isinstance(layer, L1) and len(layer) == 0 and\
                issubclass(expected, AnnotationLayer):
            return expected([])
        raise CorpusError('Layer %s should be %s, not %s' %
                          (name, expected.__name__,
                           layer.__class__.__name__))

    def add_document(self, layers):
        checked = dict((name, self._check_layer(name, layer))
                       for name, layer in layers.items())
        doc_id = teanga_id(self._docs, checked)
        self._docs[doc_id] = checked
        return doc_id

    def get_document(self, doc_id):
        if doc_id not in self._docs:
            raise CorpusError('Document not found: %s' % doc_id)
        return dict(self._docs[doc_id])

    def list_document_ids(self):
        return list(self._docs)

    def list_layer_descriptors(self):
        return dict(self._meta)
