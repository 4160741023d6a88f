# Author: Eric Kow
# License: BSD3

"""
One-stop access to a teanga corpus using untyped values only.

`CorpusFacade` is what you would hand to code that speaks JSON (a web
service, a browser bridge, a command line tool): everything it takes
and returns is made of strings, numbers, lists and dicts, or text in
the teanga text format. Bad input always comes back as a
`teanga.errors.TeangaError`.

.. code-block:: python

    facade = CorpusFacade()
    facade.add_layer_meta('text', 'characters')
    facade.add_layer_meta('tokens', 'span', base='text')
    doc_id = facade.add_doc({'text': 'Hi, Bob!',
                             'tokens': facade.tokenize_simple('Hi, Bob!')})
    print(facade.to_text())
"""

import sys
import warnings

from .codec import decode_document, encode_document
from .corpus import SimpleCorpus
from .errors import UnsupportedShape
from .layer import LayerDescriptor
from .parse import read_text
from .text import META_KEY, to_text
from .tokenize import tokenize

IMPLEMENTATION = 'Python'


class CorpusFacade(object):
    """
    Untyped front end to a `teanga.corpus.Corpus`

    :param corpus: store to work on (a fresh `SimpleCorpus` if None)
    :type corpus: teanga.corpus.Corpus

    :param verbose: if True, report what we add on stderr
    :type verbose: bool
    """
    def __init__(self, corpus=None, verbose=False):
        self.corpus = SimpleCorpus() if corpus is None else corpus
        self.verbose = verbose

    def _note(self, msg):
        if self.verbose:
            print(msg, file=sys.stderr)

    def add_layer_meta(self, name, layer_type, base=None, data=None):
        """
        Declare a layer.

        Parameters
        ----------
        name : str
            Layer name
        layer_type : str
            One of `characters`, `span`, `seq`, `div`, `element`
        base : str, optional
            Name of the layer this one points into
        data : str or list of str, optional
            `string`, `link`, or enum labels (either as a list or as a
            list literal like `'["NOUN", "VERB"]'`)

        Raises
        ------
        InvalidDescriptor
            If the layer type or data type is not recognised
        CorpusError
            If the corpus refuses the layer
        """
        descriptor = LayerDescriptor.from_strings(layer_type, base, data)
        self.corpus.add_layer_descriptor(name, descriptor)
        self._note('Added layer: %s (%s)' % (name, descriptor.layer_type))

    def add_doc(self, doc):
        """
        Add a document given as a dict from layer names to untyped
        values, and return its id
        """
        layers = decode_document(doc, self.corpus.list_layer_descriptors())
        doc_id = self.corpus.add_document(layers)
        self._note('Added document: %s' % doc_id)
        return doc_id

    def get_doc_by_id(self, doc_id):
        """
        Untyped form of a document (dict from layer names to values)
        """
        return encode_document(self.corpus.get_document(doc_id))

    def get_doc_ids(self):
        "ids of all documents, oldest first"
        return list(self.corpus.list_document_ids())

    def get_meta(self):
        """
        Schema as a dict from layer names to dicts with a
        `layer_type`, and where relevant `base` and `data`, entry
        """
        return dict((name, desc.to_value()) for name, desc in
                    self.corpus.list_layer_descriptors().items())

    def tokenize_simple(self, text, utf8=False):
        "see `teanga.tokenize.tokenize`"
        return tokenize(text, utf8=utf8)

    def to_text(self):
        "the whole corpus in teanga text format"
        return to_text(self.corpus)

    def corpus_info(self):
        """
        Summary of the corpus
        """
        meta = self.corpus.list_layer_descriptors()
        docs = self.corpus.list_document_ids()
        return {
            'layer_count': len(meta),
            'document_count': len(docs),
            'layer_names': list(meta),
            'document_ids': list(docs),
            'implementation': IMPLEMENTATION,
        }

    def _add_read_document(self, expected_id, layers):
        """
        Add an already decoded document, warning if it does not get
        the id it was saved with
        """
        doc_id = self.corpus.add_document(layers)
        if expected_id is not None and doc_id != expected_id:
            warnings.warn('Document %s was read back as %s' %
                          (expected_id, doc_id))
        self._note('Added document: %s' % doc_id)
        return doc_id

    @classmethod
    def from_text(cls, text, corpus=None, verbose=False):
        """
        Facade over a corpus read from teanga text format (see
        `teanga.parse.read_text`)
        """
        facade = cls(corpus=corpus, verbose=verbose)
        descriptors, documents = read_text(text)
        for name, descriptor in descriptors.items():
            facade.corpus.add_layer_descriptor(name, descriptor)
            facade._note('Added layer: %s (%s)' %
                         (name, descriptor.layer_type))
        for doc_id, layers in documents:
            facade._add_read_document(doc_id, layers)
        return facade

    @classmethod
    def from_json_value(cls, value, corpus=None, verbose=False):
        """
        Facade over a corpus given as a JSON-like dict ::

            {"_meta": {"text": {"type": "characters"}, ...},
             "Kjco": {"text": "Dogs bark.", ...},
             ...}

        Document keys are taken to be the ids the documents were saved
        with, as in `from_text`.
        """
        if not isinstance(value, dict):
            raise UnsupportedShape('a corpus must be a mapping, not %s' %
                                   type(value).__name__)
        facade = cls(corpus=corpus, verbose=verbose)
        meta = value.get(META_KEY) or {}
        if not isinstance(meta, dict):
            raise UnsupportedShape('%s must be a mapping' % META_KEY)
        for name, desc in meta.items():
            if not isinstance(desc, dict):
                raise UnsupportedShape('descriptor for %s must be a mapping'
                                       % name)
            facade.add_layer_meta(name,
                                  desc.get('type', desc.get('layer_type')),
                                  desc.get('base'),
                                  desc.get('data'))
        schema = facade.corpus.list_layer_descriptors()
        for doc_id, doc in value.items():
            if doc_id == META_KEY:
                continue
            facade._add_read_document(doc_id, decode_document(doc, schema))
        return facade

    def to_json_value(self):
        """
        The whole corpus as a JSON-like dict (see `from_json_value`)
        """
        res = {}
        meta = self.corpus.list_layer_descriptors()
        if meta:
            res[META_KEY] = dict((name, _json_descriptor(desc))
                                 for name, desc in meta.items())
        for doc_id in self.corpus.list_document_ids():
            res[doc_id] = self.get_doc_by_id(doc_id)
        return res


def _json_descriptor(descriptor):
    """
    Descriptor in the form `from_json_value` reads (`type` rather than
    `layer_type`, mirroring the text format)
    """
    res = {'type': str(descriptor.layer_type)}
    res.update((k, v) for k, v in descriptor.to_value().items()
               if k != 'layer_type')
    return res
