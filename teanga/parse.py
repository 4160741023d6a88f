# Author: Eric Kow
# License: BSD3

"""
Teanga text format (input).

Reads back what `teanga.text.to_text` writes. The grammar works on the
characters of the text (there is no separate lexer), using the flow
literal parsers of `teanga.flow` for layer values. Blank lines are
allowed between entries, and Windows line endings are accepted.

The entry point is `read_text`, which gives you the schema and the
documents but does not put them in any corpus; see
`teanga.facade.CorpusFacade.from_text` for that.
"""

import warnings

import funcparserlib.parser as fp

from .codec import decode_layer
from .errors import TextFormatError, text_format_error_from
from .flow import (flatten_str, flow_value, hspace, many_char, noise,
                   satisfies)
from .layer import LayerDescriptor
from .text import INDENT, META_KEY

KNOWN_FIELDS = frozenset(['type', 'base', 'data'])

# ---------------------------------------------------------------------
# grammar
# ---------------------------------------------------------------------

_nl = fp.skip(fp.a('\n'))
_blanks = fp.skip(fp.many(hspace + _nl))
_colon = noise(':') + hspace

# names do not start with whitespace and do not contain colons
_key = satisfies(lambda c: c not in ' \t:\n') +\
    many_char(lambda c: c not in ':\n') >> flatten_str
_rest_of_line = many_char(lambda c: c != '\n') >> (lambda s: s.strip())
_field_name = fp.oneplus(satisfies(lambda c: c.isalnum() or c == '_'))\
    >> flatten_str

_field = _blanks + noise(INDENT * 2) + _field_name + _colon +\
    _rest_of_line + _nl >> tuple

_meta_entry = _blanks + noise(INDENT) + _key + _colon + _nl +\
    fp.many(_field) >> tuple

_meta_block = _blanks + noise(META_KEY) + _colon + _nl +\
    fp.many(_meta_entry)

_layer_entry = _blanks + noise(INDENT) + _key + _colon +\
    flow_value + hspace + _nl >> tuple

_doc_block = _blanks + _key + _colon + _nl +\
    fp.many(_layer_entry) >> tuple

_corpus = fp.maybe(_meta_block) + fp.many(_doc_block) + _blanks +\
    fp.skip(fp.finished)

# ---------------------------------------------------------------------
# interpretation
# ---------------------------------------------------------------------


def _mk_descriptor(name, fields):
    """
    Descriptor from the (field, text) pairs in a `_meta` entry
    """
    values = {}
    for field, text in fields:
        if field not in KNOWN_FIELDS:
            warnings.warn('Ignoring unknown field %s of layer %s' %
                          (field, name))
            continue
        values[field] = text
    if 'type' not in values:
        raise TextFormatError('Layer %s has no type' % name)
    return LayerDescriptor.from_strings(values['type'],
                                        values.get('base'),
                                        values.get('data'))


def _normalise(text):
    text = text.replace('\r\n', '\n')
    if text and not text.endswith('\n'):
        text += '\n'
    return text


def read_text(text):
    """
    Read a corpus in teanga text format.

    Returns
    -------
    descriptors : dict(string, LayerDescriptor)
        Schema, in the order it was declared
    documents : [(string, dict(string, Layer))]
        Document ids (as they appear in the text) and layers, in order

    Raises
    ------
    TextFormatError
        If the text is not in the expected format
    InvalidDescriptor
        If a layer type or data type in the schema is not recognised
    DecodeError
        If a layer value does not make a valid layer
    """
    text = _normalise(text)
    try:
        meta, docs = _corpus.parse(text)
    except fp.NoParseError as exc:
        raise text_format_error_from(exc, text)

    descriptors = {}
    for name, fields in meta or []:
        if name in descriptors:
            raise TextFormatError('Layer %s is declared twice' % name)
        descriptors[name] = _mk_descriptor(name, fields)

    documents = []
    for doc_id, entries in docs:
        layers = {}
        for name, value in entries:
            layers[name] = decode_layer(name, value, descriptors.get(name))
        documents.append((doc_id, layers))
    return descriptors, documents
