# Author: Eric Kow
# License: BSD3

"""
Teanga text format (output).

This is a line-oriented, YAML-like rendering of a whole corpus ::

    _meta:
      text:
        type: characters
      tokens:
        type: span
        base: text
      pos:
        type: seq
        base: tokens
        data: ["NOUN", "VERB", "PUNCT"]
    Kjco:
      text: "Dogs bark."
      tokens: [[0,4],[5,9],[9,10]]
      pos: ["NOUN","VERB","PUNCT"]

The schema comes first under the reserved `_meta` key, followed by one
block per document. Characters layers are double-quoted with
backslashes, quotes and line breaks escaped; every other layer is
written as its `teanga.codec.encode` form, compactly on one line.

See `teanga.parse` for reading it back.
"""

from .codec import encode
from .flow import quote, render_flow
from .layer import Characters

META_KEY = '_meta'
INDENT = '  '


def _descriptor_lines(name, descriptor):
    lines = [INDENT + '%s:' % name,
             INDENT * 2 + 'type: %s' % descriptor.layer_type]
    if descriptor.base is not None:
        lines.append(INDENT * 2 + 'base: %s' % descriptor.base)
    if descriptor.data is not None:
        lines.append(INDENT * 2 + 'data: %s' % (descriptor.data,))
    return lines


def layer_to_text(layer):
    """
    Text form of a single layer value (what follows `name: `)
    """
    if isinstance(layer, Characters):
        return quote(layer.text)
    else:
        return render_flow(encode(layer))


def to_text(corpus):
    """
    Render a corpus in the teanga text format.

    Layers within a document come out in the order the document
    mapping gives them; documents in the order of
    `corpus.list_document_ids()`. Nothing is validated here.

    :type corpus: teanga.corpus.Corpus
    :rtype: string
    """
    lines = []
    descriptors = corpus.list_layer_descriptors()
    if descriptors:
        lines.append(META_KEY + ':')
        for name, descriptor in descriptors.items():
            lines.extend(_descriptor_lines(name, descriptor))

    for doc_id in corpus.list_document_ids():
        lines.append('%s:' % doc_id)
        for name, layer in corpus.get_document(doc_id).items():
            lines.append(INDENT + '%s: %s' % (name, layer_to_text(layer)))

    return ''.join(line + '\n' for line in lines)
