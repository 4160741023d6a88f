# -*- coding: utf-8 -*-
#
# Author: Eric Kow
# License: BSD3
# pylint: disable=too-many-public-methods, invalid-name

"""
Tests for teanga
"""

from contextlib import redirect_stderr
import io
import unittest
import warnings

from teanga.codec import (decode, decode_as, decode_document, encode,
                          encode_document)
from teanga.corpus import SimpleCorpus, teanga_id
from teanga.errors import (ArityMismatch, CorpusError, DecodeError,
                           ErrorKind, InvalidDescriptor, InvalidNumber,
                           ShapeMismatch, TeangaError, TextFormatError,
                           UnsupportedShape)
from teanga.facade import CorpusFacade
from teanga.flow import parse_flow, quote, render_flow
from teanga.layer import (Characters, DataType, L1, L1S, L2, L2S, L3, L3S,
                          LS, LayerDescriptor, LayerType, MetaLayer)
from teanga.parse import read_text
from teanga.text import layer_to_text, to_text
from teanga.tokenize import tokenize
from teanga.value import freeze, thaw


def mk_corpus():
    """
    Small corpus with text, tokens and a tag per token
    """
    corpus = SimpleCorpus()
    corpus.add_layer_descriptor('text', LayerDescriptor('characters'))
    corpus.add_layer_descriptor('tokens', LayerDescriptor('span', 'text'))
    corpus.add_layer_descriptor('pos',
                                LayerDescriptor('seq', 'tokens',
                                                ['NOUN', 'VERB']))
    return corpus


# ---------------------------------------------------------------------
# shape inference
# ---------------------------------------------------------------------


class DecodeTest(unittest.TestCase):
    "tests for teanga.codec.decode"

    def assertDecodeError(self, err_class, value, index=None, offset=None):
        "decoding should fail with this error at this position"
        with self.assertRaises(err_class) as ctx:
            decode(value)
        self.assertEqual(index, ctx.exception.index)
        self.assertEqual(offset, ctx.exception.offset)

    def test_strings(self):
        "strings and arrays of strings"
        self.assertEqual(Characters('hello'), decode('hello'))
        self.assertEqual(LS(['a', 'b']), decode(['a', 'b']))
        self.assertEqual(Characters(''), decode(''))

    def test_empty(self):
        "empty arrays default to L1"
        self.assertEqual(L1([]), decode([]))
        self.assertNotEqual(L2([]), decode([]))

    def test_numbers(self):
        "arrays of numbers"
        self.assertEqual(L1([1, 2, 3]), decode([1, 2, 3]))
        self.assertEqual(L1([0, 2 ** 32 - 1]), decode([0, 2 ** 32 - 1]))
        self.assertEqual(L1([4, 5]), decode((4, 5)))
        self.assertDecodeError(ShapeMismatch, [1, 2, 'x'], 2)
        self.assertDecodeError(ShapeMismatch, [1, True], 1)
        self.assertDecodeError(ShapeMismatch, [1, [2, 3]], 1)

    def test_invalid_numbers(self):
        "indices must be non-negative 32-bit integers"
        self.assertDecodeError(InvalidNumber, [-1], 0)
        self.assertDecodeError(InvalidNumber, [0, 1.5], 1)
        self.assertDecodeError(InvalidNumber, [1.0], 0)
        self.assertDecodeError(InvalidNumber, [2 ** 32], 0)
        self.assertDecodeError(InvalidNumber, [[0, 1], [2, -3]], 1, 1)

    def test_pairs_and_triples(self):
        "arrays of arrays"
        self.assertEqual(L2([(1, 2), (3, 4)]), decode([[1, 2], [3, 4]]))
        self.assertEqual(L3([(0, 1, 2)]), decode([[0, 1, 2]]))
        self.assertEqual(L3([(0, 1, 2), (3, 4, 5)]),
                         decode(((0, 1, 2), [3, 4, 5])))

    def test_arity_from_first(self):
        "the first element decides the arity for everyone"
        self.assertDecodeError(ArityMismatch, [[1, 2], [3, 4, 5]], 1)
        self.assertDecodeError(ArityMismatch, [[1, 2], [3]], 1)
        self.assertDecodeError(ArityMismatch, [[1, 2, 3], [4, 5]], 1)
        self.assertDecodeError(ArityMismatch, [[1, 2], ['a', 3]], 1, 0)
        self.assertDecodeError(ShapeMismatch, [[1, 2], 5], 1)

    def test_unsupported(self):
        "shapes that are not layers"
        self.assertDecodeError(UnsupportedShape, [[1]], 0)
        self.assertDecodeError(UnsupportedShape, [[]], 0)
        self.assertDecodeError(UnsupportedShape, [[1, 2, 3, 4]], 0)
        self.assertDecodeError(UnsupportedShape, [True], 0)
        self.assertDecodeError(UnsupportedShape, [None], 0)
        self.assertDecodeError(UnsupportedShape, [{'a': 1}], 0)
        self.assertDecodeError(UnsupportedShape, 5)
        self.assertDecodeError(UnsupportedShape, None)
        self.assertDecodeError(UnsupportedShape, {'a': [1]})

    def test_string_uniformity(self):
        "arrays of strings stay arrays of strings"
        self.assertDecodeError(ShapeMismatch, ['a', 1], 1)
        self.assertDecodeError(ShapeMismatch, ['a', None], 1)

    def test_error_kinds(self):
        "errors can be told apart by kind as well as by class"
        try:
            decode([1, 'x'])
        except DecodeError as exc:
            self.assertEqual(ErrorKind.shape_mismatch, exc.kind)
            self.assertTrue(isinstance(exc, TeangaError))
        else:
            self.fail('expected a decode error')


# ---------------------------------------------------------------------
# encoding and hinted decoding
# ---------------------------------------------------------------------


ROUND_TRIPPERS = [
    Characters('Hi, Bob!'),
    Characters('He said "hi"\n'),
    L1([0, 3, 7]),
    L2([(0, 2), (2, 3)]),
    L3([(0, 2, 1), (2, 3, 0)]),
    LS(['NOUN', 'PUNCT']),
]

ALL_LAYERS = ROUND_TRIPPERS + [
    L1S([(0, 'a')]),
    L2S([(0, 2, 'NNP'), (2, 3, ',')]),
    L3S([(0, 2, 1, 'nsubj')]),
    MetaLayer({'author': 'me', 'tags': [1, 2.5, True]}),
    MetaLayer(None),
]


class EncodeTest(unittest.TestCase):
    "tests for teanga.codec.encode and decode_as"

    def test_encode(self):
        "untyped forms"
        self.assertEqual('abc', encode(Characters('abc')))
        self.assertEqual([1, 2], encode(L1([1, 2])))
        self.assertEqual([[1, 2]], encode(L2([(1, 2)])))
        self.assertEqual([[1, 2, 3]], encode(L3([(1, 2, 3)])))
        self.assertEqual(['x'], encode(LS(['x'])))
        self.assertEqual([[0, 'a']], encode(L1S([(0, 'a')])))
        self.assertEqual([[0, 1, 'a']], encode(L2S([(0, 1, 'a')])))
        self.assertEqual([[0, 1, 2, 'a']], encode(L3S([(0, 1, 2, 'a')])))
        self.assertEqual({'a': [1, {'b': 'c'}]},
                         encode(MetaLayer({'a': [1, {'b': 'c'}]})))
        self.assertEqual(None, encode(MetaLayer()))
        self.assertEqual(None, encode(MetaLayer(float('nan'))))

    def test_round_trip(self):
        "decode . encode is the identity on inferable layers"
        for layer in ROUND_TRIPPERS:
            self.assertEqual(layer, decode(encode(layer)))

    def test_hinted_round_trip(self):
        "decode_as . encode is the identity on all layers"
        for layer in ALL_LAYERS:
            self.assertEqual(layer, decode_as(encode(layer), type(layer)))

    def test_hinted_errors(self):
        "decode_as complains if the value does not fit"
        self.assertEqual(L2S([(0, 4, 'NN')]), decode_as([[0, 4, 'NN']], L2S))
        self.assertEqual(L3S([]), decode_as([], L3S))
        with self.assertRaises(ShapeMismatch) as ctx:
            decode_as([[0, 4, 5]], L2S)
        self.assertEqual((0, 2), (ctx.exception.index, ctx.exception.offset))
        self.assertRaises(ArityMismatch, decode_as, [[0, 'NN']], L2S)
        self.assertRaises(ShapeMismatch, decode_as, ['NN'], L1S)
        self.assertRaises(UnsupportedShape, decode_as, 'x', L1)
        self.assertRaises(ShapeMismatch, decode_as, 5, Characters)

    def test_documents(self):
        "whole documents, with metadata and hinted layers"
        descriptors = {'text': LayerDescriptor('characters'),
                       'tags': LayerDescriptor('div', 'text', 'string')}
        doc = {'text': 'ab cd',
               'tags': [[0, 'x'], [3, 'y']],
               '_source': {'url': 'http://example.com'}}
        layers = decode_document(doc, descriptors)
        self.assertEqual(Characters('ab cd'), layers['text'])
        self.assertEqual(L1S([(0, 'x'), (3, 'y')]), layers['tags'])
        self.assertEqual(MetaLayer({'url': 'http://example.com'}),
                         layers['_source'])
        self.assertEqual(doc, encode_document(layers))
        self.assertEqual(['text', 'tags', '_source'], list(layers))
        self.assertRaises(UnsupportedShape, decode_document, ['text'])


# ---------------------------------------------------------------------
# layer model
# ---------------------------------------------------------------------


class LayerTest(unittest.TestCase):
    "tests for teanga.layer"

    def test_equality(self):
        "variant and content both count"
        self.assertEqual(L2([(0, 1)]), L2([[0, 1]]))
        self.assertNotEqual(L1([]), L2([]))
        self.assertNotEqual(L2([(0, 1)]), L2([(0, 2)]))
        self.assertNotEqual(Characters('a'), LS(['a']))
        self.assertEqual(hash(L2([(0, 1)])), hash(L2([[0, 1]])))
        self.assertEqual(hash(MetaLayer({'a': [1]})),
                         hash(MetaLayer({'a': [1]})))

    def test_checked_construction(self):
        "layers refuse bad data up front"
        self.assertRaises(ArityMismatch, L2, [(0,)])
        self.assertRaises(InvalidNumber, L1, [-1])
        self.assertRaises(ShapeMismatch, LS, [1])
        self.assertRaises(UnsupportedShape, Characters, 3)
        self.assertRaises(UnsupportedShape, L1, 3)

    def test_rows(self):
        "rows are normalised"
        layer = L2S([[0, 1, 'a'], (1, 2, 'b')])
        self.assertEqual(2, len(layer))
        self.assertEqual((0, 1, 'a'), layer[0])
        self.assertEqual([(0, 1, 'a'), (1, 2, 'b')], list(layer))
        self.assertEqual(3, L2S.width())
        self.assertEqual(1, LS.width())


class ValueTest(unittest.TestCase):
    "tests for teanga.value"

    def test_freeze_thaw(self):
        "frozen values come back as plain lists and dicts"
        val = {'a': [1, 2.5, 'x', True], 'b': {'c': []}}
        frozen = freeze(val)
        self.assertTrue(isinstance(frozen['a'], tuple))
        self.assertEqual(val, thaw(frozen))
        self.assertEqual(['a', 'b'], list(thaw(frozen)))

    def test_bad_values(self):
        "things that are not values"
        self.assertRaises(UnsupportedShape, MetaLayer, [1, None])
        self.assertRaises(UnsupportedShape, MetaLayer, {1: 2})
        self.assertRaises(UnsupportedShape, MetaLayer, set([1]))
        self.assertRaises(InvalidNumber, MetaLayer, 2 ** 70)

    def test_kinds_kept_apart(self):
        "booleans, integers and floats are never equal to each other"
        self.assertNotEqual(MetaLayer(True), MetaLayer(1))
        self.assertNotEqual(MetaLayer(1.0), MetaLayer(1))
        self.assertNotEqual(MetaLayer([0]), MetaLayer([False]))
        self.assertNotEqual(MetaLayer({'a': 1}), MetaLayer({'a': True}))
        self.assertEqual(MetaLayer({'a': [1, 'x']}),
                         MetaLayer({'a': [1, 'x']}))
        self.assertEqual(hash(MetaLayer([1.5])), hash(MetaLayer([1.5])))


class DescriptorTest(unittest.TestCase):
    "tests for layer and data types"

    def test_layer_type(self):
        "layer type names"
        self.assertEqual(LayerType.span, LayerType.from_string('span'))
        self.assertEqual('div', str(LayerType.div))
        self.assertRaises(InvalidDescriptor, LayerType.from_string, 'spam')

    def test_data_type(self):
        "data type strings"
        self.assertEqual('string', DataType.from_string('string').kind)
        self.assertEqual('link', DataType.from_string('link').kind)
        enum = DataType.from_string('["NOUN", "VERB"]')
        self.assertEqual(('NOUN', 'VERB'), enum.values)
        self.assertEqual('["NOUN", "VERB"]', str(enum))
        self.assertEqual(['NOUN', 'VERB'], enum.to_value())
        self.assertEqual(enum, DataType.from_value(['NOUN', 'VERB']))

    def test_bad_data_type(self):
        "malformed data types are refused, never defaulted"
        for literal in ['["NOUN", "VERB"',
                        '[NOUN]',
                        '[1, 2]',
                        '["A", "A"]',
                        'strung',
                        '']:
            self.assertRaises(InvalidDescriptor, DataType.from_string,
                              literal)
        self.assertRaises(InvalidDescriptor, DataType.from_value, [1])
        self.assertRaises(InvalidDescriptor, DataType.from_value, 3)

    def test_layer_class(self):
        "which layer goes with which descriptor"
        expected = [
            (('characters', None, None), Characters),
            (('span', 't', None), L2),
            (('span', 't', 'string'), L2S),
            (('span', 't', '["A"]'), L2S),
            (('span', 't', 'link'), L3),
            (('div', 't', None), L1),
            (('div', 't', 'string'), L1S),
            (('div', 't', 'link'), L2),
            (('element', 't', None), L1),
            (('element', 't', '["A"]'), L1S),
            (('seq', 't', 'string'), LS),
            (('seq', 't', 'link'), L1),
            (('seq', 't', None), None),
            (('characters', None, 'string'), None),
        ]
        for args, cls in expected:
            desc = LayerDescriptor.from_strings(*args)
            self.assertEqual(cls, desc.layer_class(), args)

    def test_to_value(self):
        "dictionary form of descriptors"
        self.assertEqual({'layer_type': 'characters'},
                         LayerDescriptor('characters').to_value())
        self.assertEqual({'layer_type': 'seq', 'base': 'tokens',
                          'data': ['A', 'B']},
                         LayerDescriptor('seq', 'tokens',
                                         '["A", "B"]').to_value())


# ---------------------------------------------------------------------
# tokeniser
# ---------------------------------------------------------------------


class TokenizeTest(unittest.TestCase):
    "tests for teanga.tokenize"

    def test_simple(self):
        "words and punctuation"
        self.assertEqual([(0, 2), (2, 3), (4, 7), (7, 8)],
                         tokenize('Hi, Bob!'))
        self.assertEqual([(0, 2), (2, 3), (4, 7), (7, 8)],
                         tokenize('Hi, Bob!', utf8=True))

    def test_corner_cases(self):
        "empty text, whitespace, runs of punctuation, digits"
        self.assertEqual([], tokenize(''))
        self.assertEqual([], tokenize(' \n\t '))
        self.assertEqual([(0, 2)], tokenize('ab'))
        self.assertEqual([(1, 3)], tokenize(' ab '))
        self.assertEqual([(0, 1), (1, 2), (2, 3), (3, 4)], tokenize('a--b'))
        self.assertEqual([(0, 2), (3, 5)], tokenize('x1 2y'))

    def test_offset_units(self):
        "code points by default, UTF-8 bytes on request"
        text = u'naïve café'
        spans = tokenize(text)
        self.assertEqual([(0, 5), (6, 10)], spans)
        self.assertEqual([u'naïve', u'café'], [text[s:e] for s, e in spans])
        self.assertEqual([(0, 6), (7, 12)], tokenize(text, utf8=True))

    def test_combining_marks(self):
        "vowel signs and viramas do not break up words"
        # kitab
        self.assertEqual([(0, 5)],
                         tokenize(u'किताब'))
        # namaste duniya
        text = (u'नमस्ते '
                u'दुनिया')
        self.assertEqual([(0, 6), (7, 13)], tokenize(text))
        self.assertEqual([(0, 18), (19, 37)], tokenize(text, utf8=True))


# ---------------------------------------------------------------------
# flow literals
# ---------------------------------------------------------------------


class FlowTest(unittest.TestCase):
    "tests for teanga.flow"

    def test_render(self):
        "compact rendering"
        self.assertEqual('[[0,2],[2,3]]', render_flow([[0, 2], [2, 3]]))
        self.assertEqual('["a", "b"]', render_flow(['a', 'b'], sep=', '))
        self.assertEqual('{"a":true,"b":null,"c":1.5}',
                         render_flow({'a': True, 'b': None, 'c': 1.5}))
        self.assertEqual('"a\\"b\\\\c\\nd"', quote('a"b\\c\nd'))
        self.assertEqual('"\\u0001"', quote('\x01'))

    def test_parse(self):
        "reading literals back"
        self.assertEqual([[0, 2], [2, 3]], parse_flow('[[0,2],[2,3]]'))
        self.assertEqual(['a', 'b'], parse_flow(' [ "a" , "b" ] '))
        self.assertEqual({'a': True, 'b': None, 'c': -1.5e3},
                         parse_flow('{"a":true,"b":null,"c":-1.5e3}'))
        self.assertEqual([], parse_flow('[]'))
        self.assertEqual({}, parse_flow('{}'))
        self.assertEqual('it\'s "x"\n\\', parse_flow(r'"it\'s \"x\"\n\\"'))
        self.assertEqual(u'é', parse_flow(r'"é"'))

    def test_parse_errors(self):
        "malformed literals"
        for literal in ['[1,', '[1 2]', '"abc', 'nul', '{"a" 1}', '[1]]']:
            self.assertRaises(TextFormatError, parse_flow, literal)

    def test_round_trip(self):
        "what we write, we read"
        for val in [[1, 2], ['a\tb', 'c"d'], {'x': [1.25, False]}, 'é']:
            self.assertEqual(val, parse_flow(render_flow(val)))


# ---------------------------------------------------------------------
# corpus store
# ---------------------------------------------------------------------


class CorpusTest(unittest.TestCase):
    "tests for teanga.corpus.SimpleCorpus"

    def test_schema_checks(self):
        "bad layer declarations"
        corpus = mk_corpus()
        self.assertRaises(CorpusError, corpus.add_layer_descriptor,
                          'text', LayerDescriptor('characters'))
        self.assertRaises(CorpusError, corpus.add_layer_descriptor,
                          'x', LayerDescriptor('span', 'nowhere'))
        self.assertRaises(CorpusError, corpus.add_layer_descriptor,
                          'x', LayerDescriptor('span'))
        self.assertRaises(CorpusError, corpus.add_layer_descriptor,
                          'x', LayerDescriptor('span', 'x'))
        self.assertRaises(CorpusError, corpus.add_layer_descriptor,
                          'x', LayerDescriptor('characters', 'text'))
        self.assertRaises(CorpusError, corpus.add_layer_descriptor,
                          'x', LayerDescriptor('seq', 'tokens'))
        self.assertRaises(CorpusError, corpus.add_layer_descriptor,
                          '_x', LayerDescriptor('characters'))
        self.assertEqual(['text', 'tokens', 'pos'],
                         list(corpus.list_layer_descriptors()))

    def test_document_checks(self):
        "documents must agree with the schema"
        corpus = mk_corpus()
        self.assertRaises(CorpusError, corpus.add_document,
                          {'words': L2([(0, 1)])})
        self.assertRaises(CorpusError, corpus.add_document,
                          {'text': Characters('a'), 'tokens': L3([])})
        self.assertRaises(CorpusError, corpus.add_document,
                          {'_meta_x': Characters('a')})
        self.assertRaises(CorpusError, corpus.get_document, 'nope')
        self.assertEqual([], corpus.list_document_ids())

    def test_empty_layers(self):
        "an empty L1 stands in for any empty annotation layer"
        corpus = mk_corpus()
        doc_id = corpus.add_document({'text': Characters(''),
                                      'tokens': L1([]),
                                      'pos': L1([])})
        doc = corpus.get_document(doc_id)
        self.assertEqual(L2([]), doc['tokens'])
        self.assertEqual(LS([]), doc['pos'])

    def test_ids(self):
        "ids are short, stable, and made longer when they clash"
        corpus = mk_corpus()
        layers = {'text': Characters('Dogs bark')}
        id1 = corpus.add_document(layers)
        id2 = corpus.add_document(layers)
        self.assertEqual(4, len(id1))
        self.assertEqual(5, len(id2))
        self.assertTrue(id2.startswith(id1))
        self.assertEqual(id1, teanga_id(set(), layers))
        self.assertEqual([id1, id2], corpus.list_document_ids())

    def test_names(self):
        "layer names must be writable as keys in the text format"
        corpus = mk_corpus()
        for name in ['a:b', 'a\nb', ' a', 'a ', '', 3]:
            self.assertRaises(CorpusError, corpus.add_layer_descriptor,
                              name, LayerDescriptor('characters'))
        self.assertRaises(CorpusError, corpus.add_document,
                          {'_a:b': MetaLayer(1)})
        corpus.add_layer_descriptor('a b', LayerDescriptor('characters'))
        self.assertTrue('a b' in corpus.list_layer_descriptors())


# ---------------------------------------------------------------------
# text format
# ---------------------------------------------------------------------


class TextTest(unittest.TestCase):
    "tests for teanga.text and teanga.parse"

    def test_to_text(self):
        "the whole corpus, in order"
        corpus = mk_corpus()
        doc_id = corpus.add_document({
            'text': Characters('Dogs bark'),
            'tokens': L2([(0, 4), (5, 9)]),
            'pos': LS(['NOUN', 'VERB']),
        })
        expected = '\n'.join([
            '_meta:',
            '  text:',
            '    type: characters',
            '  tokens:',
            '    type: span',
            '    base: text',
            '  pos:',
            '    type: seq',
            '    base: tokens',
            '    data: ["NOUN", "VERB"]',
            '%s:' % doc_id,
            '  text: "Dogs bark"',
            '  tokens: [[0,4],[5,9]]',
            '  pos: ["NOUN","VERB"]',
        ]) + '\n'
        self.assertEqual(expected, to_text(corpus))

    def test_data_lines(self):
        "every kind of data type is written out and read back"
        corpus = SimpleCorpus()
        corpus.add_layer_descriptor('text', LayerDescriptor('characters'))
        corpus.add_layer_descriptor('tokens', LayerDescriptor('span', 'text'))
        corpus.add_layer_descriptor('lemma',
                                    LayerDescriptor('seq', 'tokens',
                                                    'string'))
        corpus.add_layer_descriptor('head',
                                    LayerDescriptor('seq', 'tokens', 'link'))
        corpus.add_layer_descriptor('pos',
                                    LayerDescriptor('seq', 'tokens',
                                                    ['A', 'B']))
        corpus.add_document({'text': Characters('ab'),
                             'tokens': L2([(0, 1), (1, 2)]),
                             'lemma': LS(['a', 'b']),
                             'head': L1([1, 1]),
                             'pos': LS(['A', 'B'])})
        text = to_text(corpus)
        lines = text.splitlines()
        self.assertEqual(['    data: string', '    data: link',
                          '    data: ["A", "B"]'],
                         [x for x in lines if x.startswith('    data:')])
        descriptors, documents = read_text(text)
        self.assertEqual(corpus.list_layer_descriptors(), descriptors)
        self.assertEqual(corpus.get_document(documents[0][0]),
                         documents[0][1])

    def test_escaping(self):
        "characters layers are quoted and escaped"
        layer = Characters('He said "hi"\n')
        self.assertEqual('"He said \\"hi\\"\\n"', layer_to_text(layer))
        self.assertEqual(layer, decode(parse_flow(layer_to_text(layer))))
        tricky = Characters('back\\nslash')
        self.assertEqual(tricky, decode(parse_flow(layer_to_text(tricky))))

    def test_layer_order(self):
        "layers come out in the order the document gives them"
        corpus = mk_corpus()
        doc_id = corpus.add_document({'tokens': L2([(0, 1)]),
                                      'text': Characters('a')})
        lines = to_text(corpus).splitlines()
        start = lines.index('%s:' % doc_id)
        self.assertEqual(['  tokens: [[0,1]]', '  text: "a"'],
                         lines[start + 1:])

    def test_empty(self):
        "an empty corpus is empty text"
        self.assertEqual('', to_text(SimpleCorpus()))

    def test_read_back(self):
        "to_text then read_text gives us the same thing"
        corpus = mk_corpus()
        corpus.add_layer_descriptor('labels',
                                    LayerDescriptor('span', 'tokens',
                                                    'string'))
        doc_id = corpus.add_document({
            'text': Characters('Dogs "bark"\n'),
            'tokens': L2([(0, 4), (5, 11)]),
            'pos': LS(['NOUN', 'VERB']),
            'labels': L2S([(0, 2, 'NP')]),
            '_meta_info': MetaLayer({'year': 2013}),
        })
        descriptors, documents = read_text(to_text(corpus))
        self.assertEqual(corpus.list_layer_descriptors(), descriptors)
        self.assertEqual(list(corpus.list_layer_descriptors()),
                         list(descriptors))
        self.assertEqual([(doc_id, corpus.get_document(doc_id))],
                         documents)

    def test_blank_lines(self):
        "blank lines and windows line endings are tolerated"
        text = '_meta:\r\n  text:\r\n    type: characters\r\n\r\n' +\
            'abcd:\r\n\r\n  text: "x"'
        descriptors, documents = read_text(text)
        self.assertEqual({'text': LayerDescriptor('characters')},
                         descriptors)
        self.assertEqual([('abcd', {'text': Characters('x')})], documents)

    def test_read_errors(self):
        "what read_text refuses"
        with self.assertRaises(TextFormatError) as ctx:
            read_text('doc:\n  text "x"\n')
        self.assertEqual(2, ctx.exception.line)
        self.assertRaises(InvalidDescriptor, read_text,
                          '_meta:\n  text:\n    type: spam\n')
        self.assertRaises(TextFormatError, read_text,
                          '_meta:\n  text:\n    base: x\n')
        self.assertRaises(ArityMismatch, read_text,
                          'doc:\n  tokens: [[0,1],[2]]\n')

    def test_unknown_fields(self):
        "fields we do not know about are skipped with a warning"
        text = '_meta:\n  text:\n    type: characters\n    meta: x\n'
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter('always')
            descriptors, _ = read_text(text)
        self.assertEqual(1, len(caught))
        self.assertEqual({'text': LayerDescriptor('characters')},
                         descriptors)


# ---------------------------------------------------------------------
# facade
# ---------------------------------------------------------------------


def mk_facade(**kwargs):
    "facade with a few layers declared"
    facade = CorpusFacade(**kwargs)
    facade.add_layer_meta('text', 'characters')
    facade.add_layer_meta('tokens', 'span', base='text')
    facade.add_layer_meta('pos', 'seq', base='tokens',
                          data='["NOUN", "PROPN", "PUNCT", "INTJ"]')
    facade.add_layer_meta('chunks', 'span', base='tokens', data='string')
    return facade


class FacadeTest(unittest.TestCase):
    "tests for teanga.facade"

    def test_documents(self):
        "adding and getting back documents"
        facade = mk_facade()
        text = 'Hi, Bob!'
        doc = {'text': text,
               'tokens': [list(s) for s in facade.tokenize_simple(text)],
               'pos': ['INTJ', 'PUNCT', 'PROPN', 'PUNCT'],
               'chunks': [[2, 3, 'NP']],
               '_lang': 'en'}
        doc_id = facade.add_doc(doc)
        self.assertEqual([doc_id], facade.get_doc_ids())
        self.assertEqual(doc, facade.get_doc_by_id(doc_id))

    def test_meta(self):
        "schema as dicts"
        meta = mk_facade().get_meta()
        self.assertEqual({'layer_type': 'characters'}, meta['text'])
        self.assertEqual({'layer_type': 'span', 'base': 'tokens',
                          'data': 'string'}, meta['chunks'])
        self.assertEqual(['NOUN', 'PROPN', 'PUNCT', 'INTJ'],
                         meta['pos']['data'])

    def test_errors(self):
        "bad input comes back as teanga errors"
        facade = mk_facade()
        self.assertRaises(InvalidDescriptor, facade.add_layer_meta,
                          'x', 'spam')
        self.assertRaises(InvalidDescriptor, facade.add_layer_meta,
                          'x', 'seq', 'text', '[1')
        self.assertRaises(CorpusError, facade.add_layer_meta,
                          'x', 'span', 'nowhere')
        self.assertRaises(ShapeMismatch, facade.add_doc,
                          {'text': 'a', 'tokens': [[0, 1], 2]})
        self.assertRaises(CorpusError, facade.add_doc,
                          {'text': 'a', 'tokens': [0, 1]})
        self.assertRaises(CorpusError, facade.get_doc_by_id, 'nope')
        self.assertRaises(UnsupportedShape, facade.add_doc, {1: 'x'})
        self.assertRaises(CorpusError, facade.add_layer_meta,
                          'a:b', 'characters')

    def test_data_layers(self):
        "layers with string, link and enum data come out as text"
        facade = CorpusFacade()
        facade.add_layer_meta('text', 'characters')
        facade.add_layer_meta('tags', 'div', base='text', data='string')
        facade.add_doc({'text': 'ab', 'tags': [[0, 'x'], [1, 'y']]})
        text = facade.to_text()
        self.assertTrue('    data: string\n' in text)
        self.assertTrue('  tags: [[0,"x"],[1,"y"]]\n' in text)
        self.assertEqual(text, CorpusFacade.from_text(text).to_text())

    def test_info(self):
        "corpus summary"
        facade = mk_facade()
        doc_id = facade.add_doc({'text': 'a'})
        info = facade.corpus_info()
        self.assertEqual(4, info['layer_count'])
        self.assertEqual(1, info['document_count'])
        self.assertEqual(['text', 'tokens', 'pos', 'chunks'],
                         info['layer_names'])
        self.assertEqual([doc_id], info['document_ids'])
        self.assertEqual('Python', info['implementation'])

    def test_verbose(self):
        "progress goes to stderr if asked for"
        err = io.StringIO()
        with redirect_stderr(err):
            facade = CorpusFacade(verbose=True)
            facade.add_layer_meta('text', 'characters')
        self.assertEqual('Added layer: text (characters)\n', err.getvalue())

    def test_text_round_trip(self):
        "text output is a fixed point of reading it back"
        facade = mk_facade()
        facade.add_doc({'text': 'Hi, Bob!',
                        'tokens': [[0, 2], [2, 3], [4, 7], [7, 8]],
                        'chunks': [],
                        '_lang': {'code': 'en', 'sure': True}})
        facade.add_doc({'text': 'Another\tone'})
        text = facade.to_text()
        again = CorpusFacade.from_text(text)
        self.assertEqual(facade.get_doc_ids(), again.get_doc_ids())
        self.assertEqual(text, again.to_text())

    def test_json_round_trip(self):
        "same with JSON-like values"
        facade = mk_facade()
        facade.add_doc({'text': 'Hi', 'tokens': [[0, 2]]})
        value = facade.to_json_value()
        self.assertEqual({'type': 'span', 'base': 'text'},
                         value['_meta']['tokens'])
        again = CorpusFacade.from_json_value(value)
        self.assertEqual(value, again.to_json_value())

    def test_id_mismatch(self):
        "documents stored under an unexpected id are reported"
        text = '_meta:\n  text:\n    type: characters\nXXXX:\n  text: "a"\n'
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter('always')
            facade = CorpusFacade.from_text(text)
        self.assertEqual(1, len(caught))
        self.assertEqual(1, len(facade.get_doc_ids()))
        self.assertNotEqual(['XXXX'], facade.get_doc_ids())
