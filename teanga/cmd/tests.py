# Author: Eric Kow
# License: BSD3

"""
Tests for the teanga-util subcommands
"""

from contextlib import redirect_stderr, redirect_stdout
import codecs
import io
import json
import os
import shutil
import tempfile
import unittest

from teanga.cmd.main import main
from teanga.cmd.tokenize import token_rows
from teanga.facade import CorpusFacade


def mk_facade():
    "corpus with one document"
    facade = CorpusFacade()
    facade.add_layer_meta('text', 'characters')
    facade.add_layer_meta('tokens', 'span', base='text')
    facade.add_layer_meta('pos', 'seq', base='tokens',
                          data=['INTJ', 'PROPN', 'PUNCT'])
    facade.add_doc({'text': 'Hi, Bob!',
                    'tokens': [[0, 2], [2, 3], [4, 7], [7, 8]],
                    'pos': ['INTJ', 'PUNCT', 'PROPN', 'PUNCT']})
    return facade


class CmdTest(unittest.TestCase):
    "running teanga-util on files"

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.facade = mk_facade()
        self.text_file = self._write('corpus.txt', self.facade.to_text())
        self.json_file = self._write('corpus.json',
                                     json.dumps(self.facade.to_json_value()))

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def _write(self, name, contents):
        path = os.path.join(self.tmpdir, name)
        with codecs.open(path, 'w', 'utf-8') as stream:
            stream.write(contents)
        return path

    def _run(self, argv):
        "stdout of a teanga-util run"
        out = io.StringIO()
        with redirect_stdout(out):
            main(argv)
        return out.getvalue()

    def test_info(self):
        "layer table and counts"
        output = self._run(['info', self.text_file])
        self.assertTrue('tokens' in output)
        self.assertTrue('INTJ, PROPN, PUNCT' in output)
        self.assertTrue(output.endswith('3 layers, 1 documents\n'))
        info = json.loads(self._run(['info', '--json', self.json_file]))
        self.assertEqual(1, info['document_count'])
        self.assertEqual(['text', 'tokens', 'pos'], info['layer_names'])

    def test_text(self):
        "both formats read back to the same text"
        self.assertEqual(self.facade.to_text(),
                         self._run(['text', self.text_file]))
        self.assertEqual(self.facade.to_text(),
                         self._run(['text', self.json_file]))

    def test_json(self):
        "json output is what the facade gives us"
        value = json.loads(self._run(['json', self.text_file]))
        self.assertEqual(self.facade.to_json_value(), value)
        self.assertEqual({'type': 'characters'}, value['_meta']['text'])

    def test_tokenize(self):
        "spans over a text file"
        path = self._write('raw.txt', 'Hi, Bob!')
        spans = json.loads(self._run(['tokenize', '--json', path]))
        self.assertEqual([[0, 2], [2, 3], [4, 7], [7, 8]], spans)
        table = self._run(['tokenize', path])
        self.assertTrue('Bob' in table)

    def test_errors(self):
        "bad input exits with a message rather than a traceback"
        bad_text = self._write('bad.txt', 'doc:\n  text "x"\n')
        bad_json = self._write('bad.json', '{"_meta": ')
        err = io.StringIO()
        missing = os.path.join(self.tmpdir, 'missing.txt')
        for path in [bad_text, bad_json, missing]:
            with redirect_stderr(err):
                with self.assertRaises(SystemExit) as ctx:
                    self._run(['text', path])
            self.assertTrue(str(ctx.exception.code).startswith('teanga-util'))
        with redirect_stderr(err):
            self.assertRaises(SystemExit, self._run, ['frobnicate'])


def test_token_rows():
    "token text is cut out of the right units"
    text = u'naïve café'
    assert token_rows(text, [(0, 5), (6, 10)]) ==\
        [[0, 5, u'naïve'], [6, 10, u'café']]
    assert token_rows(text, [(0, 6), (7, 12)], utf8=True) ==\
        [[0, 6, u'naïve'], [7, 12, u'café']]
