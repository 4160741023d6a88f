# Author: Eric Kow
# License: BSD3

"""
Split some text into tokens

Prints a table of token spans, or a JSON array of spans (suitable for
a span layer) with --json.
"""

import codecs
import json
import sys

from tabulate import tabulate

from ..tokenize import tokenize


def token_rows(text, spans, utf8=False):
    """
    Table rows (start, end, token) for the spans over some text
    """
    if utf8:
        data = text.encode('utf-8')
        return [[start, end, data[start:end].decode('utf-8')]
                for start, end in spans]
    else:
        return [[start, end, text[start:end]] for start, end in spans]


def config_argparser(parser):
    """
    Subcommand flags.
    """
    parser.add_argument('input', metavar='FILE', nargs='?',
                        help='text file (default: stdin)')
    parser.add_argument('--utf8', action='store_true',
                        help='UTF-8 byte offsets instead of '
                        'character offsets')
    parser.add_argument('--json', action='store_true',
                        help='print spans as a JSON array')
    parser.set_defaults(func=main)


def main(args):
    """
    Subcommand main.
    """
    if args.input is None:
        text = sys.stdin.read()
    else:
        with codecs.open(args.input, 'r', 'utf-8') as stream:
            text = stream.read()
    spans = tokenize(text, utf8=args.utf8)
    if args.json:
        print(json.dumps([list(span) for span in spans]))
    else:
        print(tabulate(token_rows(text, spans, args.utf8),
                       headers=['start', 'end', 'token']))
