# Author: Eric Kow
# License: BSD3

"""
Summarise a corpus: its layers and how many documents it has
"""

import json

from tabulate import tabulate

from ..util import add_usual_input_args, read_corpus

NAME = 'info'


def layer_table(facade):
    """
    One row per declared layer: name, type, base, data
    """
    rows = []
    for name, desc in facade.get_meta().items():
        data = desc.get('data')
        if isinstance(data, list):
            data = ', '.join(data)
        rows.append([name, desc['layer_type'], desc.get('base', ''),
                     data or ''])
    return tabulate(rows, headers=['layer', 'type', 'base', 'data'])


def config_argparser(parser):
    """
    Subcommand flags.

    You should create and pass in the subparser to which the flags
    are to be added.
    """
    add_usual_input_args(parser)
    parser.add_argument('--json', action='store_true',
                        help='dump the summary as JSON instead')
    parser.set_defaults(func=main)


def main(args):
    """
    Subcommand main.

    You shouldn't need to call this yourself if you're using
    `config_argparser`
    """
    facade = read_corpus(args)
    if args.json:
        print(json.dumps(facade.corpus_info(), indent=2))
        return
    info = facade.corpus_info()
    print(layer_table(facade))
    print()
    print('%d layers, %d documents' % (info['layer_count'],
                                       info['document_count']))
