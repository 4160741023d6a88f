# Author: Eric Kow
# License: BSD3

"""
Print a corpus as JSON
"""

import json

from ..util import add_usual_input_args, read_corpus

NAME = 'json'


def config_argparser(parser):
    """
    Subcommand flags.
    """
    add_usual_input_args(parser)
    parser.add_argument('--indent', type=int, default=2,
                        help='indentation level (default: %(default)s)')
    parser.set_defaults(func=main)


def main(args):
    """
    Subcommand main.
    """
    facade = read_corpus(args)
    print(json.dumps(facade.to_json_value(), indent=args.indent,
                     ensure_ascii=False))
