# Author: Eric Kow
# License: BSD3

"""
Print a corpus in teanga text format

Reads either format, so this can be used to convert JSON to text or
to check that a text file reads back cleanly.
"""

from ..util import add_usual_input_args, read_corpus


def config_argparser(parser):
    """
    Subcommand flags.
    """
    add_usual_input_args(parser)
    parser.set_defaults(func=main)


def main(args):
    """
    Subcommand main.
    """
    facade = read_corpus(args)
    print(facade.to_text(), end='')
