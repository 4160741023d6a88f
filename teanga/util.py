# Author: Eric Kow
# License: BSD3

"""
Helpers for command line tools
"""

import codecs
import json

from .errors import TextFormatError
from .facade import CorpusFacade


def add_subcommand(subparsers, module):
    '''
    Add a subcommand to an argparser following some conventions:

        - the module can have an optional NAME constant
          (giving the name of the command); otherwise we
          assume it's the unqualified module name
        - the first line of its docstring is its help text
        - subsequent lines (if any) form its epilog

    Returns the resulting subparser for the module
    '''

    if 'NAME' in module.__dict__:
        module_name = module.NAME
    else:
        module_name = module.__name__.split('.')[-1]

    module_help_parts = [x for x in module.__doc__.strip().split('\n', 1)
                         if x]
    if len(module_help_parts) > 1:
        module_help = module_help_parts[0]
        module_epilog = '\n'.join(module_help_parts[1:]).strip()
    else:
        module_help = module.__doc__
        module_epilog = None
    return subparsers.add_parser(module_name,
                                 help=module_help,
                                 epilog=module_epilog)


def add_usual_input_args(parser):
    """
    Augment a subcommand argparser with the corpus to read
    """
    parser.add_argument('corpus', metavar='FILE',
                        help='corpus file (.json for JSON, anything else '
                        'is read as teanga text)')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='report progress on stderr')


def read_corpus(args):
    """
    Read the corpus named on the command line into a `CorpusFacade`

    :rtype: teanga.facade.CorpusFacade
    """
    with codecs.open(args.corpus, 'r', 'utf-8') as stream:
        contents = stream.read()
    if args.corpus.endswith('.json'):
        try:
            value = json.loads(contents)
        except ValueError as exc:
            raise TextFormatError('Could not read JSON: %s' %
                                  getattr(exc, 'msg', exc),
                                  getattr(exc, 'lineno', None),
                                  getattr(exc, 'colno', None))
        return CorpusFacade.from_json_value(value, verbose=args.verbose)
    else:
        return CorpusFacade.from_text(contents, verbose=args.verbose)
