# Author: Eric Kow
# License: BSD3

"""
Entry point for the teanga-util script
"""

import argparse
import sys

from ..errors import TeangaError
from ..util import add_subcommand
from . import SUBCOMMAND_SECTIONS, SUBCOMMANDS


def _epilog():
    lines = []
    for descr, section in SUBCOMMAND_SECTIONS:
        names = [getattr(m, 'NAME', m.__name__.split('.')[-1])
                 for m in section]
        lines.append('%s: %s' % (descr, ', '.join(names)))
    return '\n'.join(lines)


def mk_argparser():
    """
    Argument parser with all subcommands registered
    """
    arg_parser = argparse.ArgumentParser(
        prog='teanga-util',
        description='Tools for working with teanga corpora',
        epilog=_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter)
    subparsers = arg_parser.add_subparsers(help='sub-command help')
    subparsers.required = True
    subparsers.dest = 'subcommand'
    for module in SUBCOMMANDS:
        subparser = add_subcommand(subparsers, module)
        module.config_argparser(subparser)
    return arg_parser


def main(argv=None):
    """
    Run teanga-util on the given arguments (default: sys.argv)
    """
    args = mk_argparser().parse_args(argv)
    try:
        args.func(args)
    except (TeangaError, IOError) as exc:
        sys.exit('teanga-util: %s' % exc)
