"""
teanga-util subcommands
"""

# Author: Eric Kow
# License: BSD3

from . import (info,
               json_,
               text,
               tokenize)

# at the time of this writing argparse doesn't support a way to group
# subcommands into sections, so we just abuse the command epilog
SUBCOMMAND_SECTIONS = [
    ('Querying', [
        info,
    ]),
    ('Conversion', [
        text,
        json_,
    ]),
    ('Annotation', [
        tokenize,
    ]),
]

SUBCOMMANDS = []
for descr, section in SUBCOMMAND_SECTIONS:
    SUBCOMMANDS.extend(section)
