# Copyright (c) 2017-2025 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

import sys

from argparse import ArgumentParser
from functools import partial
from multiprocessing import Pool
from os import getcwd
from os.path import exists

from inators.arg import add_log_level_argument, add_version_argument, process_log_level_argument

from .cli import add_encoding_argument, add_encoding_errors_argument, add_jobs_argument, init_logging, logger
from .pkgdata import __version__
from .tool import DocumentTool, RailroadError


def process_grammar(grammar, *, out_dir, root, lib_dir, encoding, errors):
    logger.info('Processing %s', grammar)
    try:
        # Every grammar gets its own tool (and renderer), nothing is shared between grammars.
        DocumentTool(encoding=encoding, errors=errors).process(grammar, out_dir=out_dir, root=root, lib_dir=lib_dir)
        return True
    except (RailroadError, OSError, UnicodeError) as e:
        logger.error('Processing %s failed: %s', grammar, e)
        logger.debug('', exc_info=e)
        return False


def execute():
    parser = ArgumentParser(description='Railroadinator: Railroad Diagram Documentation', epilog="""
        The tool processes grammars in ANTLR v4 format (*.g4) and creates an
        HTML page for each of them that documents the rules of the grammar
        with cross-linked railroad diagrams.
        """)
    parser.add_argument('grammar', metavar='FILE', nargs='+',
                        help='ANTLR grammar files to document.')
    parser.add_argument('--rule', '-r', metavar='NAME',
                        help='document only the rule NAME and the rules reachable from it (default: all rules).')
    parser.add_argument('--lib', metavar='DIR',
                        help='alternative location of import grammars.')
    parser.add_argument('-o', '--out', metavar='DIR', default=getcwd(),
                        help='output directory (default: %(default)s).')
    add_encoding_argument(parser, help='grammar and output file encoding (default: %(default)s).')
    add_encoding_errors_argument(parser)
    add_jobs_argument(parser)
    add_log_level_argument(parser, short_alias=())
    add_version_argument(parser, version=__version__)
    args = parser.parse_args()

    for grammar in args.grammar:
        if not exists(grammar):
            parser.error(f'{grammar} does not exist.')

    init_logging()
    process_log_level_argument(args, logger)

    process = partial(process_grammar, out_dir=args.out, root=args.rule, lib_dir=args.lib, encoding=args.encoding, errors=args.encoding_errors)
    if args.jobs > 1 and len(args.grammar) > 1:
        with Pool(min(args.jobs, len(args.grammar))) as pool:
            results = pool.map(process, args.grammar)
    else:
        results = [process(grammar) for grammar in args.grammar]

    if not all(results):
        sys.exit(1)


if __name__ == '__main__':
    execute()
