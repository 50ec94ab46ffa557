#
# Copyright (c), 2016-2025, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
# mypy: ignore-errors
"""Command Line Interface"""
import sys
import os
import argparse
import logging

from xsdzod import __version__
from xsdzod.compiler import compile_xsd
from xsdzod.exceptions import XsdZodException
from xsdzod.naming import NAMING_CONVENTIONS
from xsdzod.settings import CompileSettings


PROGRAM_NAME = os.path.basename(sys.argv[0])


def get_loglevel(verbosity):
    if verbosity <= 0:
        return logging.ERROR
    elif verbosity == 1:
        return logging.WARNING
    elif verbosity == 2:
        return logging.INFO
    else:
        return logging.DEBUG


def get_parser():
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME, add_help=True,
        description="generate TypeScript types and Zod validators from XSD files."
    )
    parser.usage = "%(prog)s [OPTION]... INPUT\n" \
                   "Try '%(prog)s --help' for more information."

    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('-v', dest='verbosity', action='count', default=0,
                        help="increase output verbosity.")
    parser.add_argument('-o', '--output', type=str, default='./generated',
                        help="output directory for the generated files "
                             "(default is './generated').")
    parser.add_argument('-n', '--naming', type=str, default='camel',
                        choices=NAMING_CONVENTIONS,
                        help="naming convention for the generated field names "
                             "(default is 'camel').")
    parser.add_argument('-s', '--separate', dest='separate', action='store_true',
                        default=True,
                        help="write types and validators to separate files (default).")
    parser.add_argument('-c', '--combined', dest='separate', action='store_false',
                        help="write types and validators to a single combined file.")
    parser.add_argument('input', metavar='INPUT',
                        help="an XSD file or a directory containing XSD files.")
    return parser


def main():
    args = get_parser().parse_args()
    logging.basicConfig(format='%(levelname)s: %(message)s')

    try:
        settings = CompileSettings(
            input=args.input,
            output=args.output,
            naming=args.naming,
            separate=args.separate,
        )
        results = compile_xsd(settings, loglevel=get_loglevel(args.verbosity))
    except (XsdZodException, OSError) as err:
        sys.stderr.write(f"Error: {err}\n")
        sys.exit(1)

    for xsd_file, output_files in results.items():
        written = ' and '.join(str(x) for x in output_files)
        sys.stdout.write(f"generated {written} from {str(xsd_file)!r}\n")

    sys.stdout.write(f"generated files from {len(results)} XSD file(s)\n")
    sys.exit(0)


if __name__ == '__main__':
    main()
