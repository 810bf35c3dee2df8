"""
Command-line interface for `zp`.

Usage::

    zp [-v] [--debug] FILE [FILE ...]

Each file is processed in turn and its summary (or, with ``-v``, its verbose dump) is written to stdout. Processing
stops at the first file that cannot be read or decoded, with the error reported on stderr and a non-zero exit status.
"""

from argparse import ArgumentParser, Namespace
from logging import getLogger, DEBUG
from typing import Optional, Sequence

import colorama

from zp import __version__, process_file
from zp.errors import ZipParseError, ZipLoadError
from zp.cli.errors import fail, descriptive_errors, pretty_unhandled
from zp.cli.logging import init_console_friendly_logging


_log = getLogger(__name__)


def build_argument_parser() -> ArgumentParser:
    parser = ArgumentParser(prog='zp', description="Zip Parser: shows the metadata of ZIP files")

    parser.add_argument('-V', '--version', action='version', version=f"zp {__version__}")
    parser.add_argument(
        '-v', '--verbose', action='count', default=0,
        help="show a complete dump of all the records instead of a summary of the entries"
    )
    parser.add_argument('--debug', action='store_true', help="log decoding progress to stderr")
    parser.add_argument('files', nargs='*', metavar='FILE', help="one or more ZIP files")

    return parser


@pretty_unhandled(exit_code=1)
def main(argv: Optional[Sequence[str]] = None):
    colorama.just_fix_windows_console()

    args = build_argument_parser().parse_args(argv)

    if args.debug:
        init_console_friendly_logging(DEBUG)

    run(args)


def run(args: Namespace):
    if len(args.files) == 0:
        fail("No files provided. Run with `-h` to view usage.")

    verbose = args.verbose > 0

    for path in args.files:
        _log.debug("Processing %s (verbose=%s)", path, verbose)

        with descriptive_errors(ZipLoadError):
            with descriptive_errors(ZipParseError, context=path):
                output = process_file(path, verbose)

        print(output)
