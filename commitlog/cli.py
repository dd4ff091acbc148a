from typing import List
import sys
import os
import argparse
import logging

from commitlog import __version__
from commitlog.config import AnalyzerConfig
from commitlog.messages import fatal
from commitlog.tasks.check import CheckError, UsageError, check_main

##################################################################################################
# Main
##################################################################################################

PROG = "find-missing-developers"


class ArgParser(argparse.ArgumentParser):
    """
    Raises UsageError instead of exiting, so bad invocations are reported
    like every other input error.
    """
    def error(self, message: str):
        logging.debug(f"Argument error: {message}")
        raise UsageError("ERROR: Expected only 1 argument")

    def parse_args(self, args=None, namespace=None):
        args = list(sys.argv[1:] if args is None else args)
        # A trailing argument that is not a known option is the log file, even if it starts with '-'
        if args and '--' not in args and args[-1].startswith('-') and args[-1] not in self._option_string_actions:
            args.insert(len(args) - 1, '--')
        return super().parse_args(args, namespace)


def build_parser() -> ArgParser:
    parser = ArgParser(
        prog=PROG,
        description="Checks in a `git log` dump that every commit has an author and has been signed off.",
        epilog="A LOG_FILE starting with '-' is accepted as the last argument, or after '--'.",
        allow_abbrev=False,
    )
    parser.add_argument('log_file', metavar='LOG_FILE', type=str,
                        help='Text file containing the output of `git log`.')
    parser.add_argument('--version', action='version', version=f"VERSION: {__version__}")
    parser.add_argument('--debug', action='store_true', help='Enable debug logging.')
    return parser


def main(argv: List[str] | None = None) -> int:
    if sys.platform.lower() == "win32":
        os.system('chcp 65001 > nul')
        sys.stdout.reconfigure(encoding='utf-8') # type: ignore
        sys.stderr.reconfigure(encoding='utf-8') # type: ignore

    logging.basicConfig(level=logging.INFO, format='%(message)s')

    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        fatal(str(e))
        parser.print_usage(sys.stdout)
        return e.exit_code

    config = AnalyzerConfig.from_env()
    if args.debug:
        config = config.with_debug()

    # enable DEBUG logging
    if config.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        check_main(args.log_file, config)
    except CheckError as e:
        fatal(str(e))
        return e.exit_code
    return 0


def run() -> None:
    sys.exit(main())
