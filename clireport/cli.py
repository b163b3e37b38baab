"""clireport: write one diagnostic from a shell script.

Released under the Apache Software Licence, v2.0.

    clireport --prefix backup --tag summary --level info "3 files copied"
    clireport --prefix backup --level die "cannot reach $HOST"

gives the same lines (and, for --level die, the same exit status) that a
Python program using clireport would.
"""

import argparse
import importlib.metadata
import logging
import os
import sys
import warnings

from .tidy import tidy_error
from .warnings_util import (
    DEFAULT_EXIT_STATUS,
    MAX_EXIT_STATUS,
    MIN_EXIT_STATUS,
    Reporter,
    simple_warning,
)


LEVELS = ("info", "warn", "die")


def version() -> str:
    try:
        return importlib.metadata.version("clireport")
    except importlib.metadata.PackageNotFoundError:
        return "(not installed)"


def exit_status(text: str) -> int:
    try:
        status = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None
    if status < MIN_EXIT_STATUS or status > MAX_EXIT_STATUS:
        raise argparse.ArgumentTypeError(
            f"need {MIN_EXIT_STATUS} to {MAX_EXIT_STATUS} inclusive, not {status}"
        )
    return status


def report(reporter: Reporter, level: str, tag: str, text: str) -> None:
    if level == "info":
        reporter.write_message_with_tag(tag, text)
    elif level == "warn":
        reporter.warn_with_tag(tag, text)
    else:
        reporter.die_with_tag(tag, text)


def main(argv: list[str] = sys.argv[1:]) -> None:
    # Command-line arguments
    parser = argparse.ArgumentParser(
        prog="clireport",
        description="Write a diagnostic message in the usual format",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"""%(prog)s {version()}
This programme is free software; you may redistribute and/or modify it under
the terms of the Apache Software Licence v2.0.""",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        required=False,
        help="set logging level to INFO (etc)",
    )
    parser.add_argument(
        "--prefix", default=None, help="set the program name the message starts with"
    )
    parser.add_argument(
        "--tag", default="", help="set a tag (e.g. BUG) to go after the prefix"
    )
    parser.add_argument(
        "--level",
        choices=LEVELS,
        default="warn",
        help="info, warn, or die (exit with --exit-status)",
    )
    parser.add_argument(
        "--exit-status",
        type=exit_status,
        default=DEFAULT_EXIT_STATUS,
        help=(
            f"set the base exit status for --level die "
            f"({MIN_EXIT_STATUS} to {MAX_EXIT_STATUS})"
        ),
    )
    parser.add_argument("message", nargs="+", help="the message text")
    args = parser.parse_args(argv)

    # Run command
    if args.debug:
        logging.getLogger().setLevel(20)

    reporter = Reporter(prefix=args.prefix or parser.prog)
    warnings.showwarning = simple_warning(reporter)
    reporter.set_exit_status(args.exit_status)
    try:
        report(reporter, args.level, args.tag, " ".join(args.message))
    except OSError as err:
        if "DEBUG" in os.environ:
            logging.error(err, exc_info=True)
            sys.exit(1)
        Reporter(prefix=parser.prog).die("cannot write message: %s", tidy_error(err))
