"""clireport, diagnostics for command-line programs.

Released under the Apache Software Licence, v2.0.

Messages are written in the conventional format

    <program name>: <message>

or the slightly less conventional

    <program name> <tag>: <message>

where the tag is a string such as "BUG" or "summary". Most programs only
call the warn[_if][_with_tag] and die[_if][_with_tag] functions:

    warn(format, *args)
    warn_with_tag(tag, format, *args)
    warn_if(condition, format, *args)
    warn_if_with_tag(condition, tag, format, *args)
    die(format, *args)
    die_with_tag(tag, format, *args)
    die_if(condition, format, *args)
    die_if_with_tag(condition, tag, format, *args)

where `format % args` gives the message, and the _if functions do nothing
when the condition is None. As special cases, `warn_if(err, "")` is
`warn_if(err, "%s", err)`, likewise for die_if, and `die("")` exits without
writing anything.

write_message() is for informational messages; the warn functions count
how many warnings they write; the die functions raise SystemExit. The exit
status is 2, or 3 if there have been any warnings; set_exit_status()
changes the base value.

These functions all use one default Reporter; programs that want another
(or tests that want a fresh one) can call set_reporter().
"""

from typing import Any, NoReturn

from .cannot import CannotError, cannot
from .cli import main
from .tidy import TidiedError, tidy_error
from .urls import URLError, parse_url
from .warnings_util import PanicError, Reporter, simple_warning


__all__ = [
    "CannotError",
    "PanicError",
    "Reporter",
    "TidiedError",
    "URLError",
    "cannot",
    "die",
    "die_if",
    "die_if_with_tag",
    "die_with_tag",
    "get_exit_status",
    "get_prefix",
    "get_reporter",
    "main",
    "number_of_warnings",
    "panic",
    "panic_with_tag",
    "parse_url",
    "set_exit_status",
    "set_prefix",
    "set_reporter",
    "simple_warning",
    "tidy_error",
    "warn",
    "warn_if",
    "warn_if_with_tag",
    "warn_with_tag",
    "write_message",
    "write_message_with_tag",
]


_reporter = Reporter()


def get_reporter() -> Reporter:
    return _reporter


def set_reporter(reporter: Reporter) -> Reporter:
    """Make `reporter` the one the module-level functions use.

    Returns the reporter it replaces.
    """
    global _reporter
    old, _reporter = _reporter, reporter
    return old


def number_of_warnings() -> int:
    return _reporter.warning_count


def get_prefix() -> str:
    return _reporter.prefix


def set_prefix(prefix: str) -> None:
    """Change what goes at the start of every message.

    e.g. `set_prefix(sys.argv[0])` to use the full program path.
    """
    _reporter.prefix = prefix


def get_exit_status() -> int:
    """Return the status die() would exit with now."""
    return _reporter.exit_status


def set_exit_status(status: int) -> int:
    return _reporter.set_exit_status(status)


def write_message(format: str, *args: Any) -> None:
    _reporter.write_message(format, *args)


def write_message_with_tag(tag: str, format: str, *args: Any) -> None:
    _reporter.write_message_with_tag(tag, format, *args)


def warn(format: str, *args: Any) -> None:
    _reporter.warn(format, *args)


def warn_with_tag(tag: str, format: str, *args: Any) -> None:
    _reporter.warn_with_tag(tag, format, *args)


def warn_if(condition: Any, format: str = "", *args: Any) -> None:
    _reporter.warn_if(condition, format, *args)


def warn_if_with_tag(condition: Any, tag: str, format: str = "", *args: Any) -> None:
    _reporter.warn_if_with_tag(condition, tag, format, *args)


def die(format: str = "", *args: Any) -> NoReturn:
    _reporter.die(format, *args)


def die_with_tag(tag: str, format: str = "", *args: Any) -> NoReturn:
    _reporter.die_with_tag(tag, format, *args)


def die_if(condition: Any, format: str = "", *args: Any) -> None:
    _reporter.die_if(condition, format, *args)


def die_if_with_tag(condition: Any, tag: str, format: str = "", *args: Any) -> None:
    _reporter.die_if_with_tag(condition, tag, format, *args)


def panic(format: str, *args: Any) -> NoReturn:
    _reporter.panic(format, *args)


def panic_with_tag(tag: str, format: str, *args: Any) -> NoReturn:
    _reporter.panic_with_tag(tag, format, *args)
