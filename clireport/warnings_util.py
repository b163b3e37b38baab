"""Warning and error routines.

Released under the Apache Software Licence, v2.0.

A Reporter writes diagnostics in the conventional format

    <prefix>: <message>

or, when given a tag such as "BUG" or "summary",

    <prefix> <tag>: <message>

to standard error. If writing to standard error fails, the Reporter
switches to the controlling terminal for that message and all later ones,
and if that cannot be opened either it sends the message to syslog and
raises PanicError.

A Reporter keeps no locks: use it from one thread, or serialize the calls
yourself.

Dying is dangerous: die() raises SystemExit, which unwinds the calling
thread (running its `finally` blocks) but does not wait for other threads.
Only main() and the code close to it should call die() and its relatives.
"""

import errno
import io
import logging
import logging.handlers
import os
import socket
import sys
from collections.abc import Callable
from typing import Any, NoReturn, TextIO

from .tidy import tidy_error


logger = logging.getLogger(__name__)

DEFAULT_EXIT_STATUS = 2
MIN_EXIT_STATUS = 2
MAX_EXIT_STATUS = 124

TTY_PATH = "CON" if sys.platform == "win32" else "/dev/tty"

if sys.platform == "darwin":
    SYSLOG_ADDRESS: str | None = "/var/run/syslog"
elif sys.platform == "win32":
    SYSLOG_ADDRESS = None
else:
    SYSLOG_ADDRESS = "/dev/log"

# what fsync() says about pipes, sockets, terminals and such
UNSYNCABLE_ERRNOS = frozenset({errno.EINVAL, errno.EOPNOTSUPP, errno.EROFS})


class PanicError(RuntimeError):
    """Raised when a program misuses a Reporter, or no way to report is left."""


def _sync(stream: TextIO) -> None:
    try:
        fd = stream.fileno()
    except io.UnsupportedOperation:
        # not backed by a file descriptor, so nothing to sync
        return
    try:
        os.fsync(fd)
    except OSError as err:
        if err.errno not in UNSYNCABLE_ERRNOS:
            raise


class Reporter:
    """Writes informational messages, warnings and fatal errors.

    Attributes:
        prefix (str): what goes at the start of every message; defaults to
            the base name of `sys.argv[0]`
        tty_path (str): the device to use once standard error has failed
        syslog_address (str | None): the syslog socket used as a last resort,
            or None if there is none
    """

    def __init__(
        self,
        prefix: str | None = None,
        stream: TextIO | None = None,
        tty_path: str = TTY_PATH,
        syslog_address: str | None = SYSLOG_ADDRESS,
    ) -> None:
        """Make a Reporter.

        Args:
            prefix (str | None, optional): the message prefix. Defaults to
                the program's name.
            stream (TextIO | None, optional): the primary stream. Defaults
                to whatever `sys.stderr` is at the time of each write.
            tty_path (str, optional): the fallback device.
            syslog_address (str | None, optional): the last-resort syslog
                socket.
        """
        if prefix is None:
            prefix = os.path.basename(sys.argv[0]) if sys.argv else "python"
        self.prefix = prefix
        self.tty_path = tty_path
        self.syslog_address = syslog_address
        self._stream = stream
        self._n_warnings = 0
        self._exit_status = DEFAULT_EXIT_STATUS
        self._alt_dest: TextIO | None = None

    @property
    def stream(self) -> TextIO | None:
        return self._stream if self._stream is not None else sys.stderr

    @property
    def fallback(self) -> TextIO | None:
        """The stream used instead of standard error, once that has failed."""
        return self._alt_dest

    @property
    def warning_count(self) -> int:
        """How many warnings have been written.

        Calls to warn_if() with a None condition don't count.
        """
        return self._n_warnings

    # Exit status

    @property
    def base_exit_status(self) -> int:
        return self._exit_status

    @property
    def exit_status(self) -> int:
        """The status die() exits with: the base status, made odd by warnings."""
        if self._n_warnings > 0:
            return self._exit_status | 1
        return self._exit_status

    def set_exit_status(self, status: int) -> int:
        """Set a new base exit status and return the old one.

        The new status should usually be even, so that the status die() uses
        shows whether any warnings were written.

        Args:
            status (int): the new base status, from 2 to 124 inclusive

        Returns:
            int: the previous base status
        """
        if status < MIN_EXIT_STATUS or status > MAX_EXIT_STATUS:
            self.panic(
                "set_exit_status(%d): need %d to %d inclusive",
                status,
                MIN_EXIT_STATUS,
                MAX_EXIT_STATUS,
            )
        old_status = self._exit_status
        self._exit_status = status
        return old_status

    # Writing diagnostics

    def format_message(self, tag: str, format: str, *args: Any) -> str:
        """Return `format % args` as a line with the prefix and optional tag."""
        text = format % args if args else format
        if text.endswith("\n"):
            text = text[:-1]
        if tag:
            return f"{self.prefix} {tag}: {text}\n"
        return f"{self.prefix}: {text}\n"

    def write_message(self, format: str, *args: Any) -> None:
        """Write an informational message (as opposed to a warning or error)."""
        self.write_message_with_tag("", format, *args)

    def write_message_with_tag(self, tag: str, format: str, *args: Any) -> None:
        self._write(self.format_message(tag, format, *args))

    def warn(self, format: str, *args: Any) -> None:
        self.warn_with_tag("", format, *args)

    def warn_with_tag(self, tag: str, format: str, *args: Any) -> None:
        self._n_warnings += 1
        self.write_message_with_tag(tag, format, *args)

    def warn_if(self, condition: Any, format: str = "", *args: Any) -> None:
        """Write a warning unless `condition` is None.

        As a special case, `warn_if(x, "")` is equivalent to
        `warn_if(x, "%s", x)`, so `warn_if(err)` reports `err` if there is one.
        """
        self.warn_if_with_tag(condition, "", format, *args)

    def warn_if_with_tag(
        self, condition: Any, tag: str, format: str = "", *args: Any
    ) -> None:
        if condition is None:
            return
        if format == "":
            self.warn_with_tag(tag, "%s", condition)
        else:
            self.warn_with_tag(tag, format, *args)

    def die(self, format: str = "", *args: Any) -> NoReturn:
        """Write a fatal error message and exit.

        As a special case, nothing is written if `format` is empty.

        Raises:
            SystemExit: always, with `exit_status`
        """
        self.die_with_tag("", format, *args)

    def die_with_tag(self, tag: str, format: str = "", *args: Any) -> NoReturn:
        if format != "":
            self.write_message_with_tag(tag, format, *args)
        raise SystemExit(self.exit_status)

    def die_if(self, condition: Any, format: str = "", *args: Any) -> None:
        """Report a fatal error and exit unless `condition` is None.

        As a special case, `die_if(x, "")` is equivalent to `die_if(x, "%s", x)`.
        """
        self.die_if_with_tag(condition, "", format, *args)

    def die_if_with_tag(
        self, condition: Any, tag: str, format: str = "", *args: Any
    ) -> None:
        if condition is None:
            return
        if format == "":
            self.die_with_tag(tag, "%s", condition)
        else:
            self.die_with_tag(tag, format, *args)

    def panic(self, format: str, *args: Any) -> NoReturn:
        """Raise PanicError with a message in the same format as warn()."""
        self.panic_with_tag("", format, *args)

    def panic_with_tag(self, tag: str, format: str, *args: Any) -> NoReturn:
        raise PanicError(self.format_message(tag, format, *args)[:-1])

    # Output

    def _write(self, text: str) -> None:
        if self._alt_dest is None:
            verb = "write to"
            try:
                stream = self.stream
                if stream is None:
                    raise OSError(errno.EBADF, os.strerror(errno.EBADF))
                stream.write(text)
                stream.flush()
                verb = "sync"
                _sync(stream)
                return
            except (OSError, ValueError) as err:
                failure = tidy_error(err)
            self._alt_dest = self._open_alt_dest(verb, failure, text)
        self._alt_dest.write(text)
        self._alt_dest.flush()

    def _open_alt_dest(self, verb: str, failure: BaseException, text: str) -> TextIO:
        try:
            alt_dest = open(self.tty_path, "w")
        except OSError as err:
            problem = (
                f"can neither {verb} stderr ({failure})"
                f" nor open {self.tty_path} ({tidy_error(err)})"
            )
            self._last_resort(problem, text)
        logger.debug("cannot %s stderr, switching to %s", verb, self.tty_path)
        try:
            alt_dest.write(
                f"{self.prefix}: cannot {verb} stderr ({failure}),"
                f" using {self.tty_path} instead\n"
            )
        except (OSError, ValueError):
            alt_dest.close()
            raise
        return alt_dest

    def _open_syslog(self) -> logging.handlers.SysLogHandler:
        if self.syslog_address is None:
            raise OSError(errno.ENOENT, "no syslog on this system")
        # SysLogHandler ignores connection errors, so find out first
        with socket.socket(socket.AF_UNIX, socket.SOCK_DGRAM) as probe:
            probe.connect(self.syslog_address)
        handler = logging.handlers.SysLogHandler(
            address=self.syslog_address, socktype=socket.SOCK_DGRAM
        )
        handler.ident = f"{self.prefix}: "
        return handler

    def _last_resort(self, problem: str, text: str) -> NoReturn:
        report = f"{problem} to report: {text[:-1]}"
        try:
            handler = self._open_syslog()
        except OSError as err:
            raise PanicError(f"{self.prefix} PANIC: {report}") from err

        syslog = logging.getLogger(f"{__name__}.syslog")
        syslog.propagate = False
        syslog.addHandler(handler)
        try:
            syslog.critical("%s", report)
        finally:
            syslog.removeHandler(handler)
            handler.close()
        raise PanicError(f"{self.prefix} PANIC: {problem}: more in syslog")


# Error messages
def simple_warning(reporter: Reporter) -> Callable[..., None]:
    """Make a `warnings.showwarning` routine that reports through `reporter`.

    This is suitable for console warnings for a program invoked from the
    terminal: each warning is written like any other, and counted.

    Args:
        reporter (Reporter): the reporter to write warnings with

    Returns:
        Callable[..., None]: the warning function
    """

    def _warning(
        message: Warning | str,
        category: type[Warning],
        filename: str,
        lineno: int,
        file: TextIO | None = None,
        line: str | None = None,
    ) -> None:
        reporter.warn("%s", message)

    return _warning
