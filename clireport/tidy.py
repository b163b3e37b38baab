"""Make error messages easier on the users of command-line programs.

Released under the Apache Software Licence, v2.0.
"""

from .urls import URLError


URL_PREFIX = "urllib3: "
# what callers wrapping archive errors put in front; nothing in the standard
# library writes it
ARCHIVE_PREFIX = "zip: "


class TidiedError(Exception):
    """An error whose text is another error's text minus a leading fragment.

    Attributes:
        original_error: the error that was tidied
        base_error: the error whose text is shown (the one `unwrap` gives)
        trim_start: how many characters to drop from the base error's text
    """

    def __init__(
        self, original_error: BaseException, base_error: BaseException, trim_start: int
    ) -> None:
        super().__init__(original_error, base_error, trim_start)
        self.original_error = original_error
        self.base_error = base_error
        self.trim_start = trim_start
        self.__cause__ = base_error

    def __str__(self) -> str:
        return str(self.base_error)[self.trim_start :]

    def unwrap(self) -> BaseException:
        return self.base_error


class OSErrorCause(OSError):
    """The cause of an OSError: its errno, shown as just its strerror.

    OSError texts look like "[Errno 2] No such file or directory: 'x'".
    Callers name the operation and the path themselves, so only the
    strerror part is worth showing.
    """

    def __str__(self) -> str:
        return str(self.strerror)


def _bare_cause(err: OSError) -> BaseException:
    cause = err.__cause__
    if isinstance(cause, OSError):
        return cause
    # not type(err): subclasses may take quite different arguments
    return OSErrorCause(err.errno, err.strerror)


def tidy_error(err: BaseException) -> BaseException:
    """Return `err`, or a replacement whose text users will find clearer.

    `str(tidy_error(e))` is `str(e)` except in a few cases:

    * OSErrors naming one path (open, stat, ...), two paths (rename, link)
      or none (a failed system call) give just their cause, e.g.
      "No such file or directory". The caller is expected to say what it
      was doing and to which file.
    * URLErrors from parsing drop the "urllib3: " that starts their cause.
    * Errors whose text starts "zip: " drop it. No standard library archive
      module writes that prefix (zipfile says "File is not a zip file"); it
      is there for programs that wrap their own archive errors as
      "zip: <problem>".

    Args:
        err (BaseException): the error to tidy; never None

    Returns:
        BaseException: `err` itself or its tidier replacement
    """
    if isinstance(err, OSError) and err.strerror is not None:
        # covers the path, two-path and bare system call forms alike
        return _bare_cause(err)

    if isinstance(err, URLError):
        if err.op == "parse" and str(err.err).startswith(URL_PREFIX):
            return TidiedError(err, err.err, len(URL_PREFIX))
        return err

    # archive errors wrapped by the caller, recognised only by their text
    if str(err).startswith(ARCHIVE_PREFIX):
        return TidiedError(err, err, len(ARCHIVE_PREFIX))
    return err
