# URL parsing for programs that report problems with clireport

# urllib3's LocationParseError only says "Failed to parse: <url>", which
# leaves the program's message with nothing to say about what was being
# done when it failed. URLError records the operation and the URL, much as
# OSError records the operation's file name, and puts the library's own
# complaint underneath.

import urllib3


class URLError(ValueError):
    """A failed operation on a URL.

    Its text has the form `<op> "<url>": <err>`.
    """

    def __init__(self, op: str, url: str, err: BaseException) -> None:
        super().__init__(op, url, err)
        self.op = op
        self.url = url
        self.err = err
        self.__cause__ = err

    def __str__(self) -> str:
        return f'{self.op} "{self.url}": {self.err}'

    def unwrap(self) -> BaseException:
        return self.err


def parse_url(url: str) -> urllib3.util.Url:
    """
    Parse `url` with urllib3, raising URLError if it cannot be parsed.

    e.g.: parse_url("gemini://some.domain.com:1965/dir1/index.gmi").port
            --> 1965
          parse_url("http://some.domain.com:99999/")
            --> URLError: parse "http://some.domain.com:99999/": urllib3: ...
    """
    try:
        return urllib3.util.parse_url(url)
    except urllib3.exceptions.LocationParseError as err:
        cause = ValueError(f"urllib3: {err}")
        cause.__cause__ = err
        raise URLError("parse", url, cause)
