"""CannotError, for English-language error messages of the form

    cannot <verb>[ <adjective>] <noun>[ <suffix>][: <base error>]

Released under the Apache Software Licence, v2.0.

Many callers will want

    from clireport.cannot import cannot

    raise cannot("open", "config file", path, True, "", err)

to save precious columns when writing error messages.
"""

from .tidy import tidy_error


def quote(s: str) -> str:
    """Put `s` in double quotes, escaping what needs escaping."""
    out = []
    for ch in s:
        if ch in '"\\':
            out.append("\\" + ch)
        elif ch == "\n":
            out.append("\\n")
        elif ch == "\t":
            out.append("\\t")
        elif not ch.isprintable():
            out.append(ch.encode("unicode_escape").decode("ascii"))
        else:
            out.append(ch)
    return '"' + "".join(out) + '"'


class CannotError(Exception):
    """Details of a problem, for messages saying what could not be done.

    Attributes:
        verb (str): a present-tense verb, e.g. "open"
        adjective (str): what kind of thing the action was on, or ""
        noun (str): which thing the action was on
        quote_noun (bool): whether to put the noun in double quotes
        suffix (str): text to go after the noun, or ""
        base_error (BaseException | None): the underlying error, if any
    """

    def __init__(
        self,
        verb: str,
        adjective: str,
        noun: str,
        quote_noun: bool = False,
        suffix: str = "",
        base_error: BaseException | None = None,
    ) -> None:
        super().__init__(verb, adjective, noun, quote_noun, suffix, base_error)
        self.verb = verb
        self.adjective = adjective
        self.noun = noun
        self.quote_noun = quote_noun
        self.suffix = suffix
        self.base_error = base_error
        self.__cause__ = base_error

    def __str__(self) -> str:
        parts = ["cannot", self.verb]
        if self.adjective:
            parts.append(self.adjective)
        parts.append(quote(self.noun) if self.quote_noun else self.noun)
        if self.suffix:
            parts.append(self.suffix)
        text = " ".join(parts)
        if self.base_error is not None:
            text += f": {tidy_error(self.base_error)}"
        return text

    def unwrap(self) -> BaseException | None:
        return self.base_error


def cannot(
    verb: str,
    adjective: str,
    noun: str,
    quote_noun: bool = False,
    suffix: str = "",
    base_error: BaseException | None = None,
) -> CannotError:
    return CannotError(verb, adjective, noun, quote_noun, suffix, base_error)
