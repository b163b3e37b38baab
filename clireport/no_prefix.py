"""The eight warn and die functions of clireport, for star-importing.

Released under the Apache Software Licence, v2.0.

    from clireport.no_prefix import *
    ...
        err = open_backup(...)
        die_if(err, "cannot restore from backup: %s", err)

These names are distinctive enough to do without the package prefix.
"""

from typing import Any, NoReturn

import clireport


__all__ = [
    "die",
    "die_if",
    "die_if_with_tag",
    "die_with_tag",
    "warn",
    "warn_if",
    "warn_if_with_tag",
    "warn_with_tag",
]


def warn(format: str, *args: Any) -> None:
    clireport.warn(format, *args)


def warn_with_tag(tag: str, format: str, *args: Any) -> None:
    clireport.warn_with_tag(tag, format, *args)


def warn_if(condition: Any, format: str = "", *args: Any) -> None:
    clireport.warn_if(condition, format, *args)


def warn_if_with_tag(condition: Any, tag: str, format: str = "", *args: Any) -> None:
    clireport.warn_if_with_tag(condition, tag, format, *args)


def die(format: str = "", *args: Any) -> NoReturn:
    clireport.die(format, *args)


def die_with_tag(tag: str, format: str = "", *args: Any) -> NoReturn:
    clireport.die_with_tag(tag, format, *args)


def die_if(condition: Any, format: str = "", *args: Any) -> None:
    clireport.die_if(condition, format, *args)


def die_if_with_tag(condition: Any, tag: str, format: str = "", *args: Any) -> None:
    clireport.die_if_with_tag(condition, tag, format, *args)
