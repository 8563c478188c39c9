r"""
SmartArgs option descriptors and factories.

Overview
- ValueType: the four payload kinds an option may carry (FLAG, INTEGER, TEXT, FLOAT).
- Option: immutable descriptor tying one or two names (-x / --name) to a value
  type and a caller-owned Cell the parser writes into.
- Factories: flag(), integer(), real(), text() build descriptors in the
  familiar (cell, short, long, help) order; helper() builds the -h/--help flag.

Validation (on construction)
- At least one of short/long must be given.
- short: exactly one character, not '-' and not whitespace.
- long: non-empty, no leading '-', no '=' and no whitespace.
- storage: must be a Cell.
- help: a string when given.

Uniqueness of names across a table is the caller's concern; when two
descriptors share a name the first one in table order wins during parsing.

Example
    >>> verbose, threads = Cell(False), Cell(4)
    >>> table = (
    ...     flag(verbose, "v", "verbose", "Enable verbose output"),
    ...     integer(threads, "t", "threads", "Number of worker threads"),
    ... )
"""
import re
from enum import IntEnum

from .utils import *


class ValueType(IntEnum):
    """
    payload kind of an option, fixed when the descriptor is built.

    hint is the placeholder shown after the long name in usage text; flags
    carry no payload and have no hint.
    """
    FLAG    = 0
    INTEGER = 1
    TEXT    = 2
    FLOAT   = 3

    @property
    def hint(self):
        return ("", "<num>", "<string>", "<float>")[self]


class Option:
    """
    Named option specification.

    Properties (read-only)
    - long: str | None, matched against "--long".
    - short: str | None, matched against "-s".
    - type: ValueType.
    - storage: Cell the parser writes into.
    - help: str | None, shown in usage only.
    - required: bool.
    """

    __introspectable__ = (
        "long",
        "short",
        "type",
        "storage",
        "help",
        "required",
    )
    __slots__ = tuple("_" + name for name in __introspectable__)

    long = mirror("long")
    short = mirror("short")
    type = mirror("type")
    storage = mirror("storage")
    help = mirror("help")
    required = mirror("required")

    def __init__(self, type, storage, /, short=None, long=None, help=None, *, required=False):
        if not isinstance(type, ValueType):
            raise TypeError("option 'type' must be a ValueType")
        if not isinstance(storage, Cell):
            raise TypeError("option 'storage' must be a Cell")

        if short is None and long is None:
            raise TypeError("option must specify at least one name")
        if short is not None:
            if not isinstance(short, str):
                raise TypeError("option 'short' must be a string")
            elif len(short) != 1 or short == "-" or short.isspace():
                raise ValueError("option 'short' must be a single non-dash character")
        if long is not None:
            if not isinstance(long, str):
                raise TypeError("option 'long' must be a string")
            elif not re.fullmatch(r"[^\s=-][^\s=]*", long):
                raise ValueError("option 'long' must be non-empty, without '=', spaces or a leading dash")

        if help is not None and not isinstance(help, str):
            raise TypeError("option 'help' must be a string")

        self._long = long
        self._short = short
        self._type = type
        self._storage = storage
        self._help = help
        self._required = bool(required)

    @property
    def names(self):
        """
        Display form of every name, short first (e.g. "-v/--verbose").
        """
        return "/".join(name for name in (
            self._short and "-" + self._short,
            self._long and "--" + self._long,
        ) if name)

    @property
    def helper(self):
        """
        True for the conventional help flag (--help or -h); its presence
        suspends required-option validation.
        """
        return self._type is ValueType.FLAG and (self._long == "help" or self._short == "h")

    def __repr__(self):
        return "option(%s)" % ", ".join("%s=%r" % pair for pair in self.__rich_repr__())

    def __rich_repr__(self):
        for name in type(self).__introspectable__:
            yield name, getattr(self, name)


def flag(storage, short=None, long=None, help=None, *, required=False):
    """
    Build a presence-only option; the parser stores True when it is seen.
    """
    return Option(ValueType.FLAG, storage, short, long, help, required=required)


def integer(storage, short=None, long=None, help=None, *, required=False):
    """
    Build a 32-bit signed integer option.
    """
    return Option(ValueType.INTEGER, storage, short, long, help, required=required)


def real(storage, short=None, long=None, help=None, *, required=False):
    """
    Build a double-precision float option.
    """
    return Option(ValueType.FLOAT, storage, short, long, help, required=required)


def text(storage, short=None, long=None, help=None, *, required=False):
    """
    Build a string option; the token is stored as-is.
    """
    return Option(ValueType.TEXT, storage, short, long, help, required=required)


def helper(storage):
    """
    Build the conventional -h/--help flag.
    """
    return flag(storage, "h", "help", "Show this help message")


__all__ = (
    "ValueType",
    "Option",
    "flag",
    "integer",
    "real",
    "text",
    "helper",
)
