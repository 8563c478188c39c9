"""
SmartArgs utilities (internal helpers, carefully exposed)

Overview
- UnsetType / Unset
  • Singleton sentinel to represent “value not provided” without conflating with None.
  • Falsey (bool(Unset) is False), printable as "Unset", and non-subclassable.

- coalesce(value, default=None)
  • Replace Unset with a concrete default, but preserve legitimate falsey values like None/0/"".

- mirror("attr")
  • Read-only property factory exposing a private backing field (self._attr).

- Cell
  • Caller-owned storage box. Option descriptors point at a cell; the parser
    writes the parsed value into cell.value and never owns the cell itself.

Quick examples
    >>> coalesce(Unset, "fallback")
    'fallback'
    >>> port = Cell(8080)
    >>> port.value
    8080
"""
import functools
from typing import final


@final
class UnsetType:
    """
    Internal sentinel type representing a value that was not provided.

    Characteristics
    - Boolean-false: bool(Unset) is False, but it is distinct from None and 0.
    - Printable: repr(Unset) -> "Unset" for friendly diagnostics.
    - Non-subclassable: this type is sealed; do not subclass.
    - Singleton per process: UnsetType() always yields the same instance.
    """

    def __or__(self, other, /):
        """
        Support PEP 604 unions in isinstance checks (e.g., str | Unset).
        """
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


Unset = UnsetType()


def coalesce(object, default=None, /):
    """
    Resolve the Unset sentinel to a concrete default.

    Falsey values like None, 0, "" are preserved as-is: only Unset is replaced.

    Examples
    - coalesce("name", "fallback") -> "name"
    - coalesce(Unset, "fallback")  -> "fallback"
    - coalesce(None, "fallback")   -> None
    """
    return object if object is not Unset else default


def mirror(name, /):
    """
    Define a read-only property that mirrors a private backing attribute.

    The generated property reads "_{name}" from the instance. Descriptors only
    hold scalars and cells, so no defensive copy is made.
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    def getter(self):
        return getattr(self, "_" + name)

    getter.__name__ = getter.__qualname__ = name
    return property(getter)


class Cell:
    """
    Mutable storage slot owned by the caller.

    A cell is what an option descriptor writes through: the parser assigns
    cell.value when the option is matched, and leaves it untouched otherwise,
    so whatever the caller stored beforehand acts as the default.

        >>> verbose = Cell(False)
        >>> threads = Cell(4)
        >>> config = Cell()          # absent text value
        >>> config.value is None
        True
    """
    __slots__ = ("value",)

    def __init__(self, value=None, /):
        self.value = value

    def __repr__(self):
        return f"Cell({self.value!r})"

    def __rich_repr__(self):
        yield self.value


__all__ = (
    "UnsetType",
    "Unset",
    "coalesce",
    "mirror",
    "Cell",
)
