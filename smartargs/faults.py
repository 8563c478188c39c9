"""
SmartArgs faults (parse errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every parse failure.
- ParseError and its subclasses: one exception type per failure kind, carrying
  the message plus read-only context options (token, option, value, ...).
- trigger(): central entry point to surface a fault, either by raising it or,
  in shell mode, by printing it with the usage text and exiting.

Integration
- The parser raises the first fault it meets; nothing is recovered internally.
- The configure() glue catches it and calls trigger(fault, shell=True, usage=...).
- Hosts may remap codes with a __codes__ mapping and restyle output with a
  __styles__ mapping, both looked up in __main__.
"""
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console
from rich.text import Text

from .utils import Unset

console = Console(stderr=True, highlight=False)


class FaultCode(IntEnum):
    """
    canonical fault codes raised by the parser (stable identifiers).

    grouping
    - call shape (1010x): INVALID_ARGUMENTS, NULL_TOKEN
    - switches (1011x): UNKNOWN_OPTION, FLAG_TAKES_NO_VALUE, MISSING_VALUE
    - coercion (1012x): INVALID_INTEGER, INVALID_FLOAT
    - validation (1013x): REQUIRED_OPTION_MISSING
    - host (1019x): ALLOCATION_FAILURE
    """
    # --- call shape ---
    INVALID_ARGUMENTS       = 10101
    NULL_TOKEN              = 10102

    # --- switches ---
    UNKNOWN_OPTION          = 10111
    FLAG_TAKES_NO_VALUE     = 10112
    MISSING_VALUE           = 10113

    # --- coercion ---
    INVALID_INTEGER         = 10121
    INVALID_FLOAT           = 10122

    # --- validation ---
    REQUIRED_OPTION_MISSING = 10131

    # --- host ---
    ALLOCATION_FAILURE      = 10191

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class ParseError(Exception):
    """
    base type of every parse failure.

    attributes
    - message: single-line diagnostic, printed by the glue as "Error: <message>".
    - options: read-only mapping of context (token, option, value, hint, ...).
      the hint is kept for hosts; rendering stays on the single "Error: " line.
    - result: the ParseResult the fault was recorded on (None until attached).
    """
    code = Unset
    default = "Argument parsing failed"

    def __init__(self, message=Unset, /, **options):
        if message is Unset:
            message = self.default
        assert isinstance(message, str)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)
        self.result = None

    def __rich__(self):
        styles = defaultdict(str, {
            "error-label": "bold #FF4DA6",
            "error-message": "#C8C8D0",
        } | getattr(__import__("__main__"), "__styles__", {}))

        return Text.assemble(("Error", styles["error-label"]), ": ", (self.message, styles["error-message"]))

    def __trigger__(self, *, shell=False, usage=None):
        if not shell:
            raise self
        console.print(self, soft_wrap=True)
        if usage is not None:
            usage()
        sys.exit(1)


class InvalidArgumentsError(ParseError):
    code = FaultCode.INVALID_ARGUMENTS
    default = "Invalid arguments"


class NullTokenError(ParseError):
    code = FaultCode.NULL_TOKEN
    default = "NULL argument encountered"


class UnknownOptionError(ParseError):
    code = FaultCode.UNKNOWN_OPTION
    default = "Unknown option"


class FlagTakesNoValueError(ParseError):
    code = FaultCode.FLAG_TAKES_NO_VALUE
    default = "Flag option does not accept a value"


class MissingValueError(ParseError):
    code = FaultCode.MISSING_VALUE
    default = "Option requires a value"


class InvalidIntegerError(ParseError):
    code = FaultCode.INVALID_INTEGER
    default = "Invalid integer value"


class InvalidFloatError(ParseError):
    code = FaultCode.INVALID_FLOAT
    default = "Invalid double value"


class RequiredOptionMissingError(ParseError):
    code = FaultCode.REQUIRED_OPTION_MISSING
    default = "Required option missing"


class AllocationFailureError(ParseError):
    code = FaultCode.ALLOCATION_FAILURE
    default = "Memory allocation failed"


def trigger(fault, /, *, shell=False, usage=None):
    """
    surface a fault.

    contract
    - fault must provide a __trigger__ method (see ParseError).
    - outside shell mode the fault is raised to the caller unchanged.
    - in shell mode "Error: <message>" goes to stderr, then usage() is called
      (when given) to print the help text, and the process exits with status 1.
    """
    if not hasattr(fault, "__trigger__") or not callable(fault.__trigger__):
        raise TypeError("trigger() argument must have a __trigger__ method")
    fault.__trigger__(shell=shell, usage=usage)


__all__ = (
    "FaultCode",
    "ParseError",
    "InvalidArgumentsError",
    "NullTokenError",
    "UnknownOptionError",
    "FlagTakesNoValueError",
    "MissingValueError",
    "InvalidIntegerError",
    "InvalidFloatError",
    "RequiredOptionMissingError",
    "AllocationFailureError",
    "trigger",
)
