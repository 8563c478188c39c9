"""
SmartArgs parser engine and parse results.

Overview
- parse(tokens, options): single left-to-right pass over tokens[1:] (index 0
  is the program name), writing matched values into the options' cells and
  collecting everything else as positionals.
- ParseResult: the per-call output (positionals + error), owned by the caller.
- release(result): idempotent cleanup of a result.

Token shapes
- "--"              → every remaining token is positional, verbatim.
- "--name[=value]"  → long option; value inline or taken from the next token.
- "-x"              → short option; only the character after '-' is looked at,
                      value (if any) is always the next token.
- anything else     → positional (a lone "-" included).

Coercion
- INTEGER: optional leading whitespace, optional sign, decimal digits; must
  fit a signed 32-bit integer; overlong digit runs are out of range.
- FLOAT: Python float() syntax (nan/inf accepted) without trailing whitespace
  or digit separators; finite literals that overflow to infinity are rejected.
- TEXT: stored unchanged.

Required options
- Skipped entirely when a help flag (--help / -h) ended up set.
- FLAG must be truthy, TEXT must not be None; INTEGER and FLOAT are always
  considered set (their cells carry a default from the start).

Errors
- The first problem raises a ParseError subclass (see faults). The fault is
  also recorded on the result (result.error / result.fault) and the result is
  reachable from the fault (fault.result). Partial positionals left on a
  failed result are unspecified.
"""
import difflib
import logging
import math
import re
from collections.abc import Sequence

from .faults import *
from .options import Option, ValueType
from .utils import Unset

logger = logging.getLogger(__name__)

INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1

_INTEGER = re.compile(r"\s*[+-]?[0-9]+", re.ASCII)


class ParseResult:
    """
    Output aggregate of one parse call.

    - positionals: list[str], in command-line order.
    - error: str | None, the diagnostic of the fault that stopped parsing.
    - fault: ParseError | None, the fault itself.

    A result supports len() and iteration over its positionals.
    """
    __slots__ = ("positionals", "error", "fault")

    def __init__(self):
        self.positionals = []
        self.error = None
        self.fault = None

    @property
    def ok(self):
        return self.error is None

    def release(self):
        """
        Drop the positionals and any recorded fault. Safe to call repeatedly.
        """
        self.positionals = []
        self.error = None
        self.fault = None

    def __len__(self):
        return len(self.positionals)

    def __iter__(self):
        return iter(self.positionals)

    def __repr__(self):
        return "ParseResult(positionals=%r, error=%r)" % (self.positionals, self.error)

    def __rich_repr__(self):
        yield "positionals", self.positionals
        yield "error", self.error, None


def release(result, /):
    """
    Release a result; a None or already-released result is a no-op.
    """
    if result is not None:
        result.release()


def _append(result, token):
    try:
        result.positionals.append(token)
    except MemoryError:
        raise AllocationFailureError(token=token) from None


def _find_long(options, name):
    for option in options:
        if option.long == name:
            return option
    suggestions = difflib.get_close_matches(name, [option.long for option in options if option.long], 3)
    raise UnknownOptionError(
        "Unknown option: --%s" % name,
        token="--" + name,
        suggestions=suggestions,
        hint="did you mean '--%s'?" % suggestions[0] if suggestions else "try '--help' to see all available options",
    )


def _find_short(options, name):
    for option in options:
        if option.short == name:
            return option
    raise UnknownOptionError(
        "Unknown option: -%s" % name,
        token="-" + name,
        suggestions=[],
        hint="try '--help' to see all available options",
    )


def _coerce(option, value):
    """
    convert the raw value string according to the option's type.
    """
    match option.type:
        case ValueType.INTEGER:
            if not _INTEGER.fullmatch(value):
                raise InvalidIntegerError("Invalid integer value: %r" % value, option=option, value=value)
            try:
                number = int(value)
            except ValueError:
                # digit counts past the interpreter conversion limit
                raise InvalidIntegerError("Integer value out of range: %r" % value, option=option, value=value) from None
            if not INT_MIN <= number <= INT_MAX:
                raise InvalidIntegerError("Integer value out of range: %r" % value, option=option, value=value)
            return number
        case ValueType.FLOAT:
            # float() tolerates what strtod stops at: trailing whitespace and digit separators
            if value != value.rstrip() or "_" in value:
                raise InvalidFloatError("Invalid double value: %r" % value, option=option, value=value)
            try:
                number = float(value)
            except ValueError:
                raise InvalidFloatError("Invalid double value: %r" % value, option=option, value=value) from None
            if math.isinf(number) and "inf" not in value.lower():
                raise InvalidFloatError("Double value out of range: %r" % value, option=option, value=value)
            return number
        case _:
            return value


def _store(option, value):
    if value is None:
        raise MissingValueError("Option requires a value: %s" % option.names, option=option)
    if not isinstance(value, str):
        raise InvalidArgumentsError("Invalid arguments: value of %s is not a string" % option.names, option=option)
    option.storage.value = _coerce(option, value)
    logger.debug("option %s set to %r", option.names, option.storage.value)


def _scan(tokens, options, result):
    index = 1
    while index < len(tokens):
        token = tokens[index]

        if token is None:
            raise NullTokenError("NULL argument encountered at position %d" % index, index=index)
        if not isinstance(token, str):
            raise InvalidArgumentsError("Invalid arguments: token at position %d is not a string" % index, index=index)

        if token == "--":
            for position, token in enumerate(tokens[index + 1:], index + 1):
                if token is None:
                    raise NullTokenError("NULL argument encountered at position %d" % position, index=position)
                _append(result, token)
            break

        if token.startswith("--") and len(token) > 2:
            name, separator, value = token[2:].partition("=")
            option = _find_long(options, name)
            if option.type is ValueType.FLAG:
                if separator:
                    raise FlagTakesNoValueError(
                        "Flag option does not accept a value: --%s" % name,
                        option=option,
                        token=token,
                        hint="remove everything from '=' (for example: --%s)" % name,
                    )
                option.storage.value = True
                logger.debug("flag %s set", option.names)
            else:
                if not separator:
                    if index + 1 >= len(tokens):
                        raise MissingValueError("Option requires a value: --%s" % name, option=option, token=token)
                    index += 1
                    value = tokens[index]
                _store(option, value)
        elif token.startswith("-") and len(token) > 1:
            # only the first character names the option: "-vt" is "-v"
            option = _find_short(options, token[1])
            if option.type is ValueType.FLAG:
                option.storage.value = True
                logger.debug("flag %s set", option.names)
            else:
                if index + 1 >= len(tokens):
                    raise MissingValueError("Option requires a value: -%s" % token[1], option=option, token=token)
                index += 1
                _store(option, tokens[index])
        else:
            _append(result, token)

        index += 1


def _validate(options):
    if any(option.helper and option.storage.value for option in options):
        logger.debug("help requested, required options not checked")
        return

    for option in options:
        if not option.required:
            continue
        match option.type:
            case ValueType.FLAG:
                present = bool(option.storage.value)
            case ValueType.TEXT:
                present = option.storage.value is not None
            case _:
                present = True
        if not present:
            raise RequiredOptionMissingError(
                "Required option missing: %s" % option.names,
                option=option,
                hint="pass %s or run with '--help'" % option.names,
            )


def parse(tokens, options, result=Unset, /):
    """
    Parse an argv-style token sequence against an option table.

    Parameters
    - tokens: Sequence[str], program name first.
    - options: Sequence[Option], read-only during the call.
    - result: ParseResult to reuse (it is reset first); a fresh one by default.

    Returns
    - the ParseResult with positionals in command-line order.

    Raises
    - ParseError subclass on the first failure, after recording it on the result.
    """
    if result is Unset:
        result = ParseResult()
    elif not isinstance(result, ParseResult):
        raise InvalidArgumentsError("Invalid arguments: result must be a ParseResult")
    else:
        result.release()

    try:
        if (
            not isinstance(tokens, Sequence) or isinstance(tokens, str | bytes) or
            not isinstance(options, Sequence) or isinstance(options, str | bytes) or
            not all(isinstance(option, Option) for option in options)
        ):
            raise InvalidArgumentsError()
        _scan(tokens, options, result)
        _validate(options)
    except ParseError as fault:
        result.error = fault.message
        result.fault = fault
        fault.result = result
        logger.debug("parse failed: %s", fault.message)
        raise

    return result


__all__ = (
    "ParseResult",
    "parse",
    "release",
    "INT_MIN",
    "INT_MAX",
)
