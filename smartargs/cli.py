"""
SmartArgs one-call entry points.

configure(argv, description, *options)
- prepends the -h/--help flag, parses argv and then:
  • on a fault: "Error: <message>" to stderr, usage to stdout, exit status 1.
  • on --help: usage to stdout, exit status 0.
  • otherwise: returns the ParseResult holding the positionals.

arguments(argv, description, *options)
- the same without the automatic help flag.

With shell=False faults are raised to the caller instead of exiting, which is
what tests and embedding hosts want.

    >>> verbose, port = Cell(False), Cell(8080)
    >>> result = configure(["srv", "-v", "--port", "9000", "a.txt"], "Demo server",
    ...     flag(verbose, "v", "verbose", "Enable verbose output"),
    ...     integer(port, "p", "port", "Port to listen on"),
    ... )
    >>> verbose.value, port.value, result.positionals
    (True, 9000, ['a.txt'])
"""
import functools
import sys

from .faults import ParseError, trigger
from .options import helper as help_flag
from .parser import parse
from .usage import print_usage
from .utils import Cell, Unset, coalesce


def _program(argv):
    main = __import__("__main__")
    if prog := getattr(main, "__prog__", None):
        return prog
    return argv[0] if argv else None


def _run(argv, description, options, *, help, shell):
    argv = sys.argv if argv is None else argv
    usage = functools.partial(print_usage, _program(argv), options, description)

    try:
        result = parse(argv, options)
    except ParseError as fault:
        trigger(fault, shell=shell, usage=usage)
        raise

    if help is not None and help.value:
        usage()
        result.release()
        sys.exit(0)

    return result


def configure(argv, description, /, *options, help=Unset, shell=True):
    """
    Parse argv with an automatic help flag in front of the given options.

    Parameters
    - argv: Sequence[str] | None, program name first (sys.argv when None).
    - description: str | None, shown under the usage line.
    - options: Option descriptors.
    - help: Cell for the help flag; a private cell is used when omitted.
    - shell: exit the process on faults (True) or raise them (False).
    """
    help = coalesce(help, Cell(False))
    return _run(argv, description, (help_flag(help), *options), help=help, shell=shell)


def arguments(argv, description, /, *options, shell=True):
    """
    Parse argv against exactly the given options (no automatic help flag).
    """
    return _run(argv, description, options, help=None, shell=shell)


__all__ = (
    "configure",
    "arguments",
)
