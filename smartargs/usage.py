"""
SmartArgs usage text.

Layout (plain text, one block per option in table order)

    Usage: <program> [options] [arguments]

    <description>

    Options:
      -h, --help
          Show this help message
      -t, --threads <num> (required)
          --name <string>

- The description block appears only when a description is given; the
  options block only when the table is not empty.
- The type hint follows the long name, so short-only options show none.

Styling
- render_usage() returns a rich Text whose plain form is exactly the layout
  above; print_usage() writes it through a rich Console (stdout by default).
- Palette entries can be overridden with a __styles__ mapping in __main__.
"""
from collections import defaultdict

from rich.console import Console
from rich.text import Text

from .options import ValueType


def render_usage(program, options, description=None, /, *, colorful=True):
    """
    Build the styled usage text. Never mutates the table or any cell.
    """
    styles = defaultdict(str, {
        "usage-label": "bold #00E6FF",
        "program-name": "bold #FF4D94",
        "usage-section": "#36C5F0",
        "description-section": "italic #A3A3A3",
        "group-label": "bold #FFFFFF",
        "option-name": "bold #00E6FF",
        "flag-name": "bold #22C55E",
        "metavar": "bold #FFD600",
        "required": "#EF4444",
        "argument-description": "#9CA3AF",
    } | getattr(__import__("__main__"), "__styles__", {}))

    def styler(style):
        return styles[style] if colorful else ""

    usage = Text()
    usage.append("Usage", styler("usage-label")).append(": ")
    usage.append(program if program is not None else "program", styler("program-name"))
    usage.append(" [options] [arguments]", styler("usage-section")).append("\n")

    if description is not None:
        usage.append("\n").append(description, styler("description-section")).append("\n")

    if options:
        usage.append("\n").append("Options:", styler("group-label")).append("\n")

    for option in options:
        style = styler("flag-name" if option.type is ValueType.FLAG else "option-name")

        usage.append("  ")
        if option.short:
            usage.append("-" + option.short, style)
            if option.long:
                usage.append(", ")
        else:
            usage.append("    ")

        if option.long:
            usage.append("--" + option.long, style)
            if option.type is not ValueType.FLAG:
                usage.append(" ").append(option.type.hint, styler("metavar"))

        if option.required:
            usage.append(" (required)", styler("required"))

        if option.help is not None:
            usage.append("\n      ").append(option.help, styler("argument-description"))

        usage.append("\n")

    return usage


def format_usage(program, options, description=None, /):
    """
    Return the plain usage text.
    """
    return render_usage(program, options, description, colorful=False).plain


def print_usage(program, options, description=None, /, *, file=None, colorful=True):
    """
    Write the usage text to file (stdout when None).
    """
    console = Console(file=file, highlight=False)
    console.print(render_usage(program, options, description, colorful=colorful), soft_wrap=True, end="")


__all__ = (
    "render_usage",
    "format_usage",
    "print_usage",
)
