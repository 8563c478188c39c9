"""
One-call entry point tests (configure / arguments).

Scope
- Validate successful parses through configure() and arguments().
- Validate the help path: usage on stdout, exit status 0, required options bypassed.
- Validate the fault path: a single "Error: ..." line on stderr, usage on stdout, exit status 1.
- Validate shell=False propagation and __prog__ overrides.

Conventions
- Test method names follow CamelCase per project convention.
- Streams are captured with contextlib; the fault console is swapped for a colourless one.
"""

from __future__ import annotations

import contextlib
import io
import sys
import unittest
from unittest import TestCase, mock

from rich.console import Console

from smartargs import Cell, arguments, configure, flag, format_usage, helper, integer, text
from smartargs.faults import RequiredOptionMissingError, UnknownOptionError


class TestConfigure(TestCase):
    """configure(): automatic help flag."""

    def setUp(self):
        self.verbose = Cell(False)
        self.port = Cell(8080)
        self.config = Cell()
        self.options = (
            flag(self.verbose, "v", "verbose", "Enable verbose output"),
            integer(self.port, "p", "port", "Port to listen on"),
            text(self.config, "c", "config", "Configuration file", required=True),
        )
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()
        patcher = mock.patch("smartargs.faults.console", Console(file=self.stderr, color_system=None))
        patcher.start()
        self.addCleanup(patcher.stop)

    def invoke(self, *argv, **options):
        with contextlib.redirect_stdout(self.stdout):
            return configure(["srv", *argv], "Demo server", *self.options, **options)

    def expectedUsage(self):
        return format_usage("srv", (helper(Cell(False)), *self.options), "Demo server")

    def testSuccess(self):
        result = self.invoke("-v", "--port", "9000", "--config", "srv.ini", "a.txt")
        self.assertTrue(self.verbose.value)
        self.assertEqual(self.port.value, 9000)
        self.assertEqual(self.config.value, "srv.ini")
        self.assertEqual(result.positionals, ["a.txt"])
        self.assertEqual(self.stdout.getvalue(), "")

    def testHelpPrintsUsageAndExitsZero(self):
        with self.assertRaises(SystemExit) as context:
            self.invoke("--help")
        self.assertEqual(context.exception.code, 0)
        self.assertEqual(self.stdout.getvalue(), self.expectedUsage())
        self.assertEqual(self.stderr.getvalue(), "")

    def testHelpCellExposed(self):
        help = Cell(False)
        with self.assertRaises(SystemExit):
            self.invoke("-h", help=help)
        self.assertTrue(help.value)

    def testFaultPrintsErrorAndUsageAndExitsOne(self):
        with self.assertRaises(SystemExit) as context:
            self.invoke("--bogus")
        self.assertEqual(context.exception.code, 1)
        self.assertEqual(self.stderr.getvalue(), "Error: Unknown option: --bogus\n")
        self.assertEqual(self.stdout.getvalue(), self.expectedUsage())

    def testMissingRequiredOptionExitsOne(self):
        with self.assertRaises(SystemExit) as context:
            self.invoke()
        self.assertEqual(context.exception.code, 1)
        self.assertEqual(self.stderr.getvalue(), "Error: Required option missing: -c/--config\n")

    def testShellDisabledRaises(self):
        with self.assertRaises(UnknownOptionError):
            self.invoke("--bogus", shell=False)
        with self.assertRaises(RequiredOptionMissingError):
            self.invoke(shell=False)
        self.assertEqual(self.stdout.getvalue(), "")
        self.assertEqual(self.stderr.getvalue(), "")

    def testDefaultsToSysArgv(self):
        with mock.patch.object(sys, "argv", ["srv", "--config", "x.ini", "tail"]):
            result = configure(None, "Demo server", *self.options)
        self.assertEqual(result.positionals, ["tail"])

    def testProgramNameOverride(self):
        main = sys.modules["__main__"]
        with mock.patch.object(main, "__prog__", "custom", create=True):
            with self.assertRaises(SystemExit):
                self.invoke("--help")
        self.assertTrue(self.stdout.getvalue().startswith("Usage: custom [options] [arguments]\n"))


class TestArguments(TestCase):
    """arguments(): no automatic help flag."""

    def testSuccess(self):
        count = Cell(0)
        result = arguments(["tool", "-n", "3", "x"], None, integer(count, "n", "count"))
        self.assertEqual(count.value, 3)
        self.assertEqual(result.positionals, ["x"])

    def testHelpIsUnknown(self):
        with self.assertRaises(UnknownOptionError):
            arguments(["tool", "--help"], None, shell=False)


if __name__ == "__main__":
    unittest.main()
