"""
Tests for the Unset sentinel and the Cell storage slot.

This module verifies semantic guarantees of the helpers:
- Singleton identity and falsy semantics of Unset.
- coalesce() replacing only Unset.
- Cell defaults, mutability, and representation.
"""
import copy
import unittest
from unittest import TestCase

from rich.console import Console

from smartargs.utils import *


class UnsetTest(TestCase):
    """
    Test suite for the `UnsetType` singleton.
    """

    def testSingleton(self) -> None:
        """
        The constructor returns the same object reference on every call.
        """
        self.assertIs(Unset, UnsetType())

    def testFalsy(self) -> None:
        self.assertFalse(bool(Unset))
        self.assertNotEqual(Unset, None)

    def testRepr(self) -> None:
        self.assertEqual(repr(Unset), "Unset")

    def testCopyPreservesSingleton(self) -> None:
        self.assertIs(copy.copy(Unset), Unset)
        self.assertIs(copy.deepcopy(Unset), Unset)

    def testFinalClass(self) -> None:
        """
        The class is final: attempts to subclass must fail with TypeError.
        """
        with self.assertRaises(TypeError):
            type("UnsetType", (UnsetType,), {})

    def testUnionWithUnset(self) -> None:
        self.assertIsInstance(Unset, str | Unset)
        self.assertIsInstance("x", str | Unset)

    def testCoalesce(self) -> None:
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(Unset))
        self.assertIsNone(coalesce(None, "fallback"))
        self.assertEqual(coalesce(0, 5), 0)


class CellTest(TestCase):
    """
    Test suite for `Cell`.
    """

    def testDefaultIsNone(self) -> None:
        self.assertIsNone(Cell().value)

    def testHoldsAndReplacesValue(self) -> None:
        cell = Cell(4)
        cell.value = 8
        self.assertEqual(cell.value, 8)

    def testRepr(self) -> None:
        self.assertEqual(repr(Cell("x")), "Cell('x')")

    def testRichConsolePrint(self) -> None:
        console = Console(color_system=None, force_terminal=False)
        with console.capture() as capture:
            console.print(Cell(3))
        self.assertEqual(capture.get().strip(), "Cell(3)")

    def testSlotsOnly(self) -> None:
        with self.assertRaises(AttributeError):
            Cell().other = 1


if __name__ == '__main__':
    unittest.main()
