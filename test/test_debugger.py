#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from unittest.mock import patch
from c8core.debugger import Debugger
from c8core.machine import Machine


class TestDebugger(unittest.TestCase):
    def setUp(self):
        self.debugger = Debugger()
        self.machine = Machine(self.debugger)

    def test_debugger_debug(self):
        self.machine.v[0xF] = 0xAB
        self.machine.i = 0x123
        debug_str = self.debugger.debug(self.machine, "NOP")
        self.assertTrue(debug_str.startswith("V: 0xab" + "00" * 15 + " I: 0x0123"))
        self.assertIn("PC: 0x200 OP: 0x0000 IN: NOP", debug_str)
        self.assertNotIn("Stack", debug_str)

    def test_debugger_debug_verbose(self):
        self.assertIn("\nStack: (Empty)", self.debugger.debug(self.machine, "NOP", verbose=True))
        self.machine.stack.push(0x202)
        self.machine.stack.push(0x3FE)
        self.assertIn("\nStack: 0x202 0x3fe", self.debugger.debug(self.machine, "NOP", verbose=True))

    def test_debugger_live(self):
        self.assertFalse(self.debugger.is_live())
        self.debugger.set_live(True)
        self.assertTrue(self.debugger.is_live())

    @patch("builtins.print")
    def test_debugger_live_trace(self, mock_print):
        self.debugger.set_live(True)
        machine = Machine(self.debugger)
        machine.load(b"\x6A\x42\x00\xE0")
        machine.step()
        machine.step()
        self.assertEqual(2, mock_print.call_count)
        self.assertIn("IN: LD Va, 0x42", mock_print.call_args_list[0][0][0])
        self.assertIn("PC: 0x202 OP: 0x00e0 IN: CLS", mock_print.call_args_list[1][0][0])

    @patch("builtins.print")
    def test_debugger_silent(self, mock_print):
        self.machine.load(b"\x6A\x42")
        self.machine.step()
        mock_print.assert_not_called()
