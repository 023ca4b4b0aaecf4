#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import os
import tempfile
import unittest
from unittest.mock import patch
from c8core import main
from c8core.constants import DEFAULT_KEYMAP
from c8core.machine import MachineError


class TestStartup(unittest.TestCase):
    def setUp(self):
        self.tempdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tempdir.cleanup)

    def _args(self, rom, **kwargs):
        filename = os.path.join(self.tempdir.name, "test.ch8")

        with open(filename, "wb") as f:
            f.write(rom)

        args = {
            "filename": filename,
            "clock_speed": 0,
            "renderer": "null",
            "scale": None,
            "mute": 1,
            "keymap": DEFAULT_KEYMAP,
            "cycles": 10,
            "skip_unknown": False,
            "debug": False
        }
        args.update(kwargs)
        return args

    @patch("builtins.print")
    def test_startup_headless(self, mock_print):
        self.assertEqual(10, main(self._args(b"\x12\x00")))
        self.assertIn("Chip8Core", mock_print.call_args_list[0][0][0])

    @patch("builtins.print")
    def test_startup_unknown_opcode(self, _):
        self.assertRaises(MachineError, main, self._args(b"\xFF\xFF"))

    @patch("builtins.print")
    def test_startup_skip_unknown_opcode(self, _):
        self.assertEqual(10, main(self._args(b"\xFF\xFF\x12\x02", skip_unknown=True)))

    @patch("builtins.print")
    def test_startup_missing_rom(self, _):
        args = self._args(b"")
        args["filename"] = os.path.join(self.tempdir.name, "missing.ch8")
        self.assertRaises(FileNotFoundError, main, args)
