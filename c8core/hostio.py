#!/usr/bin/env python3

"""
Host I/O Functionality

Handles loading ROM binaries from the host filesystem, ready for loading into
the machine.  The machine itself never touches files.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import RAM_SIZE, START_ADDR

MAX_ROM_SIZE = RAM_SIZE - START_ADDR


class LoaderError(Exception):
    pass


class Loader:
    def load_binary(self, filename):
        with open(filename, "rb") as f:
            data = f.read()

        if len(data) > MAX_ROM_SIZE:
            raise LoaderError(
                "ROM is {} bytes, but only {} bytes are available from 0x{:03x}".format(
                    len(data), MAX_ROM_SIZE, START_ADDR
                )
            )

        return data
