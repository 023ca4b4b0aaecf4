#!/usr/bin/env python3

"""
Stack Emulator

The call stack is not part of addressable RAM, as no program can reach it
directly.  It holds up to 16 return addresses.  A list gives us the push and
pop discipline for free, and its length doubles as the stack pointer.

Overflowing or underflowing the stack means the program is malformed, so both
are fatal instead of silently wrapping the pointer.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class StackError(Exception):
    pass


class Stack:
    def __init__(self, size):
        self.items = []
        self.size = size

    @property
    def sp(self):
        return len(self.items)

    def push(self, item):
        if len(self.items) >= self.size:
            raise StackError("Stack overflow")

        self.items.append(item)

    def pop(self):
        try:
            return self.items.pop()
        except IndexError:
            raise StackError("Stack underflow") from None

    def clear(self):
        self.items.clear()

    def get_items(self):
        # For debugging
        return self.items
